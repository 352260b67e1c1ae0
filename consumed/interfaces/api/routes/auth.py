"""Endpoints related to authentication."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from consumed.application.use_cases.users import AuthenticationStatus, authenticate_user
from consumed.domain.entities import User
from consumed.infrastructure.database import get_db
from consumed.infrastructure.security import (
    create_access_token,
    password_signature,
    refresh_access_token,
)
from consumed.interfaces.api.dependencies import get_current_user, oauth2_scheme
from consumed.interfaces.api.schemas import Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate by e-mail or username and return a JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Rejected login attempt for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={
            "sub": user.email,
            "pwd_sig": password_signature(user.password, user.is_active),
        }
    )
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/token/validate", response_model=Token)
def validate_access_token(
    request: Request,
    current_user: User = Depends(get_current_user),
    token: str = Depends(oauth2_scheme),
):
    """Check the token and return a copy with a renewed expiration."""

    refreshed_token = getattr(request.state, "refreshed_token", None)

    if not refreshed_token:
        try:
            refreshed_token = refresh_access_token(token)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc

    return {"access_token": refreshed_token, "token_type": "bearer"}
