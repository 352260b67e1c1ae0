"""Endpoints for creating, deleting, liking and commenting on posts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from consumed.application.use_cases.comments import create_comment, list_comments
from consumed.application.use_cases.posts import (
    create_post,
    delete_post,
    like_post,
    unlike_post,
)
from consumed.domain.entities import Comment, SocialPost, User
from consumed.infrastructure.database import get_db
from consumed.interfaces.api.dependencies import get_current_active_user
from consumed.interfaces.api.schemas import (
    CommentCreate,
    CommentRead,
    LikeRead,
    PostCreate,
    PostRead,
)

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_to_schema(post: SocialPost) -> PostRead:
    return PostRead.model_validate(post)


def _comment_to_schema(comment: Comment) -> CommentRead:
    return CommentRead(
        id=comment.id or 0,
        post_id=comment.post_id,
        user_id=comment.user_id,
        username=comment.username,
        content=comment.content,
        parent_comment_id=comment.parent_comment_id,
        created_at=comment.created_at,
        replies=[_comment_to_schema(reply) for reply in comment.replies],
    )


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post_endpoint(
    payload: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PostRead:
    """Log an activity as a post authored by the current user."""

    try:
        post = create_post(db, author=current_user, **payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _post_to_schema(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post_endpoint(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Delete one of the current user's posts along with its engagement."""

    try:
        delete_post(db, post_id=post_id, requester=current_user)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/like", response_model=LikeRead)
def like_post_endpoint(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> LikeRead:
    try:
        likes = like_post(db, post_id=post_id, user=current_user)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return LikeRead(post_id=post_id, likes=likes, liked=True)


@router.delete("/{post_id}/like", response_model=LikeRead)
def unlike_post_endpoint(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> LikeRead:
    try:
        likes = unlike_post(db, post_id=post_id, user=current_user)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return LikeRead(post_id=post_id, likes=likes, liked=False)


@router.get("/{post_id}/comments", response_model=list[CommentRead])
def list_comments_endpoint(
    post_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[CommentRead]:
    """Return the comment thread of a post, replies nested under parents."""

    try:
        comments = list_comments(db, post_id=post_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return [_comment_to_schema(comment) for comment in comments]


@router.post(
    "/{post_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def create_comment_endpoint(
    post_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> CommentRead:
    try:
        comment = create_comment(
            db,
            post_id=post_id,
            author=current_user,
            content=payload.content,
            parent_comment_id=payload.parent_comment_id,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _comment_to_schema(comment)


__all__ = ["router"]
