"""Endpoints serving the consolidated activity feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from consumed.application.use_cases.feed import (
    FeedPage,
    activity_icon,
    activity_label,
    get_avatar_initial,
    get_display_name,
    get_feed,
    media_type_icon,
)
from consumed.domain.entities import (
    ActivityGroup,
    ListGroup,
    MediaActivityGroup,
    MediaItem,
    Slide,
    User,
)
from consumed.infrastructure.database import get_db
from consumed.interfaces.api.dependencies import get_current_active_user
from consumed.interfaces.api.schemas import (
    ActivityGroupRead,
    FeedRead,
    FeedUserRead,
    ListGroupRead,
    MediaActivityGroupRead,
    MediaItemRead,
    SlideRead,
)

router = APIRouter(prefix="/feed", tags=["feed"])


def _user_to_schema(user_id: str, users: dict[str, User]) -> FeedUserRead:
    user = users.get(user_id)
    if user is None:
        return FeedUserRead(
            id=user_id, username="Unknown", display_name="Unknown", initial="?"
        )
    return FeedUserRead(
        id=user_id,
        username=user.username,
        display_name=get_display_name(user.display_name, user.username),
        avatar=user.avatar,
        initial=get_avatar_initial(user.display_name, user.username),
    )


def _item_to_schema(item: MediaItem) -> MediaItemRead:
    return MediaItemRead(
        id=item.id,
        title=item.title,
        creator=item.creator,
        media_type=item.media_type,
        media_icon=media_type_icon(item.media_type),
        image_url=item.image_url,
        external_id=item.external_id,
        external_source=item.external_source,
        rating=item.rating,
    )


def _list_to_schema(list_group: ListGroup) -> ListGroupRead:
    return ListGroupRead(
        list_name=list_group.list_name,
        list_id=list_group.list_id,
        items=[_item_to_schema(item) for item in list_group.items],
    )


def _slide_to_schema(slide: Slide) -> SlideRead:
    return SlideRead(
        type=slide.type,
        title=slide.title,
        items=[_item_to_schema(item) for item in slide.items],
        rating=slide.rating,
        list_name=slide.list_name,
        list_id=slide.list_id,
    )


def _group_to_schema(group: ActivityGroup, page: FeedPage) -> ActivityGroupRead:
    return ActivityGroupRead(
        id=group.id,
        kind=group.kind,
        action_type=group.action_type.value,
        user=_user_to_schema(group.user_id, page.users),
        timestamp=group.timestamp,
        date_label=page.date_labels.get(group.id, ""),
        header_text=group.header_text,
        summary_text=group.summary_text,
        label=activity_label(group.action_type),
        icon=activity_icon(group.action_type),
        items=[_item_to_schema(item) for item in group.items],
        preview_items=[_item_to_schema(item) for item in group.preview_items],
        remaining_count=group.remaining_count,
        total_items=group.total_items,
        total_lists=group.total_lists,
        list_names=group.list_names,
        lists=[_list_to_schema(list_group) for list_group in group.lists],
        slides=[_slide_to_schema(slide) for slide in group.slides],
        likes=group.likes,
        comments=group.comments,
        liked_by_current_user=group.liked_by_current_user,
        is_consolidated=group.is_consolidated,
        original_post_ids=group.original_post_ids,
    )


def _media_group_to_schema(
    group: MediaActivityGroup, page: FeedPage
) -> MediaActivityGroupRead:
    return MediaActivityGroupRead(
        media=_item_to_schema(group.media),
        list_type=group.list_type,
        users=[_user_to_schema(user_id, page.users) for user_id in group.user_ids],
        displayed_users=[
            _user_to_schema(user_id, page.users) for user_id in group.displayed_user_ids
        ],
        remaining_count=group.remaining_count,
        show_bet=group.show_bet,
        post_ids=group.post_ids,
        timestamp=group.timestamp,
    )


@router.get("/", response_model=FeedRead)
def read_feed(
    limit: int | None = Query(
        None, ge=1, le=200, description="Number of recent posts to consolidate"
    ),
    user_id: int | None = Query(None, description="Only include posts by this user"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> FeedRead:
    """Return recent activity merged into cards."""

    page = get_feed(db, current_user=current_user, limit=limit, user_id=user_id)
    return FeedRead(
        groups=[_group_to_schema(group, page) for group in page.groups],
        media_groups=[_media_group_to_schema(group, page) for group in page.media_groups],
        generated_at=page.generated_at,
    )


__all__ = ["router"]
