"""Thought API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_thought_service
from src.exceptions import NotFoundError
from src.models.user import User
from src.schemas.envelope import Envelope
from src.schemas.thought import ThoughtCreate, ThoughtResponse, ThoughtUpdate
from src.services.thought_service import ThoughtService, parse_hearts

router = APIRouter(prefix="/thoughts", tags=["thoughts"])


def _to_response(thoughts) -> list[ThoughtResponse]:
    return [ThoughtResponse.model_validate(t) for t in thoughts]


@router.get("", response_model=Envelope[list[ThoughtResponse]])
def list_thoughts(
    service: Annotated[ThoughtService, Depends(get_thought_service)],
):
    """Get all thoughts, newest first."""
    thoughts = service.list_thoughts()
    return Envelope[list[ThoughtResponse]](
        response=_to_response(thoughts),
        message="Thoughts retrieved",
    )


@router.get("/like", response_model=Envelope[list[ThoughtResponse]])
def filter_thoughts_by_hearts(
    service: Annotated[ThoughtService, Depends(get_thought_service)],
    hearts: Annotated[str | None, Query()] = None,
):
    """Get thoughts with an exact heart count.

    A missing or non-numeric ``hearts`` value returns every thought.
    """
    thoughts = service.list_thoughts(hearts=parse_hearts(hearts))
    if not thoughts:
        raise NotFoundError("No thoughts match the query", response=[])

    return Envelope[list[ThoughtResponse]](
        response=_to_response(thoughts),
        message="Thoughts retrieved",
    )


@router.get("/{thought_id}", response_model=Envelope[ThoughtResponse])
def get_thought(
    thought_id: str,
    service: Annotated[ThoughtService, Depends(get_thought_service)],
):
    """Get a specific thought."""
    thought = service.get_thought(thought_id)
    return Envelope[ThoughtResponse](
        response=ThoughtResponse.model_validate(thought),
        message="Success",
    )


@router.post(
    "",
    response_model=Envelope[ThoughtResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_thought(
    thought_data: ThoughtCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ThoughtService, Depends(get_thought_service)],
):
    """Post a new thought as the current user."""
    thought = service.create_thought(thought_data.message, current_user)
    return Envelope[ThoughtResponse](
        response=ThoughtResponse.model_validate(thought),
        message="Thought created successfully",
    )


@router.patch("/{thought_id}", response_model=Envelope[ThoughtResponse])
def update_thought(
    thought_id: str,
    thought_data: ThoughtUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ThoughtService, Depends(get_thought_service)],
):
    """Edit the message and/or hearts of one of your thoughts."""
    thought = service.update_thought(
        thought_id, current_user, thought_data.model_dump(exclude_unset=True)
    )
    return Envelope[ThoughtResponse](
        response=ThoughtResponse.model_validate(thought),
        message="Thought updated successfully",
    )


@router.post("/{thought_id}/like", response_model=Envelope[ThoughtResponse])
def like_thought(
    thought_id: str,
    service: Annotated[ThoughtService, Depends(get_thought_service)],
):
    """Add a heart to a thought. Open to anonymous callers."""
    thought = service.like_thought(thought_id)
    return Envelope[ThoughtResponse](
        response=ThoughtResponse.model_validate(thought),
        message="Thought liked",
    )


@router.delete("/{thought_id}", response_model=Envelope[str])
def delete_thought(
    thought_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ThoughtService, Depends(get_thought_service)],
):
    """Delete one of your thoughts."""
    deleted_id = service.delete_thought(thought_id, current_user)
    return Envelope[str](response=deleted_id, message="Thought deleted successfully")
