"""Thought service for posting, liking and moderating thoughts."""

import logging
import math
import uuid
from typing import Any

from sqlalchemy import desc
from sqlalchemy.orm import Session

from src.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from src.models.thought import Thought
from src.models.user import User

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid ID format"
NOT_FOUND_MESSAGE = "Thought not found"


def validate_thought_id(thought_id: str) -> str:
    """Check that an id is a well-formed UUID and return its canonical form.

    Raises:
        InvalidArgumentError: the id is not a UUID.
    """
    try:
        return str(uuid.UUID(thought_id))
    except (TypeError, ValueError, AttributeError):
        raise InvalidArgumentError(INVALID_ID_MESSAGE) from None


def parse_hearts(raw: str | None) -> float | None:
    """Parse the hearts filter. Anything that is not a finite number means no filter."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def ensure_owner(thought: Thought, user: User, action: str = "edit") -> None:
    """Allow a mutation only when the caller wrote the thought.

    Raises:
        ForbiddenError: the caller is not the author.
    """
    if thought.author_id != user.id:
        logger.info(f"User {user.id} denied {action} on thought {thought.id}")
        raise ForbiddenError(f"You can only {action} your own thoughts")


class ThoughtService:
    """Service for thought-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_thoughts(self, hearts: float | None = None) -> list[Thought]:
        """Get thoughts newest first, optionally restricted to an exact heart count."""
        query = self.db.query(Thought)
        if hearts is not None:
            query = query.filter(Thought.hearts == hearts)
        return query.order_by(desc(Thought.created_at)).all()

    def get_thought(self, thought_id: str) -> Thought:
        """Get a thought by id.

        Raises:
            InvalidArgumentError: malformed id.
            NotFoundError: no thought with this id.
        """
        canonical = validate_thought_id(thought_id)
        thought = self.db.get(Thought, canonical)
        if thought is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return thought

    def create_thought(self, message: str, author: User) -> Thought:
        """Post a new thought owned by ``author``."""
        thought = Thought(message=message, hearts=0, author_id=author.id)
        self.db.add(thought)
        self.db.commit()
        self.db.refresh(thought)
        logger.info(f"User {author.id} posted thought {thought.id}")
        return thought

    def update_thought(self, thought_id: str, user: User, changes: dict[str, Any]) -> Thought:
        """Apply a partial edit by the thought's author.

        Only ``message`` and ``hearts`` are editable; ``None`` values are ignored.
        """
        thought = self.get_thought(thought_id)
        ensure_owner(thought, user, "edit")

        for field in ("message", "hearts"):
            value = changes.get(field)
            if value is not None:
                setattr(thought, field, value)

        self.db.commit()
        self.db.refresh(thought)
        return thought

    def like_thought(self, thought_id: str) -> Thought:
        """Add one heart to a thought.

        The increment runs as a single UPDATE so concurrent likes never
        overwrite each other.
        """
        canonical = validate_thought_id(thought_id)
        updated = (
            self.db.query(Thought)
            .filter(Thought.id == canonical)
            .update({Thought.hearts: Thought.hearts + 1}, synchronize_session=False)
        )
        if not updated:
            self.db.rollback()
            raise NotFoundError(NOT_FOUND_MESSAGE)
        self.db.commit()

        thought = self.db.get(Thought, canonical, populate_existing=True)
        if thought is None:
            # Deleted between the increment and the reload
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.debug(f"Thought {canonical} now has {thought.hearts} hearts")
        return thought

    def delete_thought(self, thought_id: str, user: User) -> str:
        """Delete a thought owned by ``user`` and return its id."""
        thought = self.get_thought(thought_id)
        ensure_owner(thought, user, "delete")

        deleted_id = thought.id
        self.db.delete(thought)
        self.db.commit()
        logger.info(f"User {user.id} deleted thought {deleted_id}")
        return deleted_id
