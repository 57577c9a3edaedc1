"""Thought model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import UUIDPrimaryKeyMixin, utcnow


class Thought(Base, UUIDPrimaryKeyMixin):
    """A short message posted by a user, with a like counter."""

    __tablename__ = "thoughts"

    message = Column(Text, nullable=False)
    hearts = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    author = relationship("User", backref="thoughts")
