"""SQLAlchemy models."""

from src.models.thought import Thought
from src.models.user import User

__all__ = [
    "User",
    "Thought",
]
