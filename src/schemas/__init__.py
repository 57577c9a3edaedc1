"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import UserLogin, UserResponse, UserSignup
from src.schemas.envelope import Envelope
from src.schemas.thought import ThoughtCreate, ThoughtResponse, ThoughtUpdate

__all__ = [
    "Envelope",
    "UserSignup",
    "UserLogin",
    "UserResponse",
    "ThoughtCreate",
    "ThoughtUpdate",
    "ThoughtResponse",
]
