"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from src.config import Settings
from src.database import get_db
from src.models.user import User
from src.services.auth import resolve_identity
from src.services.thought_service import ThoughtService


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running app was built with."""
    return request.app.state.context.settings


def get_current_user(
    db: Annotated[Session, Depends(get_db)],
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Get the current authenticated user from the bearer token.

    Declared by every mutating route so the check runs before the handler body.
    """
    return resolve_identity(db, authorization)


def get_thought_service(
    db: Annotated[Session, Depends(get_db)],
) -> ThoughtService:
    """Get thought service with dependencies."""
    return ThoughtService(db)
