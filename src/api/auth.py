"""User signup and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_app_settings, get_current_user
from src.config import Settings
from src.database import get_db
from src.models.user import User
from src.schemas.auth import UserLogin, UserResponse, UserSignup
from src.schemas.envelope import Envelope
from src.services.auth import authenticate_user, create_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/signup", response_model=Envelope[UserResponse])
def signup(
    user_data: UserSignup,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Register a new user."""
    user = create_user(db, user_data.email, user_data.password, settings.access_token_bytes)
    return Envelope[UserResponse](
        response=UserResponse.model_validate(user),
        message="User created successfully",
    )


@router.post("/login", response_model=Envelope[UserResponse])
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    return Envelope[UserResponse](
        response=UserResponse.model_validate(user),
        message="Logged in successfully",
    )


@router.get("/me", response_model=Envelope[UserResponse])
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return Envelope[UserResponse](
        response=UserResponse.model_validate(current_user),
        message="Success",
    )
