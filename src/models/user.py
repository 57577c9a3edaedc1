"""User model."""

from sqlalchemy import Column, String

from src.database import Base
from src.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and thought ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased
    password_hash = Column(String(255), nullable=False)
    access_token = Column(String(512), unique=True, nullable=False, index=True)
