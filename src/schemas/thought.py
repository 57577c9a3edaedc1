"""Thought schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_MESSAGE_LENGTH = 500
# Largest value an INTEGER column holds
MAX_HEARTS = 2**31 - 1


def require_text(value: str | None) -> str | None:
    """Strip a message and reject it when nothing is left."""
    if value is None:
        return value
    stripped = value.strip()
    if not stripped:
        raise ValueError("Message must not be empty")
    return stripped


class ThoughtCreate(BaseModel):
    """Post a new thought."""

    message: str = Field(..., max_length=MAX_MESSAGE_LENGTH)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        return require_text(v)


class ThoughtUpdate(BaseModel):
    """Edit a thought. Absent fields keep their current value."""

    message: str | None = Field(None, max_length=MAX_MESSAGE_LENGTH)
    hearts: int | None = Field(None, ge=0, le=MAX_HEARTS)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str | None) -> str | None:
        return require_text(v)


class ThoughtResponse(BaseModel):
    """Thought response."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    message: str
    hearts: int
    created_at: datetime
    author_id: str
