"""Uniform response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Wrapper returned by every endpoint."""

    success: bool = True
    response: T | None = None
    message: str
