"""Application exceptions.

Services raise these; the handlers registered in ``src.main`` render each
one as a response envelope with the matching HTTP status code.
"""

from typing import Any

from fastapi import status


class ThoughtsError(Exception):
    """Base exception for all API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, response: Any = None):
        self.message = message or self.default_message
        self.response = response
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        """Render the error as a response envelope."""
        return {"success": False, "response": self.response, "message": self.message}


class InvalidArgumentError(ThoughtsError):
    """Malformed id or request input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UnauthenticatedError(ThoughtsError):
    """Missing or unknown bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication missing / invalid"

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        body["loggedOut"] = True
        return body


class ForbiddenError(ThoughtsError):
    """Authenticated caller is not allowed to touch the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(ThoughtsError):
    """No matching record."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DuplicateIdentityError(ThoughtsError):
    """Signup with an email that is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User with this email already exists"


class InvalidCredentialsError(ThoughtsError):
    """Login with an unknown email or a wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Wrong e-mail or password"


class InternalError(ThoughtsError):
    """Unexpected store or infrastructure failure."""
