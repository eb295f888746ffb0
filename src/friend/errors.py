"""Error taxonomy shared by services, repositories and routers.

Every error carries the HTTP status it maps to and a message that is safe
to return to the client.
"""

from __future__ import annotations


class FriendError(Exception):
    """Base class for errors that translate to a JSON error response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FriendError):
    """A required field is missing from the request."""

    status_code = 400
    default_message = "Missing fields"


class ConflictError(FriendError):
    """A unique value (username, email) is already taken."""

    status_code = 400
    default_message = "Username or email already exists"


class Unauthorized(FriendError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_message = "Unauthorized"


class NotFound(FriendError):
    status_code = 404
    default_message = "Not found"


class PersistenceError(FriendError):
    """The store rejected a statement or is unavailable."""

    status_code = 500
    default_message = "Database error"
