"""Request/response schemas for authentication endpoints."""

from __future__ import annotations

from friend.schemas import CamelModel


# Required fields are checked by the router so that a missing field maps to
# a plain 400 "Missing fields" rather than a per-field validation report.


class SignupRequest(CamelModel):
    """Create an account."""

    username: str | None = None
    email: str | None = None
    password: str | None = None
    full_name: str | None = None


class LoginRequest(CamelModel):
    """Login with email + password."""

    email: str | None = None
    password: str | None = None


class UserResponse(CamelModel):
    """Public projection of a user. Never includes the password hash."""

    id: int
    username: str
    email: str
    full_name: str | None = None
    bio: str | None = None
    profile_pic: str | None = None


class AuthResponse(CamelModel):
    """Token issued at signup or login, with the user it belongs to."""

    success: bool = True
    token: str
    user: UserResponse
