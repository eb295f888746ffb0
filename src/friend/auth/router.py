"""Authentication router — all /api/auth/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from friend.auth.dependencies import get_current_user_id
from friend.auth.schemas import AuthResponse, LoginRequest, SignupRequest, UserResponse
from friend.auth.service import UserStore, get_user_store
from friend.auth.tokens import TokenService, get_token_service
from friend.db.models import User
from friend.errors import ValidationError

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _auth_response(user: User, tokens: TokenService) -> AuthResponse:
    return AuthResponse(
        token=tokens.issue(user.id),
        user=UserResponse.model_validate(user),
    )


@router.post("/signup", response_model=AuthResponse)
async def signup(
    body: SignupRequest,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
) -> AuthResponse:
    """Register with username + email + password and receive a session token."""
    if not body.username or not body.email or not body.password:
        raise ValidationError("Missing fields")

    user = await users.register(
        username=body.username,
        email=body.email,
        password=body.password,
        full_name=body.full_name,
    )
    return _auth_response(user, tokens)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
) -> AuthResponse:
    """Login with email + password."""
    if not body.email or not body.password:
        raise ValidationError("Missing email or password")

    user = await users.authenticate(body.email, body.password)
    return _auth_response(user, tokens)


@router.get("/me", response_model=UserResponse)
async def me(
    user_id: int = Depends(get_current_user_id),
    users: UserStore = Depends(get_user_store),
) -> UserResponse:
    """Get the caller's own profile."""
    user = await users.find_by_id(user_id)
    return UserResponse.model_validate(user)
