"""User account routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from scribe.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    ProfileView,
    RegisterRequest,
    RegisterUseCase,
)
from scribe.application.usecase.user import UpdateProfileRequest, UpdateProfileUseCase
from scribe.interface.api.dependencies import bearer_token

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    register_use_case: FromDishka[RegisterUseCase],
    payload: dict[str, Any] | None = Body(default=None),
) -> AuthResponse:
    """Create an account and return a session token.

    Args:
        register_use_case: Register use case from DI
        payload: ``{username, email, password}``

    Returns:
        Token and the new user (without password)
    """
    return await register_use_case.execute(RegisterRequest(payload=payload or {}))


@router.post("/login", response_model=AuthResponse)
async def login(
    login_use_case: FromDishka[LoginUseCase],
    payload: dict[str, Any] | None = Body(default=None),
) -> AuthResponse:
    """Exchange email and password for a session token."""
    return await login_use_case.execute(LoginRequest(payload=payload or {}))


@router.get("/profile", response_model=ProfileView)
async def get_profile(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> ProfileView:
    """Return the authenticated user's profile."""
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))


@router.put("/profile", response_model=ProfileView)
async def update_profile(
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    payload: dict[str, Any] | None = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> ProfileView:
    """Change the authenticated user's username and/or email."""
    return await update_profile_use_case.execute(
        UpdateProfileRequest(token=token, payload=payload or {})
    )
