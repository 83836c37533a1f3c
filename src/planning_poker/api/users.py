"""User endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from planning_poker.api.models import CreateUserRequest, UserResponse

if TYPE_CHECKING:
    from planning_poker.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_user(body: CreateUserRequest, request: Request) -> UserResponse:
    """Create a user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.create_user(body.name)
    return UserResponse.from_user(user)


@router.get("/{user_id}")
async def get_user(user_id: str, request: Request) -> UserResponse:
    """Return a single user."""
    container: AppContainer = request.app.state.container
    return UserResponse.from_user(container.user_service.get_user(user_id))
