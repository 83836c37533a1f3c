"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from planning_poker.adapters.in_memory_session_repository import (
    InMemorySessionRepository,
)
from planning_poker.adapters.in_memory_user_repository import InMemoryUserRepository
from planning_poker.api.app import create_app
from planning_poker.config import Settings
from planning_poker.containers import AppContainer
from planning_poker.domain.models import User
from planning_poker.services.sessions import SessionService
from planning_poker.services.users import UserService


@pytest.fixture
def settings() -> Settings:
    return Settings(
        id_character_set="abcdef0123456789",
        session_id_length=6,
        user_id_length=10,
        creator_can_estimate=False,
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def user_service(
    settings: Settings, user_repository: InMemoryUserRepository
) -> UserService:
    return UserService(
        repository=user_repository,
        id_character_set=settings.id_character_set,
        id_length=settings.user_id_length,
    )


@pytest.fixture
def session_service(
    settings: Settings,
    session_repository: InMemorySessionRepository,
    user_service: UserService,
) -> SessionService:
    return SessionService(
        repository=session_repository,
        user_service=user_service,
        id_character_set=settings.id_character_set,
        id_length=settings.session_id_length,
        creator_can_estimate=settings.creator_can_estimate,
    )


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    session_service: SessionService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=user_service,
        session_service=session_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def alice() -> User:
    return User(id="u1", name="Alice")


@pytest.fixture
def bob() -> User:
    return User(id="u2", name="Bob")
