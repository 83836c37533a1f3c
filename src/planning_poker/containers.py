"""Dependency container wiring for the application."""

from dataclasses import dataclass

from planning_poker.adapters.in_memory_session_repository import (
    InMemorySessionRepository,
)
from planning_poker.adapters.in_memory_user_repository import InMemoryUserRepository
from planning_poker.config import Settings
from planning_poker.services.sessions import SessionService
from planning_poker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    session_service: SessionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    user_service = UserService(
        repository=InMemoryUserRepository(),
        id_character_set=resolved_settings.id_character_set,
        id_length=resolved_settings.user_id_length,
    )
    session_service = SessionService(
        repository=InMemorySessionRepository(),
        user_service=user_service,
        id_character_set=resolved_settings.id_character_set,
        id_length=resolved_settings.session_id_length,
        creator_can_estimate=resolved_settings.creator_can_estimate,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        session_service=session_service,
    )
