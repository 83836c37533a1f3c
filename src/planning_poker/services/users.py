"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from planning_poker.domain.errors import UserNotFoundError
from planning_poker.domain.identifiers import (
    DEFAULT_ID_CHARACTER_SET,
    DEFAULT_USER_ID_LENGTH,
    generate_random_id,
)
from planning_poker.domain.models import User

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Storage interface for users."""

    def add(self, user: User) -> None:
        """Store a user, replacing any user with the same id."""

    def get(self, user_id: str) -> User | None:
        """Return the user for an id, if present."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    id_character_set: str = DEFAULT_ID_CHARACTER_SET
    id_length: int = DEFAULT_USER_ID_LENGTH

    def create_user(self, name: str) -> User:
        """Create, store and return a new user."""
        user = User(
            id=generate_random_id(self.id_character_set, self.id_length),
            name=name,
        )
        self.repository.add(user)
        _logger.info("Created user: user_id=%s", user.id)
        return user

    def get_user(self, user_id: str) -> User:
        """Return the user for an id or raise UserNotFoundError."""
        user = self.repository.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
