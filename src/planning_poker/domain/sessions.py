"""Estimation session entity."""

import logging

from planning_poker.domain.errors import (
    EmptyRosterError,
    MissingOwnerError,
    MissingStoryError,
    UserNotFoundError,
)
from planning_poker.domain.identifiers import (
    DEFAULT_ID_CHARACTER_SET,
    DEFAULT_SESSION_ID_LENGTH,
    generate_random_id,
)
from planning_poker.domain.models import Participant, RevealedEstimate, Story, User

_logger = logging.getLogger(__name__)


class Session:
    """One estimation round: an owner, a roster, a story and estimates.

    The roster is keyed by user id and carries no ordering guarantee. The
    owner is not part of the roster until ``creator_can_estimate`` is called.
    """

    def __init__(  # noqa: PLR0913
        self,
        id: str | None,  # noqa: A002
        user: User | None,
        name: str,
        description: str = "",
        *,
        id_character_set: str = DEFAULT_ID_CHARACTER_SET,
        id_length: int = DEFAULT_SESSION_ID_LENGTH,
    ) -> None:
        if user is None:
            raise MissingOwnerError()
        if id is None:
            id = generate_random_id(id_character_set, id_length)  # noqa: A001
        self.id = id
        user.grant_creator()
        self.owner = user
        self.name = name
        self.description = description
        self.story: Story | None = None
        self.users: dict[str, User] = {}

    def creator_can_estimate(self) -> None:
        """Add the owner to the roster so they can submit an estimate."""
        self.users[self.owner.id] = self.owner

    def set_story(self, story: Story | None) -> None:
        self.story = story

    def add_user(self, user: User) -> None:
        self.users[user.id] = user

    def remove_user(self, user_id: str) -> bool:
        """Remove a user from the roster, returning whether it was present."""
        if user_id in self.users:
            del self.users[user_id]
            return True
        return False

    def add_estimate(self, user_id: str, points: float) -> None:
        """Record a point estimate for a roster user."""
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.set_estimate(points)

    def clear_estimates(self) -> None:
        for user in self.users.values():
            user.clear_estimate()

    @property
    def all_estimated(self) -> bool:
        return bool(self.users) and all(
            user.has_estimate for user in self.users.values()
        )

    def get_users_with_estimations(self) -> list[Participant]:
        """Return participants who have submitted a positive estimate."""
        if self.story is None:
            raise MissingStoryError()
        if len(self.users) == 0:
            raise EmptyRosterError()
        return [
            Participant(id=user.id, name=user.name)
            for user in self.users.values()
            if user.has_estimate
        ]

    def reveal_estimates(self) -> list[RevealedEstimate]:
        """Return every participant's estimate, or nothing until all have voted."""
        if len(self.get_users_with_estimations()) != len(self.users):
            _logger.info("Session %s: not all users have estimated", self.id)
            return []
        return [
            RevealedEstimate(id=user.id, name=user.name, estimate=user.estimate)
            for user in self.users.values()
        ]

    def get_estimation_average(self) -> float:
        """Return the mean estimate across the roster, unset estimates as zero."""
        if not self.users:
            raise EmptyRosterError()
        total = sum(user.estimate for user in self.users.values())
        return total / len(self.users)
