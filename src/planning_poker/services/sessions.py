"""Estimation session workflows."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from planning_poker.domain.errors import SessionExistsError, SessionNotFoundError
from planning_poker.domain.identifiers import (
    DEFAULT_ID_CHARACTER_SET,
    DEFAULT_SESSION_ID_LENGTH,
    generate_random_id,
)
from planning_poker.domain.models import Participant, RevealedEstimate, Story
from planning_poker.domain.sessions import Session
from planning_poker.services.users import UserService

_logger = logging.getLogger(__name__)

_STORY_ID_LENGTH = 8


class SessionRepository(Protocol):
    """Storage interface for sessions."""

    def add(self, session: Session) -> None:
        """Store a session, replacing any session with the same id."""

    def get(self, session_id: str) -> Session | None:
        """Return a session by id, if present."""


@dataclass
class SessionService:
    """Runs estimation rounds on stored sessions."""

    repository: SessionRepository
    user_service: UserService
    id_character_set: str = DEFAULT_ID_CHARACTER_SET
    id_length: int = DEFAULT_SESSION_ID_LENGTH
    creator_can_estimate: bool = False

    def create_session(
        self,
        owner_id: str,
        name: str,
        description: str = "",
        session_id: str | None = None,
    ) -> Session:
        """Create a session owned by an existing user.

        The session works on its own copy of the owner so that the creator role
        and estimates stay local to it.
        """
        if session_id is not None and self.repository.get(session_id) is not None:
            raise SessionExistsError(session_id)
        owner = replace(self.user_service.get_user(owner_id))
        session = Session(
            session_id,
            owner,
            name,
            description,
            id_character_set=self.id_character_set,
            id_length=self.id_length,
        )
        if self.creator_can_estimate:
            session.creator_can_estimate()
        self.repository.add(session)
        _logger.info(
            "Created session: session_id=%s owner_id=%s", session.id, owner.id
        )
        return session

    def get_session(self, session_id: str) -> Session:
        """Return a session or raise SessionNotFoundError."""
        session = self.repository.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def allow_creator_estimate(self, session_id: str) -> Session:
        """Let the session owner take part in estimation."""
        session = self.get_session(session_id)
        session.creator_can_estimate()
        _logger.info("Owner joined roster: session_id=%s", session_id)
        return session

    def join(self, session_id: str, user_id: str) -> Session:
        """Add an existing user to a session's roster."""
        session = self.get_session(session_id)
        session.add_user(replace(self.user_service.get_user(user_id)))
        _logger.info("User joined: session_id=%s user_id=%s", session_id, user_id)
        return session

    def leave(self, session_id: str, user_id: str) -> bool:
        """Remove a user from a session's roster."""
        removed = self.get_session(session_id).remove_user(user_id)
        if removed:
            _logger.info("User left: session_id=%s user_id=%s", session_id, user_id)
        return removed

    def set_story(self, session_id: str, title: str, description: str = "") -> Story:
        """Replace the story under estimation."""
        session = self.get_session(session_id)
        story = Story(
            id=generate_random_id(self.id_character_set, _STORY_ID_LENGTH),
            title=title,
            description=description,
        )
        session.set_story(story)
        _logger.info("Story set: session_id=%s story_id=%s", session_id, story.id)
        return story

    def add_estimate(self, session_id: str, user_id: str, points: float) -> None:
        self.get_session(session_id).add_estimate(user_id, points)
        _logger.info("Estimate added: session_id=%s user_id=%s", session_id, user_id)

    def clear_estimates(self, session_id: str) -> None:
        self.get_session(session_id).clear_estimates()
        _logger.info("Estimates cleared: session_id=%s", session_id)

    def users_with_estimations(self, session_id: str) -> list[Participant]:
        return self.get_session(session_id).get_users_with_estimations()

    def reveal(self, session_id: str) -> list[RevealedEstimate]:
        return self.get_session(session_id).reveal_estimates()

    def average(self, session_id: str) -> float:
        return self.get_session(session_id).get_estimation_average()
