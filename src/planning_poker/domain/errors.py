"""Errors raised by the estimation domain."""


class PlanningPokerError(Exception):
    """Base class for domain errors."""


class MissingOwnerError(PlanningPokerError):
    """A session was constructed without an owner."""

    def __init__(self) -> None:
        super().__init__("A session requires an owner.")


class MissingStoryError(PlanningPokerError):
    """An estimation query ran before a story was set."""

    def __init__(self) -> None:
        super().__init__("No story has been set in the session.")


class EmptyRosterError(PlanningPokerError):
    """An estimation query ran against a session with no participants."""

    def __init__(self) -> None:
        super().__init__("No users in the session.")


class UserNotFoundError(PlanningPokerError):
    """The referenced user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class SessionNotFoundError(PlanningPokerError):
    """The referenced session does not exist."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class SessionExistsError(PlanningPokerError):
    """A session with the requested id already exists."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session already exists: {session_id}")
        self.session_id = session_id
