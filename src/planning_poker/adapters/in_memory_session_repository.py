"""In-memory session repository."""

from dataclasses import dataclass, field

from planning_poker.domain.sessions import Session
from planning_poker.services.sessions import SessionRepository


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Keeps sessions in a process-local dict keyed by id."""

    sessions: dict[str, Session] = field(default_factory=dict)

    def add(self, session: Session) -> None:
        self.sessions[session.id] = session

    def get(self, session_id: str) -> Session | None:
        return self.sessions.get(session_id)
