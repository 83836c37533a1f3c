"""In-memory user repository."""

from dataclasses import dataclass, field

from planning_poker.domain.models import User
from planning_poker.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Keeps users in a process-local dict keyed by id."""

    users: dict[str, User] = field(default_factory=dict)

    def add(self, user: User) -> None:
        self.users[user.id] = user

    def get(self, user_id: str) -> User | None:
        return self.users.get(user_id)
