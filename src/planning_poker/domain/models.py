"""Domain models for planning poker participants and stories."""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Roles a user can hold within a session."""

    CREATOR = "creator"
    PARTICIPANT = "participant"


@dataclass
class User:
    """A person taking part in estimation."""

    id: str
    name: str
    role: Role = Role.PARTICIPANT
    estimate: float = 0

    def assign_role(self, role: Role) -> None:
        self.role = role

    def grant_creator(self) -> None:
        """Give the user the creator capability."""
        self.assign_role(Role.CREATOR)

    @property
    def is_creator(self) -> bool:
        return self.role is Role.CREATOR

    def set_estimate(self, points: float) -> None:
        self.estimate = points

    def clear_estimate(self) -> None:
        self.estimate = 0

    @property
    def has_estimate(self) -> bool:
        """Return True when the user has submitted a positive estimate."""
        return self.estimate > 0


@dataclass(frozen=True)
class Story:
    """The item being estimated."""

    id: str
    title: str
    description: str = ""


@dataclass(frozen=True)
class Participant:
    """Public view of a roster entry."""

    id: str
    name: str


@dataclass(frozen=True)
class RevealedEstimate:
    """A participant's estimate after reveal."""

    id: str
    name: str
    estimate: float
