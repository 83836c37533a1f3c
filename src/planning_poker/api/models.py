"""Pydantic request and response schemas for the HTTP API."""

from pydantic import BaseModel, Field

from planning_poker.domain.models import Story, User
from planning_poker.domain.sessions import Session


class CreateUserRequest(BaseModel):
    """Payload for creating a user."""

    name: str = Field(min_length=1)


class UserResponse(BaseModel):
    """Public view of a user."""

    id: str
    name: str
    role: str
    estimate: float

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id, name=user.name, role=user.role.value, estimate=user.estimate
        )


class CreateSessionRequest(BaseModel):
    """Payload for creating a session."""

    owner_id: str
    name: str
    description: str = ""
    id: str | None = None


class JoinSessionRequest(BaseModel):
    user_id: str


class SetStoryRequest(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""


class EstimateRequest(BaseModel):
    points: float


class StoryResponse(BaseModel):
    id: str
    title: str
    description: str

    @classmethod
    def from_story(cls, story: Story) -> "StoryResponse":
        return cls(id=story.id, title=story.title, description=story.description)


class SessionResponse(BaseModel):
    """Public view of a session and its roster."""

    id: str
    name: str
    description: str
    owner: UserResponse
    story: StoryResponse | None
    users: list[UserResponse]

    @classmethod
    def from_session(cls, session: Session) -> "SessionResponse":
        return cls(
            id=session.id,
            name=session.name,
            description=session.description,
            owner=UserResponse.from_user(session.owner),
            story=StoryResponse.from_story(session.story) if session.story else None,
            users=[UserResponse.from_user(user) for user in session.users.values()],
        )


class ParticipantResponse(BaseModel):
    id: str
    name: str


class RevealedEstimateResponse(BaseModel):
    id: str
    name: str
    estimate: float
