"""Estimation session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from planning_poker.api.models import (
    CreateSessionRequest,
    EstimateRequest,
    JoinSessionRequest,
    ParticipantResponse,
    RevealedEstimateResponse,
    SessionResponse,
    SetStoryRequest,
    StoryResponse,
)

if TYPE_CHECKING:
    from planning_poker.services.sessions import SessionService

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _sessions(request: Request) -> SessionService:
    return request.app.state.container.session_service


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(
    body: CreateSessionRequest, request: Request
) -> SessionResponse:
    """Create a session owned by an existing user."""
    session = _sessions(request).create_session(
        owner_id=body.owner_id,
        name=body.name,
        description=body.description,
        session_id=body.id,
    )
    return SessionResponse.from_session(session)


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> SessionResponse:
    return SessionResponse.from_session(_sessions(request).get_session(session_id))


@router.post("/{session_id}/owner")
async def allow_creator_estimate(session_id: str, request: Request) -> SessionResponse:
    """Add the session owner to the roster."""
    session = _sessions(request).allow_creator_estimate(session_id)
    return SessionResponse.from_session(session)


@router.post("/{session_id}/users")
async def join_session(
    session_id: str, body: JoinSessionRequest, request: Request
) -> SessionResponse:
    session = _sessions(request).join(session_id, body.user_id)
    return SessionResponse.from_session(session)


@router.delete("/{session_id}/users/{user_id}")
async def leave_session(
    session_id: str, user_id: str, request: Request
) -> dict[str, bool]:
    """Remove a user from the roster."""
    return {"removed": _sessions(request).leave(session_id, user_id)}


@router.put("/{session_id}/story")
async def set_story(
    session_id: str, body: SetStoryRequest, request: Request
) -> StoryResponse:
    story = _sessions(request).set_story(session_id, body.title, body.description)
    return StoryResponse.from_story(story)


@router.put("/{session_id}/estimates/{user_id}")
async def add_estimate(
    session_id: str, user_id: str, body: EstimateRequest, request: Request
) -> dict[str, str]:
    """Record a participant's estimate."""
    _sessions(request).add_estimate(session_id, user_id, body.points)
    return {"status": "ok"}


@router.delete("/{session_id}/estimates")
async def clear_estimates(session_id: str, request: Request) -> dict[str, str]:
    _sessions(request).clear_estimates(session_id)
    return {"status": "ok"}


@router.get("/{session_id}/estimators")
async def users_with_estimations(
    session_id: str, request: Request
) -> list[ParticipantResponse]:
    """Return participants who have estimated the current story."""
    participants = _sessions(request).users_with_estimations(session_id)
    return [ParticipantResponse(id=p.id, name=p.name) for p in participants]


@router.get("/{session_id}/reveal")
async def reveal_estimates(
    session_id: str, request: Request
) -> list[RevealedEstimateResponse]:
    """Return all estimates once every participant has voted."""
    revealed = _sessions(request).reveal(session_id)
    return [
        RevealedEstimateResponse(id=item.id, name=item.name, estimate=item.estimate)
        for item in revealed
    ]


@router.get("/{session_id}/average")
async def estimation_average(session_id: str, request: Request) -> dict[str, float]:
    return {"average": _sessions(request).average(session_id)}
