"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from planning_poker.api.sessions import router as sessions_router
from planning_poker.api.users import router as users_router
from planning_poker.app_logging import configure_logging
from planning_poker.containers import AppContainer
from planning_poker.domain.errors import (
    EmptyRosterError,
    MissingOwnerError,
    MissingStoryError,
    PlanningPokerError,
    SessionExistsError,
    SessionNotFoundError,
    UserNotFoundError,
)

_ERROR_STATUS: dict[type[PlanningPokerError], int] = {
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    SessionExistsError: status.HTTP_409_CONFLICT,
    MissingOwnerError: status.HTTP_400_BAD_REQUEST,
    MissingStoryError: status.HTTP_409_CONFLICT,
    EmptyRosterError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    logger.info(
        "Creating planning poker API: environment=%s",
        container.settings.environment,
    )

    app = FastAPI(title="Planning Poker API")
    app.state.container = container

    app.include_router(users_router)
    app.include_router(sessions_router)

    @app.exception_handler(PlanningPokerError)
    async def domain_error_handler(
        request: Request, exc: PlanningPokerError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.info(
            "Request failed: path=%s status=%s error=%s",
            request.url.path,
            status_code,
            exc,
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
