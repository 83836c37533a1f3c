"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from planning_poker.domain.identifiers import (
    DEFAULT_ID_CHARACTER_SET,
    DEFAULT_SESSION_ID_LENGTH,
    DEFAULT_USER_ID_LENGTH,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    id_character_set: str = DEFAULT_ID_CHARACTER_SET
    session_id_length: int = DEFAULT_SESSION_ID_LENGTH
    user_id_length: int = DEFAULT_USER_ID_LENGTH
    creator_can_estimate: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
