"""Random identifier generation."""

import secrets
import string

DEFAULT_ID_CHARACTER_SET = string.ascii_letters + string.digits
DEFAULT_SESSION_ID_LENGTH = 8
DEFAULT_USER_ID_LENGTH = 12


def generate_random_id(character_set: str, length: int) -> str:
    """Return a random id of ``length`` characters drawn from ``character_set``."""
    if not character_set:
        raise ValueError("character_set must not be empty")
    if length <= 0:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(character_set) for _ in range(length))
