"""Argument checks shared by the services; failures raise ``InvalidArgument``."""

import uuid

from src.shop.core.errors import InvalidArgument
from src.shop.entities._base import STORE_INT_MAX, STORE_INT_MIN


def require_id(value: str, field: str) -> str:
    """Reject identifiers that are not UUID strings."""
    try:
        uuid.UUID(str(value))
    except ValueError as e:
        raise InvalidArgument(f"Invalid {field}: {value!r}") from e
    return value


def require_int(value: object, field: str) -> int:
    """Accept only real integers that fit a signed 64-bit store column."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{field} must be an integer")
    if not STORE_INT_MIN <= value <= STORE_INT_MAX:
        raise InvalidArgument(f"{field} is out of range")
    return value
