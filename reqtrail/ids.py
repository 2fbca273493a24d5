"""Identifiers for requests held in memory."""

from __future__ import annotations

import uuid


def is_str_valid(value: str) -> bool:
    """Tell whether ``value`` is a textual UUID."""
    try:
        uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def new_random() -> uuid.UUID:
    """Return a new random (version 4) identifier."""
    return uuid.uuid4()


def parse_id(value: str) -> uuid.UUID:
    """Parse a textual UUID, raising ``ValueError`` if it is not one."""
    try:
        return uuid.UUID(value)
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"Invalid identifier: {value!r}") from exc