"""HTTP methods a request can use."""

from __future__ import annotations

from enum import Enum


class Method(Enum):
    """An HTTP method; ``GET`` is the default one."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"

    @classmethod
    def parse(cls, value: str) -> Method:
        """Parse a method name, case-insensitively."""
        try:
            return cls(value.upper())
        except (ValueError, AttributeError) as exc:
            raise ValueError("No valid METHOD") from exc

    def __str__(self) -> str:
        return self.value