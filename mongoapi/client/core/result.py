"""Discriminated result type returned by the dispatcher.

``Ok`` wraps the decoded response body. ``Err`` wraps a message and, for
application errors, the proxy's own error body. Both flatten to the legacy
``{"status": ..., ...}`` record via ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    payload: Any

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Any:
        """Return the response body unchanged."""
        return self.payload


@dataclass(frozen=True)
class Err:
    message: str
    payload: Any = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Any:
        """Return the server's error body if there is one, else the uniform failure record."""
        if self.payload is not None:
            return self.payload
        return failure(self.message)


Result = Ok | Err


def failure(message: str) -> dict[str, Any]:
    """Uniform failure record."""
    return {"status": False, "error": message}
