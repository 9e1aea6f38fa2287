"""Custom exception hierarchy.

None of these escape the public client for expected failures: the runner
converts them into ``Err`` results which are flattened to ``{status, error}``.
"""

from __future__ import annotations

from typing import Any


class MongoApiError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(MongoApiError):
    """A required argument for a terminal operation is missing."""

    pass


class TransportError(MongoApiError):
    """Error raised while talking to the proxy."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServerNotRespondingError(TransportError):
    """The proxy could not be reached (DNS, refused connection, timeout)."""

    pass


class InternalServerError(TransportError):
    """The proxy answered with a 5xx status."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message, status_code=status_code)


class ApiResponseError(TransportError):
    """Non-2xx response carrying the proxy's own JSON error body."""

    def __init__(self, message: str, status_code: int, body: Any) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class ResponseDecodeError(TransportError):
    """Response body is not the JSON document the proxy promised."""

    pass
