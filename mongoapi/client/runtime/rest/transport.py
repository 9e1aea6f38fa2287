"""REST transport for the proxy API."""

from __future__ import annotations

import json
from typing import Any

from .http_client import HTTPClient

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def encode_payload(body: Any) -> dict[str, str]:
    """Wrap a record (or list of records) as the single ``payload`` form field."""
    return {"payload": json.dumps(body, separators=(",", ":"))}


class RESTTransport:
    """Thin wrapper over ``HTTPClient`` adding default headers and body encoding."""

    def __init__(
        self,
        base_url: str,
        *,
        default_headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self.default_headers = dict(default_headers or {})

    def merge_headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        """Caller headers overlaid by the defaults (defaults win)."""
        return {**(headers or {}), **self.default_headers}

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        data = encode_payload(payload) if payload is not None else None
        return await self._http.request(
            method,
            path,
            params=params,
            headers=self.merge_headers(headers),
            data=data,
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
