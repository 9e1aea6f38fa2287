"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import (
    ApiResponseError,
    InternalServerError,
    ResponseDecodeError,
    ServerNotRespondingError,
)

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Performs exactly one request per call: no retries, no throttling. Failures
    are raised as ``TransportError`` subclasses so the runner can map them.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            if self.timeout is not None:
                self._session = aiohttp.ClientSession(timeout=self.timeout)
            else:
                self._session = aiohttp.ClientSession()
        return self._session

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            ServerNotRespondingError: No response could be obtained
            InternalServerError: 5xx status
            ApiResponseError: Other non-2xx status with a JSON body
            ResponseDecodeError: Body is missing or not JSON
        """
        url = self._url(url)
        logger.debug("%s %s params=%s", method, url, params)
        try:
            async with self.session.request(
                method, url, params=params, headers=headers, data=data
            ) as response:
                status = response.status
                if status >= 500:
                    text = await response.text()
                    logger.warning("%s %s failed with %s", method, url, status)
                    raise InternalServerError(
                        f"`{method} {url}` resulted in a `{status} {response.reason}` "
                        f"response: {text}",
                        status_code=status,
                    )
                body = await self._decode(response, method, url)
                if not 200 <= status < 300:
                    raise ApiResponseError(
                        f"`{method} {url}` resulted in a `{status} {response.reason}` response",
                        status_code=status,
                        body=body,
                    )
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("%s %s: server not responding (%s)", method, url, e)
            raise ServerNotRespondingError(str(e) or type(e).__name__) from e

    async def _decode(self, response: aiohttp.ClientResponse, method: str, url: str) -> Any:
        try:
            body = await response.json(content_type=None)
        except ValueError as e:
            raise ResponseDecodeError(
                f"`{method} {url}` returned a non-JSON body", status_code=response.status
            ) from e
        if body is None:
            raise ResponseDecodeError(
                f"`{method} {url}` returned an empty body", status_code=response.status
            )
        return body

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
