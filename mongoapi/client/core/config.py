"""Connection settings for the proxy.

This module centralizes the server target, the API key and the placeholder
database/collection names so the client facade can stay small and focused.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Placeholders used until from_db()/from_table() override them
DEFAULT_DATABASE = "my-db"
DEFAULT_TABLE = "my-collection"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 9875

ENV_PREFIX = "MONGO_API_"


class ClientConfig(BaseModel):
    """Where the proxy lives and how to authenticate against it."""

    host: str = Field(DEFAULT_HOST, min_length=1)
    port: int = Field(DEFAULT_PORT, ge=0, le=65535)
    scheme: Literal["http", "https"] = "http"
    api_key: str | None = None
    default_database: str = Field(DEFAULT_DATABASE, min_length=1)
    default_table: str = Field(DEFAULT_TABLE, min_length=1)
    # None keeps aiohttp's own default
    timeout: float | None = Field(None, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def api_url(self) -> str:
        """Base URL, e.g. ``http://localhost:9875``."""
        return f"{self.scheme}://{self.host}:{self.port}"

    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        headers = {"accept": "application/json"}
        if self.api_key:
            headers["api_key"] = self.api_key
        return headers

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> ClientConfig:
        """Build a config from ``<prefix>HOST``, ``PORT``, ``SCHEME`` and ``API_KEY``.

        Unset variables fall back to the model defaults.

        Example:
            >>> os.environ["MONGO_API_PORT"] = "8080"
            >>> ClientConfig.from_env().port
            8080
        """
        values: dict[str, str] = {}
        for field_name in ("host", "port", "scheme", "api_key"):
            raw = os.environ.get(f"{prefix}{field_name.upper()}")
            if raw:
                values[field_name] = raw
        return cls(**values)
