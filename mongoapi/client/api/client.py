"""Blocking client facade for the proxy API.

Architecture:
    ``MongoApiClient`` is a ``QueryBuilder`` (chainable configuration) plus
    terminal operations. A terminal operation picks an endpoint spec, builds
    its params from the query state and the call arguments, and runs the REST
    runner to completion on a fresh event loop. The aiohttp session is closed
    before the call returns, so nothing outlives a terminal operation.

    Results are plain dicts in the proxy's ``{"status": ..., ...}`` shape.
    Expected failures (missing arguments, unreachable server, 5xx, error
    bodies) come back as records, never as exceptions.

Note:
    Terminal operations do not reset the query state. Call ``reset()``
    between unrelated queries on the same instance.

Example:
    >>> client = MongoApiClient("localhost", 9875, "http")
    >>> result = (client
    ...     .from_db("my-test-database")
    ...     .from_table("my-test-table")
    ...     .where("username", "=", "popeye1212")
    ...     .sort_by("created_at", "asc")
    ...     .page(1)
    ...     .per_page(10)
    ...     .select())
    >>> result["status"]
    True
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..core.config import ClientConfig
from ..core.result import Result, failure
from ..query import QueryBuilder, QueryState
from ..runtime.rest import RestEndpointSpec, RestRunner, RESTTransport
from . import endpoints

logger = logging.getLogger(__name__)

NOTHING_FETCHED = (
    "Query did not return any data. Are you sure you called .get() before this?"
)


class MongoApiClient(QueryBuilder):
    """Fluent client for a MongoDB REST proxy."""

    def __init__(
        self,
        server_url: str | None = None,
        server_port: int | None = None,
        scheme: str | None = None,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            server_url: Proxy host name; overrides ``config.host``
            server_port: Proxy port; overrides ``config.port``
            scheme: ``http`` or ``https``; overrides ``config.scheme``
            api_key: Sent as the ``api_key`` header when set
            config: Base settings (defaults to ``ClientConfig()``)

        Raises:
            pydantic.ValidationError: If the resulting settings are invalid
        """
        self.config = _resolve_config(
            config,
            host=server_url,
            port=server_port,
            scheme=scheme,
            api_key=api_key,
        )
        super().__init__(
            QueryState(
                database=self.config.default_database,
                table=self.config.default_table,
            )
        )
        self._transport = RESTTransport(
            self.config.api_url,
            default_headers=self.config.default_headers(),
            timeout=self.config.timeout,
        )
        self._runner = RestRunner(self._transport)
        self._query_results: Any = None

    @property
    def api_url(self) -> str:
        return self.config.api_url

    @property
    def cached_result(self) -> Any:
        """Result stored by the last successful ``get()``, or None."""
        return self._query_results

    def reset(self) -> MongoApiClient:
        """Clear the query state and the cached result."""
        super().reset()
        self._query_results = None
        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, spec: RestEndpointSpec, params: dict[str, Any]) -> Result:
        query = self.state.serialize() if spec.uses_query else None
        return asyncio.run(self._send(spec, params, query))

    async def _send(
        self, spec: RestEndpointSpec, params: dict[str, Any], query: dict[str, Any] | None
    ) -> Result:
        try:
            return await self._runner.run(spec=spec, params=params, query=query)
        finally:
            await self._transport.close()

    def _table_params(self, **extra: Any) -> dict[str, Any]:
        return {"db": self.state.database, "table": self.state.table, **extra}

    # ------------------------------------------------------------------
    # Databases and collections
    # ------------------------------------------------------------------

    def list_databases(self) -> Any:
        """List all databases on the server."""
        return self._dispatch(endpoints.LIST_DATABASES, {}).to_dict()

    def list_tables_in_db(self, db_name: str | None = None) -> Any:
        """List all collections inside ``db_name``."""
        return self._dispatch(endpoints.LIST_TABLES, {"db": db_name}).to_dict()

    def delete_database(self, db_name: str | None = None) -> Any:
        return self._dispatch(endpoints.DELETE_DATABASE, {"db": db_name}).to_dict()

    def delete_tables_in_database(
        self, db_name: str | None = None, table_name: str | None = None
    ) -> Any:
        """Drop one collection from a database."""
        return self._dispatch(
            endpoints.DELETE_TABLE, {"db": db_name, "table": table_name}
        ).to_dict()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def select(self) -> Any:
        """Fetch the records matching the current query state."""
        return self._dispatch(endpoints.SELECT, self._table_params()).to_dict()

    def find(self) -> Any:
        """Alias of ``select``."""
        return self.select()

    def select_by_id(self, mongo_id: str | None = None) -> Any:
        return self._dispatch(endpoints.SELECT_BY_ID, self._table_params(id=mongo_id)).to_dict()

    def find_by_id(self, mongo_id: str | None = None) -> Any:
        """Alias of ``select_by_id``."""
        return self.select_by_id(mongo_id)

    def get(self) -> MongoApiClient:
        """Run ``select`` and cache the result if it holds any records.

        Returns:
            Self, so ``first()`` or ``count()`` can follow
        """
        results = self.select()
        if _has_records(results):
            self._query_results = results
            logger.debug("Cached select result for %s/%s", self.state.database, self.state.table)
        return self

    def count(self) -> dict[str, Any]:
        """Number of matching records.

        Served from the cached result when ``get()`` stored one; otherwise a
        fresh ``select`` is made.
        """
        if self._query_results is None:
            results = self.select()
            if not isinstance(results, dict) or not results.get("status"):
                return failure(_error_of(results))
            return {"status": True, "count": results.get("count")}
        return {"status": True, "count": _cached_count(self._query_results)}

    def first(self) -> dict[str, Any]:
        """First record of the cached result."""
        if self._query_results is None:
            return failure(NOTHING_FETCHED)
        cached = self._query_results
        if isinstance(cached, dict) and cached.get("results"):
            return {"status": True, "result": cached["results"][0]}
        return {"status": True, "result": cached}

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(self, data: Any = None) -> Any:
        """Insert one record (dict) or many (list of dicts)."""
        return self._dispatch(endpoints.INSERT, self._table_params(data=data)).to_dict()

    def insert_if(self, data: Any = None) -> Any:
        """Insert ``data`` only if the current query conditions are met server-side."""
        return self._dispatch(endpoints.INSERT_IF, self._table_params(data=data)).to_dict()

    def update(self, data: Any = None) -> Any:
        """Update every record matching the current query state."""
        return self._dispatch(endpoints.UPDATE_WHERE, self._table_params(data=data)).to_dict()

    def update_by_id(self, mongo_id: str | None = None, data: Any = None) -> Any:
        return self._dispatch(
            endpoints.UPDATE_BY_ID, self._table_params(id=mongo_id, data=data)
        ).to_dict()

    def delete(self) -> Any:
        """Delete every record matching the current query state."""
        return self._dispatch(endpoints.DELETE_WHERE, self._table_params()).to_dict()

    def delete_by_id(self, mongo_id: str | None = None) -> Any:
        return self._dispatch(endpoints.DELETE_BY_ID, self._table_params(id=mongo_id)).to_dict()


def _resolve_config(base: ClientConfig | None, **overrides: Any) -> ClientConfig:
    """Apply non-None overrides on top of ``base``, re-validating the result."""
    base = base or ClientConfig()
    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return base
    return ClientConfig(**{**base.model_dump(), **updates})


def _as_count(value: Any) -> int | None:
    """``count`` as an int; numeric strings are accepted, anything else is None."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _has_records(results: Any) -> bool:
    if not isinstance(results, dict) or not results.get("status"):
        return False
    count = _as_count(results.get("count"))
    if count is not None:
        return count > 0
    return bool(results.get("results"))


def _cached_count(cached: Any) -> int:
    if isinstance(cached, dict):
        count = _as_count(cached.get("count"))
        if count is not None:
            return count
        if isinstance(cached.get("results"), list):
            return len(cached["results"])
    return len(cached)


def _error_of(results: Any) -> str:
    if isinstance(results, dict) and results.get("error"):
        return str(results["error"])
    return "Unknown error"
