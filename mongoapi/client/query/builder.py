"""Fluent query builder.

This module provides the chainable configuration API shared by clients.
Every method mutates the owned ``QueryState`` and returns ``self``; inputs
the proxy cannot express (unknown operator, bad sort direction, page <= 0)
are dropped without raising.

Example:
    >>> builder = QueryBuilder()
    >>> params = (builder
    ...     .from_db("shop")
    ...     .from_table("orders")
    ...     .where("total", ">", 100)
    ...     .or_where("status", "=", "open")
    ...     .sort_by("created_at", "desc")
    ...     .page(2)
    ...     .per_page(25)
    ...     .query_params())
    >>> params["query_and"]
    '[total,>,100]'
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from ..core.enums import Directive
from .state import QueryState

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="QueryBuilder")


class QueryBuilder:
    """Chainable front end over a ``QueryState``."""

    def __init__(self, state: QueryState | None = None) -> None:
        self.state = state if state is not None else QueryState()

    def _note(self, directive: Directive, action: str, *args: Any) -> None:
        if not directive.accepted:
            logger.debug("Ignored %s%r", action, args)

    def from_db(self: B, db_name: str | None = None) -> B:
        """Set the database to read from."""
        self._note(self.state.set_database(db_name), "from_db", db_name)
        return self

    def into_db(self: B, db_name: str | None = None) -> B:
        """Set the database to write into (same slot as ``from_db``)."""
        self._note(self.state.set_database(db_name), "into_db", db_name)
        return self

    def from_table(self: B, table_name: str | None = None) -> B:
        """Set the collection to read from."""
        self._note(self.state.set_table(table_name), "from_table", table_name)
        return self

    def into_table(self: B, table_name: str | None = None) -> B:
        """Set the collection to write into (same slot as ``from_table``)."""
        self._note(self.state.set_table(table_name), "into_table", table_name)
        return self

    def where(self: B, column: str, operator: Any, value: Any = None) -> B:
        """Add an AND condition.

        Args:
            column: Field name
            operator: One of ``=``, ``!=``, ``<``, ``<=``, ``>``, ``>=``,
                ``like``, ``not_like``, ``between`` (or an ``Operator``)
            value: Value to compare against; ``[low, high]`` for ``between``

        Returns:
            Self for method chaining
        """
        self._note(self.state.add_condition(column, operator, value), "where", column, operator)
        return self

    def or_where(self: B, column: str, operator: Any, value: Any = None) -> B:
        """Add an OR condition. Same arguments as ``where``."""
        self._note(
            self.state.add_or_condition(column, operator, value), "or_where", column, operator
        )
        return self

    def sort_by(self: B, column: str, direction: Any = "asc") -> B:
        """Sort by ``column``; ``direction`` must be ``asc`` or ``desc``."""
        self._note(self.state.add_sort(column, direction), "sort_by", column, direction)
        return self

    def group_by(self: B, column: str | None = None) -> B:
        self._note(self.state.set_group_by(column), "group_by", column)
        return self

    def page(self: B, page: int = 0) -> B:
        self._note(self.state.set_page(page), "page", page)
        return self

    def per_page(self: B, per_page: int = 0) -> B:
        self._note(self.state.set_page_size(per_page), "per_page", per_page)
        return self

    def query_params(self) -> dict[str, Any]:
        """Serialized query-string parameters for the current state."""
        return self.state.serialize()

    def reset(self: B) -> B:
        """Clear filters, sort, grouping and pagination for the next query."""
        self.state.reset()
        return self
