"""Accumulated query state and its wire serialization.

Architecture:
    ``QueryState`` is a plain mutable dataclass owned by one client. Every
    mutator returns a ``Directive`` telling whether the input was applied or
    ignored; nothing here raises for bad input. ``serialize()`` derives the
    query-string mapping fresh on each call, so the stored state stays the
    single source of truth.

Wire format:
    query_and  "[name,=,alice|age,>,30]"
    query_or   "[name,=,bob]"
    per_page   10
    page       1
    sort       "[created_at:asc|name:desc]"
    group_by   "country"
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.config import DEFAULT_DATABASE, DEFAULT_TABLE
from ..core.enums import Directive, Operator, SortDirection


def render_value(value: Any) -> str:
    """Render a condition value for a ``field,op,value`` triple.

    A 2-element list/tuple becomes ``[low:high]`` (used by ``between``).
    Other sequences fall back to their elements joined by ``;``, so a single
    element list renders as that element. Commas separate the parts of the
    triple and never appear in the fallback.

    Examples:
        >>> render_value([18, 30])
        '[18:30]'
        >>> render_value([18])
        '18'
        >>> render_value([1, 2, 3])
        '1;2;3'
        >>> render_value(True)
        'true'
    """
    if isinstance(value, (list, tuple)):
        if len(value) == 2:
            low, high = value
            return f"[{_scalar(low)}:{_scalar(high)}]"
        return ";".join(_scalar(v) for v in value)
    return _scalar(value)


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _bracket(items: Sequence[str]) -> str:
    return "[" + "|".join(items) + "]"


@dataclass
class QueryState:
    """Filter, sort, grouping and pagination state for one client."""

    database: str = DEFAULT_DATABASE
    table: str = DEFAULT_TABLE
    and_conditions: list[str] = field(default_factory=list)
    or_conditions: list[str] = field(default_factory=list)
    sort: list[str] = field(default_factory=list)
    group_by: str | None = None
    page: int = 0
    per_page: int = 0

    def set_database(self, name: str | None) -> Directive:
        if not name:
            return Directive.REJECTED
        self.database = name
        return Directive.ACCEPTED

    def set_table(self, name: str | None) -> Directive:
        if not name:
            return Directive.REJECTED
        self.table = name
        return Directive.ACCEPTED

    def add_condition(self, column: str, operator: Any, value: Any = None) -> Directive:
        """Append an AND condition. Unknown operators are ignored."""
        return self._append_condition(self.and_conditions, column, operator, value)

    def add_or_condition(self, column: str, operator: Any, value: Any = None) -> Directive:
        """Append an OR condition. Unknown operators are ignored."""
        return self._append_condition(self.or_conditions, column, operator, value)

    def _append_condition(
        self, target: list[str], column: str, operator: Any, value: Any
    ) -> Directive:
        op = Operator.from_str(operator)
        if op is None:
            return Directive.REJECTED
        target.append(f"{_scalar(column)},{op.wire},{render_value(value)}")
        return Directive.ACCEPTED

    def add_sort(self, column: str, direction: Any) -> Directive:
        resolved = SortDirection.from_str(direction)
        if resolved is None:
            return Directive.REJECTED
        self.sort.append(f"{_scalar(column)}:{resolved.value}")
        return Directive.ACCEPTED

    def set_group_by(self, column: str | None) -> Directive:
        self.group_by = column
        return Directive.ACCEPTED

    def set_page(self, page: int) -> Directive:
        if not _is_positive(page):
            return Directive.REJECTED
        self.page = page
        return Directive.ACCEPTED

    def set_page_size(self, per_page: int) -> Directive:
        if not _is_positive(per_page):
            return Directive.REJECTED
        self.per_page = per_page
        return Directive.ACCEPTED

    def serialize(self) -> dict[str, Any]:
        """Query-string parameters for the current state; empty parts are omitted."""
        params: dict[str, Any] = {}
        if self.and_conditions:
            params["query_and"] = _bracket(self.and_conditions)
        if self.or_conditions:
            params["query_or"] = _bracket(self.or_conditions)
        if self.per_page > 0:
            params["per_page"] = self.per_page
        if self.page > 0:
            params["page"] = self.page
        if self.sort:
            params["sort"] = _bracket(self.sort)
        if self.group_by:
            params["group_by"] = self.group_by
        return params

    def reset(self) -> None:
        """Clear filters, sort, grouping and pagination; keep database and table."""
        self.and_conditions.clear()
        self.or_conditions.clear()
        self.sort.clear()
        self.group_by = None
        self.page = 0
        self.per_page = 0


def _is_positive(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
