"""Query state and fluent builder."""

from .builder import QueryBuilder
from .state import QueryState, render_value

__all__ = [
    "QueryBuilder",
    "QueryState",
    "render_value",
]
