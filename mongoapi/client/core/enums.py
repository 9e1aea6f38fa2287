"""Core enumerations shared by the query builder and the dispatcher.

Architecture:
    String enums keep values serializable as-is: the member value is exactly
    what the caller passes in, and ``Operator.wire`` is exactly what the proxy
    expects inside a ``query_and`` / ``query_or`` triple.

Key Types:
    - Operator: Supported filter operators and their wire spelling
    - SortDirection: ``asc`` / ``desc``
    - HttpMethod: Verbs used by the proxy endpoints
    - Directive: Outcome of a query state mutation (accepted / rejected)
"""

from enum import Enum
from typing import Any, Optional

# Operators whose wire spelling differs from the caller-facing one
_WIRE_OVERRIDES = {
    "like": "ilike",
}


class Operator(str, Enum):
    """Filter operators understood by the proxy."""

    EQ = "="
    NE = "!="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    LIKE = "like"
    NOT_LIKE = "not_like"
    BETWEEN = "between"

    @property
    def wire(self) -> str:
        """Operator as sent inside a condition triple."""
        return _WIRE_OVERRIDES.get(self.value, self.value)

    @classmethod
    def from_str(cls, op: Any) -> Optional["Operator"]:
        """Get operator from its caller-facing spelling. Returns None if no match."""
        try:
            return cls(op)
        except (ValueError, TypeError):
            return None


class SortDirection(str, Enum):
    """Sort directions accepted by the ``sort`` parameter."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_str(cls, direction: Any) -> Optional["SortDirection"]:
        """Get direction from string value. Returns None if no match."""
        try:
            return cls(direction)
        except (ValueError, TypeError):
            return None


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Directive(str, Enum):
    """Outcome of a single query state mutation.

    The fluent API discards this value; it exists so callers and tests can
    tell an ignored call from an applied one without going to the network.
    """

    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def accepted(self) -> bool:
        return self is Directive.ACCEPTED
