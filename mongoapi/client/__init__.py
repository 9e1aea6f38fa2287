"""MongoAPI Client - fluent client for a MongoDB REST proxy."""

from .api import MongoApiClient
from .core import (
    DEFAULT_DATABASE,
    DEFAULT_TABLE,
    ApiResponseError,
    ClientConfig,
    Directive,
    Err,
    HttpMethod,
    InternalServerError,
    MongoApiError,
    Ok,
    Operator,
    ResponseDecodeError,
    Result,
    ServerNotRespondingError,
    SortDirection,
    TransportError,
    ValidationError,
)
from .query import QueryBuilder, QueryState

__version__ = "0.1.0"

__all__ = [
    "MongoApiClient",
    "ClientConfig",
    "DEFAULT_DATABASE",
    "DEFAULT_TABLE",
    "QueryBuilder",
    "QueryState",
    "Operator",
    "SortDirection",
    "HttpMethod",
    "Directive",
    "Ok",
    "Err",
    "Result",
    "MongoApiError",
    "ValidationError",
    "TransportError",
    "ServerNotRespondingError",
    "InternalServerError",
    "ApiResponseError",
    "ResponseDecodeError",
]
