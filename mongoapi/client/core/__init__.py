"""Core components."""

from .config import DEFAULT_DATABASE, DEFAULT_TABLE, ClientConfig
from .enums import Directive, HttpMethod, Operator, SortDirection
from .exceptions import (
    ApiResponseError,
    InternalServerError,
    MongoApiError,
    ResponseDecodeError,
    ServerNotRespondingError,
    TransportError,
    ValidationError,
)
from .result import Err, Ok, Result, failure

__all__ = [
    "ClientConfig",
    "DEFAULT_DATABASE",
    "DEFAULT_TABLE",
    "Directive",
    "HttpMethod",
    "Operator",
    "SortDirection",
    "MongoApiError",
    "ValidationError",
    "TransportError",
    "ServerNotRespondingError",
    "InternalServerError",
    "ApiResponseError",
    "ResponseDecodeError",
    "Ok",
    "Err",
    "Result",
    "failure",
]
