"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import RestEndpointSpec, RestRunner
from .transport import RESTTransport, encode_payload

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "encode_payload",
]
