"""Runtime components."""

from .rest import HTTPClient, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
]
