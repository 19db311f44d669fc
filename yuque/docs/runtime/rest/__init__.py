"""REST runtime abstractions."""

from .http_client import HTTPClient
from .provider import RESTProvider
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RESTProvider",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
