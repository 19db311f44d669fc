"""Yuque REST connector and endpoint registry."""

from .endpoints import get_endpoint_adapter, get_endpoint_spec, list_endpoints
from .provider import YuqueRESTConnector

__all__ = [
    "YuqueRESTConnector",
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
]
