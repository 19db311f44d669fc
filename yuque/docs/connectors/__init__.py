"""Remote service connectors."""

from .yuque import YuqueConfig, YuqueRESTConnector

__all__ = ["YuqueConfig", "YuqueRESTConnector"]
