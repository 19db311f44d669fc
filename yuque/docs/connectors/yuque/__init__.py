"""Yuque connector."""

from .config import YuqueConfig
from .rest.provider import YuqueRESTConnector

__all__ = ["YuqueConfig", "YuqueRESTConnector"]
