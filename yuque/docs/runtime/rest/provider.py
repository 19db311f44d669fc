"""Base class for REST connectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RESTProvider(ABC):
    """Interface shared by REST connectors.

    Connectors resolve an endpoint id to a spec/adapter pair and execute it;
    subclasses add typed convenience methods on top of ``fetch``.
    """

    @abstractmethod
    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Execute a registered endpoint and return its parsed response."""

    @abstractmethod
    async def close(self) -> None:
        """Release HTTP resources."""

    async def __aenter__(self) -> RESTProvider:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
