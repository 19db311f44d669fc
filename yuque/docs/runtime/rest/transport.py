"""REST transport built on HTTPClient."""

from __future__ import annotations

from typing import Any

from .http_client import HTTPClient, ResponseHook


class RESTTransport:
    """Thin transport that endpoint runners talk to.

    Keeps the runner independent of the HTTP library and gives connectors a
    single place to attach headers and response hooks.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json_body, headers=headers)

    async def put(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.put(path, json=json_body, headers=headers)

    async def delete(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.delete(path, params=params, headers=headers)

    async def close(self) -> None:
        await self._http.close()
