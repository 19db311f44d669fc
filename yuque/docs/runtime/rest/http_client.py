"""Async HTTP client with throttling, response hooks and rate-limit retries."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, Dict, Optional, Union

import aiohttp

from ...core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ProviderError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

# Hooks may return a delay (seconds) to throttle subsequent requests
ResponseHook = Callable[[aiohttp.ClientResponse], Union[Optional[float], Awaitable[Optional[float]]]]

RATE_LIMIT_STATUSES = (429,)
DEFAULT_RETRY_AFTER = 1.0
MAX_RATE_LIMIT_RETRIES = 3


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: Optional[aiohttp.ClientSession] = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: Optional[float] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callback invoked with every response."""
        self._response_hooks.append(hook)

    def set_throttle(self, seconds: float) -> None:
        """Delay the next request by ``seconds``; never shortens an existing window."""
        if seconds <= 0:
            return
        until = time.time() + seconds
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        delay = self._throttle_until - time.time()
        if delay > 0:
            await asyncio.sleep(delay)
        self._throttle_until = None

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception as e:
                logger.warning(f"Response hook failed: {e}")
                continue
            if delay:
                self.set_throttle(float(delay))

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    @staticmethod
    def _retry_after(response: aiohttp.ClientResponse) -> float:
        value = (getattr(response, "headers", None) or {}).get("Retry-After")
        try:
            return float(value) if value is not None else DEFAULT_RETRY_AFTER
        except (TypeError, ValueError):
            return DEFAULT_RETRY_AFTER

    @staticmethod
    async def _raise_for_status(response: aiohttp.ClientResponse, method: str, url: str) -> None:
        status = response.status
        if status < 400:
            return
        try:
            detail = await response.text()
        except Exception:
            detail = ""
        message = f"{method} {url} failed with HTTP {status}"
        if detail:
            message = f"{message}: {detail[:500]}"
        if status in (401, 403):
            raise AuthenticationError(message, status_code=status)
        if status == 404:
            raise NotFoundError(message, status_code=status)
        raise ProviderError(message, status_code=status)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Rate-limited responses (429) are retried after ``Retry-After``
        seconds, up to MAX_RATE_LIMIT_RETRIES times.

        Raises:
            RateLimitError: If the provider keeps rate limiting
            AuthenticationError: On 401/403
            NotFoundError: On 404
            ProviderError: On any other HTTP error status
        """
        url = self._url(url)
        send = getattr(self.session, method.lower())
        kwargs: Dict[str, Any] = {"params": params, "headers": headers}
        if json is not None:
            kwargs["json"] = json

        for attempt in range(MAX_RATE_LIMIT_RETRIES + 1):
            await self._wait_for_throttle()
            async with send(url, **kwargs) as response:
                if response.status in RATE_LIMIT_STATUSES:
                    retry_after = self._retry_after(response)
                    if attempt >= MAX_RATE_LIMIT_RETRIES:
                        raise RateLimitError(
                            f"{method.upper()} {url} rate limited", retry_after=retry_after
                        )
                    logger.warning(
                        f"Rate limited on {method.upper()} {url}, retrying in {retry_after}s"
                    )
                    self.set_throttle(retry_after)
                    continue

                await self._run_hooks(response)
                await self._raise_for_status(response, method.upper(), url)
                return await response.json()

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """POST request."""
        return await self.request("POST", url, json=json, headers=headers)

    async def put(
        self,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """PUT request."""
        return await self.request("PUT", url, json=json, headers=headers)

    async def delete(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """DELETE request."""
        return await self.request("DELETE", url, params=params, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
