"""Yuque REST connector.

This connector provides direct access to Yuque REST endpoints. It uses the
endpoint registry to look up specs and adapters, then uses RestRunner to
execute requests.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any

from yuque.docs.core.enums import DocFormat, PublicLevel, SearchType, SortOrder, StatsRange
from yuque.docs.models import Doc, Repo, SearchResult, User
from yuque.docs.runtime.rest import RESTProvider, RestRunner, RESTTransport

from ..config import YuqueConfig
from .endpoints import get_endpoint_adapter, get_endpoint_spec

logger = logging.getLogger(__name__)


class YuqueRESTConnector(RESTProvider):
    """Yuque REST connector.

    One async method per API operation; every method goes through ``fetch``
    so tests can mock a single seam.
    """

    def __init__(self, config: YuqueConfig | None = None) -> None:
        """Initialize Yuque REST connector.

        Args:
            config: Connection settings (defaults to YuqueConfig.from_env())
        """
        self.config = config or YuqueConfig.from_env()
        self._transport = RESTTransport(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self.config.headers(),
        )
        self._runner = RestRunner(self._transport)

    async def fetch_health(self) -> dict[str, object]:
        """Call the current-user endpoint to verify connectivity and credentials."""
        start = perf_counter()
        await self._transport.get("/user")
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "service": "yuque",
            "base_url": self.config.base_url,
            "status": "ok",
            "latency_ms": latency_ms,
            "endpoint": "/user",
        }

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a Yuque REST endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "doc", "search")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        logger.debug("Fetching endpoint", extra={"endpoint_id": endpoint_id})
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def get_current_user(self) -> User:
        """Fetch the authenticated user."""
        result: User = await self.fetch("current_user", {})
        return result

    async def get_user_docs(self) -> list[Doc]:
        """Fetch documents the authenticated user owns or collaborates on."""
        data = await self.fetch("user_docs", {})
        return list(data)

    async def get_user_repos(self, login: str) -> list[Repo]:
        """Fetch repositories belonging to a user or group."""
        data = await self.fetch("user_repos", {"login": login})
        return list(data)

    async def get_repo(self, namespace: str) -> Repo:
        """Fetch a repository by ``user/repo`` namespace."""
        result: Repo = await self.fetch("repo", {"namespace": namespace})
        return result

    async def get_repo_docs(self, namespace: str) -> list[Doc]:
        """Fetch the documents of a repository."""
        data = await self.fetch("repo_docs", {"namespace": namespace})
        return list(data)

    async def get_doc(self, namespace: str, slug: str) -> Doc:
        """Fetch one document with its body."""
        result: Doc = await self.fetch("doc", {"namespace": namespace, "slug": slug})
        return result

    async def create_doc(
        self,
        namespace: str,
        title: str,
        slug: str,
        body: str,
        format: DocFormat | str = DocFormat.MARKDOWN,
        public: PublicLevel | int = PublicLevel.PUBLIC,
    ) -> Doc:
        """Create a document in a repository.

        Args:
            namespace: Repository namespace, ``user/repo``
            title: Document title
            slug: URL path name of the document
            body: Document content
            format: Body format (markdown, html, lake)
            public: Visibility level

        Returns:
            The created Doc
        """
        params = {
            "namespace": namespace,
            "title": title,
            "slug": slug,
            "body": body,
            "format": format,
            "public": public,
        }
        result: Doc = await self.fetch("create_doc", params)
        return result

    async def update_doc(
        self,
        namespace: str,
        doc_id: int,
        *,
        title: str | None = None,
        slug: str | None = None,
        body: str | None = None,
        public: PublicLevel | int | None = None,
        format: DocFormat | str | None = None,
    ) -> Doc:
        """Update fields of an existing document; omitted fields are left unchanged."""
        params = {
            "namespace": namespace,
            "doc_id": doc_id,
            "title": title,
            "slug": slug,
            "body": body,
            "public": public,
            "format": format,
        }
        result: Doc = await self.fetch("update_doc", params)
        return result

    async def delete_doc(self, namespace: str, doc_id: int) -> Any:
        """Delete a document. This cannot be undone."""
        return await self.fetch("delete_doc", {"namespace": namespace, "doc_id": doc_id})

    async def search(
        self,
        query: str,
        type: SearchType | str = SearchType.DOC,
        *,
        scope: str | None = None,
        page: int | None = None,
        creator: str | None = None,
    ) -> list[SearchResult]:
        """Search documents or repositories."""
        params = {
            "query": query,
            "type": type,
            "scope": scope,
            "page": page,
            "creator": creator,
        }
        data = await self.fetch("search", params)
        return list(data)

    async def get_group_statistics(self, login: str) -> Any:
        """Fetch summary statistics of a group."""
        return await self.fetch("group_statistics", {"login": login})

    async def get_group_member_statistics(
        self,
        login: str,
        *,
        name: str | None = None,
        range: StatsRange | int | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort_field: str | None = None,
        sort_order: SortOrder | str | None = None,
    ) -> Any:
        """Fetch per-member statistics of a group."""
        params = {
            "login": login,
            "name": name,
            "range": range,
            "page": page,
            "limit": limit,
            "sort_field": sort_field,
            "sort_order": sort_order,
        }
        return await self.fetch("group_member_statistics", params)

    async def get_group_book_statistics(
        self,
        login: str,
        *,
        name: str | None = None,
        range: StatsRange | int | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort_field: str | None = None,
        sort_order: SortOrder | str | None = None,
    ) -> Any:
        """Fetch per-repository statistics of a group."""
        params = {
            "login": login,
            "name": name,
            "range": range,
            "page": page,
            "limit": limit,
            "sort_field": sort_field,
            "sort_order": sort_order,
        }
        return await self.fetch("group_book_statistics", params)

    async def get_group_doc_statistics(
        self,
        login: str,
        *,
        book_id: int | None = None,
        name: str | None = None,
        range: StatsRange | int | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort_field: str | None = None,
        sort_order: SortOrder | str | None = None,
    ) -> Any:
        """Fetch per-document statistics of a group."""
        params = {
            "login": login,
            "book_id": book_id,
            "name": name,
            "range": range,
            "page": page,
            "limit": limit,
            "sort_field": sort_field,
            "sort_order": sort_order,
        }
        return await self.fetch("group_doc_statistics", params)

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._transport.close()
