"""Document tool handlers.

DocumentTools turns tool calls into connector requests and renders every
outcome as text. Remote and chunking failures become ``<label>: <error>``
text instead of propagating, so a single bad request never ends the calling
session. Argument validation failures are the exception: they are raised as
ValidationError from ``call`` because no request was made.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ChunkIndexError, DocsError, ValidationError
from ..runtime.chunking import (
    DEFAULT_CHUNK_SIZE,
    OVERLAP_SIZE,
    ChunkEstimator,
    ChunkExecutor,
    ChunkPolicy,
    MergePolicy,
)
from ..runtime.chunking.telemetry import LoggerLike
from .definitions import TOOLS, ToolSpec, get_tool
from .results import ToolResult

# Errors reported as tool text rather than raised
_REPORTED_ERRORS = (DocsError, aiohttp.ClientError, asyncio.TimeoutError)


class DocumentTools:
    """Async handlers for every document tool.

    Args:
        connector: A YuqueRESTConnector (or anything with the same methods)
        merge_policy: How re-parsed chunk fields merge into chunk payloads
        logger: Optional logger; defaults to this module's logger
    """

    def __init__(
        self,
        connector: Any,
        *,
        merge_policy: MergePolicy = MergePolicy.PARSED_WINS,
        logger: LoggerLike | None = None,
    ) -> None:
        self._connector = connector
        self._merge_policy = merge_policy
        self._logger = logger or logging.getLogger(__name__)

    @property
    def tools(self) -> tuple[ToolSpec, ...]:
        return TOOLS

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Validate ``arguments`` and run the named tool.

        Raises:
            ValidationError: If the tool is unknown or the arguments are invalid
        """
        spec = get_tool(name)
        if spec is None:
            raise ValidationError(f"Unknown tool: {name}")
        try:
            args = spec.args_model.model_validate(arguments or {})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid arguments for {name}: {e}") from e

        handler = getattr(self, spec.handler)
        return await handler(**args.model_dump())

    def _failure(self, name: str, error: BaseException) -> ToolResult:
        spec = get_tool(name)
        label = spec.error_label if spec is not None else f"Error running {name}"
        self._logger.error(
            "Tool call failed",
            extra={"tool": name, "error_type": type(error).__name__, "error": str(error)},
        )
        return ToolResult.from_text(f"{label}: {error}")

    async def get_current_user(self) -> ToolResult:
        try:
            user = await self._connector.get_current_user()
        except _REPORTED_ERRORS as e:
            return self._failure("get_current_user", e)
        return ToolResult.from_json(user)

    async def get_user_docs(self) -> ToolResult:
        try:
            docs = await self._connector.get_user_docs()
        except _REPORTED_ERRORS as e:
            return self._failure("get_user_docs", e)
        self._logger.info("Fetched user docs", extra={"count": len(docs)})
        return ToolResult.from_json(docs)

    async def get_user_repos(self, login: str) -> ToolResult:
        try:
            repos = await self._connector.get_user_repos(login)
        except _REPORTED_ERRORS as e:
            return self._failure("get_user_repos", e)
        self._logger.info("Fetched user repos", extra={"login": login, "count": len(repos)})
        return ToolResult.from_json(repos)

    async def get_repo_docs(self, namespace: str) -> ToolResult:
        try:
            docs = await self._connector.get_repo_docs(namespace)
        except _REPORTED_ERRORS as e:
            return self._failure("get_repo_docs", e)
        self._logger.info("Fetched repo docs", extra={"namespace": namespace, "count": len(docs)})
        return ToolResult.from_json(docs)

    async def get_doc(
        self,
        namespace: str,
        slug: str,
        chunk_index: int | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> ToolResult:
        """Return a document, or one chunk of it when it is too large.

        A document whose canonical text fits in ``chunk_size`` is returned
        whole. Otherwise chunk ``chunk_index`` (default 0) is returned with
        the metadata needed to request the rest. An out-of-range index yields
        the range message as text.
        """
        try:
            executor = ChunkExecutor(
                ChunkPolicy(chunk_size=chunk_size, overlap_size=OVERLAP_SIZE),
                merge_policy=self._merge_policy,
                logger=self._logger,
            )
            doc = await self._connector.get_doc(namespace, slug)
            self._logger.info(
                "Fetched doc",
                extra={"namespace": namespace, "slug": slug, "body_length": doc.body_length},
            )
            chunk = executor.get_chunk(doc, chunk_index)
            return ToolResult.from_json(executor.render(chunk))
        except ChunkIndexError as e:
            return ToolResult.from_text(str(e))
        except _REPORTED_ERRORS as e:
            return self._failure("get_doc", e)

    async def get_doc_chunks_info(
        self,
        namespace: str,
        slug: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> ToolResult:
        """Return the chunk count and per-chunk offsets of a document."""
        try:
            estimator = ChunkEstimator(
                ChunkPolicy(chunk_size=chunk_size, overlap_size=OVERLAP_SIZE),
                logger=self._logger,
            )
            doc = await self._connector.get_doc(namespace, slug)
            estimate = estimator.describe(doc)
        except _REPORTED_ERRORS as e:
            return self._failure("get_doc_chunks_info", e)
        return ToolResult.from_json(estimate.to_payload())

    async def create_doc(
        self,
        namespace: str,
        title: str,
        slug: str,
        body: str,
        format: str = "markdown",
        public_level: int = 1,
    ) -> ToolResult:
        try:
            doc = await self._connector.create_doc(
                namespace, title, slug, body, format=format, public=public_level
            )
        except _REPORTED_ERRORS as e:
            return self._failure("create_doc", e)
        self._logger.info("Created doc", extra={"namespace": namespace, "doc_id": doc.id})
        return ToolResult.from_json(doc)

    async def update_doc(
        self,
        namespace: str,
        doc_id: int,
        title: str | None = None,
        slug: str | None = None,
        body: str | None = None,
        public: int | None = None,
        format: str | None = None,
    ) -> ToolResult:
        try:
            doc = await self._connector.update_doc(
                namespace,
                doc_id,
                title=title,
                slug=slug,
                body=body,
                public=public,
                format=format,
            )
        except _REPORTED_ERRORS as e:
            return self._failure("update_doc", e)
        self._logger.info("Updated doc", extra={"namespace": namespace, "doc_id": doc_id})
        return ToolResult.from_json(doc)

    async def delete_doc(self, namespace: str, doc_id: int) -> ToolResult:
        try:
            await self._connector.delete_doc(namespace, doc_id)
        except _REPORTED_ERRORS as e:
            return self._failure("delete_doc", e)
        self._logger.info("Deleted doc", extra={"namespace": namespace, "doc_id": doc_id})
        return ToolResult.from_text(f"Document {doc_id} has been successfully deleted")

    async def search(
        self,
        query: str,
        type: str,
        scope: str | None = None,
        page: int | None = None,
        creator: str | None = None,
    ) -> ToolResult:
        try:
            results = await self._connector.search(
                query, type, scope=scope, page=page, creator=creator
            )
        except _REPORTED_ERRORS as e:
            return self._failure("search", e)
        self._logger.info("Search finished", extra={"query": query, "count": len(results)})
        return ToolResult.from_json(results)

    async def get_group_statistics(self, login: str) -> ToolResult:
        try:
            stats = await self._connector.get_group_statistics(login)
        except _REPORTED_ERRORS as e:
            return self._failure("get_group_statistics", e)
        return ToolResult.from_json(stats)

    async def get_group_member_statistics(self, login: str, **query: Any) -> ToolResult:
        try:
            stats = await self._connector.get_group_member_statistics(login, **query)
        except _REPORTED_ERRORS as e:
            return self._failure("get_group_member_statistics", e)
        return ToolResult.from_json(stats)

    async def get_group_book_statistics(self, login: str, **query: Any) -> ToolResult:
        try:
            stats = await self._connector.get_group_book_statistics(login, **query)
        except _REPORTED_ERRORS as e:
            return self._failure("get_group_book_statistics", e)
        return ToolResult.from_json(stats)

    async def get_group_doc_statistics(self, login: str, **query: Any) -> ToolResult:
        try:
            stats = await self._connector.get_group_doc_statistics(login, **query)
        except _REPORTED_ERRORS as e:
            return self._failure("get_group_doc_statistics", e)
        return ToolResult.from_json(stats)
