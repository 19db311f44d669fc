"""Chunk execution logic for cutting canonical text into chunks.

This module provides the ChunkExecutor class that serializes a record, plans
its windows, and wraps each window's text into a Chunk, opportunistically
re-parsing fragments that happen to be complete JSON objects.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from ...core.enums import MergePolicy
from ...core.exceptions import ChunkIndexError
from ...models import Chunk, part_title
from .definitions import DEFAULT_CHUNK_SIZE, OVERLAP_SIZE, ChunkPolicy, ChunkWindow, _is_int
from .planners import WindowPlanner
from .serializer import record_field, serialize
from .telemetry import (
    LoggerLike,
    log_chunk_index_rejected,
    log_chunk_materialized,
    log_chunk_parse_failed,
)


def parse_fragment(text: str) -> tuple[dict[str, Any] | None, bool, str | None]:
    """Try to recover a structured value from a window's text.

    Only text that, once stripped, starts with ``{`` and ends with ``}`` is
    attempted.

    Returns:
        Tuple of (parsed fields or None, parse_failed flag, error message)
    """
    stripped = text.strip()
    if not (stripped.startswith("{") and stripped.endswith("}")):
        return None, False, None
    try:
        parsed = json.loads(stripped)
    except json.JSONDecodeError as e:
        return None, True, str(e)
    return parsed, False, None


class ChunkExecutor:
    """Splits records into overlapping chunks.

    Every call re-serializes the record and re-plans its windows; nothing is
    cached between calls.
    """

    def __init__(
        self,
        policy: ChunkPolicy,
        merge_policy: MergePolicy = MergePolicy.PARSED_WINS,
        logger: LoggerLike | None = None,
    ) -> None:
        """Initialize chunk executor.

        Args:
            policy: Chunking policy (validated on construction)
            merge_policy: Merge order applied when chunks are rendered
            logger: Optional logger for chunk telemetry
        """
        self._policy = policy
        self._merge_policy = merge_policy
        self._logger = logger
        self._planner = WindowPlanner(policy, logger=logger)

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    @property
    def merge_policy(self) -> MergePolicy:
        return self._merge_policy

    def split(self, record: Any) -> list[Chunk]:
        """Split a record into every chunk.

        Holds all chunk texts at once (roughly ``total_chunks * chunk_size``
        characters); use iter_chunks or get_chunk to keep one in memory.
        """
        return list(self.iter_chunks(record))

    def iter_chunks(self, record: Any) -> Iterator[Chunk]:
        """Yield chunks one at a time.

        Raises:
            SerializationError: If the record has no canonical text
        """
        text = serialize(record)
        windows = self._planner.plan(len(text))
        for window in windows:
            yield self._materialize(record, text, window, len(windows))

    def get_chunk(self, record: Any, index: int | None = None) -> Chunk:
        """Return a single chunk by index.

        Args:
            record: Record to split
            index: Zero-based chunk index; None returns the first chunk

        Returns:
            The requested Chunk (its total_chunks tells the caller how many exist)

        Raises:
            ChunkIndexError: If index is a bool, not an int, or outside
                [0, total_chunks - 1]
        """
        text = serialize(record)
        windows = self._planner.plan(len(text))
        total_chunks = len(windows)

        if index is None:
            index = 0
        if not _is_int(index) or index < 0 or index >= total_chunks:
            log_chunk_index_rejected(
                document_id=record_field(record, "id"),
                chunk_index=index,
                total_chunks=total_chunks,
                logger=self._logger,
            )
            raise ChunkIndexError(index, total_chunks)

        return self._materialize(record, text, windows[index], total_chunks)

    def render(self, chunk: Chunk) -> Any:
        """Tool-facing payload for a chunk using this executor's merge policy."""
        return chunk.to_payload(self._merge_policy)

    def _materialize(
        self,
        record: Any,
        text: str,
        window: ChunkWindow,
        total_chunks: int,
    ) -> Chunk:
        document_id = record_field(record, "id")
        title = record_field(record, "title")

        if total_chunks == 1:
            return Chunk(
                index=0,
                total_chunks=1,
                start=0,
                end=len(text),
                text_content=text,
                chunk_size=self._policy.chunk_size,
                overlap_size=self._policy.overlap_size,
                document_id=document_id,
                original_title=title,
                derived_title=part_title(title, 0, 1),
                is_chunked=False,
                record=record,
            )

        fragment = text[window.start : window.end]
        parsed, parse_failed, error_message = parse_fragment(fragment)
        if parse_failed:
            log_chunk_parse_failed(
                document_id=document_id,
                chunk_index=window.index,
                error_message=error_message or "",
                logger=self._logger,
            )

        structured = parsed if isinstance(parsed, dict) else None
        log_chunk_materialized(
            document_id=document_id,
            window=window,
            total_chunks=total_chunks,
            parsed=structured is not None,
            logger=self._logger,
        )

        return Chunk(
            index=window.index,
            total_chunks=total_chunks,
            start=window.start,
            end=window.end,
            text_content=fragment,
            chunk_size=self._policy.chunk_size,
            overlap_size=self._policy.overlap_size,
            document_id=document_id,
            original_title=title,
            derived_title=part_title(title, window.index, total_chunks),
            structured_fields=structured,
            parse_failed=parse_failed,
        )


def split(
    record: Any,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    *,
    overlap_size: int = OVERLAP_SIZE,
    logger: LoggerLike | None = None,
) -> list[Chunk]:
    """Split a record into overlapping chunks.

    Raises:
        InvalidChunkConfigError: Before any work if chunk_size <= overlap_size
        SerializationError: If the record is cyclic or unserializable
    """
    policy = ChunkPolicy(chunk_size=chunk_size, overlap_size=overlap_size)
    return ChunkExecutor(policy, logger=logger).split(record)


def get_chunk(
    record: Any,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    index: int | None = None,
    *,
    overlap_size: int = OVERLAP_SIZE,
    logger: LoggerLike | None = None,
) -> Chunk:
    """Return chunk ``index`` (default 0) of a record.

    Raises:
        InvalidChunkConfigError: Before any work if chunk_size <= overlap_size
        ChunkIndexError: If index is outside the valid range
    """
    policy = ChunkPolicy(chunk_size=chunk_size, overlap_size=overlap_size)
    return ChunkExecutor(policy, logger=logger).get_chunk(record, index)
