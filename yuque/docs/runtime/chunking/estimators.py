"""Closed-form chunk estimation.

The estimator predicts how the planner would split a text from its length
alone. It never builds windows or touches document content, so a caller can
learn the chunk count and sizes before requesting any chunk.

The count formula, for ``total_length > chunk_size``::

    ceil((total_length - overlap_size) / (chunk_size - overlap_size))

matches the planner exactly: window ``i`` starts at ``i * stride`` and the
planner stops at the first window whose end reaches the text length.
"""

from __future__ import annotations

from typing import Any

from ...models import ChunkEstimate, ChunkSummary, part_title
from .definitions import (
    OVERLAP_SIZE,
    ChunkPolicy,
    fits_single_chunk,
    validate_total_length,
    window_end,
)
from .serializer import record_field, serialize
from .telemetry import LoggerLike, log_chunk_estimate

GET_CHUNK_HINT = "Use the get_doc tool with chunk_index={index}"


def estimate_chunk_count(total_length: int, policy: ChunkPolicy) -> int:
    """Number of chunks a text of ``total_length`` characters splits into."""
    validate_total_length(total_length)
    if fits_single_chunk(total_length, policy.chunk_size):
        return 1
    # Integer ceiling division
    return -(-(total_length - policy.overlap_size) // policy.stride)


def approximate_start(index: int, policy: ChunkPolicy) -> int:
    """Start offset of chunk ``index``."""
    return 0 if index == 0 else index * policy.stride


class ChunkEstimator:
    """Builds ChunkEstimate objects for a chunking policy."""

    def __init__(self, policy: ChunkPolicy, logger: LoggerLike | None = None) -> None:
        """Initialize chunk estimator.

        Args:
            policy: Chunking policy to estimate for
            logger: Optional logger for estimate telemetry
        """
        self._policy = policy
        self._logger = logger

    def estimate(
        self,
        total_length: int,
        *,
        title: Any = None,
        document_id: Any = None,
    ) -> ChunkEstimate:
        """Estimate chunk count and offsets for a text length.

        Args:
            total_length: Length of the canonical text in characters
            title: Optional document title used for per-chunk titles
            document_id: Optional document identifier echoed in the result

        Returns:
            ChunkEstimate with one summary per chunk

        Raises:
            InvalidChunkConfigError: If total_length is invalid
        """
        policy = self._policy
        total_chunks = estimate_chunk_count(total_length, policy)

        summaries = []
        for index in range(total_chunks):
            start = approximate_start(index, policy)
            summaries.append(
                ChunkSummary(
                    index=index,
                    title=part_title(title, index, total_chunks),
                    approximate_start=start,
                    approximate_end=window_end(start, policy.chunk_size, total_length),
                    how_to_get=GET_CHUNK_HINT.format(index=index),
                )
            )

        log_chunk_estimate(
            total_length=total_length,
            total_chunks=total_chunks,
            chunk_size=policy.chunk_size,
            logger=self._logger,
        )

        return ChunkEstimate(
            total_chunks=total_chunks,
            total_length=total_length,
            chunk_size=policy.chunk_size,
            overlap_size=policy.overlap_size,
            chunks=summaries,
            document_id=document_id,
            title=title,
        )

    def describe(self, record: Any) -> ChunkEstimate:
        """Estimate chunks for a record, echoing its ``id`` and ``title``.

        The record is serialized once to measure it; no chunk text is cut.
        """
        return self.estimate(
            len(serialize(record)),
            title=record_field(record, "title"),
            document_id=record_field(record, "id"),
        )


def estimate(
    total_length: int,
    chunk_size: int,
    overlap_size: int = OVERLAP_SIZE,
    *,
    title: Any = None,
    document_id: Any = None,
    logger: LoggerLike | None = None,
) -> ChunkEstimate:
    """Estimate chunk count and offsets without materializing any chunk.

    Raises:
        InvalidChunkConfigError: If chunk_size <= overlap_size, sizes are
            non-positive, or total_length is negative
    """
    policy = ChunkPolicy(chunk_size=chunk_size, overlap_size=overlap_size)
    return ChunkEstimator(policy, logger=logger).estimate(
        total_length, title=title, document_id=document_id
    )
