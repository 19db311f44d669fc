"""Window planning logic for splitting canonical text.

This module provides the WindowPlanner class that determines the character
ranges a document's canonical text is cut into, without touching the text
itself.
"""

from __future__ import annotations

from collections.abc import Iterator

from .definitions import (
    ChunkPolicy,
    ChunkWindow,
    fits_single_chunk,
    validate_total_length,
    window_end,
)
from .telemetry import LoggerLike, log_chunk_plan


class WindowPlanner:
    """Plans overlapping fixed-size windows over a text of known length.

    Window 0 starts at offset 0 and every later window starts ``overlap_size``
    characters before the previous one ended. Planning stops as soon as a
    window reaches the end of the text.
    """

    def __init__(self, policy: ChunkPolicy, logger: LoggerLike | None = None) -> None:
        """Initialize window planner.

        Args:
            policy: Chunking policy (sizes are validated by the policy itself)
            logger: Optional logger for plan telemetry
        """
        self._policy = policy
        self._logger = logger

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def iter_windows(self, total_length: int) -> Iterator[ChunkWindow]:
        """Yield windows lazily, in order.

        Args:
            total_length: Length of the canonical text in characters

        Yields:
            ChunkWindow for each chunk

        Raises:
            InvalidChunkConfigError: If total_length is negative or not an integer
        """
        validate_total_length(total_length)
        chunk_size = self._policy.chunk_size
        overlap_size = self._policy.overlap_size

        # Fast path: the whole text is one chunk
        if fits_single_chunk(total_length, chunk_size):
            yield ChunkWindow(index=0, start=0, end=total_length)
            return

        start = 0
        index = 0
        while start < total_length:
            end = window_end(start, chunk_size, total_length)
            yield ChunkWindow(index=index, start=start, end=end)
            index += 1

            # Next window re-reads the tail of this one
            start = end - overlap_size

            # Checked against the next start so no empty or duplicate tail is emitted
            if start >= total_length - overlap_size:
                break

    def plan(self, total_length: int) -> list[ChunkWindow]:
        """Plan every window for a text.

        Only offsets are materialized; memory grows with the number of
        windows, not with the text length.

        Args:
            total_length: Length of the canonical text in characters

        Returns:
            List of windows covering the text
        """
        windows = list(self.iter_windows(total_length))

        log_chunk_plan(
            total_length=total_length,
            total_chunks=len(windows),
            chunk_size=self._policy.chunk_size,
            overlap_size=self._policy.overlap_size,
            logger=self._logger,
        )

        return windows
