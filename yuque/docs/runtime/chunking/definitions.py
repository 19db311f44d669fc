"""Chunking policy definitions and shared window arithmetic.

This module defines the data structures used to describe how a document's
canonical text is cut into overlapping windows, plus the offset helpers that
both the planner and the estimator rely on.

All sizes are measured in characters (Unicode code points) of the canonical
text, never bytes or tokens.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import MergePolicy
from ...core.exceptions import InvalidChunkConfigError

# Characters shared between consecutive chunks
OVERLAP_SIZE = 200

# Characters per chunk when the caller gives no size
DEFAULT_CHUNK_SIZE = 100_000


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for a split or estimate.

    Attributes:
        chunk_size: Maximum characters per chunk (must exceed overlap_size)
        overlap_size: Characters repeated at the start of every chunk after the first

    Raises:
        InvalidChunkConfigError: If the window could never advance
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    overlap_size: int = OVERLAP_SIZE

    def __post_init__(self) -> None:
        """Validate chunk policy configuration."""
        if not _is_int(self.chunk_size) or not _is_int(self.overlap_size):
            raise InvalidChunkConfigError(
                "chunk_size and overlap_size must be integers, "
                f"got {self.chunk_size!r} and {self.overlap_size!r}",
                chunk_size=None,
                overlap_size=None,
            )
        if self.chunk_size <= 0:
            raise InvalidChunkConfigError(
                f"chunk_size must be positive, got {self.chunk_size}",
                chunk_size=self.chunk_size,
                overlap_size=self.overlap_size,
            )
        if self.overlap_size < 0:
            raise InvalidChunkConfigError(
                f"overlap_size must not be negative, got {self.overlap_size}",
                chunk_size=self.chunk_size,
                overlap_size=self.overlap_size,
            )
        if self.chunk_size <= self.overlap_size:
            raise InvalidChunkConfigError(
                f"chunk_size ({self.chunk_size}) must be greater than "
                f"overlap_size ({self.overlap_size})",
                chunk_size=self.chunk_size,
                overlap_size=self.overlap_size,
            )

    @property
    def stride(self) -> int:
        """Distance between the starts of consecutive windows."""
        return self.chunk_size - self.overlap_size


@dataclass(frozen=True)
class ChunkWindow:
    """Half-open character range ``[start, end)`` of one chunk.

    Attributes:
        index: Zero-based position of the window
        start: First character offset (inclusive)
        end: Last character offset (exclusive)
    """

    index: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def overlaps_previous(self) -> bool:
        return self.index > 0


def validate_total_length(total_length: int) -> int:
    """Reject lengths that cannot describe a text.

    Raises:
        InvalidChunkConfigError: If total_length is not a non-negative integer
    """
    if not _is_int(total_length) or total_length < 0:
        raise InvalidChunkConfigError(
            f"total_length must be a non-negative integer, got {total_length!r}"
        )
    return total_length


def window_end(start: int, chunk_size: int, total_length: int) -> int:
    """End offset of the window beginning at ``start``."""
    return min(start + chunk_size, total_length)


def fits_single_chunk(total_length: int, chunk_size: int) -> bool:
    """Whether the whole text is returned as one unsplit chunk."""
    return total_length <= chunk_size


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "OVERLAP_SIZE",
    "ChunkPolicy",
    "ChunkWindow",
    "MergePolicy",
    "fits_single_chunk",
    "validate_total_length",
    "window_end",
]
