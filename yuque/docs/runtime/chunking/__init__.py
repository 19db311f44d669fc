"""Document chunking layer for oversized documents.

This module splits a document's canonical text into overlapping fixed-size
windows so it can pass through a transport with a bounded message size, and
predicts those windows from the text length alone.

Architecture:
    The chunking layer consists of:
    - serializer.py: Canonical text of a record (the unit of measurement)
    - definitions.py: Chunk policy, window structure and shared offset math
    - planners.py: Window planning (sliding window with overlap)
    - executors.py: Chunk materialization, fragment re-parsing, index access
    - estimators.py: Closed-form chunk count and offsets
    - telemetry.py: Structured logging

Usage:
    >>> chunk = get_chunk(doc, chunk_size=100_000, index=2)
    >>> info = estimate(len(serialize(doc)), chunk_size=100_000)
    >>> assert info.total_chunks == chunk.total_chunks
"""

from __future__ import annotations

from .definitions import (
    DEFAULT_CHUNK_SIZE,
    OVERLAP_SIZE,
    ChunkPolicy,
    ChunkWindow,
    MergePolicy,
    window_end,
)
from .estimators import ChunkEstimator, estimate, estimate_chunk_count
from .executors import ChunkExecutor, get_chunk, parse_fragment, split
from .planners import WindowPlanner
from .serializer import record_field, serialize

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "OVERLAP_SIZE",
    "ChunkPolicy",
    "ChunkWindow",
    "MergePolicy",
    "WindowPlanner",
    "ChunkExecutor",
    "ChunkEstimator",
    "estimate",
    "estimate_chunk_count",
    "get_chunk",
    "parse_fragment",
    "record_field",
    "serialize",
    "split",
    "window_end",
]
