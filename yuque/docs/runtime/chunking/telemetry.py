"""Structured logging for chunking operations.

This module provides telemetry hooks for chunking operations, emitting
structured log records. Every helper takes an optional ``logger`` so callers
can inject their own sink instead of reconfiguring a shared one.
"""

from __future__ import annotations

import logging
from typing import Union

from .definitions import ChunkWindow

logger = logging.getLogger(__name__)

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


def _resolve(custom: LoggerLike | None) -> LoggerLike:
    return custom if custom is not None else logger


def log_chunk_plan(
    *,
    total_length: int,
    total_chunks: int,
    chunk_size: int,
    overlap_size: int,
    logger: LoggerLike | None = None,
) -> None:
    """Log window plan creation.

    Args:
        total_length: Length of the canonical text in characters
        total_chunks: Number of windows planned
        chunk_size: Maximum characters per window
        overlap_size: Characters shared by consecutive windows
        logger: Optional logger overriding the module logger
    """
    _resolve(logger).info(
        "chunk_plan_created",
        extra={
            "total_length": total_length,
            "total_chunks": total_chunks,
            "chunk_size": chunk_size,
            "overlap_size": overlap_size,
        },
    )


def log_chunk_materialized(
    *,
    document_id: object,
    window: ChunkWindow,
    total_chunks: int,
    parsed: bool,
    logger: LoggerLike | None = None,
) -> None:
    """Log that one window's text was cut and wrapped into a chunk."""
    _resolve(logger).debug(
        "chunk_materialized",
        extra={
            "document_id": document_id,
            "chunk_index": window.index,
            "total_chunks": total_chunks,
            "start": window.start,
            "end": window.end,
            "parsed": parsed,
        },
    )


def log_chunk_parse_failed(
    *,
    document_id: object,
    chunk_index: int,
    error_message: str,
    logger: LoggerLike | None = None,
) -> None:
    """Log a window whose text looked like an object but did not parse."""
    _resolve(logger).debug(
        "chunk_parse_failed",
        extra={
            "document_id": document_id,
            "chunk_index": chunk_index,
            "error_message": error_message,
        },
    )


def log_chunk_estimate(
    *,
    total_length: int,
    total_chunks: int,
    chunk_size: int,
    logger: LoggerLike | None = None,
) -> None:
    """Log creation of a metadata-only chunk estimate."""
    _resolve(logger).info(
        "chunk_estimate_created",
        extra={
            "total_length": total_length,
            "total_chunks": total_chunks,
            "chunk_size": chunk_size,
        },
    )


def log_chunk_index_rejected(
    *,
    document_id: object,
    chunk_index: int,
    total_chunks: int,
    logger: LoggerLike | None = None,
) -> None:
    """Log a request for a chunk index outside the valid range."""
    _resolve(logger).warning(
        "chunk_index_rejected",
        extra={
            "document_id": document_id,
            "chunk_index": chunk_index,
            "total_chunks": total_chunks,
        },
    )
