"""Core components."""

from .enums import DocFormat, MergePolicy, PublicLevel, SearchType, SortOrder, StatsRange
from .exceptions import (
    AuthenticationError,
    ChunkIndexError,
    ChunkingError,
    DocsError,
    InvalidChunkConfigError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "DocFormat",
    "PublicLevel",
    "SearchType",
    "SortOrder",
    "StatsRange",
    "MergePolicy",
    "DocsError",
    "ChunkingError",
    "InvalidChunkConfigError",
    "ChunkIndexError",
    "SerializationError",
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
]
