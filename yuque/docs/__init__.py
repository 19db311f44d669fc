"""Yuque Docs - Yuque document access with chunked reads for oversized documents."""

from .connectors import YuqueConfig, YuqueRESTConnector
from .core import (
    AuthenticationError,
    ChunkIndexError,
    ChunkingError,
    DocFormat,
    DocsError,
    InvalidChunkConfigError,
    MergePolicy,
    NotFoundError,
    ProviderError,
    PublicLevel,
    RateLimitError,
    SearchType,
    SerializationError,
    SortOrder,
    StatsRange,
    ValidationError,
)
from .models import Chunk, ChunkEstimate, ChunkSummary, Doc, Repo, SearchResult, User
from .runtime.chunking import (
    DEFAULT_CHUNK_SIZE,
    OVERLAP_SIZE,
    ChunkEstimator,
    ChunkExecutor,
    ChunkPolicy,
    WindowPlanner,
    estimate,
    get_chunk,
    serialize,
    split,
)
from .tools import DocumentTools, ToolResult, format_tool_catalog

__version__ = "0.1.0"

__all__ = [
    # Core enums
    "DocFormat",
    "PublicLevel",
    "SearchType",
    "SortOrder",
    "StatsRange",
    "MergePolicy",
    # Connectors
    "YuqueConfig",
    "YuqueRESTConnector",
    # Models
    "Chunk",
    "ChunkEstimate",
    "ChunkSummary",
    "Doc",
    "Repo",
    "SearchResult",
    "User",
    # Chunking
    "DEFAULT_CHUNK_SIZE",
    "OVERLAP_SIZE",
    "ChunkPolicy",
    "WindowPlanner",
    "ChunkExecutor",
    "ChunkEstimator",
    "estimate",
    "get_chunk",
    "serialize",
    "split",
    # Tools
    "DocumentTools",
    "ToolResult",
    "format_tool_catalog",
    # Exceptions
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
