"""Data models for documents and document chunks.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    All models are immutable (frozen=True) so records handed to the chunker
    cannot be modified while their canonical text is being measured.

Design Decisions:
    - Pydantic v2: Type validation and serialization of API payloads
    - extra="allow" on API models: Unknown remote fields survive a round trip
    - String timestamps: Keep remote payload text unchanged

Model Categories:
    - Remote entities: User, Repo, Doc, SearchResult
    - Chunking: Chunk, ChunkSummary, ChunkEstimate
"""

from .chunk import Chunk, ChunkEstimate, ChunkSummary, part_title
from .doc import Doc
from .repo import Repo
from .search import SearchResult
from .user import User

__all__ = [
    "Chunk",
    "ChunkEstimate",
    "ChunkSummary",
    "Doc",
    "Repo",
    "SearchResult",
    "User",
    "part_title",
]
