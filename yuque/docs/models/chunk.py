"""Document chunk and chunk estimate models.

A Chunk is one overlapping window of a document's canonical text plus the
positional metadata a caller needs to request its neighbours. A ChunkEstimate
describes the same windows from the text length alone.

Both are value objects recomputed per request; nothing here is cached.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import MergePolicy

CONTENT_TYPE = "full_doc_json"
OVERLAP_NOTE = "This chunk starts with content that overlaps the previous chunk"


def part_title(title: Any, index: int, total_chunks: int) -> str:
    """Title shown for chunk ``index`` of ``total_chunks``."""
    return f"{'' if title is None else title} [part {index + 1}/{total_chunks}]"


class Chunk(BaseModel):
    """One window of a document's canonical text.

    When the whole document fits in a single chunk, ``is_chunked`` is False
    and ``record`` carries the original document unmodified.
    """

    index: int = Field(..., ge=0)
    total_chunks: int = Field(..., ge=1)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    text_content: str
    chunk_size: int = Field(..., gt=0)
    overlap_size: int = Field(..., ge=0)
    document_id: Any = None
    original_title: Any = None
    derived_title: str
    structured_fields: dict[str, Any] | None = None
    parse_failed: bool = False
    is_chunked: bool = True
    record: Any = None

    model_config = ConfigDict(frozen=True)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.total_chunks - 1

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def has_next(self) -> bool:
        return self.index < self.total_chunks - 1

    @property
    def note(self) -> str:
        """Human-readable hint; empty for the first chunk."""
        return OVERLAP_NOTE if self.has_previous else ""

    def to_payload(self, merge_policy: MergePolicy = MergePolicy.PARSED_WINS) -> Any:
        """Render the tool-facing representation of this chunk.

        Keys are written in a fixed order: wrapper metadata, raw text, parse
        error marker, re-parsed fields (per ``merge_policy``) and finally the
        positional ``title``, so the title always reflects the chunk position.

        Args:
            merge_policy: How re-parsed fields combine with wrapper keys

        Returns:
            The original record for an unchunked document, otherwise a dict
        """
        if not self.is_chunked:
            return self.record

        payload: dict[str, Any] = {
            "_original_doc_id": self.document_id,
            "_original_title": self.original_title,
            "_chunk_info": {
                "index": self.index,
                "total": self.total_chunks,
                "is_chunked": True,
                "chunk_size": self.chunk_size,
                "overlap_size": self.overlap_size,
                "start_offset": self.start,
                "end_offset": self.end,
                "content_type": CONTENT_TYPE,
                "context": {
                    "has_previous": self.has_previous,
                    "has_next": self.has_next,
                    "note": self.note,
                },
            },
            "text_content": self.text_content,
        }
        if self.parse_failed:
            payload["parse_error"] = "Chunk content is not a complete JSON object; kept as text"

        if self.structured_fields:
            if merge_policy is MergePolicy.PARSED_WINS:
                payload.update(self.structured_fields)
            elif merge_policy is MergePolicy.METADATA_WINS:
                for key, value in self.structured_fields.items():
                    payload.setdefault(key, value)
            else:
                payload["structured_fields"] = dict(self.structured_fields)

        payload["title"] = self.derived_title
        return payload


class ChunkSummary(BaseModel):
    """Predicted placement of one chunk, computed without its content."""

    index: int = Field(..., ge=0)
    title: str
    approximate_start: int = Field(..., ge=0)
    approximate_end: int = Field(..., ge=0)
    how_to_get: str

    model_config = ConfigDict(frozen=True)

    @property
    def approximate_length(self) -> int:
        return self.approximate_end - self.approximate_start


class ChunkEstimate(BaseModel):
    """Chunk count and per-chunk offsets predicted from the text length."""

    total_chunks: int = Field(..., ge=1)
    total_length: int = Field(..., ge=0)
    chunk_size: int = Field(..., gt=0)
    overlap_size: int = Field(..., ge=0)
    chunks: list[ChunkSummary]
    document_id: Any = None
    title: Any = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """Render the metadata-only tool response."""
        return {
            "document_id": self.document_id,
            "title": self.title,
            "total_chunks": self.total_chunks,
            "total_length": self.total_length,
            "chunk_size": self.chunk_size,
            "overlap_size": self.overlap_size,
            "estimated_chunks": [
                {
                    "index": summary.index,
                    "title": summary.title,
                    "approximate_start": summary.approximate_start,
                    "approximate_end": summary.approximate_end,
                    "approximate_length": summary.approximate_length,
                    "how_to_get": summary.how_to_get,
                }
                for summary in self.chunks
            ],
        }
