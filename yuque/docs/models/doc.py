"""Yuque document data model.

A document parsed from an API response keeps the mapping it was built from,
and its canonical text is rendered from that mapping. Key order and values
therefore follow the remote payload as received, so chunk boundaries do not
depend on how the model coerces fields. Timestamps stay strings.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .repo import Repo
from .user import User


class Doc(BaseModel):
    """Document record as returned by the repository docs endpoints."""

    id: int
    slug: str | None = None
    title: str | None = None
    description: str | None = None
    user_id: int | None = None
    book_id: int | None = None
    format: str | None = None
    public: int | None = None
    status: int | None = None
    likes_count: int | None = None
    comments_count: int | None = None
    content_updated_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    word_count: int | None = None
    body: str | None = None
    body_html: str | None = None
    body_lake: str | None = None
    book: Repo | None = None
    user: User | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    _payload: dict[str, Any] | None = PrivateAttr(default=None)

    @classmethod
    def from_payload(cls, data: Any) -> "Doc":
        """Validate a remote payload and keep it for serialization."""
        doc = cls.model_validate(data)
        if isinstance(data, dict):
            doc._payload = dict(data)
        return doc

    @property
    def source_payload(self) -> dict[str, Any] | None:
        """Mapping the document was parsed from, None when built locally."""
        return self._payload

    @property
    def body_length(self) -> int:
        """Length of the markdown body in characters (0 when absent)."""
        return len(self.body or "")
