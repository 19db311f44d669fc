"""Search result data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SearchResult(BaseModel):
    """Single hit from the search endpoint.

    ``target`` holds the matched doc or repo as a raw mapping since its shape
    depends on the search type.
    """

    id: int | None = None
    type: str | None = None
    title: str | None = None
    summary: str | None = None
    url: str | None = None
    info: str | None = None
    target: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
