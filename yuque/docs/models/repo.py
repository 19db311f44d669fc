"""Yuque repository (knowledge base) data model."""

from pydantic import BaseModel, ConfigDict

from .user import User


class Repo(BaseModel):
    """Knowledge base grouping a set of documents."""

    id: int
    type: str | None = None
    slug: str | None = None
    name: str | None = None
    user_id: int | None = None
    description: str | None = None
    public: int | None = None
    items_count: int | None = None
    likes_count: int | None = None
    watches_count: int | None = None
    content_updated_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    namespace: str | None = None
    user: User | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
