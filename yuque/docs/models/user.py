"""Yuque user data model."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Account (person or group) on the document service."""

    id: int
    type: str | None = None
    login: str = Field(..., min_length=1)
    name: str | None = None
    description: str | None = None
    avatar_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
