"""Tool definitions for the Yuque document tools.

Each tool has a name, a description shown to the calling agent, and a
pydantic model describing its arguments. Argument names follow the wire
names callers already use (``id``, ``bookId``, ``sortField``...); the models
expose them as snake_case attributes.

Tool Categories:
    - Account: get_current_user, get_user_docs, get_user_repos
    - Reading: get_repo_docs, get_doc, get_doc_chunks_info, search
    - Writing: create_doc, update_doc, delete_doc
    - Statistics: get_group_statistics, get_group_member_statistics,
      get_group_book_statistics, get_group_doc_statistics
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..runtime.chunking import DEFAULT_CHUNK_SIZE

NAMESPACE_HELP = "Repository namespace in the form user/repo"
SLUG_HELP = "Document slug or short link name"
CHUNK_SIZE_HELP = f"Chunk size in characters, defaults to {DEFAULT_CHUNK_SIZE}"
RANGE_HELP = "Time range in days (0: all time, 30: last 30 days, 365: last year)"
PAGE_HELP = "Page number, defaults to 1"
LIMIT_HELP = "Page size, defaults to 10, at most 20"
SORT_ORDER_HELP = "Sort direction: desc or asc, defaults to desc"


class ToolArgs(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class NoArgs(ToolArgs):
    pass


class LoginArgs(ToolArgs):
    login: str = Field(..., min_length=1, description="Login name of the user or group")


class NamespaceArgs(ToolArgs):
    namespace: str = Field(..., min_length=1, description=NAMESPACE_HELP)


class GetDocArgs(ToolArgs):
    namespace: str = Field(..., min_length=1, description=NAMESPACE_HELP)
    slug: str = Field(..., min_length=1, description=SLUG_HELP)
    chunk_index: int | None = Field(
        None,
        description="Index of the chunk to fetch; omitted returns the first chunk, "
        "or the whole document when it is small enough",
    )
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, description=CHUNK_SIZE_HELP)


class ChunksInfoArgs(ToolArgs):
    namespace: str = Field(..., min_length=1, description=NAMESPACE_HELP)
    slug: str = Field(..., min_length=1, description=SLUG_HELP)
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, description=CHUNK_SIZE_HELP)


class CreateDocArgs(ToolArgs):
    namespace: str = Field(..., min_length=1, description=NAMESPACE_HELP)
    title: str = Field(..., description="Document title")
    slug: str = Field(..., description="Short link name used in the document URL")
    body: str = Field(..., description="Document content, Markdown supported")
    format: Literal["markdown", "html", "lake"] = Field(
        "markdown", description="Content format: markdown, html or lake"
    )
    public_level: Literal[0, 1, 2] = Field(
        1, description="Visibility: 0 (private), 1 (public), 2 (organization only)"
    )


class UpdateDocArgs(ToolArgs):
    namespace: str = Field(..., min_length=1, description=NAMESPACE_HELP)
    doc_id: int = Field(..., alias="id", description="ID of the document to update")
    title: str | None = Field(None, description="New title")
    slug: str | None = Field(None, description="New short link name")
    body: str | None = Field(None, description="New content, Markdown supported")
    public: Literal[0, 1, 2] | None = Field(
        None, description="Visibility: 0 (private), 1 (public), 2 (organization only)"
    )
    format: Literal["markdown", "html", "lake"] | None = Field(
        None, description="Content format: markdown, html or lake"
    )


class DeleteDocArgs(ToolArgs):
    namespace: str = Field(..., min_length=1, description=NAMESPACE_HELP)
    doc_id: int = Field(..., alias="id", description="ID of the document to delete")


class SearchArgs(ToolArgs):
    query: str = Field(..., description="Search keywords")
    type: Literal["doc", "repo"] = Field(..., description="What to search: doc or repo")
    scope: str | None = Field(
        None, description="Search scope, defaults to the current user or group"
    )
    page: int | None = Field(None, ge=1, description=PAGE_HELP)
    creator: str | None = Field(None, description="Only match content by this author")


class StatisticsQueryArgs(ToolArgs):
    login: str = Field(..., min_length=1, description="Login name of the group")
    name: str | None = Field(None, description="Name filter")
    range: Literal[0, 30, 365] | None = Field(None, description=RANGE_HELP)
    page: int | None = Field(None, ge=1, description=PAGE_HELP)
    limit: int | None = Field(None, ge=1, le=20, description=LIMIT_HELP)
    sort_field: str | None = Field(None, alias="sortField", description="Sort field")
    sort_order: Literal["desc", "asc"] | None = Field(
        None, alias="sortOrder", description=SORT_ORDER_HELP
    )


class DocStatisticsArgs(StatisticsQueryArgs):
    book_id: int | None = Field(
        None, alias="bookId", description="Only include documents of this repository"
    )


@dataclass(frozen=True)
class ToolSpec:
    """Declarative description of one tool.

    Attributes:
        name: Tool name callers invoke
        description: Human readable purpose of the tool
        args_model: Pydantic model validating the tool arguments
        handler: Name of the DocumentTools coroutine implementing it
        error_label: Prefix of the error text returned on failure
    """

    name: str
    description: str
    args_model: type[ToolArgs]
    handler: str
    error_label: str

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments, using wire names."""
        return self.args_model.model_json_schema(by_alias=True)


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_current_user",
        description="Get the authenticated user's account information, "
        "including user ID, login name and avatar",
        args_model=NoArgs,
        handler="get_current_user",
        error_label="Error fetching current user",
    ),
    ToolSpec(
        name="get_user_docs",
        description="List all documents of the current user, "
        "including private and collaborative documents",
        args_model=NoArgs,
        handler="get_user_docs",
        error_label="Error fetching user docs",
    ),
    ToolSpec(
        name="get_user_repos",
        description="List the repositories of a user; a repository groups documents",
        args_model=LoginArgs,
        handler="get_user_repos",
        error_label="Error fetching repos",
    ),
    ToolSpec(
        name="get_repo_docs",
        description="List the documents of a repository with titles and update times",
        args_model=NamespaceArgs,
        handler="get_repo_docs",
        error_label="Error fetching docs",
    ),
    ToolSpec(
        name="get_doc",
        description="Get the full content of a document, including body, history "
        "and permissions (large documents are returned in chunks)",
        args_model=GetDocArgs,
        handler="get_doc",
        error_label="Error fetching doc",
    ),
    ToolSpec(
        name="get_doc_chunks_info",
        description="Get chunk metadata of a document, such as the total number "
        "of chunks and the characters in each",
        args_model=ChunksInfoArgs,
        handler="get_doc_chunks_info",
        error_label="Error fetching doc chunks info",
    ),
    ToolSpec(
        name="create_doc",
        description="Create a document in a repository in markdown, html or lake format",
        args_model=CreateDocArgs,
        handler="create_doc",
        error_label="Error creating doc",
    ),
    ToolSpec(
        name="update_doc",
        description="Update an existing document's title, content or visibility",
        args_model=UpdateDocArgs,
        handler="update_doc",
        error_label="Error updating doc",
    ),
    ToolSpec(
        name="delete_doc",
        description="Delete a document from a repository; this cannot be undone",
        args_model=DeleteDocArgs,
        handler="delete_doc",
        error_label="Error deleting doc",
    ),
    ToolSpec(
        name="search",
        description="Search documents or repositories, optionally by scope and author",
        args_model=SearchArgs,
        handler="search",
        error_label="Error searching",
    ),
    ToolSpec(
        name="get_group_statistics",
        description="Get summary statistics of a group, including member count, "
        "document count, reads and interactions",
        args_model=LoginArgs,
        handler="get_group_statistics",
        error_label="Error fetching group statistics",
    ),
    ToolSpec(
        name="get_group_member_statistics",
        description="Get per-member statistics of a group, such as edits, reads and likes",
        args_model=StatisticsQueryArgs,
        handler="get_group_member_statistics",
        error_label="Error fetching group member statistics",
    ),
    ToolSpec(
        name="get_group_book_statistics",
        description="Get per-repository statistics of a group, such as documents, "
        "words and reads",
        args_model=StatisticsQueryArgs,
        handler="get_group_book_statistics",
        error_label="Error fetching group book statistics",
    ),
    ToolSpec(
        name="get_group_doc_statistics",
        description="Get per-document statistics of a group, such as words, "
        "reads and comments",
        args_model=DocStatisticsArgs,
        handler="get_group_doc_statistics",
        error_label="Error fetching group doc statistics",
    ),
)

_TOOLS_BY_NAME: dict[str, ToolSpec] = {tool.name: tool for tool in TOOLS}


def get_tool(name: str) -> ToolSpec | None:
    """Look up a tool by name."""
    return _TOOLS_BY_NAME.get(name)


def list_tools() -> list[str]:
    """Names of all tools in catalog order."""
    return [tool.name for tool in TOOLS]


def format_tool_catalog() -> str:
    """Render the catalog as console text, one entry per tool."""
    lines = [
        "",
        "======== Yuque document tools ========",
        "The following tools are available for working with Yuque repositories:",
        "--------------------------------------",
    ]
    for tool in TOOLS:
        lines.append("")
        lines.append(f"• {tool.name}")
        lines.append(f"  {tool.description}")
    lines.append("")
    lines.append("======================================")
    return "\n".join(lines)
