"""Yuque REST endpoint registry.

This module exports all endpoint specifications and adapters from the
endpoint modules and maps endpoint ids to them.
"""

from __future__ import annotations

from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec

from .docs import (
    CREATE_DOC_SPEC,
    DELETE_DOC_SPEC,
    DOC_SPEC,
    REPO_DOCS_SPEC,
    UPDATE_DOC_SPEC,
    DocAdapter,
    DocListAdapter,
)
from .repos import REPO_SPEC, RepoAdapter
from .search import SPEC as SearchSpec  # noqa: N811
from .search import Adapter as SearchAdapter
from .statistics import (
    GROUP_BOOK_STATISTICS_SPEC,
    GROUP_DOC_STATISTICS_SPEC,
    GROUP_MEMBER_STATISTICS_SPEC,
    GROUP_STATISTICS_SPEC,
)
from .statistics import Adapter as StatisticsAdapter
from .users import (
    CURRENT_USER_SPEC,
    USER_DOCS_SPEC,
    USER_REPOS_SPEC,
    CurrentUserAdapter,
    UserDocsAdapter,
    UserReposAdapter,
)

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "current_user": (CURRENT_USER_SPEC, CurrentUserAdapter),
    "user_docs": (USER_DOCS_SPEC, UserDocsAdapter),
    "user_repos": (USER_REPOS_SPEC, UserReposAdapter),
    "repo": (REPO_SPEC, RepoAdapter),
    "repo_docs": (REPO_DOCS_SPEC, DocListAdapter),
    "doc": (DOC_SPEC, DocAdapter),
    "create_doc": (CREATE_DOC_SPEC, DocAdapter),
    "update_doc": (UPDATE_DOC_SPEC, DocAdapter),
    "delete_doc": (DELETE_DOC_SPEC, ResponseAdapter),
    "search": (SearchSpec, SearchAdapter),
    "group_statistics": (GROUP_STATISTICS_SPEC, StatisticsAdapter),
    "group_member_statistics": (GROUP_MEMBER_STATISTICS_SPEC, StatisticsAdapter),
    "group_book_statistics": (GROUP_BOOK_STATISTICS_SPEC, StatisticsAdapter),
    "group_doc_statistics": (GROUP_DOC_STATISTICS_SPEC, StatisticsAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "doc", "search")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "doc", "search")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
]
