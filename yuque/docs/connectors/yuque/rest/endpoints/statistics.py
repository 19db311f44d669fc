"""Yuque group statistics endpoint definitions and adapter.

Statistics payloads vary between deployments, so they are returned as the
raw ``data`` mapping rather than a model.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import drop_none, segment, unwrap_data

# Tool argument name -> API query parameter name
_QUERY_FIELDS = {
    "name": "name",
    "range": "range",
    "page": "page",
    "limit": "limit",
    "sort_field": "sortField",
    "sort_order": "sortOrder",
    "book_id": "bookId",
}

MAX_PAGE_SIZE = 20


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters shared by the statistics listings."""
    query: dict[str, Any] = {}
    for key, api_key in _QUERY_FIELDS.items():
        value = params.get(key)
        if isinstance(value, Enum):
            value = value.value
        query[api_key] = value
    if query["limit"] is not None:
        query["limit"] = min(int(query["limit"]), MAX_PAGE_SIZE)
    return drop_none(query)


def _stats_path(suffix: str):
    def build_path(params: dict[str, Any]) -> str:
        return f"/groups/{segment(params['login'])}/statistics{suffix}"

    return build_path


GROUP_STATISTICS_SPEC = RestEndpointSpec(
    id="group_statistics",
    method="GET",
    build_path=_stats_path(""),
)

GROUP_MEMBER_STATISTICS_SPEC = RestEndpointSpec(
    id="group_member_statistics",
    method="GET",
    build_path=_stats_path("/members"),
    build_query=build_query,
)

GROUP_BOOK_STATISTICS_SPEC = RestEndpointSpec(
    id="group_book_statistics",
    method="GET",
    build_path=_stats_path("/books"),
    build_query=build_query,
)

GROUP_DOC_STATISTICS_SPEC = RestEndpointSpec(
    id="group_doc_statistics",
    method="GET",
    build_path=_stats_path("/docs"),
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter returning the unwrapped statistics payload."""

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return unwrap_data(response)
