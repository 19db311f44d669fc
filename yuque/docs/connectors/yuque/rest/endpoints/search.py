"""Yuque search endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from yuque.docs.core.enums import SearchType
from yuque.docs.models import SearchResult
from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import drop_none, unwrap_list, validate_models


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the search endpoint."""
    search_type = params.get("type", SearchType.DOC)
    return drop_none(
        {
            "q": params["query"],
            "type": search_type.value if isinstance(search_type, SearchType) else search_type,
            "scope": params.get("scope"),
            "page": params.get("page"),
            "creator": params.get("creator"),
        }
    )


SPEC = RestEndpointSpec(
    id="search",
    method="GET",
    build_path=lambda _: "/search",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing search hits into SearchResult list."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[SearchResult]:
        return validate_models(SearchResult, unwrap_list(response))
