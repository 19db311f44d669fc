"""Yuque document endpoint definitions and adapters.

Covers listing a repository's documents, reading one document, and the
create / update / delete operations.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from yuque.docs.models import Doc
from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import (
    drop_none,
    namespace_path,
    segment,
    unwrap_data,
    unwrap_list,
    validate_model,
    validate_models,
)


def _docs_path(params: dict[str, Any]) -> str:
    return f"/repos/{namespace_path(params['namespace'])}/docs"


def _doc_path(params: dict[str, Any]) -> str:
    """Path addressing one document by slug (read) or id (update/delete)."""
    key = params["doc_id"] if "doc_id" in params else params["slug"]
    return f"{_docs_path(params)}/{segment(key)}"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def build_create_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build JSON body for document creation."""
    return drop_none(
        {
            "title": params["title"],
            "slug": params["slug"],
            "public": _plain(params.get("public")),
            "format": _plain(params.get("format")),
            "body": params["body"],
        }
    )


def build_update_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build JSON body for document update; only provided fields are sent."""
    return drop_none(
        {
            "title": params.get("title"),
            "slug": params.get("slug"),
            "public": _plain(params.get("public")),
            "format": _plain(params.get("format")),
            "body": params.get("body"),
        }
    )


REPO_DOCS_SPEC = RestEndpointSpec(
    id="repo_docs",
    method="GET",
    build_path=_docs_path,
)

DOC_SPEC = RestEndpointSpec(
    id="doc",
    method="GET",
    build_path=_doc_path,
)

CREATE_DOC_SPEC = RestEndpointSpec(
    id="create_doc",
    method="POST",
    build_path=_docs_path,
    build_body=build_create_body,
)

UPDATE_DOC_SPEC = RestEndpointSpec(
    id="update_doc",
    method="PUT",
    build_path=_doc_path,
    build_body=build_update_body,
)

DELETE_DOC_SPEC = RestEndpointSpec(
    id="delete_doc",
    method="DELETE",
    build_path=_doc_path,
)


class DocAdapter(ResponseAdapter):
    """Adapter for parsing a single document response into Doc."""

    def parse(self, response: Any, params: dict[str, Any]) -> Doc:
        return validate_model(Doc, unwrap_data(response))


class DocListAdapter(ResponseAdapter):
    """Adapter for parsing a document listing into Doc list."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Doc]:
        return validate_models(Doc, unwrap_list(response))
