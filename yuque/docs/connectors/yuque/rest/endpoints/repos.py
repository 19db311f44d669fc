"""Yuque repository endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from yuque.docs.models import Repo
from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import namespace_path, unwrap_data, validate_model

REPO_SPEC = RestEndpointSpec(
    id="repo",
    method="GET",
    build_path=lambda params: f"/repos/{namespace_path(params['namespace'])}",
)


class RepoAdapter(ResponseAdapter):
    """Adapter for parsing a repository response into Repo."""

    def parse(self, response: Any, params: dict[str, Any]) -> Repo:
        return validate_model(Repo, unwrap_data(response))
