"""Yuque user endpoint definitions and adapters.

Covers the authenticated user, that user's documents, and another user's
repositories.
"""

from __future__ import annotations

from typing import Any

from yuque.docs.models import Doc, Repo, User
from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec

from .common import segment, unwrap_data, unwrap_list, validate_model, validate_models

CURRENT_USER_SPEC = RestEndpointSpec(
    id="current_user",
    method="GET",
    build_path=lambda _: "/user",
)

USER_DOCS_SPEC = RestEndpointSpec(
    id="user_docs",
    method="GET",
    build_path=lambda _: "/user/docs",
)

USER_REPOS_SPEC = RestEndpointSpec(
    id="user_repos",
    method="GET",
    build_path=lambda params: f"/users/{segment(params['login'])}/repos",
)


class CurrentUserAdapter(ResponseAdapter):
    """Adapter for parsing the current user response into User."""

    def parse(self, response: Any, params: dict[str, Any]) -> User:
        return validate_model(User, unwrap_data(response))


class UserDocsAdapter(ResponseAdapter):
    """Adapter for parsing the user's documents into Doc list."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Doc]:
        return validate_models(Doc, unwrap_list(response))


class UserReposAdapter(ResponseAdapter):
    """Adapter for parsing a user's repositories into Repo list."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Repo]:
        return validate_models(Repo, unwrap_list(response))
