"""Helpers shared by Yuque endpoint adapters."""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from yuque.docs.core.exceptions import ProviderError

ModelT = TypeVar("ModelT", bound=BaseModel)


def unwrap_data(response: Any) -> Any:
    """Extract the payload from Yuque's ``{"data": ...}`` envelope."""
    if not isinstance(response, dict):
        raise ProviderError(f"Invalid response format: expected dict, got {type(response)}")
    if "data" not in response:
        raise ProviderError(f"Invalid response format: missing 'data' key in {sorted(response)}")
    return response["data"]


def unwrap_list(response: Any) -> list[Any]:
    """Extract a list payload, rejecting any other shape."""
    data = unwrap_data(response)
    if not isinstance(data, list):
        raise ProviderError(f"Invalid response format: expected list, got {type(data)}")
    return data


def validate_model(model: type[ModelT], data: Any) -> ModelT:
    """Build ``model`` from a payload, reporting shape mismatches as ProviderError.

    Models that define ``from_payload`` are built through it so they can keep
    the raw mapping.
    """
    build = getattr(model, "from_payload", model.model_validate)
    try:
        return build(data)
    except PydanticValidationError as e:
        raise ProviderError(f"Invalid response format for {model.__name__}: {e}") from e


def validate_models(model: type[ModelT], items: list[Any]) -> list[ModelT]:
    return [validate_model(model, item) for item in items]


def namespace_path(namespace: str) -> str:
    """Quote each segment of a ``user/repo`` namespace for use in a path."""
    return "/".join(quote(part, safe="") for part in namespace.strip("/").split("/"))


def segment(value: Any) -> str:
    """Quote a single path segment (slug, login, id)."""
    return quote(str(value), safe="")


def drop_none(values: dict[str, Any]) -> dict[str, Any]:
    """Remove unset optional parameters before sending them."""
    return {k: v for k, v in values.items() if v is not None}
