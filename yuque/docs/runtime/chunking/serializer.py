"""Canonical text serialization for chunking.

The canonical text is the pretty-printed JSON form of a record. Its length in
characters is the only quantity the planner and estimator measure, so the
output must be identical every time the same record is serialized.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ...core.exceptions import SerializationError

INDENT = 2


def _to_plain(record: Any) -> Any:
    if isinstance(record, BaseModel):
        payload = getattr(record, "source_payload", None)
        if payload is not None:
            return payload
        return record.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(record, (list, tuple)):
        return [_to_plain(item) for item in record]
    return record


def serialize(record: Any) -> str:
    """Convert a record into its canonical text.

    Keys keep their insertion order and non-ASCII characters are written as-is,
    so ``len()`` of the result counts the characters a reader sees.

    Args:
        record: Mapping, JSON-like value or pydantic model

    Returns:
        Two-space indented JSON text

    Raises:
        SerializationError: If the record is cyclic or holds values with no JSON form
    """
    try:
        return json.dumps(
            _to_plain(record),
            indent=INDENT,
            ensure_ascii=False,
            default=to_jsonable_python,
        )
    except (ValueError, TypeError, RecursionError, PydanticSerializationError) as e:
        raise SerializationError(f"Cannot serialize record: {e}") from e


def record_field(record: Any, name: str) -> Any:
    """Read a top-level field from a mapping or model record, None if absent."""
    if isinstance(record, BaseModel):
        return getattr(record, name, None)
    if isinstance(record, dict):
        return record.get(name)
    return None
