"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from yuque.docs.models import Doc
from yuque.docs.runtime.chunking import serialize


def build_record(total_length: int, *, doc_id: int = 1, title: str = "Doc") -> dict:
    """Record whose canonical text is exactly ``total_length`` characters."""
    record = {"id": doc_id, "title": title, "body": ""}
    base = len(serialize(record))
    if total_length < base:
        raise ValueError(f"total_length must be at least {base}")
    record["body"] = "a" * (total_length - base)
    return record


@pytest.fixture
def record_of_length():
    """Factory building records of an exact canonical length."""
    return build_record


@pytest.fixture
def sample_doc() -> Doc:
    """Small document that fits in a single default-sized chunk."""
    return Doc(
        id=42,
        slug="intro",
        title="Introduction",
        format="markdown",
        body="# Hello\n\nWelcome to the knowledge base.",
        created_at="2024-01-01T00:00:00.000Z",
    )


@pytest.fixture
def large_doc() -> Doc:
    """Document whose canonical text spans several 1000-character chunks."""
    return Doc(id=7, slug="handbook", title="Handbook", body="x" * 3000)
