"""Tool result models.

Every tool answers with text content, including failures, so a calling
session never sees a transport-level fault for a bad request.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..runtime.chunking import serialize


class TextContent(BaseModel):
    """A single text content block."""

    type: Literal["text"] = "text"
    text: str

    model_config = ConfigDict(frozen=True)


class ToolResult(BaseModel):
    """Result of a tool invocation."""

    content: list[TextContent] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        return cls(content=[TextContent(text=text)])

    @classmethod
    def from_json(cls, value: Any) -> ToolResult:
        """Render a record, model or list of models as indented JSON text."""
        return cls.from_text(serialize(value))

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)
