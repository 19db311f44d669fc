"""Agent-facing document tools.

Architecture:
    - definitions.py: Tool catalog (names, descriptions, argument models)
    - results.py: Text results returned by every tool
    - service.py: DocumentTools, the async handlers behind the catalog
"""

from .definitions import (
    TOOLS,
    ToolArgs,
    ToolSpec,
    format_tool_catalog,
    get_tool,
    list_tools,
)
from .results import TextContent, ToolResult
from .service import DocumentTools

__all__ = [
    "TOOLS",
    "DocumentTools",
    "TextContent",
    "ToolArgs",
    "ToolResult",
    "ToolSpec",
    "format_tool_catalog",
    "get_tool",
    "list_tools",
]
