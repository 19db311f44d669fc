"""Core enumerations for standardized values accepted by the Yuque API.

Design Decisions:
    - String/int enums: Serialize directly into query strings and JSON bodies
    - Values mirror the remote API so no translation layer is needed

Key Types:
    - DocFormat: Body format of a document (markdown, html, lake)
    - PublicLevel: Visibility of a document or repository
    - SearchType: Search target (doc or repo)
    - SortOrder: Ordering for statistics listings
    - StatsRange: Time window for statistics listings
    - MergePolicy: Merge order for re-parsed chunk fields
"""

from enum import Enum, IntEnum
from typing import Optional


class DocFormat(str, Enum):
    """Document body format."""

    MARKDOWN = "markdown"
    HTML = "html"
    LAKE = "lake"

    @classmethod
    def from_str(cls, value: str) -> Optional["DocFormat"]:
        """Parse a format string, returning None for unknown values."""
        try:
            return cls(value.lower())
        except ValueError:
            return None


class PublicLevel(IntEnum):
    """Visibility of a document or repository."""

    PRIVATE = 0
    PUBLIC = 1
    ORGANIZATION = 2  # visible inside the owning organization only


class SearchType(str, Enum):
    """Kind of object a search targets."""

    DOC = "doc"
    REPO = "repo"


class SortOrder(str, Enum):
    """Sort direction for statistics listings."""

    DESC = "desc"
    ASC = "asc"


class StatsRange(IntEnum):
    """Time window for statistics listings, in days (0 = all time)."""

    ALL = 0
    LAST_30_DAYS = 30
    LAST_YEAR = 365


class MergePolicy(str, Enum):
    """How fields re-parsed from a chunk's text combine with its wrapper metadata.

    Applied in order: wrapper metadata first, then parsed fields, then the
    positional title, which is always written last.
    """

    PARSED_WINS = "parsed_wins"  # parsed fields overwrite wrapper keys of the same name
    METADATA_WINS = "metadata_wins"  # parsed fields only fill keys the wrapper leaves free
    NAMESPACED = "namespaced"  # parsed fields go under "structured_fields"
