"""Custom exception hierarchy."""

from __future__ import annotations


class DocsError(Exception):
    """Base exception for all library errors."""

    pass


class ChunkingError(DocsError):
    """Failure while planning, estimating or materializing chunks."""

    pass


class InvalidChunkConfigError(ChunkingError, ValueError):
    """Chunk size / overlap combination cannot produce a terminating split.

    Raised before any splitting work begins, e.g. when ``chunk_size`` is not
    strictly greater than ``overlap_size``.
    """

    def __init__(
        self,
        message: str,
        chunk_size: int | None = None,
        overlap_size: int | None = None,
    ) -> None:
        super().__init__(message)
        self.chunk_size = chunk_size
        self.overlap_size = overlap_size


class ChunkIndexError(ChunkingError, IndexError):
    """Requested chunk index is outside ``[0, total_chunks - 1]``."""

    def __init__(self, index: int, total_chunks: int) -> None:
        super().__init__(
            f"Invalid chunk_index: {index}. Valid range is 0-{total_chunks - 1}"
        )
        self.index = index
        self.total_chunks = total_chunks

    @property
    def valid_range(self) -> tuple[int, int]:
        """Inclusive bounds of acceptable indexes."""
        return (0, self.total_chunks - 1)


class SerializationError(ChunkingError):
    """Record could not be turned into canonical text (cyclic or unserializable)."""

    pass


class ProviderError(DocsError):
    """Error from the remote document service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""

    def __init__(self, message: str, retry_after: float = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class AuthenticationError(ProviderError):
    """Token missing, expired or lacking permission (401/403)."""

    pass


class NotFoundError(ProviderError):
    """Repository, document or user does not exist (404)."""

    pass


class ValidationError(DocsError):
    """Tool argument validation failure."""

    pass
