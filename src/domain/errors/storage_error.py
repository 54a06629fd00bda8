"""Object storage error types.

Usage:
    return Failure(error=StorageUnavailableError(
        code=ErrorCode.STORAGE_UNAVAILABLE,
        message="Object store unreachable",
        key=f"{event_id}/{file_name}",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageUnavailableError(DomainError):
    """Object store failed to store or return bytes.

    Covers unreachable endpoints, credential problems and missing keys
    alike; callers never retry internally.

    Attributes:
        code: ErrorCode.STORAGE_UNAVAILABLE.
        message: Human-readable message.
        key: Object key involved in the failed operation.
    """

    key: str | None = None
