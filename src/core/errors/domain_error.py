"""Base domain error class for railway-oriented programming.

DomainError is the base class for every error the service reports, from a
blank event title to an unreachable object store. Errors flow through the
system as data inside Result types; they are never raised across layers.

Architecture:
- Base class for all error types (core, domain, infrastructure)
- Does NOT inherit from Exception (returned in Failure, not raised)
- Dataclass inheritance keeps subclasses declarative

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class CapacityExceededError(DomainError):
        max_attendees: int
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for logs and error responses.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
