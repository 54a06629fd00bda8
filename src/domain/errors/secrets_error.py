"""Secrets management error types.

Used when secrets retrieval or parsing fails during startup credential
bootstrap.

Usage:
    from src.domain.errors import SecretsError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=SecretsError(
        code=ErrorCode.SECRET_NOT_FOUND,
        message="Secret not found: database/url",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Secrets management failure.

    Attributes:
        code: ErrorCode enum (SECRET_NOT_FOUND, SECRET_ACCESS_DENIED, etc.).
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError
