"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: Wrap a domain error in the matching ApplicationError
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import NotFoundError, ValidationError
from src.core.errors.domain_error import DomainError
from src.domain.errors import (
    CapacityExceededError,
    DispatchError,
    StorageUnavailableError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query handlers),
    typically wrapping domain errors with additional context.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CAPACITY_EXCEEDED,
        ...     message="Event is full",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Used by command and
    query handlers to provide structured error information to the presentation layer.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Event not found",
        ...     details={"event_id": "0190c7a4-..."},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def to_application_error(
    error: DomainError,
    *,
    query: bool = False,
) -> ApplicationError:
    """Wrap a domain error in the ApplicationError the presentation layer maps.

    Args:
        error: Domain error returned by a domain function or adapter.
        query: True when raised while serving a query (read path).

    Returns:
        ApplicationError carrying the original error.

    Example:
        >>> to_application_error(not_found).code
        <ApplicationErrorCode.NOT_FOUND: 'not_found'>
    """
    match error:
        case ValidationError():
            code = (
                ApplicationErrorCode.QUERY_VALIDATION_FAILED
                if query
                else ApplicationErrorCode.COMMAND_VALIDATION_FAILED
            )
        case NotFoundError():
            code = ApplicationErrorCode.NOT_FOUND
        case CapacityExceededError():
            code = ApplicationErrorCode.CAPACITY_EXCEEDED
        case StorageUnavailableError() | DispatchError():
            code = ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
        case _:
            code = (
                ApplicationErrorCode.QUERY_FAILED
                if query
                else ApplicationErrorCode.COMMAND_EXECUTION_FAILED
            )
    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details=error.details,
    )
