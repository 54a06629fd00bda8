"""Application layer errors."""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    to_application_error,
)
from src.application.errors.not_found import attendee_not_found, event_not_found

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "attendee_not_found",
    "event_not_found",
    "to_application_error",
]
