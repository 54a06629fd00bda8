"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALIDATION_*, INVALID_*)
- Resource errors (*_NOT_FOUND)
- Business rule violations (*_CAPACITY_EXCEEDED)
- Collaborator failures (STORAGE_*, DISPATCH_*)
- Secrets management errors (SECRET_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    INVALID_FILE_NAME = "invalid_file_name"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"
    ATTENDEE_NOT_FOUND = "attendee_not_found"
    MATERIALS_NOT_FOUND = "materials_not_found"
    OUTBOX_ENTRY_NOT_FOUND = "outbox_entry_not_found"

    # Business rule violations
    EVENT_CAPACITY_EXCEEDED = "event_capacity_exceeded"

    # Collaborator failures
    STORAGE_UNAVAILABLE = "storage_unavailable"
    DISPATCH_FAILED = "dispatch_failed"

    # Secrets management errors
    SECRET_NOT_FOUND = "secret_not_found"
    SECRET_ACCESS_DENIED = "secret_access_denied"
    SECRET_INVALID_JSON = "secret_invalid_json"
