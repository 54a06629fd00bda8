"""Centralized validation functions (DRY principle).

Validators are pure functions that raise ValueError on validation failure and
return the normalized value on success. Handlers run them through
``validate_fields`` so the first failure becomes a ``ValidationError``
carrying the offending field.
"""

import re
from collections.abc import Callable, Iterable
from typing import Any

from email_validator import EmailNotValidError
from email_validator import validate_email as _check_email_syntax

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.attendee import ATTENDEE_FIELD_MAX_LENGTH
from src.domain.entities.event import (
    EVENT_DESCRIPTION_MAX_LENGTH,
    EVENT_LOCATION_MAX_LENGTH,
    EVENT_TITLE_MAX_LENGTH,
)

FILE_NAME_MAX_LENGTH = 255

_UNSAFE_FILE_NAME = re.compile(r"[/\\\x00]")

# Fields whose failures carry a more specific code than VALIDATION_FAILED
_FIELD_ERROR_CODES: dict[str, ErrorCode] = {
    "email": ErrorCode.INVALID_EMAIL,
    "file_name": ErrorCode.INVALID_FILE_NAME,
}


def validate_required_text(v: str, *, max_length: int) -> str:
    """Validate a required, length-limited text field.

    Args:
        v: Raw value.
        max_length: Maximum length after stripping whitespace.

    Returns:
        Value with surrounding whitespace stripped.

    Raises:
        ValueError: If empty after stripping or longer than max_length.

    Example:
        >>> validate_required_text("  Tech Conference ", max_length=100)
        'Tech Conference'
        >>> validate_required_text("   ", max_length=100)
        ValueError: Value is required
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError("Value is required")
    if len(stripped) > max_length:
        raise ValueError(f"Value must be at most {max_length} characters")
    return stripped


def validate_event_title(v: str) -> str:
    """Validate event title (required, <= 100 chars)."""
    return validate_required_text(v, max_length=EVENT_TITLE_MAX_LENGTH)


def validate_event_description(v: str) -> str:
    """Validate event description (required, <= 500 chars)."""
    return validate_required_text(v, max_length=EVENT_DESCRIPTION_MAX_LENGTH)


def validate_event_location(v: str) -> str:
    """Validate event location (required, <= 100 chars)."""
    return validate_required_text(v, max_length=EVENT_LOCATION_MAX_LENGTH)


def validate_attendee_text(v: str) -> str:
    """Validate attendee name/company (required, <= 100 chars)."""
    return validate_required_text(v, max_length=ATTENDEE_FIELD_MAX_LENGTH)


def validate_max_attendees(v: int) -> int:
    """Validate event capacity.

    Raises:
        ValueError: If capacity is below 1.
    """
    if v < 1:
        raise ValueError("Maximum attendees must be at least 1")
    return v


def validate_email(v: str) -> str:
    """Validate email format.

    Uses the email-validator library for syntax checks (no deliverability
    lookup) and normalizes the whole address to lowercase.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid or too long.

    Example:
        >>> validate_email("Ada@Example.COM")
        'ada@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email: ...
    """
    value = validate_required_text(v, max_length=ATTENDEE_FIELD_MAX_LENGTH)
    try:
        validated = _check_email_syntax(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email: {e}") from e
    return validated.normalized.lower()


def validate_file_name(v: str) -> str:
    """Validate an uploaded materials file name.

    File names become the last segment of an object-store key, so they must
    not contain path separators or be a bare "." or "..". Dots inside a name
    ("notes..v2.pdf") are fine.

    Raises:
        ValueError: If empty, too long, or unsafe.

    Example:
        >>> validate_file_name("agenda.pdf")
        'agenda.pdf'
        >>> validate_file_name("../secrets.txt")
        ValueError: File name must not contain path separators or be '..'
    """
    stripped = validate_required_text(v, max_length=FILE_NAME_MAX_LENGTH)
    if _UNSAFE_FILE_NAME.search(stripped) or stripped in (".", ".."):
        raise ValueError("File name must not contain path separators or be '..'")
    return stripped


def validate_fields(
    checks: Iterable[tuple[str, Callable[[Any], Any], Any]],
) -> Result[dict[str, Any], ValidationError]:
    """Run validators in order and stop at the first failure.

    Args:
        checks: ``(field_name, validator, raw_value)`` triples.

    Returns:
        Success(dict of field_name -> normalized value) if all pass.
        Failure(ValidationError) naming the first offending field.

    Example:
        >>> result = validate_fields([
        ...     ("title", validate_event_title, "Tech Conference"),
        ...     ("max_attendees", validate_max_attendees, 0),
        ... ])
        >>> result.error.field
        'max_attendees'
    """
    cleaned: dict[str, Any] = {}
    for field_name, validator, raw in checks:
        try:
            cleaned[field_name] = validator(raw)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=_FIELD_ERROR_CODES.get(field_name, ErrorCode.VALIDATION_FAILED),
                    message=f"{field_name}: {e}",
                    field=field_name,
                )
            )
    return Success(value=cleaned)
