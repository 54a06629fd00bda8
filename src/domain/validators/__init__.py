"""Validators package exports."""

from src.domain.validators.functions import (
    validate_attendee_text,
    validate_email,
    validate_event_description,
    validate_event_location,
    validate_event_title,
    validate_fields,
    validate_file_name,
    validate_max_attendees,
    validate_required_text,
)

__all__ = [
    "validate_attendee_text",
    "validate_email",
    "validate_event_description",
    "validate_event_location",
    "validate_event_title",
    "validate_fields",
    "validate_file_name",
    "validate_max_attendees",
    "validate_required_text",
]
