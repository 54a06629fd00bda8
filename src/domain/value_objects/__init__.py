"""Domain value objects."""

from src.domain.value_objects.content_type import (
    DEFAULT_CONTENT_TYPE,
    MATERIALS_CONTENT_TYPES,
    content_type_for,
)
from src.domain.value_objects.outbound_message import (
    NOTIFICATION_CONTENT_TYPE,
    OutboundMessage,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "MATERIALS_CONTENT_TYPES",
    "NOTIFICATION_CONTENT_TYPE",
    "OutboundMessage",
    "content_type_for",
]
