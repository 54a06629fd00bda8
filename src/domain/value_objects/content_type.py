"""Content type derivation for downloaded materials."""

from pathlib import PurePosixPath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MATERIALS_CONTENT_TYPES: dict[str, str] = {
    ".pdf": "application/pdf",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def content_type_for(file_name: str) -> str:
    """Derive a MIME type from a file extension (case-insensitive).

    Example:
        >>> content_type_for("Agenda.PDF")
        'application/pdf'
        >>> content_type_for("notes.txt")
        'application/octet-stream'
    """
    suffix = PurePosixPath(file_name).suffix.lower()
    return MATERIALS_CONTENT_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)
