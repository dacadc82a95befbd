"""Reusable configuration validators.

Provides validation functions that can be used across the application
for consistent configuration validation.
"""

import re

from captionsync.utils.constants import CAPTION_SEPARATOR, LANG_UNKNOWN
from captionsync.utils.language_codes import is_valid_language
from captionsync.utils.logging_config import get_logger

logger = get_logger(__name__)

_EXTENSION_RE = re.compile(r"^[a-z0-9]+$")


def validate_extension(ext: str, field_name: str = "extension") -> str:
    """Validate a single file extension.

    Args:
        ext: Extension with or without leading dot (e.g., 'srt', '.VTT')
        field_name: Name of the field for error messages

    Returns:
        Normalized (lowercase, no dot) extension

    Raises:
        ValueError: If extension is invalid
    """
    ext = ext.strip().lower().lstrip(".")

    if not ext:
        raise ValueError(f"{field_name} cannot be empty")

    if not _EXTENSION_RE.match(ext):
        raise ValueError(f"Invalid {field_name}: {ext}")

    return ext


def parse_extensions(value: str | None, field_name: str = "extensions") -> list[str]:
    """Parse comma-separated extensions, preserving priority order.

    Args:
        value: Comma-separated extensions string (e.g., 'vtt,srt')
        field_name: Name of the field for error messages

    Returns:
        Ordered list of unique normalized extensions

    Raises:
        ValueError: If the list is empty or an extension is invalid
    """
    if not value or not value.strip():
        raise ValueError(f"At least one entry is required in {field_name}")

    extensions = []
    for ext in value.split(","):
        if not ext.strip():
            continue
        ext = validate_extension(ext, field_name=field_name)
        if ext not in extensions:
            extensions.append(ext)

    if not extensions:
        raise ValueError(f"At least one entry is required in {field_name}")

    return extensions


def validate_language_code(code: str) -> str:
    """Validate a single language code for use in a caption set.

    LANG_UNKNOWN is accepted since it marks captions without a qualifier.

    Args:
        code: Language code to validate

    Returns:
        Stripped language code

    Raises:
        ValueError: If language code is invalid
    """
    code = code.strip()

    if not code:
        raise ValueError("Language code cannot be empty")

    if CAPTION_SEPARATOR in code:
        raise ValueError(f"Language code cannot contain '{CAPTION_SEPARATOR}': {code}")

    if code != LANG_UNKNOWN and not is_valid_language(code):
        raise ValueError(f"Invalid language code: {code}")

    return code


def validate_log_level(level: str) -> str:
    """Validate a log level.

    Args:
        level: Log level string

    Returns:
        Normalized (uppercase) log level

    Raises:
        ValueError: If log level is invalid
    """
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    level = level.upper().strip()

    if level not in valid_levels:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(sorted(valid_levels))}"
        )

    return level
