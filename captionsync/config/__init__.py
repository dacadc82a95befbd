"""Config module exports."""

from captionsync.config.settings import (
    Settings,
    get_settings,
    reload_settings,
)
from captionsync.config.validators import (
    parse_extensions,
    validate_extension,
    validate_language_code,
    validate_log_level,
)

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    # Validators
    "validate_extension",
    "parse_extensions",
    "validate_language_code",
    "validate_log_level",
]
