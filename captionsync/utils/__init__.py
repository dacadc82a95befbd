"""Utils module exports."""

from captionsync.utils.constants import (
    CAPTION_EXTENSIONS,
    CAPTION_SEPARATOR,
    LANG_UNKNOWN,
)
from captionsync.utils.exceptions import (
    CaptionSyncError,
    InvalidCaptionSetError,
)
from captionsync.utils.language_codes import is_valid_language
from captionsync.utils.logging_config import get_logger, setup_logging
from captionsync.utils.path_utils import is_caption_accessible

__all__ = [
    # Constants
    "CAPTION_SEPARATOR",
    "CAPTION_EXTENSIONS",
    "LANG_UNKNOWN",
    # Exceptions
    "CaptionSyncError",
    "InvalidCaptionSetError",
    # Language
    "is_valid_language",
    # Filesystem
    "is_caption_accessible",
    # Logging
    "get_logger",
    "setup_logging",
]
