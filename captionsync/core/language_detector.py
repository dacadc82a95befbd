"""Language detection from caption filenames.

Caption files follow the convention ``<media base>[.<lang>].<ext>``. The
language segment is optional, and media basenames may contain dot-separated
tokens of their own (release years, version numbers), so a segment only
counts as a language when it is long enough and the ISO 639 validator
accepts it.
"""

from typing import Optional

from captionsync.utils.constants import LANG_UNKNOWN, MIN_QUALIFIER_LENGTH
from captionsync.utils.language_codes import is_valid_language
from captionsync.utils.logging_config import get_logger
from captionsync.utils.path_utils import split_extension

logger = get_logger(__name__)


def split_language_qualifier(basename: str) -> tuple[str, Optional[str]]:
    """Split a trailing language qualifier off a caption basename.

    Args:
        basename: Caption path with its format extension already removed
            (e.g., 'movie.en')

    Returns:
        Tuple of (basename without qualifier, language code or None)
    """
    stem, qualifier = split_extension(basename)
    code = qualifier[1:]
    # Codes are bare letters; the validator alone would accept " en"
    if len(qualifier) >= MIN_QUALIFIER_LENGTH and code.isalpha() and is_valid_language(code):
        return stem, code
    return basename, None


def get_caption_language(caption_path: str) -> str:
    """Get the language code from a caption path.

    Args:
        caption_path: Path to a caption file (e.g., 'movie.en.srt')

    Returns:
        Language code, or LANG_UNKNOWN if the name carries no valid qualifier
    """
    basename, _ = split_extension(caption_path)
    _, lang = split_language_qualifier(basename)

    if lang is None:
        logger.debug(f"No language qualifier in {caption_path}")
        return LANG_UNKNOWN

    return lang
