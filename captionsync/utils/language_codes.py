"""Language code utilities using ISO 639 standards.

Validation is delegated to the iso639-lang library, which accepts ISO 639-1,
639-2/B, 639-2/T, 639-3 and 639-5 codes.
"""

from iso639 import Lang
from iso639.exceptions import InvalidLanguageValue

from captionsync.utils.constants import LANG_UNKNOWN


def is_valid_language(code: str) -> bool:
    """Check if a language code is valid.

    Args:
        code: Language code to validate

    Returns:
        True if the code is a valid language identifier
    """
    code = code.lower().strip()
    if not code or code == LANG_UNKNOWN:
        return False

    try:
        Lang(code)
        return True
    except InvalidLanguageValue:
        return False


def get_supported_languages() -> list[str]:
    """Get list of supported ISO 639-1 language codes.

    Returns all languages from the iso639 library that have 2-letter codes.
    """
    from iso639 import iter_langs

    return sorted([lang.pt1 for lang in iter_langs() if lang.pt1])


def get_language_name(code: str) -> str | None:
    """Get the English name of a language code.

    Args:
        code: Language code (e.g., 'en', 'fra')

    Returns:
        Language name or None if the code is not recognised
    """
    if not is_valid_language(code):
        return None
    return Lang(code.lower().strip()).name
