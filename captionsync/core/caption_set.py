"""Caption set encoding.

A caption set is the ordered list of language codes that have a caption file
for a media item. It is persisted as a single string joined by
CAPTION_SEPARATOR, e.g. ``"en|fr|00"``.
"""

from collections.abc import Iterable

from captionsync.utils.constants import CAPTION_SEPARATOR
from captionsync.utils.exceptions import InvalidCaptionSetError


def is_lang_in_captions(lang: str, captions: str) -> bool:
    """Check if a language is present in a persisted caption set.

    Matching is exact and case-sensitive.
    """
    return lang in captions.split(CAPTION_SEPARATOR)


def add_lang_to_captions(lang: str, captions: str) -> str:
    """Return a new caption set with lang appended.

    No duplicate check is done; call is_lang_in_captions first if needed.

    Args:
        lang: Language code to add; empty leaves the set unchanged
        captions: Persisted caption set

    Returns:
        Updated caption set
    """
    if not lang:
        return captions
    if captions:
        return captions + CAPTION_SEPARATOR + lang
    return lang


def merge_caption_language(lang: str, captions: str) -> str:
    """Add lang to the caption set unless it is already present."""
    if is_lang_in_captions(lang, captions):
        return captions
    return add_lang_to_captions(lang, captions)


def parse_captions(captions: str) -> list[str]:
    """Parse a persisted caption set into its ordered language codes.

    Empty entries are skipped, so an empty string yields an empty list.
    """
    if not captions:
        return []
    return [lang for lang in captions.split(CAPTION_SEPARATOR) if lang]


def format_captions(languages: Iterable[str]) -> str:
    """Serialize language codes into a persisted caption set.

    Args:
        languages: Ordered language codes

    Returns:
        Caption set string

    Raises:
        InvalidCaptionSetError: If a code contains the separator
    """
    captions = ""
    for lang in languages:
        if CAPTION_SEPARATOR in lang:
            raise InvalidCaptionSetError(
                f"Language code {lang!r} contains separator {CAPTION_SEPARATOR!r}",
                language=lang,
            )
        captions = add_lang_to_captions(lang, captions)
    return captions
