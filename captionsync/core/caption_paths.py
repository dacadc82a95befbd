"""Caption path construction from media paths."""

from collections.abc import Sequence

from captionsync.core.language_detector import split_language_qualifier
from captionsync.utils.constants import CAPTION_EXTENSIONS, LANG_UNKNOWN
from captionsync.utils.path_utils import split_extension


def get_caption_path(path: str, lang: str, ext: str) -> str:
    """Build the path a caption for a media file would occupy.

    Args:
        path: Media file path (e.g., 'movie.mkv')
        lang: Language code; empty or LANG_UNKNOWN omits the qualifier
        ext: Caption extension without the dot (e.g., 'srt')

    Returns:
        Caption path (e.g., 'movie.en.srt' or 'movie.srt')
    """
    base, _ = split_extension(path)
    if not lang or lang == LANG_UNKNOWN:
        return f"{base}.{ext}"
    return f"{base}.{lang}.{ext}"


def generate_caption_candidates(
    caption_path: str, exts: Sequence[str] = CAPTION_EXTENSIONS
) -> list[str]:
    """Generate sibling paths of a caption under other extensions.

    A language qualifier, when present and valid, is stripped first so the
    candidates share the bare media basename. Used both for finding a caption
    in another format and for finding the media file a caption belongs to.

    Args:
        caption_path: Existing caption path (e.g., 'movie.en.srt')
        exts: Extensions to generate, in the order they should be tried

    Returns:
        One candidate path per extension, in the order of exts
    """
    basename, _ = split_extension(caption_path)
    basename, _ = split_language_qualifier(basename)
    return [f"{basename}.{ext}" for ext in exts]
