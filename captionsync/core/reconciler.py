"""Caption set reconciliation against the filesystem."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from captionsync.core.caption_paths import generate_caption_candidates, get_caption_path
from captionsync.core.caption_set import format_captions, parse_captions
from captionsync.core.language_detector import get_caption_language
from captionsync.utils.constants import CAPTION_EXTENSIONS, MEDIA_EXTENSIONS
from captionsync.utils.logging_config import get_logger
from captionsync.utils.path_utils import is_caption_accessible

logger = get_logger(__name__)

ExistsProbe = Callable[[str], bool]


@dataclass
class ReconcileResult:
    """Outcome of reconciling a caption set.

    Attributes:
        languages: Surviving language codes, in input order
        changed: True if any candidate path was missing while probing. This
            is also set when a later extension matched, so it does not
            always mean something was dropped; see ``dropped``.
        dropped: Language codes with no backing file under any extension
    """

    languages: list[str] = field(default_factory=list)
    changed: bool = False
    dropped: list[str] = field(default_factory=list)

    @property
    def captions(self) -> str:
        """Surviving languages as a persisted caption set."""
        return format_captions(self.languages)


@dataclass
class CaptionAssociation:
    """A caption file matched to the media file it belongs to."""

    caption_path: str
    media_path: str
    language: str


def reconcile_languages(
    media_path: str,
    languages: Iterable[str],
    exts: Sequence[str] = CAPTION_EXTENSIONS,
    exists: ExistsProbe = is_caption_accessible,
) -> ReconcileResult:
    """Keep only the languages that have a caption file on disk.

    Each language is probed under every extension in priority order and kept
    on the first hit.

    Args:
        media_path: Path of the media file the captions belong to
        languages: Language codes believed to have captions
        exts: Caption extensions in priority order
        exists: Existence probe; errors must be reported as False

    Returns:
        ReconcileResult with surviving and dropped languages
    """
    result = ReconcileResult()

    for lang in languages:
        found = False
        for ext in exts:
            candidate = get_caption_path(media_path, lang, ext)
            if exists(candidate):
                result.languages.append(lang)
                found = True
                break
            logger.debug(f"Caption candidate missing: {candidate}")
            result.changed = True

        if not found:
            result.dropped.append(lang)

    if result.dropped:
        logger.info(
            f"Dropped stale caption languages for {media_path}: {', '.join(result.dropped)}"
        )

    return result


def clean_captions(
    media_path: str,
    captions: str,
    exts: Sequence[str] = CAPTION_EXTENSIONS,
    exists: ExistsProbe = is_caption_accessible,
) -> tuple[str, bool]:
    """Remove non existent or inaccessible languages from a persisted caption set.

    An empty caption set holds no languages, so nothing is probed and the
    result is ``("", False)``. Empty entries such as the middle of
    ``"en||fr"`` are skipped the same way and never probed as the unknown
    language.

    Args:
        media_path: Path of the media file the captions belong to
        captions: Persisted caption set (e.g., 'en|fr')
        exts: Caption extensions in priority order
        exists: Existence probe

    Returns:
        Tuple of (cleaned caption set, changed flag)
    """
    result = reconcile_languages(media_path, parse_captions(captions), exts, exists)
    return result.captions, result.changed


def associate_caption(
    caption_path: str,
    media_exts: Sequence[str] = MEDIA_EXTENSIONS,
    exists: ExistsProbe = is_caption_accessible,
) -> Optional[CaptionAssociation]:
    """Find the media file a newly discovered caption belongs to.

    Args:
        caption_path: Path of the caption file (e.g., 'movie.en.srt')
        media_exts: Media extensions to try, in order
        exists: Existence probe

    Returns:
        CaptionAssociation for the first existing media candidate, or None
    """
    for candidate in generate_caption_candidates(caption_path, media_exts):
        if exists(candidate):
            language = get_caption_language(caption_path)
            logger.debug(f"Matched caption {caption_path} to {candidate} ({language})")
            return CaptionAssociation(
                caption_path=caption_path,
                media_path=candidate,
                language=language,
            )

    logger.debug(f"No media file found for caption {caption_path}")
    return None
