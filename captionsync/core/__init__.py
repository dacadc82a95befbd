"""Core module exports."""

from captionsync.core.caption_paths import generate_caption_candidates, get_caption_path
from captionsync.core.caption_reader import read_captions
from captionsync.core.caption_set import (
    add_lang_to_captions,
    format_captions,
    is_lang_in_captions,
    merge_caption_language,
    parse_captions,
)
from captionsync.core.language_detector import get_caption_language, split_language_qualifier
from captionsync.core.reconciler import (
    CaptionAssociation,
    ReconcileResult,
    associate_caption,
    clean_captions,
    reconcile_languages,
)

__all__ = [
    "get_caption_path",
    "generate_caption_candidates",
    "get_caption_language",
    "split_language_qualifier",
    "is_lang_in_captions",
    "add_lang_to_captions",
    "merge_caption_language",
    "parse_captions",
    "format_captions",
    "ReconcileResult",
    "CaptionAssociation",
    "reconcile_languages",
    "clean_captions",
    "associate_caption",
    "read_captions",
]
