"""Caption file association and reconciliation package."""

__version__ = "0.1.0"
__author__ = "captionsync"
__description__ = (
    "Naming-convention helpers that locate, detect and reconcile caption "
    "files stored next to media items"
)

from captionsync.core import (
    clean_captions,
    generate_caption_candidates,
    get_caption_language,
    get_caption_path,
    reconcile_languages,
)

__all__ = [
    "get_caption_path",
    "get_caption_language",
    "generate_caption_candidates",
    "reconcile_languages",
    "clean_captions",
]
