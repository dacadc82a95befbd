"""Path utilities for caption file probing."""

import os

from captionsync.utils.logging_config import get_logger

logger = get_logger(__name__)


def split_extension(path: str) -> tuple[str, str]:
    """Split a path into its stem and extension.

    The extension starts at the last dot of the final path component, leading
    dot included, so '.en' is an extension and '/media/.mkv' has an empty stem.

    Args:
        path: File path

    Returns:
        Tuple of (path without extension, extension including the dot)
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1:
        return path, ""
    cut = len(path) - len(name) + dot
    return path[:cut], path[cut:]


def is_caption_accessible(file_path: str) -> bool:
    """Check that a caption file exists and can be read.

    Any error raised while probing (permission denied, broken mount) is
    reported as absent.

    Args:
        file_path: Path to check

    Returns:
        True if the file exists and is readable
    """
    try:
        return os.path.exists(file_path) and os.access(file_path, os.R_OK)
    except (OSError, ValueError) as e:
        logger.debug(f"Probe failed for {file_path}: {e}")
        return False


def check_file_permissions(file_path: str) -> dict[str, bool]:
    """Check file permissions for diagnostics.

    Args:
        file_path: Path to check

    Returns:
        Dictionary with exists, readable, is_file status
    """
    result = {
        "exists": False,
        "readable": False,
        "is_file": False,
    }

    try:
        result["exists"] = os.path.exists(file_path)

        if result["exists"]:
            result["is_file"] = os.path.isfile(file_path)
            result["readable"] = os.access(file_path, os.R_OK)

    except (OSError, ValueError):
        pass

    return result
