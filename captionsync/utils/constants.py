"""Application-wide constants for caption naming and storage."""

# Separator used when a caption set is persisted as a single string
CAPTION_SEPARATOR: str = "|"

# Language token for captions without a language qualifier in the filename.
# ISO 639 codes are 2 or 3 letters a-z, so "00" never parses as one.
LANG_UNKNOWN: str = "00"

# Supported caption extensions in priority order (vtt is natively playable)
CAPTION_EXTENSIONS: tuple[str, ...] = ("vtt", "srt")

# Media extensions tried when associating a caption with its media file
MEDIA_EXTENSIONS: tuple[str, ...] = ("mp4", "mkv", "avi", "mov", "m4v", "webm", "wmv")

# Minimum length of a ".xx" segment for it to be considered a language qualifier
MIN_QUALIFIER_LENGTH: int = 3

# Default encoding for loading caption files
DEFAULT_CAPTION_ENCODING: str = "utf-8"


# CLI exit codes
class ExitCode:
    """Standard process exit statuses."""

    OK = 0
    ERROR = 1
    CHANGED = 2
