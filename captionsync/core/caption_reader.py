"""Caption file loading.

Parsing is delegated to pysubs2; the loaded document is handed back as-is
and errors propagate unchanged to the caller.
"""

import pysubs2

from captionsync.utils.constants import DEFAULT_CAPTION_ENCODING
from captionsync.utils.logging_config import get_logger

logger = get_logger(__name__)


def read_captions(path: str, encoding: str = DEFAULT_CAPTION_ENCODING) -> pysubs2.SSAFile:
    """Read a caption file.

    Args:
        path: Path to a caption file (vtt, srt or any format pysubs2 knows)
        encoding: Text encoding of the file

    Returns:
        Parsed subtitle document

    Raises:
        FileNotFoundError: If the file does not exist
        pysubs2.exceptions.Pysubs2Error: If the format cannot be parsed
    """
    logger.debug(f"Loading captions from {path}")
    return pysubs2.load(path, encoding=encoding)
