"""Logging setup for the CLI and library modules.

Console records are tagged with the area they come from ([RECONCILE],
[READER], ...) and go to stderr, leaving stdout for command output.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

RESET = "\033[0m"

# Area tags, most specific logger prefix first
AREA_TAGS: tuple[tuple[str, str], ...] = (
    ("captionsync.core.reconciler", "RECONCILE"),
    ("captionsync.core.caption_reader", "READER"),
    ("captionsync.config", "CONFIG"),
    ("captionsync.main", "CLI"),
)
DEFAULT_AREA = "CORE"

AREA_COLORS = {
    "CLI": "\033[36m",
    "RECONCILE": "\033[34m",
    "READER": "\033[32m",
    "CONFIG": "\033[90m",
    "CORE": "\033[37m",
}

# Levels that get an explicit marker after the area tag
LEVEL_MARKERS = (
    (logging.ERROR, "ERROR", "\033[31m"),
    (logging.WARNING, "WARN", "\033[33m"),
)


def get_area(logger_name: str) -> str:
    """Map a logger name to its area tag."""
    for prefix, area in AREA_TAGS:
        if logger_name == prefix or logger_name.startswith(prefix + "."):
            return area
    return DEFAULT_AREA


def _level_marker(levelno: int) -> Optional[tuple[str, str]]:
    for threshold, name, color in LEVEL_MARKERS:
        if levelno >= threshold:
            return name, color
    return None


class ConsoleFormatter(logging.Formatter):
    """One-line console format: ``[AREA] [LEVEL] message``."""

    def __init__(self, use_colors: bool = True):
        super().__init__("%(message)s")
        self.use_colors = use_colors and sys.stderr.isatty()

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def format(self, record: logging.LogRecord) -> str:
        area = get_area(record.name)
        parts = [self._paint(f"[{area}]", AREA_COLORS[area])]

        marker = _level_marker(record.levelno)
        if marker:
            parts.append(self._paint(f"[{marker[0]}]", marker[1]))

        parts.append(record.getMessage())
        line = " ".join(parts)

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JSONFormatter(logging.Formatter):
    """One JSON object per record, used for log files."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "area": get_area(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


_logging_initialized = False


def setup_logging(
    level: str = "INFO",
    use_colors: bool = True,
    json_format: bool = False,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """Configure the root logger once per process.

    Args:
        level: Logging level name
        use_colors: Color area tags when stderr is a terminal
        json_format: Emit JSON on the console instead of tagged lines
        log_file: Optional file that receives JSON records
        force: Reconfigure even if already initialized
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return

    numeric_level = getattr(logging, level.upper())

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(JSONFormatter() if json_format else ConsoleFormatter(use_colors))
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(numeric_level)
    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    # pysubs2 is chatty about format autodetection
    logging.getLogger("pysubs2").setLevel(logging.WARNING)

    _logging_initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
