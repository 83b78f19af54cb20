from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every console line is ``LABEL message``. The labels are
INFO|WARN|ERROR|DEBUG|SUMMARY.

Per-row progress lines carry a ``color`` attribute (``green`` / ``red``).
LabeledFormatter wraps those lines in ANSI escapes when color is enabled
(TTY by default, or forced from the CLI).
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "set_color",
    "reset_logging",
    "LabeledFormatter",
    "SUMMARY_LEVEL",
    "LOGGER_NAME",
]

LOGGER_NAME = "rbac_role_validator"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

ANSI_COLORS = {
    "green": "\033[32m",
    "red": "\033[31m",
}
ANSI_RESET = "\033[0m"

# Global logger instance
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter producing ``LABEL message`` lines, optionally colored.

    Records logged with ``extra={"color": "green"}`` (or ``"red"``) get
    wrapped in the matching ANSI escape when ``use_color`` is set.
    """

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def __init__(self, use_color: bool = False) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        line = f"{level_label} {record.getMessage()}"
        color = getattr(record, "color", None)
        if self.use_color and color in ANSI_COLORS:
            return f"{ANSI_COLORS[color]}{line}{ANSI_RESET}"
        return line


def setup_logging(color: bool | None = None) -> logging.Logger:
    """Setup the application logger (stdout, labeled prefixes).

    Args:
        color: Force ANSI color on/off. None means "only when stdout is a TTY".

    Returns:
        Configured logger instance. Subsequent calls return the same logger.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    if color is None:
        color = sys.stdout.isatty()
    handler.setFormatter(LabeledFormatter(use_color=color))
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def set_color(enabled: bool) -> None:
    """Toggle ANSI color on every labeled handler of the app logger."""
    for handler in get_logger().handlers:
        if isinstance(handler.formatter, LabeledFormatter):
            handler.formatter.use_color = enabled


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
