"""Logging configuration using loguru.

Logs are stored in the logs/ folder and kept for 1 week.
Output goes to file only by default so library use stays quiet; the CLI
adds a stderr sink when asked to be verbose.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/termtheme/logs, overridable via TERMTHEME_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "termtheme" / "logs"
LOG_DIR = Path(os.environ.get("TERMTHEME_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "termtheme_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format=LOG_FORMAT,
    rotation="00:00",  # New file at midnight
    retention="1 week",
    compression="gz",
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_sink(sink: Any, level: str = "WARNING") -> int:
    """Add an extra sink, e.g. ``sys.stderr`` or a callable.

    Args:
        sink: A stream or a callable that accepts loguru message objects.
        level: Minimum log level for the sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    return logger.add(sink, level=level, format="{level: <8} | {message}")


def remove_sink(sink_id: int) -> None:
    """Remove a sink added with ``add_sink``.

    Args:
        sink_id: The sink ID returned by add_sink.
    """
    logger.remove(sink_id)
