import sys
from typing import Optional, TextIO

from loguru import logger

from snapstate.config.settings import load_settings


def configure_logging(level: Optional[str] = None, sink: Optional[TextIO] = None) -> None:
    """
    Route snapstate's loguru records to `sink` as JSON lines.

    `level` falls back to SNAPSTATE_LOG_LEVEL; `sink` to the current sys.stdout.
    Values attached with `logger.bind(...)` land under record.extra.
    """
    logger.remove()

    log_level = (level or load_settings().log_level).upper()

    logger.add(
        sink or sys.stdout,
        level=log_level,
        serialize=True,  # JSON output
        backtrace=False,
        diagnose=False,
    )
    logger.enable("snapstate")
