"""Logging setup shared by the API server and the command line."""

import logging
from typing import Optional

from src.constants import LOG_FORMAT


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once.

    Handlers write to stderr, so log lines never end up in captured demo
    output.

    Args:
        level: Logging level name; defaults to the LOG_LEVEL setting
    """
    if level is None:
        from src.config import get_settings
        level = get_settings().log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
