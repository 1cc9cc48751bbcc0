"""Logging configuration."""

import logging

from objstore.core.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """Configure application logging.

    Without an explicit level, ``LOG_LEVEL`` from settings (environment or ``.env``) applies.
    """
    level = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
