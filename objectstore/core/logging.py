"""Logging configuration."""

import logging

from objectstore.core.config import Settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging for processes using the adapter."""
    level = (settings or Settings()).LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
