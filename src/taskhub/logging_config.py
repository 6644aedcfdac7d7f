"""Logging setup for the service."""

import logging

from taskhub.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings.

    Debug mode forces DEBUG so permission decisions are visible.
    """
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("taskhub").setLevel(level)
    # psycopg_pool is chatty at DEBUG
    if level != "DEBUG":
        logging.getLogger("psycopg.pool").setLevel(logging.WARNING)
