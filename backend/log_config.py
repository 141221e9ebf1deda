"""Logging setup for the service."""

import logging
import sys
from datetime import UTC, datetime

from backend.config import Settings

ROOT_LOGGER = "backend"
REQUEST_LOGGER = "backend.requests"


def configure_logging(settings: Settings) -> None:
    """Send ``backend.*`` log records to stdout as bare messages.

    ``LOG_LEVEL`` applies to everything except request lines, which are
    always written.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False

    logging.getLogger(REQUEST_LOGGER).setLevel(logging.INFO)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format a time as ISO-8601 UTC with milliseconds, e.g. ``2024-01-01T00:00:00.000Z``."""
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
