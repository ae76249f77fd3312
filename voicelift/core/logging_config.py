"""Logging setup applied once at application start."""

import logging

from voicelift.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings (debug forces DEBUG)."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQL echo is controlled by the engine, keep the SQLAlchemy logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
