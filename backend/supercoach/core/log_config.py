import logging

from supercoach.core.config import settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger (idempotent)."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel((level or settings.log_level).upper())
