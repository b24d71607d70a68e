import logging

from itinerary_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
SECRET_PREFIX_LENGTH = 15


def setup_logging() -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("itinerary_api").setLevel(level)


def redact_secret(value: str) -> str:
    """Only a short prefix of a secret is ever written to the logs."""
    return value[:SECRET_PREFIX_LENGTH] + "..."
