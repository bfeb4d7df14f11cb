"""Stdlib logging for uvicorn and library loggers.

Application events go through logfire; this only decides how much of the
framework chatter reaches stdout.
"""

import logging
import sys

from surmise.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

QUIET_LOGGERS = ("multipart", "python_multipart", "watchfiles")


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout, force=True)

    # SQL echo only in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging at %s for %s", logging.getLevelName(level), settings.environment
    )
