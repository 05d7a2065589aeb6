import logging
import sys

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration
from uvicorn.logging import DefaultFormatter

from PyMoji.environment import LOG_LEVEL, SENTRY_DSN, SENTRY_TRACES


def setup_sentry(dsn: str | None, name: str, version: str) -> bool:
    """
    Initialize sentry connection.

    :param dsn: the sentry data source name, falls back to the SENTRY_DSN environment variable
    :param name: the name of the application embedding this library
    :param version: the version of the application
    :return: whether sentry has been initialized
    """

    if not (dsn := dsn or SENTRY_DSN):
        return False

    sentry_sdk.init(
        dsn=dsn,
        attach_stacktrace=True,
        shutdown_timeout=5,
        traces_sample_rate=1.0 if SENTRY_TRACES else 0.0,
        integrations=[
            LoggingIntegration(
                level=logging.DEBUG,
                event_level=logging.WARNING,
            ),
        ],
        release=f"{name}@{version}",
    )
    return True


logging_formatter = DefaultFormatter("[%(asctime)s] %(levelprefix)s %(message)s")

logging_handler = logging.StreamHandler(sys.stdout)
logging_handler.setFormatter(logging_formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a given name."""

    logger: logging.Logger = logging.getLogger(name)
    if logging_handler not in logger.handlers:
        logger.addHandler(logging_handler)
    logger.setLevel(LOG_LEVEL.upper())

    return logger
