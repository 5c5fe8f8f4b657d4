"""Package-wide logger for keyset.

Transforms log a debug line summarizing what they built and an error line
before rejecting an argument. The level comes from ``Settings.LOG_LEVEL``
(``KEYSET_LOG_LEVEL`` or ``LOG_LEVEL`` in the environment).
"""

import logging
import sys

from keyset.core.config import settings

__all__ = ["logger", "setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "keyset",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.

    Args:
        name: Logger name, ``"keyset"`` for the package logger
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; defaults to the
            configured ``LOG_LEVEL``
        format_string: Record format; defaults to ``DEFAULT_FORMAT``

    Returns:
        The logger. Later calls with the same name return it unchanged.
    """
    logger = logging.getLogger(name)

    if not any(_is_package_handler(handler) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper()))
        logger.propagate = False

    return logger


def _is_package_handler(handler: logging.Handler) -> bool:
    # Exact type: capture handlers from test runners subclass StreamHandler
    return type(handler) is logging.StreamHandler


logger = setup_logger()
