"""
Logging for sparse_polynomial.

Every module logs through a child of the ``sparse_polynomial`` logger, and
only at DEBUG (rejected members, cancelled terms, arithmetic result sizes).
Nothing is configured on import; ``setup_logging`` attaches a handler to the
package logger only, leaving the application's root logger alone.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "sparse_polynomial"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Send the package's log records to a stream.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses DEFAULT_FORMAT if None)
        stream: Destination (stdout if None)

    Returns:
        The configured ``sparse_polynomial`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, "_sparse_polynomial", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler._sparse_polynomial = True
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; ``name`` should sit under ``sparse_polynomial``."""
    return logging.getLogger(name)
