"""
Centralized logging configuration for clean-scaffold.
"""

import logging
import os
import sys


def setup_logging(log_level: str | None = None) -> None:
    """
    Configure logging for the command line tool.

    Args:
        log_level: Logging level (INFO, WARNING, ERROR, DEBUG)
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "WARNING")

    # Clear any existing handlers
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )

    level = log_level.upper()
    unknown = level not in logging.getLevelNamesMapping()
    root.setLevel(logging.WARNING if unknown else level)
    root.addHandler(handler)

    if unknown:
        logging.getLogger(__name__).warning("Unknown log level %r, using WARNING", log_level)
