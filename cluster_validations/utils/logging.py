# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Logging configuration for cluster-validations."""

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    """Log levels selectable from the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(
    level: VerbosityLevel | str, error_handler: errorhandler.ErrorHandler
) -> None:
    """Configure the root logger and reset the error handler.

    The error handler records whether anything was logged at ERROR or above;
    the CLI derives its exit code from it.

    Args:
        level: Verbosity level name (e.g. "DEBUG" or VerbosityLevel.DEBUG).
        error_handler: Handler to reset before a new run.
    """
    name = level.value if isinstance(level, VerbosityLevel) else str(level).upper()
    log_level = getattr(logging, name, logging.WARNING)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Avoid stacking handlers when called repeatedly (e.g. in tests)
    for handler in list(logger.handlers):
        if getattr(handler, "_cluster_validations", False):
            logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    stream_handler._cluster_validations = True  # type: ignore[attr-defined]
    logger.addHandler(stream_handler)

    error_handler.reset()
