"""Logging setup shared by all smplsim components."""

import logging
import os
from typing import Optional

PACKAGE_LOGGER = "smplsim"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Get a component logger under the ``smplsim`` namespace.

    The first call attaches a console handler to the package logger; component
    loggers propagate to it, so setting the level of ``smplsim`` once (e.g.
    from the CLI) controls every component. The initial level comes from the
    ``SMPLSIM_LOG_LEVEL`` environment variable and defaults to INFO.

    Args:
        name: Component name, e.g. the class name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a log file to add
        format_string: Log message format

    Returns:
        Configured logger
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(format_string))
        root.addHandler(console_handler)
        root.setLevel(_parse_level(os.environ.get("SMPLSIM_LOG_LEVEL", "INFO")))

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{PACKAGE_LOGGER}.{name}")

    if level is not None:
        logger.setLevel(_parse_level(level))

    if log_file:
        log_path = os.path.abspath(log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path
            for h in logger.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(logging.Formatter(format_string))
            logger.addHandler(file_handler)

    return logger
