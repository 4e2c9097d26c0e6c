"""Logging configuration for the Zoo Enclosure Planner."""

import logging
import sys

from config.defaults import DEFAULT_LOG_LEVEL

_HANDLER_NAME = "zoo-planner"


def setup_logging(level: str = DEFAULT_LOG_LEVEL, format_json: bool = False) -> None:
    """
    Configure logging for the application.

    Safe to call more than once (Streamlit re-runs the script on every
    interaction): the handler is installed once and only the level changes.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to output logs in JSON format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.root.setLevel(log_level)

    if any(h.get_name() == _HANDLER_NAME for h in logging.root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if format_json:
        formatter = logging.Formatter(
            '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)
    logging.root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (usually `__name__`)."""
    return logging.getLogger(name)
