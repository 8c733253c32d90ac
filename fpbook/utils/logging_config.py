"""
Logging configuration for fpbook.

The library logs through the standard ``logging`` module and stays silent
unless the host application configures handlers. ``setup_logging`` is a
convenience for scripts and tests that want fpbook's own console output.
"""

import logging
import logging.config
from typing import Any

from fpbook.config import Settings, get_settings

LIBRARY_LOGGER = "fpbook"


def _create_logging_config(settings: Settings) -> dict[str, Any]:
    """Build a dictConfig for the fpbook logger tree."""
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(levelname)s - %(name)s - %(message)s",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "null": {"class": "logging.NullHandler"},
        },
        "loggers": {
            LIBRARY_LOGGER: {
                "level": settings.log_level,
                "handlers": ["null"],
                "propagate": True,
            },
        },
    }

    if settings.log_to_console:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": "detailed" if settings.log_level == "DEBUG" else "console",
            "stream": "ext://sys.stderr",
        }
        config["loggers"][LIBRARY_LOGGER]["handlers"].append("console")

    return config


def setup_logging(settings: Settings | None = None) -> dict[str, Any]:
    """
    Apply logging configuration for the fpbook logger tree.

    Args:
        settings: Settings to apply, defaults to the active settings

    Returns:
        The dictConfig that was applied
    """
    config = _create_logging_config(settings or get_settings())
    logging.config.dictConfig(config)
    return config

