"""
Logging Configuration Module

One stdout handler shared by the service, uvicorn and the redis client library.
"""

import logging.config
from typing import Any

from redis_test_drive.config import get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _logger(level: str) -> dict[str, Any]:
    return {"handlers": ["stdout"], "level": level, "propagate": False}


def build_logging_config(debug: bool) -> dict[str, Any]:
    """
    Build the dictConfig mapping

    Args:
        debug: Log the service at DEBUG instead of INFO

    Returns:
        dict: Mapping accepted by logging.config.dictConfig
    """
    service_level = "DEBUG" if debug else "INFO"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["stdout"], "level": service_level},
        "loggers": {
            "redis_test_drive": _logger(service_level),
            # Connection and retry chatter from redis-py only matters when debugging
            "redis": _logger("DEBUG" if debug else "WARNING"),
            "uvicorn": _logger("INFO"),
            "uvicorn.error": _logger("INFO"),
            "uvicorn.access": _logger("INFO"),
        },
    }


def setup_logging() -> None:
    """Apply the logging configuration for the current settings"""
    logging.config.dictConfig(build_logging_config(get_settings().DEBUG))
