"""
Logging configuration.

Sets up structured logging for the analyzer: readable console output
for development and JSON lines for production.
"""

import logging
import logging.config
import sys
from typing import Any, Dict, Optional

from pwstrength.core.config import Settings, settings as default_settings


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """
    Build a dictConfig mapping for the given settings.

    Args:
        settings: Application settings

    Returns:
        Configuration dict accepted by logging.config.dictConfig
    """
    package_level = "DEBUG" if settings.debug else settings.log_level

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": (
                    "[{asctime}] {levelname:8} {name:25} {funcName:15} "
                    "{lineno:4d} | {message}"
                ),
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": (
                    "%(asctime)s %(name)s %(levelname)s "
                    "%(funcName)s %(lineno)d %(message)s"
                ),
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "json" if settings.is_production else "detailed",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "pwstrength": {
                "level": package_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure logging for the package.

    Args:
        settings: Settings to use (defaults to the environment settings)
    """
    settings = settings or default_settings
    logging.config.dictConfig(build_logging_config(settings))

    logger = logging.getLogger("pwstrength")
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(
        "Default policy: repetition <= "
        f"{settings.max_allowed_repetition_count}, sequence <= "
        f"{settings.max_allowed_sequence_length}"
    )
