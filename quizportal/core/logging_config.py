"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the application.
Credentials are never passed to log calls; user records are identified by id or email.
"""

import logging
import logging.config
import os
from typing import Any

# Get log level from environment or default to INFO
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Base configuration that can be extended for different environments
LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "quizportal": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": os.getenv("SQL_LOG_LEVEL", "WARNING"),  # INFO or DEBUG for SQL query logging
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def build_logging_config(level: str | None = None, detailed: bool = False) -> dict[str, Any]:
    """
    Build a logging configuration derived from the base dictionary.

    Args:
        level: Log level override for the console handler and the package logger
        detailed: Use the formatter that includes line numbers

    Returns:
        A dictConfig-compatible configuration dictionary
    """
    config = {
        **LOGGING_CONFIG_BASE,
        "handlers": {name: dict(handler) for name, handler in LOGGING_CONFIG_BASE["handlers"].items()},
        "loggers": {name: dict(cfg) for name, cfg in LOGGING_CONFIG_BASE["loggers"].items()},
    }
    if level:
        config["handlers"]["console"]["level"] = level.upper()
        config["loggers"]["quizportal"]["level"] = level.upper()
    if detailed:
        config["handlers"]["console"]["formatter"] = "detailed"
    return config


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary to use instead of the default
    """
    if config is None:
        config = build_logging_config()

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
