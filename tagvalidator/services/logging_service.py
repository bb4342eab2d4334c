# -*- coding: utf-8 -*-
"""Logging Service Implementation.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

This module implements logging for the Tag Validator on top of the standard
library. It supports RFC 5424 severity levels and service-wide log level
management across every logger handed out by the service.
"""

# Standard
import logging
from typing import Dict

# First-Party
from tagvalidator.config import settings
from tagvalidator.types import LogLevel

# RFC 5424 levels without a stdlib counterpart map to the nearest stdlib level
_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.EMERGENCY: logging.CRITICAL,
}


class LoggingService:
    """Tag Validator logging service.

    Implements logging with:
    - RFC 5424 severity levels
    - Log level management
    - Logger name tracking

    Examples:
        >>> service = LoggingService(LogLevel.WARNING)
        >>> service.get_logger("doctest").level == logging.WARNING
        True
        >>> service.set_level(LogLevel.ALERT)
        >>> service.get_logger("doctest").level == logging.CRITICAL
        True
    """

    def __init__(self, level: LogLevel | None = None):
        """Initialize logging service.

        Args:
            level: Initial log level; defaults to the configured ``log_level``.
        """
        self._level = level or LogLevel(settings.log_level.lower())
        self._loggers: Dict[str, logging.Logger] = {}

    def initialize(self) -> None:
        """Initialize logging service."""
        # Configure root logger
        logging.basicConfig(
            level=_STDLIB_LEVELS[self._level],
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        self._loggers[""] = logging.getLogger()
        logging.info("Logging service initialized")

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create logger instance.

        Args:
            name: Logger name

        Returns:
            Logger instance
        """
        if name not in self._loggers:
            logger = logging.getLogger(name)

            # Set level to match service level
            logger.setLevel(_STDLIB_LEVELS[self._level])

            self._loggers[name] = logger

        return self._loggers[name]

    def set_level(self, level: LogLevel) -> None:
        """Set minimum log level.

        This updates the level for all registered loggers.

        Args:
            level: New log level
        """
        self._level = level

        # Update all loggers
        log_level = _STDLIB_LEVELS[level]
        for logger in self._loggers.values():
            logger.setLevel(log_level)

        self.get_logger("tagvalidator.logging").info(f"Log level set to {level.value}")


logging_service = LoggingService()
