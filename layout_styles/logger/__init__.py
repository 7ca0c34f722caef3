"""
Logger module for layout_styles

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from layout_styles.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Registry initialised", styles=11)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
