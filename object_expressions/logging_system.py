"""
Logging System for Expression Parsing

This module provides a centralized logger with verbosity levels so parsers can
report what they do without cluttering the terminal. Handlers are only
installed by an explicit configure_logging call; until then records propagate
to whatever the application has set up.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime

LOGGER_NAME = 'object_expressions'


class LogLevel(Enum):
    """Enumeration of logging levels for expression handling"""
    SILENT = 0      # Nothing is emitted
    MINIMAL = 1     # Default: parsers stay quiet
    VERBOSE = 2     # Parser debug details


class ExpressionLogger:
    """
    Level-gated wrapper around the package logger
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 install_handlers: bool = False):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path
        self.logger = logging.getLogger(LOGGER_NAME)

        if install_handlers:
            self._install_handlers()

    def _install_handlers(self):
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.log_to_file:
            if self.log_file_path is None:
                self.log_file_path = f"object_expressions_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(self.log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance, leaving handlers untouched"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    get_logger().log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system, replacing the package logger's handlers"""
    global _global_logger
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        install_handlers=True
    )
    return _global_logger


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
