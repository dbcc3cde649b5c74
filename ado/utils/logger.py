"""
Logging setup for Ado.

Provides colored console logging with an optional plain-text log file.
Console output goes to stderr so it never mixes with the tool's own
status messages on stdout.
"""

import logging
from pathlib import Path
from typing import Optional
from enum import Enum
import colorlog


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: Optional[str], default: "LogLevel" = None) -> "LogLevel":
        """
        Resolve a level from its (case-insensitive) name.

        Args:
            name: Level name such as "debug" or "INFO"
            default: Level returned for empty or unknown names

        Returns:
            Matching LogLevel, or the default (WARNING if none given)
        """
        if default is None:
            default = cls.WARNING
        if not name:
            return default
        return cls.__members__.get(name.strip().upper(), default)


def setup_logger(
    name: str = "ado",
    level: LogLevel = LogLevel.WARNING,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Set up a colored console logger.

    Args:
        name: Logger name
        level: Minimum log level
        log_file: Optional file path for file logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.value)

    # Remove existing handlers
    logger.handlers.clear()

    # Console handler with colors
    console_handler = colorlog.StreamHandler()
    console_handler.setLevel(level.value)

    console_formatter = colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
        datefmt=None,
        reset=True,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        },
        secondary_log_colors={},
        style='%'
    )

    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level.value)

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "ado") -> logging.Logger:
    """
    Get or create a logger instance.

    Module loggers are created under the "ado" namespace so a single
    setup_logger() call configures all of them.
    """
    return logging.getLogger(name)
