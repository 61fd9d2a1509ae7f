"""Logging configuration for Budgetbook.

CLI commands report to the user through the logger, so the console handler
prints bare messages at the configured level. The same records also go to a
dated log file with timestamps.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional
from config import Config

LOGGER_NAME = "budgetbook"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(message)s"
CONSOLE_WARNING_FORMAT = "%(levelname)s - %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Prints INFO and below as-is, prefixes warnings and errors with the level."""

    def __init__(self):
        super().__init__(CONSOLE_FORMAT)
        self._warning_formatter = logging.Formatter(CONSOLE_WARNING_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            return self._warning_formatter.format(record)
        return super().format(record)


def get_log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Get the log file for a given day (budgetbook-YYYY-MM-DD.log)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Configure the budgetbook logger from config.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(get_log_file_path(config), encoding="utf-8")
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(ConsoleFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the budgetbook logger."""
    return logging.getLogger(LOGGER_NAME)
