"""
Logging setup for ODT Composer.

Modules log through ``logging.getLogger(__name__)``; this module only wires
handlers for applications and scripts that build documents.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "odt_composer"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def _resolve_level(level: str) -> int:
    if not isinstance(level, str) or level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log level: {level!r}, expected one of {', '.join(_LEVELS)}")
    return _LEVELS[level.upper()]


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger that prints to stdout when nothing else is configured.

    Args:
        name: Logger name, usually a module path such as 'odt_composer.builder'

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def configure_logging(level: str = "INFO", format_string: Optional[str] = None,
                      log_file: Optional[Union[str, Path]] = None,
                      max_file_size: int = 5 * 1024 * 1024, backup_count: int = 3) -> logging.Logger:
    """
    Replace the root handlers with a console handler and an optional log file.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (case insensitive)
        format_string: Record format; LOG_FORMAT when omitted
        log_file: Path of a rotating log file
        max_file_size: Size in bytes after which the log file is rotated
        backup_count: Number of rotated files kept

    Returns:
        The root logger
    """
    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(format_string or LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        add_file_handler(root_logger, log_file, level, formatter, max_file_size, backup_count)

    logging.getLogger(PACKAGE_LOGGER).debug(f"Logging configured at {level.upper()}")
    return root_logger


def add_file_handler(logger: logging.Logger, file_path: Union[str, Path], level: str = "INFO",
                     formatter: Optional[logging.Formatter] = None,
                     max_file_size: int = 5 * 1024 * 1024, backup_count: int = 3) -> RotatingFileHandler:
    """
    Attach a rotating file handler to logger.

    Args:
        logger: Logger receiving the handler
        file_path: Log file path; missing directories are created
        level: Level of this handler
        formatter: Record formatter; LOG_FORMAT when omitted
        max_file_size: Size in bytes after which the file is rotated
        backup_count: Number of rotated files kept

    Returns:
        The new handler
    """
    if not isinstance(logger, logging.Logger):
        raise ValueError("Logger must be a logging.Logger instance")
    if not file_path:
        raise ValueError("File path must not be empty")

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_file_size, backupCount=backup_count, encoding='utf-8')
    handler.setLevel(_resolve_level(level))
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return handler
