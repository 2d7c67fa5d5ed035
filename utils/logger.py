"""Logging configuration for prompt-generator."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

# Global flag to track if logging has been initialized
_logging_initialized = False
_log_file_path = None


def setup_logger(log_level: str, log_dir: Optional[str] = None) -> str:
    """Send log records of every module to a timestamped file.

    Called once by the CLI when --verbose is given; later calls are no-ops.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (default: ~/.prompt-generator/logs/)

    Returns:
        Path of the log file
    """
    global _logging_initialized, _log_file_path

    if _logging_initialized:
        return _log_file_path

    level = getattr(logging, log_level.upper(), logging.DEBUG)
    logging.root.setLevel(level)

    log_path = Path(log_dir or get_log_dir())
    log_path.mkdir(exist_ok=True, parents=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_path / f"prompt_generator_{timestamp}.log"
    _log_file_path = str(log_file)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logging.root.addHandler(file_handler)

    _logging_initialized = True
    logging.info(f"Logging initialized. Level: {log_level}, File: {_log_file_path}")
    return _log_file_path


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Debug and info records are dropped until setup_logger() has been called.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Get the path to the current log file, or None if file logging is off."""
    return _log_file_path
