"""Utility modules for prompt-generator."""

from .logger import get_log_file_path, get_logger, setup_logger

# terminal_ui is NOT exported here: it reads config on import, and the
# generator package only needs logging. Import it as utils.terminal_ui.

__all__ = [
    "setup_logger",
    "get_logger",
    "get_log_file_path",
]
