"""Runtime directory management for prompt-generator.

Runtime data lives under ~/.prompt-generator/:
- config: Settings file (created by config.ensure_config())
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".prompt-generator")


def get_runtime_dir() -> str:
    """Get the runtime directory path.

    Returns:
        Path to ~/.prompt-generator directory
    """
    return RUNTIME_DIR


def get_config_file() -> str:
    """Get the configuration file path.

    Returns:
        Path to ~/.prompt-generator/config
    """
    return os.path.join(RUNTIME_DIR, "config")


def get_log_dir() -> str:
    return os.path.join(RUNTIME_DIR, "logs")


def ensure_runtime_dirs(create_logs: bool = False) -> None:
    """Ensure runtime directories exist.

    Args:
        create_logs: Whether to create the logs directory (for --verbose mode)
    """
    os.makedirs(RUNTIME_DIR, exist_ok=True)

    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
