"""Configuration management for prompt-generator."""

import os

from utils.runtime import get_config_file, get_runtime_dir

_DEFAULT_CONFIG = """\
# prompt-generator configuration

# Base directory generated skills, agents and commands are written under.
# A leading ~ is expanded to your home directory.
OUTPUT_DIR=~/.claude

# Log level used with --verbose (DEBUG, INFO, WARNING, ERROR, CRITICAL)
LOG_LEVEL=DEBUG

# Terminal colour theme: dark or light
THEME=dark
"""

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def ensure_config() -> str:
    """Create the config file with defaults if it does not exist yet.

    Returns:
        Path of the config file
    """
    config_file = get_config_file()
    if not os.path.exists(config_file):
        os.makedirs(get_runtime_dir(), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)
    return config_file


_cfg = _load_config(get_config_file())


class Config:
    """Settings for prompt-generator, read once from ~/.prompt-generator/config.

    Access values directly via Config.XXX. Command-line flags override them.
    """

    OUTPUT_DIR = _cfg.get("OUTPUT_DIR") or os.path.join("~", ".claude")

    # Only used when --verbose enables file logging
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "DEBUG").upper()

    THEME = _cfg.get("THEME", "dark").lower()

    @classmethod
    def validate(cls):
        """Validate configuration values.

        Raises:
            ValueError: If a value is not allowed
        """
        if not cls.OUTPUT_DIR:
            raise ValueError("OUTPUT_DIR must not be empty. Set it in ~/.prompt-generator/config.")
        if cls.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL: {cls.LOG_LEVEL}. Expected one of {', '.join(_LOG_LEVELS)}."
            )
        if cls.THEME not in ("dark", "light"):
            raise ValueError(f"Invalid THEME: {cls.THEME}. Expected 'dark' or 'light'.")
