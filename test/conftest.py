"""Shared fixtures for prompt-generator tests."""

import logging
import os

import pytest

import utils.logger
from config import Config


@pytest.fixture(autouse=True)
def fixed_umask():
    """Pin the umask so permission assertions do not depend on the environment."""
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@pytest.fixture(autouse=True)
def runtime_dir(tmp_path_factory, monkeypatch):
    """Keep settings files and logs out of the real ~/.prompt-generator."""
    runtime = tmp_path_factory.mktemp("runtime") / ".prompt-generator"
    monkeypatch.setattr("utils.runtime.RUNTIME_DIR", str(runtime))
    return runtime


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Ignore whatever the developer's settings file says."""
    monkeypatch.setattr(Config, "OUTPUT_DIR", os.path.join("~", ".claude"))
    monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(Config, "THEME", "dark")


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow setup_logger() to run again and remove the handlers it adds."""
    monkeypatch.setattr(utils.logger, "_logging_initialized", False)
    monkeypatch.setattr(utils.logger, "_log_file_path", None)
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if isinstance(handler, logging.FileHandler) and handler not in handlers:
            logging.root.removeHandler(handler)
            handler.close()
    logging.root.setLevel(level)


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Point the user's home directory at a fresh temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
