"""
Shared pytest fixtures.
"""
import logging

import pytest

from textbar import config


@pytest.fixture(autouse=True)
def isolated_config_path(tmp_path, monkeypatch):
    """Point the default config path at an empty temp dir so a real ~/.config never leaks in."""
    path = tmp_path / "textbar" / "config.toml"
    monkeypatch.setattr(config, "_CONFIG_PATH", path)
    return path


@pytest.fixture(autouse=True)
def reset_textbar_logger():
    """Prevent handlers installed by --verbose from leaking between tests."""
    logger = logging.getLogger("textbar")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
