"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example config file shipped with the project."""
    return Path(__file__).parent.parent / "login.example.conf"


@pytest.fixture
def config_file(tmp_path: Path):
    """Factory writing config text into a temporary file."""

    def _write(text: str, name: str = "login.conf") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers and levels installed by setup_logging() during a test."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name == "loginsrv_config" or name.startswith("loginsrv_config."):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
