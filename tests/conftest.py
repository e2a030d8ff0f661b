"""Shared pytest fixtures for catbash tests.

Every test runs in its own temporary working directory with the
CATBASH_* environment variables cleared, so relative paths such as the
default temp.txt never leak between tests.
"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run each test inside tmp_path with a clean catbash environment."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("CATBASH_"):
            monkeypatch.delenv(key)
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_catbash_logger():
    """Drop handlers installed by configure_logging()."""
    yield
    package_logger = logging.getLogger("catbash")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_script(tmp_path):
    """Factory fixture that writes a script file and returns its path."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write
