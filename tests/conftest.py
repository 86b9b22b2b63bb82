"""Shared fixtures for bevy-patch tests."""

import logging

import pytest

from bevypatch.config import get_default_config


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they never outlive a CliRunner stream."""
    logger = logging.getLogger("bevypatch")
    yield
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def crates_tree(tmp_path):
    """A local umbrella checkout with two crates and a stray file."""
    crates = tmp_path / "crates"
    crates.mkdir()
    (crates / "foo").mkdir()
    (crates / "bar").mkdir()
    (crates / "readme.txt").write_text("not a crate")
    return tmp_path
