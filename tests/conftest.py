"""Shared pytest fixtures for gopkgs tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from gopkgs.config import Config, Package


@pytest.fixture
def acme_config() -> Config:
    """Configuration with one package per repo reference shape."""
    return Config(
        host="example.com",
        default_user="acme",
        packages=(
            Package(name="foo", repo=""),
            Package(name="bar", repo="myrepo"),
            Package(name="baz", repo="other/baz2"),
            Package(name="lab", repo="https://gitlab.com/acme/lab"),
        ),
    )


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after tests that configure logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg_logger = logging.getLogger("gopkgs")
    pkg_level = pkg_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg_logger.setLevel(pkg_level)
