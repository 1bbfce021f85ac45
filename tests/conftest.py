"""Shared fixtures for the snippets test suite."""

from __future__ import annotations

from datetime import datetime

import pytest

from snippets.adapters.clock import FixedClock
from snippets.config import AppConfig, FilesConfig, reset_config
from snippets.container import Container, reset_container


@pytest.fixture(autouse=True)
def _fresh_config():
    """Make sure no test sees configuration or container state from another."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 1, 12, 30, 45))


@pytest.fixture
def files_config(tmp_path) -> FilesConfig:
    return FilesConfig(work_dir=tmp_path)


@pytest.fixture
def container(tmp_path) -> Container:
    config = AppConfig(files=FilesConfig(work_dir=tmp_path))
    return Container.create_default(config)
