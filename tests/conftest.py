from __future__ import annotations

import logging
import os
from collections.abc import Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from click.testing import CliRunner

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.workflows",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Send structlog output to stderr at WARNING so it stays out of stdout."""
    from odoflow.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture
def temp_dir(tmp_path: Path) -> Iterator[Path]:
    """Temporary directory; restores the cwd for tests that chdir into it."""
    original_cwd = os.getcwd()
    yield tmp_path
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove all ODOFLOW_ environment variables for the test."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("ODOFLOW_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def cli_runner() -> CliRunner:
    from click.testing import CliRunner

    return CliRunner()
