from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from odoflow import config as config_module
from odoflow.workflows import WorkflowServices


@pytest.fixture
def isolated_cli(
    temp_dir: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Empty working directory and no user configuration."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr(
        config_module, "get_user_config_path", lambda: temp_dir / "missing.yaml"
    )
    return temp_dir


@pytest.fixture
def fake_client() -> MagicMock:
    client = MagicMock()
    client.wait_for_terminals = AsyncMock(return_value=[])
    return client


@pytest.fixture
def wired(
    isolated_cli: Path, fake_client: MagicMock, services: WorkflowServices
) -> Iterator[MagicMock]:
    """Route CLI commands to the in-memory workflow services."""
    with (
        patch("odoflow.cli.common.build_client", return_value=fake_client),
        patch("odoflow.cli.common.build_services", return_value=services),
    ):
        yield fake_client
