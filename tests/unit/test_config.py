"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from odoflow import config as config_module
from odoflow.config import OdoflowConfig, load_config
from odoflow.exceptions import ConfigError


@pytest.fixture
def isolated(temp_dir: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no user config file."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr(
        config_module, "get_user_config_path", lambda: temp_dir / "missing.yaml"
    )
    return temp_dir


def test_defaults(isolated: Path) -> None:
    config = load_config()

    assert config.odo.binary == "odo"
    assert config.odo.timeout_seconds == 300.0
    assert config.workflows.push_after_create is True
    assert config.workflows.clone_retries == 0
    assert config.verbosity == "warning"


def test_project_yaml(isolated: Path) -> None:
    (isolated / "odoflow.yaml").write_text(
        "odo:\n  binary: /usr/local/bin/odo\nworkflows:\n  push_after_create: false\n"
    )

    config = load_config()

    assert config.odo.binary == "/usr/local/bin/odo"
    assert config.workflows.push_after_create is False


def test_explicit_path(isolated: Path) -> None:
    path = isolated / "custom.yaml"
    path.write_text("verbosity: debug\n")

    assert load_config(path).verbosity == "debug"


def test_environment_overrides_yaml(
    isolated: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (isolated / "odoflow.yaml").write_text("odo:\n  timeout_seconds: 10\n")
    monkeypatch.setenv("ODOFLOW_ODO__TIMEOUT_SECONDS", "42")

    assert load_config().odo.timeout_seconds == 42.0


def test_project_yaml_overrides_user_yaml(
    isolated: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    user = isolated / "user.yaml"
    user.write_text("verbosity: info\nodo:\n  binary: user-odo\n")
    monkeypatch.setattr(config_module, "get_user_config_path", lambda: user)
    (isolated / "odoflow.yaml").write_text("verbosity: error\n")

    config = load_config()

    assert config.verbosity == "error"
    assert config.odo.binary == "user-odo"


def test_empty_yaml_uses_defaults(isolated: Path) -> None:
    (isolated / "odoflow.yaml").write_text("")

    assert load_config().odo.binary == "odo"


def test_invalid_yaml(isolated: Path) -> None:
    (isolated / "odoflow.yaml").write_text("odo: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config()


def test_non_mapping_yaml(isolated: Path) -> None:
    (isolated / "odoflow.yaml").write_text("- a\n- b\n")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config()


def test_validation_error_names_field(isolated: Path) -> None:
    (isolated / "odoflow.yaml").write_text("odo:\n  timeout_seconds: -1\n")

    with pytest.raises(ConfigError) as exc_info:
        load_config()

    assert exc_info.value.field == "odo.timeout_seconds"
    assert exc_info.value.value == -1


def test_blank_binary_rejected(isolated: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_config_with_binary(isolated, "   ")

    assert exc_info.value.field == "odo.binary"


def load_config_with_binary(directory: Path, binary: str) -> OdoflowConfig:
    path = directory / "odoflow.yaml"
    path.write_text(f"odo:\n  binary: '{binary}'\n")
    return load_config(path)
