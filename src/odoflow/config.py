from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from odoflow.constants import DEFAULT_COMMAND_TIMEOUT, DEFAULT_ODO_BINARY
from odoflow.exceptions import ConfigError
from odoflow.logging import get_logger

__all__ = [
    "OdoConfig",
    "OdoflowConfig",
    "WorkflowConfig",
    "get_user_config_path",
    "load_config",
]

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = "odoflow.yaml"


class OdoConfig(BaseModel):
    """How odo is invoked.

    Attributes:
        binary: Command that runs odo; may include leading arguments.
        timeout_seconds: Limit for commands that run to completion.
        cwd: Working directory for odo commands (default: current directory).
    """

    binary: str = DEFAULT_ODO_BINARY
    timeout_seconds: float = Field(default=DEFAULT_COMMAND_TIMEOUT, gt=0, le=3600)
    cwd: Path | None = None

    @field_validator("binary")
    @classmethod
    def check_binary_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("odo binary must not be empty")
        return v

    @field_validator("cwd")
    @classmethod
    def check_cwd_exists(cls, v: Path | None) -> Path | None:
        """Warn if cwd doesn't exist; the runner fails on first use."""
        if v is not None and not v.is_dir():
            logger.warning(f"Configured odo cwd does not exist: {v}")
        return v


class WorkflowConfig(BaseModel):
    """Behaviour of the interactive workflows.

    Attributes:
        push_after_create: Push workspace components right after creation.
        clone_directory: Where git repositories are cloned (default: cwd).
        clone_retries: Extra attempts for a clone that fails on the network.
    """

    push_after_create: bool = True
    clone_directory: Path | None = None
    clone_retries: int = Field(default=0, ge=0, le=5)


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that reads one YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e
            if loaded is None:
                logger.warning(f"Config file {yaml_file} is empty, using defaults.")
            elif isinstance(loaded, dict):
                self._config_data = loaded
            else:
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    value=loaded,
                )

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


# Set by load_config() so settings_customise_sources can see an explicit path.
_project_config_override: Path | None = None


class OdoflowConfig(BaseSettings):
    """Root configuration object."""

    model_config = SettingsConfigDict(
        env_prefix="ODOFLOW_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    odo: OdoConfig = Field(default_factory=OdoConfig)
    workflows: WorkflowConfig = Field(default_factory=WorkflowConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority, highest first: init kwargs, env, project YAML, user YAML."""
        project_config_path = (
            _project_config_override or Path.cwd() / PROJECT_CONFIG_NAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Path to ~/.config/odoflow/config.yaml."""
    return Path.home() / ".config" / "odoflow" / "config.yaml"


def load_config(config_path: Path | None = None) -> OdoflowConfig:
    """Load configuration: defaults < user YAML < project YAML < environment.

    Args:
        config_path: Project config file. Defaults to ./odoflow.yaml.

    Returns:
        The merged OdoflowConfig.

    Raises:
        ConfigError: If a file is unreadable or a value fails validation.
    """
    global _project_config_override

    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_NAME
    if not config_path.exists():
        logger.info("No project configuration found, using defaults.")

    _project_config_override = config_path
    try:
        return OdoflowConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _project_config_override = None
