from __future__ import annotations

from typing import Any

from odoflow.exceptions.base import OdoflowError


class ConfigError(OdoflowError):
    """Configuration could not be loaded or failed validation.

    Attributes:
        message: Human-readable error message.
        field: Dotted path of the offending setting, if known.
        value: The rejected value, if known.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message)
