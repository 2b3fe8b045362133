"""Interactive prompt implementations."""

from __future__ import annotations

from odoflow.prompts.console import ConsolePrompter

__all__ = ["ConsolePrompter"]
