"""Subprocess runners for odoflow."""

from __future__ import annotations

from odoflow.runners.command import CommandRunner
from odoflow.runners.models import CommandResult, LaunchedCommand

__all__ = ["CommandResult", "CommandRunner", "LaunchedCommand"]
