"""odo integration: resource model, command assembly and execution."""

from __future__ import annotations

from odoflow.odo.client import OdoClient
from odoflow.odo.commands import Commands, assemble
from odoflow.odo.models import CommandSpec, ResourceKind, ResourceRef, SourceKind

__all__ = [
    "CommandSpec",
    "Commands",
    "OdoClient",
    "ResourceKind",
    "ResourceRef",
    "SourceKind",
    "assemble",
]
