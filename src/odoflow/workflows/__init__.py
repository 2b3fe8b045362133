"""Interactive odo workflows.

Public entry points return an ``Outcome``; ``unwrap`` converts it to the
message / None / raised ``WorkflowFailedError`` convention.
"""

from __future__ import annotations

from odoflow.workflows.application import ApplicationWorkflows
from odoflow.workflows.base import WorkflowServices
from odoflow.workflows.component import ComponentWorkflows
from odoflow.workflows.outcome import (
    CANCELLED,
    Cancelled,
    Failed,
    Outcome,
    Success,
    unwrap,
    wrap_failure,
)
from odoflow.workflows.project import ProjectWorkflows
from odoflow.workflows.resolver import ContextResolver
from odoflow.workflows.service import ServiceWorkflows
from odoflow.workflows.sources import SourceBranch, select_branch
from odoflow.workflows.steps import Step, StepChain, WorkflowAnswer

__all__ = [
    "ApplicationWorkflows",
    "CANCELLED",
    "Cancelled",
    "ComponentWorkflows",
    "ContextResolver",
    "Failed",
    "Outcome",
    "ProjectWorkflows",
    "ServiceWorkflows",
    "SourceBranch",
    "Step",
    "StepChain",
    "Success",
    "WorkflowAnswer",
    "WorkflowServices",
    "select_branch",
    "unwrap",
    "wrap_failure",
]
