"""Fixtures wiring fakes into WorkflowServices."""

from __future__ import annotations

import pytest

from odoflow.odo.commands import Commands
from odoflow.odo.models import ResourceRef
from odoflow.workflows import WorkflowServices
from tests.fixtures.fakes import (
    FakeListings,
    RecordingCloner,
    RecordingExecutor,
    ScriptedPrompter,
)


@pytest.fixture
def listings() -> FakeListings:
    """One project with one application holding one component and one service."""
    return FakeListings(
        tree={
            "proj1": {
                "app1": {"components": ["comp1"], "services": ["svc1"]},
            },
        },
        catalog={"nodejs": ["8", "latest"], "python": ["3.6"]},
    )


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def cloner() -> RecordingCloner:
    return RecordingCloner()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """Empty prompter; tests replace its queues with their script."""
    return ScriptedPrompter()


@pytest.fixture
def services(
    listings: FakeListings,
    executor: RecordingExecutor,
    prompter: ScriptedPrompter,
    cloner: RecordingCloner,
) -> WorkflowServices:
    return WorkflowServices(
        listings=listings,
        executor=executor,
        prompter=prompter,
        commands=Commands("odo"),
        cloner=cloner,
    )


@pytest.fixture
def project_ref() -> ResourceRef:
    return ResourceRef.path("proj1")


@pytest.fixture
def app_ref() -> ResourceRef:
    return ResourceRef.path("proj1", "app1")


@pytest.fixture
def component_ref() -> ResourceRef:
    return ResourceRef.path("proj1", "app1", "comp1")


@pytest.fixture
def service_ref() -> ResourceRef:
    return ResourceRef.path("proj1", "app1", service="svc1")
