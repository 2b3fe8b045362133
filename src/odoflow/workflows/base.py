"""Shared plumbing for the workflow operation classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from odoflow.constants import CONFIRM_CANCEL, CONFIRM_YES
from odoflow.logging import get_logger, workflow_context
from odoflow.odo.commands import Commands
from odoflow.odo.models import ResourceKind, ResourceRef
from odoflow.odo.protocols import (
    CommandExecutor,
    ListingProvider,
    Prompter,
    RepositoryCloner,
)
from odoflow.workflows.outcome import Cancelled, Outcome, Success, wrap_failure
from odoflow.workflows.resolver import ContextResolver
from odoflow.workflows.steps import Step, StepChain, WorkflowAnswer

__all__ = ["WorkflowBase", "WorkflowServices"]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class WorkflowServices:
    """Collaborators a workflow invocation runs against.

    Attributes:
        listings: Live resource listings.
        executor: Runs assembled commands.
        prompter: Interactive prompts.
        commands: Command factory.
        cloner: Clones git repositories after a git-based component is created.
        push_after_create: Push a workspace component right after creating it.
    """

    listings: ListingProvider
    executor: CommandExecutor
    prompter: Prompter
    commands: Commands
    cloner: RepositoryCloner
    push_after_create: bool = True


class WorkflowBase:
    """Base for the per-resource workflow classes.

    Subclasses implement each public operation as a private ``_<op>``
    coroutine returning an ``Outcome`` and expose it through ``_guarded``,
    which is the one place failures are normalized.
    """

    #: Kind used in workflow names for logging, e.g. "project"
    resource: str = ""

    def __init__(self, services: WorkflowServices) -> None:
        self.services = services
        self.resolver = ContextResolver(services.listings, services.prompter)

    @property
    def commands(self) -> Commands:
        return self.services.commands

    async def _guarded(
        self,
        action: str,
        operation: str,
        body: Callable[[], Awaitable[Outcome]],
    ) -> Outcome:
        """Run ``body`` and turn any exception into a ``Failed`` outcome.

        Args:
            action: Short action name for log context, e.g. "create".
            operation: Operation name used in the failure message.
            body: The workflow body.
        """
        with workflow_context(f"{self.resource}.{action}"):
            try:
                outcome = await body()
            except Exception as e:
                logger.warning("workflow_failed", operation=operation, error=str(e))
                return wrap_failure(operation, e)
            if isinstance(outcome, Success):
                logger.info("workflow_succeeded", operation=operation)
            return outcome

    def _chain(self, action: str) -> StepChain:
        return StepChain(f"{self.resource}.{action}")

    def resolve_step(
        self,
        name: str,
        partial: ResourceRef | None,
        required: ResourceKind,
        placeholders: Mapping[ResourceKind, str] | None = None,
    ) -> Step:
        """Step that resolves a reference through the ContextResolver."""

        async def resolve(_: WorkflowAnswer) -> ResourceRef | None:
            ref = await self.resolver.resolve(partial, required, placeholders)
            return None if isinstance(ref, Cancelled) else ref

        return Step(name, resolve)

    def confirm_step(self, name: str, message: Callable[[WorkflowAnswer], str]) -> Step:
        """Step asking a Yes/Cancel question; anything but "Yes" cancels."""

        async def confirm(answer: WorkflowAnswer) -> str | None:
            choice = await self.services.prompter.confirm(
                message(answer), (CONFIRM_YES, CONFIRM_CANCEL)
            )
            return choice if choice == CONFIRM_YES else None

        return Step(name, confirm)
