"""Component workflows.

Creation is the most involved flow in odoflow::

    application -> source kind -> <branch steps> -> type -> version
        -> create command -> branch follow-up (push / clone)

Everything else resolves a component and runs a single command.
"""

from __future__ import annotations

from typing import assert_never

from odoflow.constants import CONFIRM_NO, CONFIRM_YES
from odoflow.logging import get_logger
from odoflow.odo.models import CommandSpec, ResourceKind, ResourceRef, SourceKind
from odoflow.workflows.base import WorkflowBase
from odoflow.workflows.outcome import CANCELLED, Cancelled, Outcome, Success
from odoflow.workflows.sources import (
    NAME_STEP,
    SOURCE_STEP,
    SourceBranch,
    select_branch,
)
from odoflow.workflows.steps import Step, WorkflowAnswer

__all__ = ["ComponentWorkflows"]

logger = get_logger(__name__)

_CREATE_PLACEHOLDERS = {
    ResourceKind.PROJECT: "In which Project you want to create a Component",
    ResourceKind.APPLICATION: "In which Application you want to create a Component",
}


class ComponentWorkflows(WorkflowBase):
    """Create, delete, link and inspect components.

    Example:
        ```python
        workflows = ComponentWorkflows(services)
        outcome = await workflows.create(ResourceRef.path("proj1", "app1"))
        print(unwrap(outcome))
        ```
    """

    resource = "component"

    # -- create -------------------------------------------------------------

    def _type_steps(self) -> tuple[Step, Step]:
        listings = self.services.listings
        prompter = self.services.prompter

        async def ask_type(_: WorkflowAnswer) -> str | None:
            types = await listings.get_component_types()
            return await prompter.pick(list(types), "Component type")

        async def ask_version(answer: WorkflowAnswer) -> str | None:
            versions = await listings.get_component_type_versions(answer["type"])
            return await prompter.pick(list(versions), "Component type Version")

        return Step("type", ask_type), Step("version", ask_version)

    async def create(self, context: ResourceRef | None = None) -> Outcome:
        """Create a component from a workspace folder, git repository or binary.

        Args:
            context: Application (or anything below it) to create in. The
                project and application are picked when not supplied.
        """
        return await self._guarded(
            "create", "create component", lambda: self._create(context)
        )

    async def _create(self, context: ResourceRef | None) -> Outcome:
        prompter = self.services.prompter
        chain = self._chain("create")

        async def ask_source_kind(_: WorkflowAnswer) -> SourceKind | None:
            return await prompter.pick(
                list(SourceKind),
                "Select source type for Component",
                label=lambda kind: kind.label,
            )

        answer = await chain.run(
            [
                self.resolve_step(
                    "application",
                    context,
                    ResourceKind.APPLICATION,
                    _CREATE_PLACEHOLDERS,
                ),
                Step("source_kind", ask_source_kind),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        branch = select_branch(answer["source_kind"], prompter)
        answer = await chain.run([*branch.steps, *self._type_steps()], answer)
        if isinstance(answer, Cancelled):
            return CANCELLED

        application: ResourceRef = answer["application"]
        name: str = answer[NAME_STEP]
        spec = self.commands.create_component(
            application,
            answer["type"],
            answer["version"],
            name,
            branch.source_tokens(answer),
        )
        component = application.child(ResourceKind.COMPONENT, name)
        await self._create_from(branch, spec, component, answer)
        return Success(f"Component '{name}' successfully created")

    async def _create_from(
        self,
        branch: SourceBranch,
        spec: CommandSpec,
        component: ResourceRef,
        answer: WorkflowAnswer,
    ) -> None:
        executor = self.services.executor
        label = f"Creating new component '{component.name}'"
        kind = branch.kind

        if kind is SourceKind.WORKSPACE:
            await executor.execute_with_progress(label, spec)
            if self.services.push_after_create:
                # A failed push does not undo the create.
                await executor.execute_in_terminal(
                    self.commands.push_component(component, str(answer[SOURCE_STEP]))
                )
        elif kind is SourceKind.GIT:
            await executor.execute_in_terminal(spec)
            # odo shares the terminal; let it finish before prompting.
            await executor.wait_for_terminals()
            await self._offer_clone(str(answer[SOURCE_STEP]))
        elif kind is SourceKind.BINARY:
            await executor.execute_with_progress(label, spec)
        else:
            assert_never(kind)

    async def _offer_clone(self, url: str) -> None:
        choice = await self.services.prompter.confirm(
            "Do you want to clone git repository for created Component?",
            (CONFIRM_YES, CONFIRM_NO),
        )
        if choice == CONFIRM_YES:
            path = await self.services.cloner.clone(url)
            logger.info("repository_cloned", url=url, path=str(path))

    # -- delete -------------------------------------------------------------

    async def delete(self, context: ResourceRef | None = None) -> Outcome:
        """Pick a component (unless given), confirm, then delete it."""
        return await self._guarded(
            "delete", "delete component", lambda: self._delete(context)
        )

    async def _delete(self, context: ResourceRef | None) -> Outcome:
        answer = await self._chain("delete").run(
            [
                self.resolve_step("component", context, ResourceKind.COMPONENT),
                self.confirm_step(
                    "confirm",
                    lambda a: (
                        f"Do you want to delete Component '{a['component'].name}'?"
                    ),
                ),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        component: ResourceRef = answer["component"]
        await self.services.executor.execute_silently(
            self.commands.delete_component(component)
        )
        return Success(f"Component '{component.name}' successfully deleted")

    # -- link ---------------------------------------------------------------

    async def link_service(self, context: ResourceRef | None = None) -> Outcome:
        """Link a service from the component's application to the component."""
        return await self._guarded(
            "link", "link service", lambda: self._link_service(context)
        )

    async def _link_service(self, context: ResourceRef | None) -> Outcome:
        listings = self.services.listings

        async def ask_service(answer: WorkflowAnswer) -> ResourceRef | None:
            component: ResourceRef = answer["component"]
            application = component.require(ResourceKind.APPLICATION)
            services = await listings.get_services(application)
            return await self.services.prompter.pick(
                list(services),
                "Select the service to link",
                label=lambda ref: ref.name,
            )

        answer = await self._chain("link").run(
            [
                self.resolve_step("component", context, ResourceKind.COMPONENT),
                Step("service", ask_service),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        component = answer["component"]
        service: ResourceRef = answer["service"]
        await self.services.executor.execute_silently(
            self.commands.link_service(component, service.name)
        )
        return Success(
            f"service '{service.name}' successfully linked "
            f"with component '{component.name}'"
        )

    # -- terminal operations ------------------------------------------------

    async def _in_terminal(
        self,
        action: str,
        context: ResourceRef | None,
        *,
        follow: bool = False,
    ) -> Outcome:
        answer = await self._chain(action).run(
            [self.resolve_step("component", context, ResourceKind.COMPONENT)]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        component: ResourceRef = answer["component"]
        spec = self._terminal_spec(action, component, follow=follow)
        await self.services.executor.execute_in_terminal(spec)
        return Success(
            f"Started '{spec.command_line}' for component '{component.name}'"
        )

    def _terminal_spec(
        self, action: str, component: ResourceRef, *, follow: bool
    ) -> CommandSpec:
        if action == "push":
            return self.commands.push_component(component)
        if action == "describe":
            return self.commands.describe_component(component)
        if action == "log":
            return self.commands.log_component(component, follow=follow)
        if action == "watch":
            return self.commands.watch_component(component)
        raise ValueError(f"Unknown terminal action: {action}")

    async def push(self, context: ResourceRef | None = None) -> Outcome:
        return await self._guarded(
            "push", "push component", lambda: self._in_terminal("push", context)
        )

    async def describe(self, context: ResourceRef | None = None) -> Outcome:
        return await self._guarded(
            "describe",
            "describe component",
            lambda: self._in_terminal("describe", context),
        )

    async def log(self, context: ResourceRef | None = None) -> Outcome:
        return await self._guarded(
            "log", "show component log", lambda: self._in_terminal("log", context)
        )

    async def follow_log(self, context: ResourceRef | None = None) -> Outcome:
        return await self._guarded(
            "log",
            "follow component log",
            lambda: self._in_terminal("log", context, follow=True),
        )

    async def watch(self, context: ResourceRef | None = None) -> Outcome:
        return await self._guarded(
            "watch", "watch component", lambda: self._in_terminal("watch", context)
        )
