"""Project workflows: create and delete."""

from __future__ import annotations

from odoflow.odo.models import ResourceKind, ResourceRef
from odoflow.workflows.base import WorkflowBase
from odoflow.workflows.outcome import CANCELLED, Cancelled, Outcome, Success
from odoflow.workflows.steps import Step, WorkflowAnswer
from odoflow.workflows.validation import validate_resource_name

__all__ = ["ProjectWorkflows"]


class ProjectWorkflows(WorkflowBase):
    """Create and delete projects."""

    resource = "project"

    async def create(self) -> Outcome:
        """Ask for a name and run ``odo project create <name>``."""
        return await self._guarded("create", "create project", self._create)

    async def _create(self) -> Outcome:
        async def ask_name(_: WorkflowAnswer) -> str | None:
            return await self.services.prompter.input_text(
                "Provide Project name", validate_resource_name
            )

        answer = await self._chain("create").run([Step("name", ask_name)])
        if isinstance(answer, Cancelled):
            return CANCELLED

        name = answer["name"]
        await self.services.executor.execute_silently(
            self.commands.create_project(name)
        )
        return Success(f"Project '{name}' successfully created")

    async def delete(self, context: ResourceRef | None = None) -> Outcome:
        """Pick a project (unless given), confirm, then delete it."""
        return await self._guarded(
            "delete", "delete project", lambda: self._delete(context)
        )

    async def _delete(self, context: ResourceRef | None) -> Outcome:
        answer = await self._chain("delete").run(
            [
                self.resolve_step(
                    "project",
                    context,
                    ResourceKind.PROJECT,
                    {ResourceKind.PROJECT: "Select Project to delete"},
                ),
                self.confirm_step(
                    "confirm",
                    lambda a: f"Do you want to delete Project '{a['project'].name}'?",
                ),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        project: ResourceRef = answer["project"]
        await self.services.executor.execute_silently(
            self.commands.delete_project(project)
        )
        return Success(f"Project '{project.name}' successfully deleted")
