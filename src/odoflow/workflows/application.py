"""Application workflows: create and delete."""

from __future__ import annotations

from odoflow.odo.models import ResourceKind, ResourceRef
from odoflow.workflows.base import WorkflowBase
from odoflow.workflows.outcome import CANCELLED, Cancelled, Outcome, Success
from odoflow.workflows.steps import Step, WorkflowAnswer
from odoflow.workflows.validation import validate_resource_name

__all__ = ["ApplicationWorkflows"]

_CREATE_PLACEHOLDERS = {
    ResourceKind.PROJECT: "In which Project you want to create an Application",
}


class ApplicationWorkflows(WorkflowBase):
    resource = "application"

    async def create(self, context: ResourceRef | None = None) -> Outcome:
        """Create an application in ``context``'s project (picked if absent)."""
        return await self._guarded(
            "create", "create application", lambda: self._create(context)
        )

    async def _create(self, context: ResourceRef | None) -> Outcome:
        async def ask_name(_: WorkflowAnswer) -> str | None:
            return await self.services.prompter.input_text(
                "Provide Application name", validate_resource_name
            )

        answer = await self._chain("create").run(
            [
                self.resolve_step(
                    "project",
                    context,
                    ResourceKind.PROJECT,
                    _CREATE_PLACEHOLDERS,
                ),
                Step("name", ask_name),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        name = answer["name"]
        await self.services.executor.execute_silently(
            self.commands.create_application(answer["project"], name)
        )
        return Success(f"Application '{name}' successfully created")

    async def delete(self, context: ResourceRef | None = None) -> Outcome:
        return await self._guarded(
            "delete", "delete application", lambda: self._delete(context)
        )

    async def _delete(self, context: ResourceRef | None) -> Outcome:
        answer = await self._chain("delete").run(
            [
                self.resolve_step("application", context, ResourceKind.APPLICATION),
                self.confirm_step(
                    "confirm",
                    lambda a: (
                        f"Do you want to delete Application '{a['application'].name}'?"
                    ),
                ),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        application: ResourceRef = answer["application"]
        await self.services.executor.execute_silently(
            self.commands.delete_application(application)
        )
        return Success(f"Application '{application.name}' successfully deleted")
