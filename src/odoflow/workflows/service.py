"""Service workflows."""

from __future__ import annotations

from odoflow.odo.models import ResourceKind, ResourceRef
from odoflow.workflows.base import WorkflowBase
from odoflow.workflows.outcome import CANCELLED, Cancelled, Outcome, Success

__all__ = ["ServiceWorkflows"]


class ServiceWorkflows(WorkflowBase):
    resource = "service"

    async def delete(self, context: ResourceRef | None = None) -> Outcome:
        """Pick a service (unless given), confirm, then delete it."""
        return await self._guarded(
            "delete", "delete service", lambda: self._delete(context)
        )

    async def _delete(self, context: ResourceRef | None) -> Outcome:
        answer = await self._chain("delete").run(
            [
                self.resolve_step("service", context, ResourceKind.SERVICE),
                self.confirm_step(
                    "confirm",
                    lambda a: f"Do you want to delete Service '{a['service'].name}'?",
                ),
            ]
        )
        if isinstance(answer, Cancelled):
            return CANCELLED

        service: ResourceRef = answer["service"]
        await self.services.executor.execute_silently(
            self.commands.delete_service(service)
        )
        return Success(f"Service '{service.name}' successfully deleted")
