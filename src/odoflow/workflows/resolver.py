"""Context resolution: turn a partial resource path into a complete one.

Levels are walked top-down (project, application, then component or
service). Levels the caller already supplied are taken as-is; every other
level is listed live, scoped by the level above it, and offered to the user
as a pick list. Dismissing any pick stops resolution with ``CANCELLED``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from odoflow.exceptions import InvalidResourceError
from odoflow.logging import get_logger
from odoflow.odo.models import ResourceKind, ResourceRef
from odoflow.odo.protocols import ListingProvider, Prompter
from odoflow.workflows.outcome import CANCELLED, Cancelled

__all__ = ["ContextResolver", "DEFAULT_PLACEHOLDERS", "levels_for"]

logger = get_logger(__name__)

DEFAULT_PLACEHOLDERS: Mapping[ResourceKind, str] = {
    ResourceKind.PROJECT: "Select a project",
    ResourceKind.APPLICATION: "Select an application",
    ResourceKind.COMPONENT: "Select a component",
    ResourceKind.SERVICE: "Select a service",
}


def levels_for(required: ResourceKind) -> tuple[ResourceKind, ...]:
    """Hierarchy levels from the project down to ``required``.

    Example:
        >>> [k.value for k in levels_for(ResourceKind.SERVICE)]
        ['project', 'application', 'service']
    """
    levels: list[ResourceKind] = []
    kind: ResourceKind | None = required
    while kind is not None:
        levels.append(kind)
        kind = kind.parent_kind
    return tuple(reversed(levels))


class ContextResolver:
    """Fills in missing hierarchy levels from live listings and user picks.

    Args:
        listings: Source of live project/application/component/service lists.
        prompter: Presents the pick lists.
    """

    def __init__(self, listings: ListingProvider, prompter: Prompter) -> None:
        self._listings = listings
        self._prompter = prompter

    async def _candidates(
        self, kind: ResourceKind, parent: ResourceRef | None
    ) -> Sequence[ResourceRef]:
        if kind is ResourceKind.PROJECT:
            return await self._listings.get_projects()
        if parent is None:
            raise InvalidResourceError(
                f"Cannot list {kind.value}s without a parent", kind=kind.value
            )
        if kind is ResourceKind.APPLICATION:
            return await self._listings.get_applications(parent)
        if kind is ResourceKind.COMPONENT:
            return await self._listings.get_components(parent)
        return await self._listings.get_services(parent)

    async def resolve(
        self,
        partial: ResourceRef | None,
        required: ResourceKind,
        placeholders: Mapping[ResourceKind, str] | None = None,
    ) -> ResourceRef | Cancelled:
        """Resolve a reference of kind ``required``.

        Args:
            partial: Whatever the caller already knows, or None. It may be
                deeper than ``required``; only its ancestors that lie on the
                path to ``required`` are reused.
            required: Kind of reference wanted.
            placeholders: Pick-list prompts per level, overriding the defaults.

        Returns:
            The resolved reference, or CANCELLED if a pick was dismissed.

        Raises:
            InvalidResourceError: If a supplied level has an empty name.
        """
        prompts = {**DEFAULT_PLACEHOLDERS, **(placeholders or {})}
        current: ResourceRef | None = None

        for kind in levels_for(required):
            supplied = partial.ancestor(kind) if partial is not None else None
            if supplied is not None:
                if not supplied.name.strip():
                    raise InvalidResourceError(
                        f"{kind.title} name must not be empty", kind=kind.value
                    )
                current = supplied
                continue

            candidates = await self._candidates(kind, current)
            # An empty list is still shown so the user sees nothing is available.
            picked = await self._prompter.pick(
                list(candidates), prompts[kind], label=lambda ref: ref.name
            )
            if picked is None:
                logger.info("context_resolution_cancelled", level=kind.value)
                return CANCELLED
            current = picked

        if current is None:
            raise InvalidResourceError(
                f"Nothing resolved for {required.value}", kind=required.value
            )
        return current
