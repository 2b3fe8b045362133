"""Data model for odo resources and assembled commands.

Resources form a fixed hierarchy::

    Project
      Application
        Component
        Service

Every reference points up to its parent only, so a component reference is
enough to recover its application and project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from odoflow.exceptions import InvalidResourceError

__all__ = [
    "CommandSpec",
    "ResourceKind",
    "ResourceRef",
    "SourceKind",
]


class ResourceKind(str, Enum):
    """Kinds of odo resources, with their hierarchy depth."""

    PROJECT = "project"
    APPLICATION = "application"
    COMPONENT = "component"
    SERVICE = "service"

    @property
    def depth(self) -> int:
        """0 for projects, 1 for applications, 2 for components and services."""
        return _DEPTH[self]

    @property
    def parent_kind(self) -> ResourceKind | None:
        """Kind a resource of this kind must be nested in."""
        return _PARENT_KIND[self]

    @property
    def title(self) -> str:
        """Capitalized kind name used in user-facing messages."""
        return self.value.capitalize()


_DEPTH: dict[ResourceKind, int] = {
    ResourceKind.PROJECT: 0,
    ResourceKind.APPLICATION: 1,
    ResourceKind.COMPONENT: 2,
    ResourceKind.SERVICE: 2,
}

_PARENT_KIND: dict[ResourceKind, ResourceKind | None] = {
    ResourceKind.PROJECT: None,
    ResourceKind.APPLICATION: ResourceKind.PROJECT,
    ResourceKind.COMPONENT: ResourceKind.APPLICATION,
    ResourceKind.SERVICE: ResourceKind.APPLICATION,
}


@dataclass(frozen=True, slots=True)
class ResourceRef:
    """Reference to a live odo resource.

    Attributes:
        kind: Resource kind.
        name: Resource name; never empty.
        parent: Owning resource; None only for projects.
    """

    kind: ResourceKind
    name: str
    parent: ResourceRef | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidResourceError(
                f"{self.kind.title} name must not be empty", kind=self.kind.value
            )
        expected = self.kind.parent_kind
        actual = self.parent.kind if self.parent is not None else None
        if expected is not actual:
            raise InvalidResourceError(
                f"{self.kind.title} '{self.name}' must belong to "
                f"{expected.value if expected else 'nothing'}, "
                f"got {actual.value if actual else 'nothing'}",
                kind=self.kind.value,
            )

    @classmethod
    def project(cls, name: str) -> ResourceRef:
        return cls(ResourceKind.PROJECT, name)

    @classmethod
    def path(
        cls,
        project: str,
        application: str | None = None,
        component: str | None = None,
        *,
        service: str | None = None,
    ) -> ResourceRef:
        """Build a reference from plain names, top-down.

        Example:
            >>> ResourceRef.path("proj1", "app1", "comp1").ancestor(
            ...     ResourceKind.PROJECT
            ... ).name
            'proj1'
        """
        ref = cls.project(project)
        if application is None:
            return ref
        ref = ref.child(ResourceKind.APPLICATION, application)
        if component is not None:
            return ref.child(ResourceKind.COMPONENT, component)
        if service is not None:
            return ref.child(ResourceKind.SERVICE, service)
        return ref

    def child(self, kind: ResourceKind, name: str) -> ResourceRef:
        return ResourceRef(kind, name, parent=self)

    def ancestor(self, kind: ResourceKind) -> ResourceRef | None:
        """Return this reference or the ancestor of ``kind``, if any."""
        ref: ResourceRef | None = self
        while ref is not None:
            if ref.kind is kind:
                return ref
            ref = ref.parent
        return None

    def require(self, kind: ResourceKind) -> ResourceRef:
        """Like ``ancestor``, but the ancestor must exist.

        Raises:
            InvalidResourceError: If there is no such ancestor.
        """
        ref = self.ancestor(kind)
        if ref is None:
            raise InvalidResourceError(
                f"{self.kind.title} '{self.name}' has no {kind.value}",
                kind=self.kind.value,
            )
        return ref

    def name_of(self, kind: ResourceKind) -> str:
        """Name of the ancestor of ``kind``.

        Raises:
            InvalidResourceError: If there is no such ancestor.
        """
        return self.require(kind).name

    def __str__(self) -> str:
        return self.name


class SourceKind(str, Enum):
    """Where the code for a new component comes from."""

    WORKSPACE = "Workspace Directory"
    GIT = "Git Repository"
    BINARY = "Binary File"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A fully assembled odo command.

    Attributes:
        operation: Operation name used in messages, e.g. "create project".
        tokens: Command tokens in wire order.
        shell: True when the tokens form a composite shell command
            (clauses joined with ``&&``).
    """

    operation: str
    tokens: tuple[str, ...]
    shell: bool = False

    @property
    def command_line(self) -> str:
        """Tokens joined with single spaces."""
        return " ".join(self.tokens)

    @property
    def argv(self) -> list[str] | str:
        """What the runner executes: an argument list or a shell string."""
        if self.shell:
            return self.command_line
        return list(self.tokens)

    def __str__(self) -> str:
        return self.command_line
