"""Assembly of odo command lines.

Token order is fixed for every operation::

    <verb> <operation tokens> <operation flags> [--app <app> --project <project>]

Component-scoped operations end with the ``--app``/``--project`` scope flags,
project-scoped ones carry no trailing scope, and deletes always include
``-f``. Tests compare whole command lines, so the order here is the contract.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from odoflow.constants import DEFAULT_ODO_BINARY, FORCE_FLAG
from odoflow.odo.models import CommandSpec, ResourceKind, ResourceRef

__all__ = ["Commands", "assemble", "scope_flags"]


def scope_flags(ref: ResourceRef) -> tuple[str, ...]:
    """Trailing ``--app <app> --project <project>`` flags for ``ref``.

    Args:
        ref: An application or anything nested in one.

    Returns:
        The two scope flag pairs, application first.
    """
    return (
        "--app",
        ref.name_of(ResourceKind.APPLICATION),
        "--project",
        ref.name_of(ResourceKind.PROJECT),
    )


def assemble(
    operation: str,
    verb: Sequence[str],
    tokens: Sequence[str],
    extra_tokens: Sequence[str] = (),
    scope: ResourceRef | None = None,
    trailing: Sequence[str] = (),
) -> CommandSpec:
    """Build a CommandSpec from its parts in wire order.

    Args:
        operation: Operation name for messages, e.g. "delete component".
        verb: Tokens that invoke odo (usually just ``("odo",)``).
        tokens: Sub-command and positional arguments.
        extra_tokens: Operation flags, in the order the caller declares them.
        scope: When given, ``--app``/``--project`` for this resource follow.
        trailing: Tokens placed after the scope flags.
    """
    parts = [*verb, *tokens, *extra_tokens]
    if scope is not None:
        parts.extend(scope_flags(scope))
    parts.extend(trailing)
    return CommandSpec(operation=operation, tokens=tuple(parts))


class Commands:
    """Factory for every odo command line odoflow runs.

    Example:
        >>> Commands().create_project("myproj").command_line
        'odo project create myproj'
    """

    def __init__(self, binary: str = DEFAULT_ODO_BINARY) -> None:
        self._verb = tuple(shlex.split(binary))

    @property
    def verb(self) -> tuple[str, ...]:
        return self._verb

    # -- listings -----------------------------------------------------------

    def list_projects(self) -> CommandSpec:
        return assemble("list projects", self._verb, ("project", "list", "-o", "json"))

    def list_applications(self, project: ResourceRef) -> CommandSpec:
        return assemble(
            "list applications",
            self._verb,
            ("app", "list"),
            ("--project", project.name, "-o", "json"),
        )

    def list_components(self, application: ResourceRef) -> CommandSpec:
        return assemble(
            "list components",
            self._verb,
            ("list",),
            scope=application,
            trailing=("-o", "json"),
        )

    def list_services(self, application: ResourceRef) -> CommandSpec:
        return assemble(
            "list services",
            self._verb,
            ("service", "list"),
            scope=application,
            trailing=("-o", "json"),
        )

    def list_component_types(self) -> CommandSpec:
        return assemble(
            "list component types", self._verb, ("catalog", "list", "components")
        )

    # -- projects -----------------------------------------------------------

    def create_project(self, name: str) -> CommandSpec:
        return assemble("create project", self._verb, ("project", "create", name))

    def delete_project(self, project: ResourceRef) -> CommandSpec:
        return assemble(
            "delete project",
            self._verb,
            ("project", "delete", project.name),
            (FORCE_FLAG,),
        )

    # -- applications -------------------------------------------------------

    def create_application(self, project: ResourceRef, name: str) -> CommandSpec:
        return assemble(
            "create application",
            self._verb,
            ("app", "create", name),
            ("--project", project.name),
        )

    def delete_application(self, application: ResourceRef) -> CommandSpec:
        return assemble(
            "delete application",
            self._verb,
            ("app", "delete", application.name),
            (FORCE_FLAG, "--project", application.name_of(ResourceKind.PROJECT)),
        )

    # -- components ---------------------------------------------------------

    def create_component(
        self,
        application: ResourceRef,
        component_type: str,
        version: str,
        name: str,
        source_tokens: Sequence[str],
    ) -> CommandSpec:
        """``odo create <type>:<version> <name> <source flags> --app --project``.

        Args:
            application: Application the component is created in.
            component_type: Catalog component type, e.g. "nodejs".
            version: Version tag of the type, e.g. "latest".
            name: New component name.
            source_tokens: Source flag pair from the chosen source branch,
                e.g. ``("--local", "/ws")``.
        """
        return assemble(
            "create component",
            self._verb,
            ("create", f"{component_type}:{version}", name),
            source_tokens,
            scope=application,
        )

    def delete_component(self, component: ResourceRef) -> CommandSpec:
        return assemble(
            "delete component",
            self._verb,
            ("delete", component.name),
            (FORCE_FLAG,),
            scope=component,
        )

    def push_component(
        self, component: ResourceRef, local_path: str | None = None
    ) -> CommandSpec:
        trailing = ("--local", local_path) if local_path else ()
        return assemble(
            "push component",
            self._verb,
            ("push", component.name),
            scope=component,
            trailing=trailing,
        )

    def describe_component(self, component: ResourceRef) -> CommandSpec:
        return assemble(
            "describe component",
            self._verb,
            ("describe", component.name),
            scope=component,
        )

    def log_component(
        self, component: ResourceRef, follow: bool = False
    ) -> CommandSpec:
        return assemble(
            "show component log",
            self._verb,
            ("log", component.name),
            ("-f",) if follow else (),
            scope=component,
        )

    def watch_component(self, component: ResourceRef) -> CommandSpec:
        return assemble(
            "watch component",
            self._verb,
            ("watch", component.name),
            scope=component,
        )

    # -- services -----------------------------------------------------------

    def link_service(self, component: ResourceRef, service: str) -> CommandSpec:
        """Composite command that selects the context and then links.

        ``odo project set <p> && odo application set <a> &&
        odo component set <c> && odo link <service> --wait``

        Every token is shell-quoted; plain names come out unchanged.
        """
        clauses = (
            (*self._verb, "project", "set", component.name_of(ResourceKind.PROJECT)),
            (
                *self._verb,
                "application",
                "set",
                component.name_of(ResourceKind.APPLICATION),
            ),
            (*self._verb, "component", "set", component.name),
            (*self._verb, "link", service, "--wait"),
        )
        tokens: list[str] = []
        for clause in clauses:
            if tokens:
                tokens.append("&&")
            tokens.extend(shlex.quote(token) for token in clause)
        return CommandSpec(operation="link service", tokens=tuple(tokens), shell=True)

    def delete_service(self, service: ResourceRef) -> CommandSpec:
        return assemble(
            "delete service",
            self._verb,
            ("service", "delete", service.name),
            (FORCE_FLAG,),
            scope=service,
        )
