"""Message formatting for odoflow CLI commands."""

from __future__ import annotations

__all__ = [
    "format_error",
    "format_success",
]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error(
        ...     "odo not found",
        ...     details=["Looked for: odo"],
        ...     suggestion="Set odo.binary in odoflow.yaml",
        ... ))
        Error: odo not found
          Looked for: odo
        Suggestion: Set odo.binary in odoflow.yaml
    """
    lines = [f"Error: {message}"]
    if details:
        lines.extend(f"  {detail}" for detail in details)
    if suggestion:
        lines.append(f"Suggestion: {suggestion}")
    return "\n".join(lines)


def format_success(message: str) -> str:
    """Format a success message.

    Example:
        >>> format_success("Project 'demo' successfully created")
        "Success: Project 'demo' successfully created"
    """
    return f"Success: {message}"
