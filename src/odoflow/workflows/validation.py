"""Validators for free-text prompts.

Each validator returns an error message for unacceptable input and None
otherwise, which is what ``Prompter.input_text`` expects.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from odoflow.constants import MAX_NAME_LENGTH

__all__ = ["validate_git_url", "validate_resource_name"]

_NAME_PATTERN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
_SCP_STYLE_URL = re.compile(r"^[\w.-]+@[\w.-]+:[\w./~-]+$")


def validate_resource_name(value: str) -> str | None:
    """Check ``value`` is usable as an odo resource name.

    Names are DNS-1123 labels: lower-case alphanumerics and '-', starting
    and ending with an alphanumeric, at most 63 characters.

    Example:
        >>> validate_resource_name("comp1") is None
        True
        >>> validate_resource_name("")
        'Empty name'
    """
    if not value.strip():
        return "Empty name"
    if len(value) > MAX_NAME_LENGTH:
        return f"Name must be at most {MAX_NAME_LENGTH} characters"
    if not _NAME_PATTERN.match(value):
        return (
            "Name must consist of lower case alphanumeric characters or '-', "
            "and must start and end with an alphanumeric character"
        )
    return None


def validate_git_url(value: str) -> str | None:
    """Accept http(s), ssh, git and file URLs plus scp-style ``user@host:path``."""
    if not value.strip():
        return "Empty Git repository URL"
    if _SCP_STYLE_URL.match(value):
        return None
    parsed = urlparse(value)
    if parsed.scheme in {"http", "https", "ssh", "git"} and parsed.netloc:
        return None
    if parsed.scheme == "file" and parsed.path:
        return None
    return "Invalid Git repository URL"
