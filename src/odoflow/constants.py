"""odoflow constants.

Single source of truth for odo invocation defaults and the labels shown in
interactive prompts.
"""

from __future__ import annotations

# =============================================================================
# odo invocation
# =============================================================================

#: Executable used when no ``odo.binary`` is configured
DEFAULT_ODO_BINARY: str = "odo"

#: Flag that skips odo's own confirmation on delete
FORCE_FLAG: str = "-f"

#: Default timeout for silent and progress-decorated commands (seconds)
DEFAULT_COMMAND_TIMEOUT: float = 300.0

# =============================================================================
# Prompt labels
# =============================================================================

#: Confirmation label that lets a destructive operation proceed
CONFIRM_YES: str = "Yes"

#: Confirmation label that declines
CONFIRM_NO: str = "No"

#: Confirmation label that abandons a destructive operation
CONFIRM_CANCEL: str = "Cancel"

# =============================================================================
# Resource names
# =============================================================================

#: Longest resource name odo accepts (DNS-1123 label)
MAX_NAME_LENGTH: int = 63
