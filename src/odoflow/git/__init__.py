"""Git operations used by odoflow workflows."""

from __future__ import annotations

from odoflow.git.clone import GitCloner, repository_dir_name

__all__ = ["GitCloner", "repository_dir_name"]
