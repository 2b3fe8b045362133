"""GitPython-based repository cloning.

Used after a component is created from a git repository, when the user
asks for a local copy. This is a git operation and never goes through odo.
"""

from __future__ import annotations

import asyncio
import re
import shutil
from pathlib import Path

from git import GitCommandError, Repo
from git.exc import GitCommandNotFound
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from odoflow.exceptions import CloneError
from odoflow.logging import get_logger

logger = get_logger(__name__)

__all__ = ["GitCloner", "repository_dir_name"]

_GIT_SUFFIX = re.compile(r"\.git/?$")


def repository_dir_name(url: str) -> str:
    """Directory name ``git clone`` would pick for ``url``.

    Example:
        >>> repository_dir_name("https://github.com/org/nodejs-ex.git")
        'nodejs-ex'
        >>> repository_dir_name("git@github.com:org/app")
        'app'
    """
    tail = _GIT_SUFFIX.sub("", url.rstrip("/"))
    tail = tail.rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    return tail or "repository"


class GitCloner:
    """Clones repositories into a parent directory.

    Args:
        directory: Parent directory for clones; defaults to the current one.
        retries: Extra attempts on transient ``GitCommandError`` failures.
    """

    def __init__(self, directory: Path | None = None, retries: int = 0) -> None:
        self._directory = directory
        self._retries = retries

    def _clone_sync(self, url: str, target: Path) -> None:
        try:
            Repo.clone_from(url, target)
        except GitCommandNotFound as e:
            raise CloneError("Git CLI not found", url=url) from e
        except GitCommandError:
            # A failed clone can leave a partial tree behind; retries need it gone.
            shutil.rmtree(target, ignore_errors=True)
            raise

    async def clone(self, url: str) -> Path:
        """Clone ``url`` and return the path of the new working tree.

        Raises:
            CloneError: If the target exists or git fails.
        """
        parent = self._directory or Path.cwd()
        target = parent / repository_dir_name(url)
        if target.exists():
            raise CloneError(f"Clone target already exists: {target}", url=url)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._retries + 1),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                retry=retry_if_exception_type(GitCommandError),
                reraise=True,
            ):
                with attempt:
                    await asyncio.to_thread(self._clone_sync, url, target)
        except GitCommandError as e:
            detail = str(e.stderr).strip() or str(e)
            raise CloneError(f"Failed to clone {url}: {detail}", url=url) from e

        logger.info("clone_completed", url=url, path=str(target))
        return target
