"""Tests for GitCloner."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from git import GitCommandError
from git.exc import GitCommandNotFound

from odoflow.exceptions import CloneError
from odoflow.git.clone import GitCloner, repository_dir_name


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://github.com/openshift/nodejs-ex.git", "nodejs-ex"),
        ("https://github.com/openshift/nodejs-ex/", "nodejs-ex"),
        ("git@github.com:org/app.git", "app"),
        ("git@host:app", "app"),
    ],
)
def test_repository_dir_name(url: str, expected: str) -> None:
    assert repository_dir_name(url) == expected


@pytest.mark.asyncio
async def test_clone_into_directory(temp_dir: Path) -> None:
    with patch("odoflow.git.clone.Repo.clone_from") as clone_from:
        path = await GitCloner(temp_dir).clone("https://example.com/org/demo.git")

    assert path == temp_dir / "demo"
    clone_from.assert_called_once_with("https://example.com/org/demo.git", path)


@pytest.mark.asyncio
async def test_existing_target_is_refused(temp_dir: Path) -> None:
    (temp_dir / "demo").mkdir()

    with patch("odoflow.git.clone.Repo.clone_from") as clone_from:
        with pytest.raises(CloneError, match="already exists"):
            await GitCloner(temp_dir).clone("https://example.com/org/demo.git")

    clone_from.assert_not_called()


@pytest.mark.asyncio
async def test_git_failure_becomes_clone_error(temp_dir: Path) -> None:
    error = GitCommandError("git clone", 128, stderr="fatal: repository not found")

    with patch("odoflow.git.clone.Repo.clone_from", side_effect=error):
        with pytest.raises(CloneError) as exc_info:
            await GitCloner(temp_dir).clone("https://example.com/org/demo.git")

    assert "repository not found" in exc_info.value.message
    assert exc_info.value.url == "https://example.com/org/demo.git"
    assert exc_info.value.recoverable is True


@pytest.mark.asyncio
async def test_missing_git_cli(temp_dir: Path) -> None:
    with patch(
        "odoflow.git.clone.Repo.clone_from",
        side_effect=GitCommandNotFound("git", "not found"),
    ):
        with pytest.raises(CloneError, match="Git CLI not found"):
            await GitCloner(temp_dir).clone("https://example.com/org/demo.git")


@pytest.mark.asyncio
async def test_transient_failure_is_retried(temp_dir: Path) -> None:
    error = GitCommandError("git clone", 128, stderr="early EOF")

    with patch(
        "odoflow.git.clone.Repo.clone_from", side_effect=[error, None]
    ) as clone_from:
        path = await GitCloner(temp_dir, retries=1).clone("https://example.com/o/r")

    assert path == temp_dir / "r"
    assert clone_from.call_count == 2


@pytest.mark.asyncio
async def test_partial_clone_is_removed_before_retry(temp_dir: Path) -> None:
    target = temp_dir / "r"
    seen_on_attempt: list[bool] = []

    def clone_from(url: str, path: Path) -> None:
        seen_on_attempt.append(path.exists())
        if len(seen_on_attempt) == 1:
            path.mkdir()
            (path / ".git").mkdir()
            raise GitCommandError("git clone", 128, stderr="early EOF")

    with patch("odoflow.git.clone.Repo.clone_from", side_effect=clone_from):
        path = await GitCloner(temp_dir, retries=1).clone("https://example.com/o/r")

    assert path == target
    assert seen_on_attempt == [False, False]


@pytest.mark.asyncio
async def test_failed_clone_leaves_no_directory(temp_dir: Path) -> None:
    def clone_from(url: str, path: Path) -> None:
        path.mkdir()
        raise GitCommandError("git clone", 128, stderr="fatal: repository not found")

    with patch("odoflow.git.clone.Repo.clone_from", side_effect=clone_from):
        with pytest.raises(CloneError):
            await GitCloner(temp_dir).clone("https://example.com/o/r")

    assert not (temp_dir / "r").exists()
