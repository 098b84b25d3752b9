"""The cookbook checklist."""

import re

from health_inspector.checks.base import Check
from health_inspector.core.cookbook import Cookbook
from health_inspector.core.git.abc import Git

_AHEAD_OF = re.compile(r"Your branch is ahead of '?(?P<ref>[^'\s]+)'?")


class LocalExists(Check):
    """Fails when the cookbook has no local directory."""

    @property
    def name(self) -> str:
        return "local-exists"

    def evaluate(self, cookbook: Cookbook) -> str | None:
        if cookbook.path is None:
            return "exists on server but not locally"
        return None


class ServerExists(Check):
    """Fails when the Chef server does not know the cookbook."""

    @property
    def name(self) -> str:
        return "server-exists"

    def evaluate(self, cookbook: Cookbook) -> str | None:
        if cookbook.server_version is None:
            return "exists locally but not on server"
        return None


class VersionsMatch(Check):
    """Fails when both versions are known and differ byte-for-byte."""

    @property
    def name(self) -> str:
        return "versions-match"

    def evaluate(self, cookbook: Cookbook) -> str | None:
        server_version = cookbook.server_version
        local_version = cookbook.local_version
        if server_version is None or local_version is None:
            return None
        if server_version != local_version:
            return f"server has {server_version} but local version is {local_version}"
        return None


class NoUncommittedChanges(Check):
    """Fails when a git-managed cookbook has a dirty working tree."""

    def __init__(self, git: Git) -> None:
        self._git = git

    @property
    def name(self) -> str:
        return "no-uncommitted-changes"

    def evaluate(self, cookbook: Cookbook) -> str | None:
        if cookbook.path is None or not cookbook.is_git_repo:
            return None

        status = self._git.short_status(cookbook.path).rstrip()
        if not status:
            return None
        return f"uncommitted changes:\n{status}"


class NoUnpushedCommits(Check):
    """Fails when a git-managed cookbook's branch is ahead of its upstream.

    Only the "ahead" state is detected; behind, diverged and untracked
    branches pass.
    """

    def __init__(self, git: Git) -> None:
        self._git = git

    @property
    def name(self) -> str:
        return "no-unpushed-commits"

    def evaluate(self, cookbook: Cookbook) -> str | None:
        if cookbook.path is None or not cookbook.is_git_repo:
            return None

        match = _AHEAD_OF.search(self._git.full_status(cookbook.path))
        if match is None:
            return None
        return f"ahead of {match.group('ref')}"


def cookbook_checks(git: Git) -> list[Check]:
    """Return the cookbook checklist in evaluation order."""
    return [
        LocalExists(),
        ServerExists(),
        VersionsMatch(),
        NoUncommittedChanges(git),
        NoUnpushedCommits(git),
    ]
