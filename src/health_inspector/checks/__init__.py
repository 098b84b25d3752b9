"""Consistency checks evaluated against merged cookbooks."""

from health_inspector.checks.base import Check
from health_inspector.checks.cookbooks import (
    LocalExists,
    NoUncommittedChanges,
    NoUnpushedCommits,
    ServerExists,
    VersionsMatch,
    cookbook_checks,
)

__all__ = [
    "Check",
    "LocalExists",
    "NoUncommittedChanges",
    "NoUnpushedCommits",
    "ServerExists",
    "VersionsMatch",
    "cookbook_checks",
]
