"""Production Git implementation using subprocess."""

from pathlib import Path

from health_inspector.core.git.abc import Git
from health_inspector.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def short_status(self, path: Path) -> str:
        """Get porcelain-ish short status of the working tree."""
        result = run_subprocess_with_context(
            ["git", "status", "-s"],
            operation_context=f"get short status of {path}",
            cwd=path,
        )
        return result.stdout

    def full_status(self, path: Path) -> str:
        """Get long-form status of the working tree."""
        result = run_subprocess_with_context(
            ["git", "status"],
            operation_context=f"get status of {path}",
            cwd=path,
        )
        return result.stdout
