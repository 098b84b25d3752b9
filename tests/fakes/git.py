"""Fake Git implementation for testing.

FakeGit is an in-memory implementation that returns canned status output per
path and records which paths were probed.
"""

from pathlib import Path

from health_inspector.core.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git status probes.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Paths without configured output report a clean, up-to-date tree

    Examples:
        >>> git = FakeGit(short_statuses={Path("/repo/apache2"): " M recipes/default.rb\\n"})
        >>> git.short_status(Path("/repo/apache2"))
        ' M recipes/default.rb\\n'
    """

    def __init__(
        self,
        *,
        short_statuses: dict[Path, str] | None = None,
        full_statuses: dict[Path, str] | None = None,
        failing_paths: set[Path] | None = None,
    ) -> None:
        """Initialize fake with predetermined status output.

        Args:
            short_statuses: Mapping of path to `git status -s` output
            full_statuses: Mapping of path to `git status` output
            failing_paths: Paths for which git raises RuntimeError
        """
        self._short_statuses = short_statuses or {}
        self._full_statuses = full_statuses or {}
        self._failing_paths = failing_paths or set()
        self._status_calls: list[tuple[str, Path]] = []

    def short_status(self, path: Path) -> str:
        self._status_calls.append(("short", path))
        self._fail_if_configured(path)
        return self._short_statuses.get(path, "")

    def full_status(self, path: Path) -> str:
        self._status_calls.append(("full", path))
        self._fail_if_configured(path)
        return self._full_statuses.get(
            path, "On branch main\nYour branch is up to date with 'origin/main'.\n"
        )

    def _fail_if_configured(self, path: Path) -> None:
        if path in self._failing_paths:
            raise RuntimeError(
                f"Failed to get status of {path}\nCommand: git status\nExit code: 128"
            )

    @property
    def status_calls(self) -> list[tuple[str, Path]]:
        """Get the list of (kind, path) status probes that were made.

        This property is for test assertions only.
        """
        return self._status_calls.copy()
