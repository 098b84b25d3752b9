"""Git status interface.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit (tests/fakes/git.py): In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git status probes.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def short_status(self, path: Path) -> str:
        """Return the stdout of `git status -s` run inside `path`.

        Args:
            path: Working tree to inspect

        Returns:
            Literal command output; empty when the tree is clean

        Raises:
            RuntimeError: If git fails
        """
        ...

    @abstractmethod
    def full_status(self, path: Path) -> str:
        """Return the stdout of `git status` run inside `path`.

        Args:
            path: Working tree to inspect

        Returns:
            Literal command output, including the upstream tracking summary

        Raises:
            RuntimeError: If git fails
        """
        ...
