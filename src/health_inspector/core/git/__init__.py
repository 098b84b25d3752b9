"""Git operations subpackage.

This subpackage provides an abstraction over the git status probes used by the
cookbook checks, with support for testing via fakes.
"""

from health_inspector.core.git.abc import Git
from health_inspector.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
]
