"""Merged cookbook records."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Cookbook:
    """State of one cookbook across the Chef server and the local checkout.

    A field is None when the corresponding source does not know the cookbook.
    `local_version` comes from metadata discovery and `path` from search-root
    resolution; the two are resolved independently and may disagree.
    """

    name: str
    path: Path | None
    server_version: str | None
    local_version: str | None

    @property
    def is_git_repo(self) -> bool:
        """True if the cookbook has a local path with a `.git` marker under it."""
        if self.path is None:
            return False
        return (self.path / ".git").exists()


class MalformedMetadata(Exception):
    """Raised when a cookbook's metadata declares no usable version.

    Scoped to a single cookbook: reconciliation records it in place of the
    Cookbook and carries on with the rest of the inventory.
    """

    def __init__(self, name: str, metadata_path: Path, reason: str) -> None:
        self.name = name
        self.metadata_path = metadata_path
        self.reason = reason
        super().__init__(f"malformed metadata in {metadata_path}: {reason}")
