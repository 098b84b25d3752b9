"""Local cookbook discovery interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from health_inspector.core.cookbook import MalformedMetadata


@dataclass(frozen=True)
class LocalInventory:
    """Cookbooks found under the search roots.

    Attributes:
        versions: Cookbook name -> version declared in its metadata
        malformed: Cookbook name -> error for metadata without a usable version
    """

    versions: dict[str, str] = field(default_factory=dict)
    malformed: dict[str, MalformedMetadata] = field(default_factory=dict)


class LocalCookbooks(ABC):
    """Abstract interface for discovering cookbooks in a local checkout."""

    @abstractmethod
    def discover(self, search_roots: list[Path]) -> LocalInventory:
        """Find cookbooks among the immediate subdirectories of each search root.

        A subdirectory counts as a cookbook only if it holds a metadata file.
        When a name occurs under several roots the first root wins.

        Args:
            search_roots: Roots in precedence order

        Returns:
            LocalInventory with parsed versions and per-cookbook metadata errors
        """
        ...
