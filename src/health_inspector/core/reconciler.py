"""Merging of the Chef server and local cookbook inventories.

Names from both sources are unioned and sorted; that order is the canonical
iteration order for checking and reporting. Path resolution is independent of
metadata discovery, so a cookbook may carry a local version without a path.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from health_inspector.core.cookbook import Cookbook, MalformedMetadata
from health_inspector.core.local.abc import LocalCookbooks
from health_inspector.core.registry.abc import Registry
from health_inspector.core.registry.parsing import parse_registry_listing

logger = logging.getLogger(__name__)

ReconciliationEntry = Cookbook | MalformedMetadata


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of one reconciliation run, in canonical name order."""

    entries: list[ReconciliationEntry]

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    @property
    def cookbooks(self) -> list[Cookbook]:
        return [entry for entry in self.entries if isinstance(entry, Cookbook)]

    @property
    def errors(self) -> list[MalformedMetadata]:
        return [entry for entry in self.entries if isinstance(entry, MalformedMetadata)]


def resolve_cookbook_path(search_roots: list[Path], name: str) -> Path | None:
    """Return `root / name` for the first search root holding that directory."""
    for root in search_roots:
        candidate = root / name
        if candidate.is_dir():
            return candidate
    return None


def merge_cookbooks(
    server_versions: Mapping[str, str],
    local_versions: Mapping[str, str],
    resolve_path: Callable[[str], Path | None],
) -> list[Cookbook]:
    """Merge two name -> version mappings into Cookbooks sorted by name.

    Args:
        server_versions: Versions reported by the registry
        local_versions: Versions found in local metadata
        resolve_path: Maps a cookbook name to its local directory, or None

    Returns:
        One Cookbook per name in the union of both mappings
    """
    names = sorted(set(server_versions) | set(local_versions))
    return [
        Cookbook(
            name=name,
            path=resolve_path(name),
            server_version=server_versions.get(name),
            local_version=local_versions.get(name),
        )
        for name in names
    ]


class Reconciler:
    """Builds the merged cookbook inventory from a registry and a local checkout."""

    def __init__(
        self,
        registry: Registry,
        local_cookbooks: LocalCookbooks,
        search_roots: list[Path],
    ) -> None:
        self._registry = registry
        self._local_cookbooks = local_cookbooks
        self._search_roots = list(search_roots)

    def reconcile(self) -> Reconciliation:
        """Snapshot both sources and merge them.

        Cookbooks whose local metadata is malformed are replaced by their
        MalformedMetadata error; every other name is merged normally.

        Raises:
            RuntimeError: If the registry cannot be queried or parsed
        """
        server_versions = parse_registry_listing(self._registry.list_cookbooks())
        inventory = self._local_cookbooks.discover(self._search_roots)
        logger.debug(
            "Reconciling %d server and %d local cookbook(s)",
            len(server_versions),
            len(inventory.versions) + len(inventory.malformed),
        )

        merged = merge_cookbooks(
            server_versions,
            inventory.versions,
            lambda name: resolve_cookbook_path(self._search_roots, name),
        )

        entries: dict[str, ReconciliationEntry] = {cookbook.name: cookbook for cookbook in merged}
        entries.update(inventory.malformed)
        return Reconciliation(entries=[entries[name] for name in sorted(entries)])
