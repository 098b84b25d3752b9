"""Filesystem-backed cookbook discovery."""

import logging
from pathlib import Path

from health_inspector.core.cookbook import MalformedMetadata
from health_inspector.core.local.abc import LocalCookbooks, LocalInventory
from health_inspector.core.local.metadata import find_metadata_file, read_metadata_version

logger = logging.getLogger(__name__)


class RealLocalCookbooks(LocalCookbooks):
    """Scans search roots on disk for directories holding cookbook metadata."""

    def discover(self, search_roots: list[Path]) -> LocalInventory:
        versions: dict[str, str] = {}
        malformed: dict[str, MalformedMetadata] = {}

        for root in search_roots:
            if not root.is_dir():
                logger.debug("Skipping missing search root %s", root)
                continue

            for cookbook_dir in sorted(root.iterdir()):
                name = cookbook_dir.name
                if not cookbook_dir.is_dir() or find_metadata_file(cookbook_dir) is None:
                    continue
                # Earlier roots shadow later ones
                if name in versions or name in malformed:
                    continue

                try:
                    versions[name] = read_metadata_version(cookbook_dir)
                except MalformedMetadata as e:
                    logger.debug("Malformed metadata for %s: %s", name, e.reason)
                    malformed[name] = e

        logger.debug("Found %d local cookbook(s)", len(versions) + len(malformed))
        return LocalInventory(versions=versions, malformed=malformed)
