"""Local chef-repo cookbook discovery subpackage."""

from health_inspector.core.local.abc import LocalCookbooks, LocalInventory
from health_inspector.core.local.metadata import METADATA_FILES, read_metadata_version
from health_inspector.core.local.real import RealLocalCookbooks

__all__ = [
    "LocalCookbooks",
    "LocalInventory",
    "METADATA_FILES",
    "RealLocalCookbooks",
    "read_metadata_version",
]
