"""Chef server cookbook registry subpackage."""

from health_inspector.core.registry.abc import Registry
from health_inspector.core.registry.parsing import (
    RegistryError,
    parse_knife_json,
    parse_registry_listing,
)
from health_inspector.core.registry.real import RealRegistry

__all__ = [
    "Registry",
    "RealRegistry",
    "RegistryError",
    "parse_knife_json",
    "parse_registry_listing",
]
