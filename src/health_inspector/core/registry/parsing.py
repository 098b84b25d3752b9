"""Parsing of `knife cookbook list` output."""

import json


class RegistryError(RuntimeError):
    """Raised when the registry returns output that cannot be interpreted."""


def parse_knife_json(stdout: str) -> list[str]:
    """Parse the JSON array printed by `knife cookbook list -Fj`.

    Args:
        stdout: Raw knife output

    Returns:
        List of "name version" strings

    Raises:
        RegistryError: If the output is not a JSON array of strings
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise RegistryError(f"knife returned invalid JSON: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise RegistryError("knife returned JSON that is not a list of strings")

    return data


def parse_registry_listing(entries: list[str]) -> dict[str, str]:
    """Turn "name version" pairs into a name -> version mapping.

    Raises:
        RegistryError: If an entry does not hold exactly two tokens
    """
    versions: dict[str, str] = {}
    for entry in entries:
        tokens = entry.split()
        if len(tokens) != 2:
            raise RegistryError(f"Unexpected registry entry: {entry!r}")
        name, version = tokens
        versions[name] = version
    return versions
