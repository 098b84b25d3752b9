"""Version extraction from cookbook metadata files.

Only the forms Chef generates are understood: a `version` line holding one
quoted literal in metadata.rb, or a string "version" key in metadata.json.
Everything else is reported as MalformedMetadata rather than guessed at.
"""

import json
import re
from pathlib import Path

from health_inspector.core.cookbook import MalformedMetadata

METADATA_FILES = ("metadata.rb", "metadata.json")

_VERSION_LINE = re.compile(r"^version\b(?P<rest>.*)$")
_QUOTED_LITERAL = re.compile(r"""^(?P<quote>['"])(?P<value>[^'"]*)(?P=quote)\s*(#.*)?$""")


def find_metadata_file(cookbook_dir: Path) -> Path | None:
    """Return the metadata file of a cookbook directory, preferring metadata.rb."""
    for filename in METADATA_FILES:
        candidate = cookbook_dir / filename
        if candidate.is_file():
            return candidate
    return None


def parse_metadata_rb(name: str, metadata_path: Path, content: str) -> str:
    """Extract the version from the first `version` line of a metadata.rb."""
    for line in content.splitlines():
        match = _VERSION_LINE.match(line)
        if match is None:
            continue

        literal = _QUOTED_LITERAL.match(match.group("rest").strip())
        if literal is None:
            raise MalformedMetadata(
                name, metadata_path, f"version is not a single quoted literal: {line.strip()!r}"
            )
        if not literal.group("value"):
            raise MalformedMetadata(name, metadata_path, "version is empty")
        return literal.group("value")

    raise MalformedMetadata(name, metadata_path, "no version declared")


def parse_metadata_json(name: str, metadata_path: Path, content: str) -> str:
    """Extract the top-level "version" string of a metadata.json."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedMetadata(name, metadata_path, f"invalid JSON: {e}") from e

    version = data.get("version") if isinstance(data, dict) else None
    if not isinstance(version, str) or not version:
        raise MalformedMetadata(name, metadata_path, "no version declared")
    return version


def read_metadata_version(cookbook_dir: Path) -> str:
    """Read the version declared by the cookbook in `cookbook_dir`.

    Args:
        cookbook_dir: Directory containing metadata.rb or metadata.json

    Returns:
        The declared version with its quotes stripped

    Raises:
        MalformedMetadata: If no metadata file exists, it cannot be read as UTF-8,
            or no version can be parsed
    """
    name = cookbook_dir.name
    metadata_path = find_metadata_file(cookbook_dir)
    if metadata_path is None:
        raise MalformedMetadata(name, cookbook_dir / METADATA_FILES[0], "file not found")

    try:
        content = metadata_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedMetadata(name, metadata_path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise MalformedMetadata(name, metadata_path, f"unreadable: {e}") from e

    if metadata_path.name == "metadata.json":
        return parse_metadata_json(name, metadata_path, content)
    return parse_metadata_rb(name, metadata_path, content)
