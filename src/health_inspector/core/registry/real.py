"""Production registry implementation backed by knife."""

import logging
from pathlib import Path

from health_inspector.core.registry.abc import Registry
from health_inspector.core.registry.parsing import parse_knife_json
from health_inspector.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealRegistry(Registry):
    """Queries the Chef server through `knife cookbook list -Fj`."""

    def __init__(self, *, knife_command: str, knife_config: Path | None, cwd: Path) -> None:
        """Create a registry bound to one knife configuration.

        Args:
            knife_command: knife executable to invoke
            knife_config: Optional knife.rb passed with `-c`
            cwd: Directory knife runs in (the chef-repo root)
        """
        self._knife_command = knife_command
        self._knife_config = knife_config
        self._cwd = cwd

    def list_cookbooks(self) -> list[str]:
        cmd = [self._knife_command, "cookbook", "list", "-Fj"]
        if self._knife_config is not None:
            cmd.extend(["-c", str(self._knife_config)])

        result = run_subprocess_with_context(
            cmd,
            operation_context="list cookbooks on the Chef server",
            cwd=self._cwd,
        )
        entries = parse_knife_json(result.stdout)
        logger.debug("Chef server reported %d cookbook(s)", len(entries))
        return entries
