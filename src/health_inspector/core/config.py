"""Per-repository configuration stored in `.health_inspector/config.toml`."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomlkit

CONFIG_DIR_NAME = ".health_inspector"
CONFIG_FILE_NAME = "config.toml"
DEFAULT_COOKBOOK_PATH = ("cookbooks", "site-cookbooks")
DEFAULT_KNIFE_COMMAND = "knife"


@dataclass(frozen=True)
class InspectorConfig:
    """In-memory representation of `.health_inspector/config.toml`.

    Paths are kept as written; use the resolve helpers to anchor them at the
    repository root.
    """

    cookbook_path: list[str] = field(default_factory=lambda: list(DEFAULT_COOKBOOK_PATH))
    knife_command: str = DEFAULT_KNIFE_COMMAND
    knife_config: str | None = None

    def search_roots(self, repo_root: Path) -> list[Path]:
        """Cookbook search roots in precedence order, relative entries anchored at repo_root."""
        return [repo_root / Path(entry).expanduser() for entry in self.cookbook_path]

    def knife_config_path(self, repo_root: Path) -> Path | None:
        if self.knife_config is None:
            return None
        return repo_root / Path(self.knife_config).expanduser()


def config_path(repo_root: Path) -> Path:
    return repo_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(repo_root: Path) -> InspectorConfig:
    """Load config.toml for the repository if present; otherwise return defaults.

    Example config:
      cookbook_path = ["cookbooks", "site-cookbooks"]

      [knife]
      command = "knife"
      config = ".chef/knife.rb"

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    cfg_path = config_path(repo_root)
    if not cfg_path.exists():
        return InspectorConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    cookbook_path = data.get("cookbook_path", list(DEFAULT_COOKBOOK_PATH))
    if not isinstance(cookbook_path, list) or not all(isinstance(p, str) for p in cookbook_path):
        raise ValueError(f"'cookbook_path' in {cfg_path} must be a list of strings")

    knife = data.get("knife", {})
    if not isinstance(knife, dict):
        raise ValueError(f"'knife' in {cfg_path} must be a table")

    command = knife.get("command", DEFAULT_KNIFE_COMMAND)
    if not isinstance(command, str) or not command:
        raise ValueError(f"'knife.command' in {cfg_path} must be a non-empty string")

    knife_config = knife.get("config")
    if knife_config is not None and not isinstance(knife_config, str):
        raise ValueError(f"'knife.config' in {cfg_path} must be a string")

    return InspectorConfig(
        cookbook_path=cookbook_path,
        knife_command=command,
        knife_config=knife_config,
    )


def save_config(repo_root: Path, config: InspectorConfig) -> Path:
    """Save InspectorConfig to config.toml, creating the config directory if needed.

    Returns:
        Path of the written file
    """
    cfg_path = config_path(repo_root)
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    doc = tomlkit.document()
    doc["cookbook_path"] = config.cookbook_path

    knife = tomlkit.table()
    knife["command"] = config.knife_command
    if config.knife_config is not None:
        knife["config"] = config.knife_config
    doc["knife"] = knife

    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return cfg_path
