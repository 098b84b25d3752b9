"""Tests for loading and saving the repository config."""

from pathlib import Path

import pytest

from health_inspector.core.config import (
    InspectorConfig,
    config_path,
    load_config,
    save_config,
)


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == InspectorConfig()
    assert config.cookbook_path == ["cookbooks", "site-cookbooks"]
    assert config.knife_command == "knife"
    assert config.knife_config is None


def test_load_reads_all_fields(tmp_path: Path) -> None:
    cfg = config_path(tmp_path)
    cfg.parent.mkdir()
    cfg.write_text(
        'cookbook_path = ["vendor/cookbooks", "cookbooks"]\n'
        "\n"
        "[knife]\n"
        'command = "/opt/chef/bin/knife"\n'
        'config = ".chef/knife.rb"\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.cookbook_path == ["vendor/cookbooks", "cookbooks"]
    assert config.knife_command == "/opt/chef/bin/knife"
    assert config.knife_config == ".chef/knife.rb"


def test_search_roots_are_anchored_at_repo_root(tmp_path: Path) -> None:
    config = InspectorConfig(cookbook_path=["cookbooks", "/srv/shared-cookbooks"])

    assert config.search_roots(tmp_path) == [
        tmp_path / "cookbooks",
        Path("/srv/shared-cookbooks"),
    ]


def test_knife_config_path(tmp_path: Path) -> None:
    assert InspectorConfig().knife_config_path(tmp_path) is None
    assert InspectorConfig(knife_config=".chef/knife.rb").knife_config_path(tmp_path) == (
        tmp_path / ".chef" / "knife.rb"
    )


def test_save_then_load_preserves_config(tmp_path: Path) -> None:
    config = InspectorConfig(
        cookbook_path=["site-cookbooks"],
        knife_command="knife",
        knife_config=".chef/knife.rb",
    )

    written = save_config(tmp_path, config)

    assert written == config_path(tmp_path)
    assert load_config(tmp_path) == config


def test_invalid_toml_raises_value_error(tmp_path: Path) -> None:
    cfg = config_path(tmp_path)
    cfg.parent.mkdir()
    cfg.write_text("cookbook_path = [\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ('cookbook_path = "cookbooks"\n', "cookbook_path"),
        ("cookbook_path = [1, 2]\n", "cookbook_path"),
        ('knife = "knife"\n', "knife"),
        ('[knife]\ncommand = ""\n', "knife.command"),
        ("[knife]\nconfig = 3\n", "knife.config"),
    ],
)
def test_wrong_types_raise_value_error(tmp_path: Path, content: str, field: str) -> None:
    cfg = config_path(tmp_path)
    cfg.parent.mkdir()
    cfg.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=field):
        load_config(tmp_path)
