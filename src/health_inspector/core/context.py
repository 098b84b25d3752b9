"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from health_inspector.core.config import InspectorConfig, load_config
from health_inspector.core.git.abc import Git
from health_inspector.core.git.real import RealGit
from health_inspector.core.local.abc import LocalCookbooks
from health_inspector.core.local.real import RealLocalCookbooks
from health_inspector.core.reconciler import Reconciler
from health_inspector.core.registry.abc import Registry
from health_inspector.core.registry.real import RealRegistry


@dataclass(frozen=True)
class InspectorContext:
    """Immutable context holding all dependencies for an inspection run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: Registry
    local_cookbooks: LocalCookbooks
    git: Git
    repo_root: Path
    config: InspectorConfig

    @property
    def search_roots(self) -> list[Path]:
        return self.config.search_roots(self.repo_root)

    def reconciler(self) -> Reconciler:
        return Reconciler(self.registry, self.local_cookbooks, self.search_roots)

    @staticmethod
    def for_test(
        registry: Registry | None = None,
        local_cookbooks: LocalCookbooks | None = None,
        git: Git | None = None,
        repo_root: Path | None = None,
        config: InspectorConfig | None = None,
    ) -> "InspectorContext":
        """Create test context with optional pre-configured collaborators.

        Unspecified collaborators default to empty fakes, so a bare
        `InspectorContext.for_test()` never touches knife, git or the disk.

        Example:
            >>> registry = FakeRegistry(cookbooks={"apache2": "1.0.0"})
            >>> ctx = InspectorContext.for_test(registry=registry, repo_root=tmp_path)
        """
        from tests.fakes.git import FakeGit
        from tests.fakes.local_cookbooks import FakeLocalCookbooks
        from tests.fakes.registry import FakeRegistry
        from tests.test_utils.paths import sentinel_path

        return InspectorContext(
            registry=registry if registry is not None else FakeRegistry(),
            local_cookbooks=(
                local_cookbooks if local_cookbooks is not None else FakeLocalCookbooks()
            ),
            git=git if git is not None else FakeGit(),
            repo_root=repo_root if repo_root is not None else sentinel_path(),
            config=config if config is not None else InspectorConfig(),
        )


def create_context(repo_root: Path, *, config: InspectorConfig | None = None) -> InspectorContext:
    """Create production context with real implementations.

    Args:
        repo_root: chef-repo checkout holding the cookbooks and the config file
        config: Config to use instead of loading it from the repository

    Raises:
        ValueError: If the repository config is invalid
    """
    repo_root = repo_root.resolve()
    if config is None:
        config = load_config(repo_root)

    registry = RealRegistry(
        knife_command=config.knife_command,
        knife_config=config.knife_config_path(repo_root),
        cwd=repo_root,
    )

    return InspectorContext(
        registry=registry,
        local_cookbooks=RealLocalCookbooks(),
        git=RealGit(),
        repo_root=repo_root,
        config=config,
    )
