"""Cookbook registry interface."""

from abc import ABC, abstractmethod


class Registry(ABC):
    """Abstract interface for the authoritative cookbook registry (the Chef server)."""

    @abstractmethod
    def list_cookbooks(self) -> list[str]:
        """List the cookbooks known to the registry.

        Returns:
            One "name version" pair per element, whitespace separated

        Raises:
            RuntimeError: If the registry cannot be queried
        """
        ...
