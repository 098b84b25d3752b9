"""Base class for cookbook checks."""

from abc import ABC, abstractmethod

from health_inspector.core.cookbook import Cookbook


class Check(ABC):
    """A single independent rule over a Cookbook.

    Checks never look at each other's outcomes; the runner evaluates every
    check for every cookbook and collects all failures.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this check."""

    @abstractmethod
    def evaluate(self, cookbook: Cookbook) -> str | None:
        """Evaluate the rule.

        Args:
            cookbook: Merged cookbook record

        Returns:
            A failure message, or None if the cookbook passes
        """
