"""Reporter interface receiving per-cookbook outcomes."""

from abc import ABC, abstractmethod


class Reporter(ABC):
    """Receives exactly one success or failure event per checked cookbook."""

    @abstractmethod
    def report_success(self, name: str) -> None:
        """Record that every check passed for `name`."""

    @abstractmethod
    def report_failure(self, name: str, messages: list[str]) -> None:
        """Record the failure messages for `name`, in check order."""
