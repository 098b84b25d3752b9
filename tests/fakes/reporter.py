"""Fake Reporter implementation for testing."""

from health_inspector.core.reporter import Reporter


class FakeReporter(Reporter):
    """Records reported events in order.

    Each event is ("success", name, []) or ("failure", name, messages).
    """

    def __init__(self) -> None:
        self._events: list[tuple[str, str, list[str]]] = []

    def report_success(self, name: str) -> None:
        self._events.append(("success", name, []))

    def report_failure(self, name: str, messages: list[str]) -> None:
        self._events.append(("failure", name, list(messages)))

    @property
    def events(self) -> list[tuple[str, str, list[str]]]:
        return self._events.copy()

    @property
    def failures(self) -> dict[str, list[str]]:
        """Failure messages keyed by cookbook name."""
        return {name: messages for kind, name, messages in self._events if kind == "failure"}
