"""Reporter implementations for the CLI."""

import click

from health_inspector.cli.json_output import emit_json
from health_inspector.cli.json_schemas import CookbookResult, CookbooksCommandResponse
from health_inspector.cli.output import user_output
from health_inspector.core.reporter import Reporter


def _indent(message: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line for line in message.splitlines())


class ConsoleReporter(Reporter):
    """Prints a coloured line per cookbook, with failure messages indented below."""

    def banner(self, title: str) -> None:
        user_output(click.style(title, bold=True))

    def report_success(self, name: str) -> None:
        user_output(click.style(f"✓ {name}", fg="green"))

    def report_failure(self, name: str, messages: list[str]) -> None:
        user_output(click.style(f"✗ {name}", fg="red"))
        for message in messages:
            user_output(_indent(f"- {message}"))

    def summary(self, passed: int, failed: int) -> None:
        color = "green" if failed == 0 else "red"
        user_output("")
        user_output(click.style(f"{passed} passed, {failed} failed", fg=color))


class JsonReporter(Reporter):
    """Collects results and emits a single JSON document when flushed."""

    def __init__(self) -> None:
        self._results: list[CookbookResult] = []

    @property
    def results(self) -> list[CookbookResult]:
        return list(self._results)

    def report_success(self, name: str) -> None:
        self._results.append(CookbookResult(name=name, status="pass", failures=[]))

    def report_failure(self, name: str, messages: list[str]) -> None:
        self._results.append(CookbookResult(name=name, status="fail", failures=list(messages)))

    def flush(self) -> None:
        failed = sum(1 for result in self._results if result.status == "fail")
        response = CookbooksCommandResponse(
            cookbooks=self._results,
            passed=len(self._results) - failed,
            failed=failed,
        )
        emit_json(response.model_dump(mode="json"))
