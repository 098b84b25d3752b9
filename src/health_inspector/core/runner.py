"""Applies the checklist to every reconciled cookbook."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from health_inspector.checks.base import Check
from health_inspector.core.cookbook import Cookbook, MalformedMetadata
from health_inspector.core.reconciler import ReconciliationEntry
from health_inspector.core.reporter import Reporter

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Names that passed and failed during one run, in processing order."""

    passed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class Runner:
    """Evaluates all checks for each entry and reports the outcome."""

    def __init__(self, checks: list[Check], reporter: Reporter) -> None:
        self._checks = list(checks)
        self._reporter = reporter

    def evaluate(self, cookbook: Cookbook) -> list[str]:
        """Run every check against `cookbook` and return the failures in check order."""
        failures: list[str] = []
        for check in self._checks:
            message = check.evaluate(cookbook)
            if message is not None:
                logger.debug("%s failed %s", cookbook.name, check.name)
                failures.append(message)
        return failures

    def run(self, entries: Iterable[ReconciliationEntry]) -> RunSummary:
        """Check and report each entry in the order given.

        Malformed metadata is reported as a failure without running any check.
        """
        summary = RunSummary()
        for entry in entries:
            if isinstance(entry, MalformedMetadata):
                failures = [str(entry)]
            else:
                failures = self.evaluate(entry)

            if failures:
                self._reporter.report_failure(entry.name, failures)
                summary.failed.append(entry.name)
            else:
                self._reporter.report_success(entry.name)
                summary.passed.append(entry.name)
        return summary
