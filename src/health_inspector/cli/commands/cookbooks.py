"""Cookbooks command - checks every cookbook on the Chef server and in the repo."""

import click

from health_inspector.checks.cookbooks import cookbook_checks
from health_inspector.cli.json_output import emit_json_error
from health_inspector.cli.output import user_output
from health_inspector.cli.reporters import ConsoleReporter, JsonReporter
from health_inspector.core.context import InspectorContext
from health_inspector.core.runner import Runner, RunSummary


@click.command("cookbooks")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
def cookbooks_cmd(ctx: InspectorContext, output_json: bool) -> None:
    """Compare cookbooks on the Chef server against the local checkout.

    Exits non-zero if any cookbook fails a check.
    """
    if output_json:
        json_reporter = JsonReporter()
        summary = _run_checks(ctx, Runner(cookbook_checks(ctx.git), json_reporter), output_json)
        json_reporter.flush()
    else:
        console_reporter = ConsoleReporter()
        console_reporter.banner("Inspecting cookbooks")
        summary = _run_checks(ctx, Runner(cookbook_checks(ctx.git), console_reporter), output_json)
        console_reporter.summary(len(summary.passed), len(summary.failed))

    if not summary.ok:
        raise SystemExit(1)


def _run_checks(ctx: InspectorContext, runner: Runner, output_json: bool) -> RunSummary:
    # knife and git failures are fatal for the whole run
    try:
        reconciliation = ctx.reconciler().reconcile()
        return runner.run(reconciliation.entries)
    except RuntimeError as e:
        if output_json:
            emit_json_error(str(e), type(e).__name__)
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
