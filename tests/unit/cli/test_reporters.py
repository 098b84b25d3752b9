"""Tests for the console and JSON reporters."""

import json

import pytest

from health_inspector.cli.reporters import ConsoleReporter, JsonReporter


def test_console_reporter_prints_success_and_failures(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ConsoleReporter()

    reporter.report_success("apache2")
    reporter.report_failure("nginx", ["exists locally but not on server"])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "✓ apache2" in captured.err
    assert "✗ nginx" in captured.err
    assert "    - exists locally but not on server" in captured.err


def test_console_reporter_indents_multiline_messages(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ConsoleReporter()

    reporter.report_failure("apache2", ["uncommitted changes:\n M file.txt"])

    lines = capsys.readouterr().err.splitlines()
    assert lines[1] == "    - uncommitted changes:"
    assert lines[2] == "     M file.txt"


def test_console_reporter_summary(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleReporter().summary(2, 1)

    assert "2 passed, 1 failed" in capsys.readouterr().err


def test_json_reporter_emits_collected_results(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = JsonReporter()
    reporter.report_success("apache2")
    reporter.report_failure("nginx", ["exists locally but not on server"])

    reporter.flush()

    data = json.loads(capsys.readouterr().out)
    assert data == {
        "cookbooks": [
            {"name": "apache2", "status": "pass", "failures": []},
            {"name": "nginx", "status": "fail", "failures": ["exists locally but not on server"]},
        ],
        "passed": 1,
        "failed": 1,
    }


def test_json_reporter_collects_results_in_report_order(
    capsys: pytest.CaptureFixture[str],
) -> None:
    reporter = JsonReporter()
    reporter.report_failure("nginx", ["exists locally but not on server"])
    reporter.report_success("apache2")

    assert [(r.name, r.status) for r in reporter.results] == [
        ("nginx", "fail"),
        ("apache2", "pass"),
    ]
    assert capsys.readouterr().out == ""
