"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from health_inspector.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("health_inspector.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "success output"
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["git", "status"],
            operation_context="check git status",
            cwd=Path("/repo"),
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["git", "status"],
            cwd=Path("/repo"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("health_inspector.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=128,
            cmd=["git", "status"],
            stderr="fatal: not a git repository (or any of the parent directories): .git",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["git", "status"],
                operation_context="get status of /repo/apache2",
                cwd=Path("/repo/apache2"),
            )

        error_message = str(exc_info.value)
        assert "Failed to get status of /repo/apache2" in error_message
        assert "Command: git status" in error_message
        assert "Exit code: 128" in error_message
        assert "stderr: fatal: not a git repository" in error_message


def test_failure_with_stdout_includes_stdout_in_error() -> None:
    with patch("health_inspector.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=100,
            cmd=["knife", "cookbook", "list", "-Fj"],
            output="ERROR: Your private key could not be loaded\n",
            stderr="",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["knife", "cookbook", "list", "-Fj"],
                operation_context="list cookbooks on the Chef server",
            )

        error_message = str(exc_info.value)
        assert "stdout: ERROR: Your private key could not be loaded" in error_message
        assert "stderr:" not in error_message


def test_missing_binary_raises_runtime_error() -> None:
    with patch("health_inspector.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'knife'")

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["knife", "cookbook", "list", "-Fj"],
                operation_context="list cookbooks on the Chef server",
            )

        error_message = str(exc_info.value)
        expected = "Command not found while trying to list cookbooks on the Chef server"
        assert expected in error_message
        assert "Full command: knife cookbook list -Fj" in error_message
