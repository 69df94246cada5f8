"""Tests for the demo entry point."""

from __future__ import annotations

import errno
from unittest.mock import patch

from mthread.__main__ import main, run_demo
from mthread.exceptions import ThreadCreationError
from mthread.services.launcher import ThreadLauncher
from mthread.services.native_thread import NativeThreadPrimitive


class TestRunDemo:
    """Test the demo scenarios."""

    def test_counter_and_result_slot(self):
        count, result = run_demo(ThreadLauncher(NativeThreadPrimitive(0)), 100, 42)

        assert count == 100
        assert result == 42


class TestMain:
    """Test the command line entry point."""

    def test_prints_results(self, capsys):
        exit_code = main(["--threads", "10", "--value", "7", "--log-level", "warning"])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "counter: 10/10" in output
        assert "result slot: 7" in output

    def test_creation_failure_returns_code(self):
        with patch("mthread.__main__.run_demo", side_effect=ThreadCreationError(errno.EAGAIN)):
            assert main(["--threads", "1"]) == errno.EAGAIN
