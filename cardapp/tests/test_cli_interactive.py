"""Tests for interactive CLI loop functionality.

Covers:
- _run_cli_interactive: REPL-like command loop
- EOF/KeyboardInterrupt handling
- JSON command parsing
"""

import json
from unittest.mock import call, patch

import pytest

from cardapp.adapters.cli.commands import CLICommandHandler
from cardapp.core.evaluator import CreditCardApplicationEvaluator
from cardapp.main import _run_cli_interactive
from cardapp.tests.fakes import FakeFrequentFlyerNumberValidator


@pytest.fixture
def handler() -> CLICommandHandler:
    return CLICommandHandler(
        CreditCardApplicationEvaluator(FakeFrequentFlyerNumberValidator())
    )


class TestInteractiveCLILoop:
    """Test suite for interactive CLI loop."""

    def test_cli_reads_and_executes_commands(
        self, handler: CLICommandHandler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Commands in 'command args_json' format are executed and printed as JSON."""
        commands = [
            'evaluate {"age": 42, "gross_annual_income": 19999, "frequent_flyer_number": "y"}',
            "exit",
        ]

        with patch("builtins.input", side_effect=commands):
            _run_cli_interactive(handler)

        result = json.loads(capsys.readouterr().out)
        assert result["decision"] == "auto_declined"

    def test_lookup_count_persists_across_commands(
        self, handler: CLICommandHandler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The session shares one evaluator."""
        commands = [
            'evaluate {"age": 42, "frequent_flyer_number": "a"}',
            'evaluate {"age": 42, "frequent_flyer_number": "b"}',
            "stats",
            "exit",
        ]

        with patch("builtins.input", side_effect=commands):
            _run_cli_interactive(handler)

        assert handler.evaluator.lookup_count == 2
        assert '"lookup_count": 2' in capsys.readouterr().out

    def test_cli_handles_json_parse_errors(self, handler: CLICommandHandler) -> None:
        """Malformed JSON is reported and the loop continues."""
        commands = [
            "evaluate not-valid-json",
            "exit",
        ]

        with patch("builtins.input", side_effect=commands):
            _run_cli_interactive(handler)

        assert handler.evaluator.lookup_count == 0

    def test_cli_reports_unknown_command(
        self, handler: CLICommandHandler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Unknown commands print an error result instead of stopping the loop."""
        commands = ["approve {}", "exit"]

        with patch("builtins.input", side_effect=commands):
            _run_cli_interactive(handler)

        result = json.loads(capsys.readouterr().out)
        assert result["status"] == "error"
        assert "Unknown command" in result["message"]

    def test_cli_handles_eof(self, handler: CLICommandHandler) -> None:
        """EOF (Ctrl+D) exits gracefully."""
        with patch("builtins.input", side_effect=EOFError()):
            _run_cli_interactive(handler)

    def test_cli_handles_keyboard_interrupt(self, handler: CLICommandHandler) -> None:
        """Ctrl+C cancels the current line and keeps the loop running."""
        with patch("builtins.input", side_effect=[KeyboardInterrupt(), "exit"]) as mock_input:
            _run_cli_interactive(handler)

        assert mock_input.call_count == 2

    def test_cli_skips_empty_lines_and_shows_help(
        self, handler: CLICommandHandler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("builtins.input", side_effect=["", "   ", "help", "EXIT"]):
            _run_cli_interactive(handler)

        assert "Available Commands" in capsys.readouterr().out

    def test_cli_dispatches_through_given_handler(self, handler: CLICommandHandler) -> None:
        """Every command runs on the session's handler rather than a new one."""
        commands = [
            'evaluate {"age": 42, "frequent_flyer_number": "a"}',
            "stats",
            "exit",
        ]

        with patch("builtins.input", side_effect=commands), patch.object(
            handler, "execute", wraps=handler.execute
        ) as execute:
            _run_cli_interactive(handler)

        assert execute.call_args_list == [
            call("evaluate", {"age": 42, "frequent_flyer_number": "a"}),
            call("stats", {}),
        ]
