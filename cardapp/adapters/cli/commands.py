"""CLI command implementations for the credit card application evaluator.

This adapter maps CLI commands (evaluate, stats) to EvaluationPort
operations. It handles CLI-specific parsing, formatting and error reporting.
"""

import logging
from typing import Any

from cardapp.core.models import CreditCardApplication, CreditCardApplicationDecision
from cardapp.core.ports import EvaluationPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to EvaluationPort."""

    def __init__(self, evaluator: EvaluationPort):
        """Initialize the CLI command handler.

        Args:
            evaluator: EvaluationPort implementation to execute commands.
        """
        self.evaluator = evaluator

    def evaluate_application(
        self,
        age: Any = 0,
        gross_annual_income: Any = 0,
        frequent_flyer_number: Any = None,
        output_format: str = "json",
    ) -> dict[str, Any]:
        """Evaluate a single application via CLI.

        Args:
            age: Applicant age. Strings are converted to int.
            gross_annual_income: Gross annual income. Strings are converted to float.
            frequent_flyer_number: Optional frequent-flyer number. Non-string
                values (JSON numbers) are converted to str; empty means missing.
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with status and decision, or status/message on error.
        """
        if output_format not in ("json", "text"):
            return {
                "status": "error",
                "operation": "evaluate",
                "message": f"Unsupported format: {output_format}",
            }

        try:
            application = CreditCardApplication(
                age=int(age),
                gross_annual_income=float(gross_annual_income),
                frequent_flyer_number=(
                    str(frequent_flyer_number)
                    if frequent_flyer_number not in (None, "")
                    else None
                ),
            )
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid application: {e}")
            return {
                "status": "error",
                "operation": "evaluate",
                "message": str(e),
            }

        decision = self.evaluator.evaluate(application)

        if output_format == "text":
            return {
                "status": "success",
                "operation": "evaluate",
                "data": self._format_decision_as_text(application, decision),
            }

        return {
            "status": "success",
            "operation": "evaluate",
            "decision": decision.value,
            "application": {
                "age": application.age,
                "gross_annual_income": application.gross_annual_income,
                "frequent_flyer_number": application.frequent_flyer_number,
            },
            "lookup_count": self.evaluator.lookup_count,
        }

    def get_stats(self) -> dict[str, Any]:
        """Report evaluator statistics via CLI."""
        return {
            "status": "success",
            "operation": "stats",
            "lookup_count": self.evaluator.lookup_count,
        }

    def _format_decision_as_text(
        self,
        application: CreditCardApplication,
        decision: CreditCardApplicationDecision,
    ) -> str:
        """Format a decision as human-readable text."""
        lines = [
            f"Age: {application.age}",
            f"Gross Annual Income: {application.gross_annual_income:,.2f}",
            f"Frequent Flyer Number: {application.frequent_flyer_number or '-'}",
            "",
            f"Decision: {decision.value.replace('_', ' ').upper()}",
        ]
        return "\n".join(lines)

    def execute(self, command: str, args: dict[str, Any]) -> dict[str, Any]:
        """Dispatch a named command to the matching handler method.

        Args:
            command: Command name ('evaluate', 'stats').
            args: Dictionary of command arguments.

        Returns:
            Dictionary with command result.

        Raises:
            ValueError: If command is not recognized.
        """
        if command == "evaluate":
            return self.evaluate_application(
                age=args.get("age", 0),
                gross_annual_income=args.get("gross_annual_income", 0),
                frequent_flyer_number=args.get("frequent_flyer_number"),
                output_format=args.get("format", "json"),
            )

        elif command == "stats":
            return self.get_stats()

        else:
            raise ValueError(f"Unknown command: {command}")


def run_command(
    evaluator: EvaluationPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a single CLI command against an evaluator.

    Stateless one-shot entry point: builds a throwaway CLICommandHandler
    for each call. Callers that already hold a handler (the interactive
    loop, main) should call CLICommandHandler.execute directly.

    Args:
        evaluator: EvaluationPort implementation.
        command: Command name ('evaluate', 'stats').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized.
    """
    return CLICommandHandler(evaluator).execute(command, args)
