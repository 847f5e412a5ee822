"""Composition root for the credit card application evaluator.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (one-shot evaluate or interactive CLI)
"""

import argparse
import json
import logging
import sys
from typing import Any

from cardapp.adapters.cli.commands import CLICommandHandler
from cardapp.adapters.fraud.blocklist import BlocklistFraudCheck
from cardapp.adapters.validator.pattern import PatternFrequentFlyerValidator
from cardapp.config import Settings, load_settings
from cardapp.core.evaluator import CreditCardApplicationEvaluator
from cardapp.core.fraud import NoFraudRiskCheck
from cardapp.core.ports import FraudCheckPort

logger = logging.getLogger(__name__)


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for evaluator commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("cardapp> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = cli_handler.execute(command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  evaluate
    Evaluate a credit card application.
    Optional: age, gross_annual_income, frequent_flyer_number, format

    Example: evaluate {"age": 42, "gross_annual_income": 19999, "frequent_flyer_number": "y"}

  stats
    Show how many frequent flyer lookups were made this session.

    Example: stats

  help
    Show this help message.

  exit
    Exit the CLI.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_evaluator(settings: Settings) -> CreditCardApplicationEvaluator:
    """Wire adapters and core services from settings.

    Args:
        settings: Validated application settings.

    Returns:
        Evaluator ready to take applications.
    """
    validator = PatternFrequentFlyerValidator(
        pattern=settings.frequent_flyer_pattern,
        license_status=settings.validator_license_status,
        known_numbers=settings.known_frequent_flyer_numbers,
    )
    logger.info(f"Validator: pattern {settings.frequent_flyer_pattern!r}")

    fraud_check: FraudCheckPort
    if settings.fraud_blocklist:
        fraud_check = BlocklistFraudCheck(settings.fraud_blocklist)
        logger.info(f"Fraud check: blocklist ({len(settings.fraud_blocklist)} numbers)")
    else:
        fraud_check = NoFraudRiskCheck()
        logger.info("Fraud check: none")

    return CreditCardApplicationEvaluator(
        validator=validator,
        fraud_check=fraud_check,
        rules=settings.to_rules(),
        fraud_failure_policy=settings.to_fraud_failure_policy(),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cardapp",
        description="Evaluate credit card applications.",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Evaluate one application")
    evaluate.add_argument("--age", type=int, default=0)
    evaluate.add_argument("--income", dest="gross_annual_income", type=float, default=0)
    evaluate.add_argument("--frequent-flyer-number", default=None)
    evaluate.add_argument("--format", choices=["json", "text"], default="json")

    subparsers.add_parser("interactive", help="Start an interactive session")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Application entry point.

    Loads configuration, wires adapters, initializes the evaluator,
    and runs the selected command.

    Exit codes:
        0: Successful shutdown
        1: Fatal error or failed command
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings(args.env_file)
        configure_logging(
            "DEBUG" if settings.debug else settings.log_level, settings.log_format
        )
        evaluator = build_evaluator(settings)
        cli_handler = CLICommandHandler(evaluator)

        if args.command == "interactive":
            _run_cli_interactive(cli_handler)
            return

        command_args: dict[str, Any] = {
            "age": args.age,
            "gross_annual_income": args.gross_annual_income,
            "frequent_flyer_number": args.frequent_flyer_number,
            "format": args.format,
        }
        result = cli_handler.execute(args.command, command_args)
        print(json.dumps(result, indent=2, default=str))
        if result.get("status") != "success":
            sys.exit(1)

    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
