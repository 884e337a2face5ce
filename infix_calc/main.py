"""CLI/API entrypoint for infix-calc."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, TextIO

from infix_calc.engine import CalculationError, calculate, evaluate_expression, prepare_expression
from infix_calc.utils.config_loader import CalculatorConfig, ConfigError, load_calculator_config, parse_log_level
from infix_calc.utils.logger import configure_logging, get_logger

logger = get_logger("infix_calc.cli")

EXIT_COMMANDS = frozenset({"exit", "quit"})


def build_parser() -> argparse.ArgumentParser:
    """Builds CLI argument parser for app entrypoints.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(description="infix-calc")
    parser.add_argument("--mode", choices=["cli", "api"], default="cli")
    parser.add_argument(
        "--expr",
        type=str,
        default="",
        help='Mathematical expression to evaluate (e.g., "2 + 3 * sqrt(4)"); interactive mode when omitted',
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON result envelope in cli mode")
    parser.add_argument("--config", type=str, default=None, help="Path of a YAML configuration file")
    parser.add_argument("--host", type=str, default=None, help="Bind host in api mode (overrides config)")
    parser.add_argument("--port", type=int, default=None, help="Bind port in api mode (overrides config)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (overrides config)")
    return parser


def format_result(value: float) -> str:
    """Renders whole numbers without a trailing ``.0``."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _prepare(expression: str, config: CalculatorConfig) -> str:
    return prepare_expression(
        expression,
        max_length=config.engine.max_expression_length,
        normalize_unicode=config.engine.normalize_unicode,
    )


def run_cli(expression: str, config: CalculatorConfig, as_json: bool = False, output: Optional[TextIO] = None) -> int:
    """Evaluates one expression and prints the outcome.

    Args:
        expression: Expression text from ``--expr``.
        config: Loaded settings.
        as_json: Print the tool-style envelope instead of plain text.
        output: Stream to write to, stdout by default.

    Returns:
        Process exit code, 1 when the expression is rejected.
    """
    output = output or sys.stdout

    if as_json:
        try:
            envelope = evaluate_expression(_prepare(expression, config))
        except CalculationError as exc:
            envelope = {"ok": False, "error": str(exc), "method": "prepare_expression", "metadata": {"code": exc.code}}
        print(json.dumps(envelope, ensure_ascii=True, indent=2), file=output)
        return 0 if envelope["ok"] else 1

    try:
        result = calculate(_prepare(expression, config))
    except CalculationError as exc:
        logger.debug("cli_rejected code=%s error=%s", exc.code, exc)
        print("Error: {}".format(exc), file=output)
        return 1
    print(format_result(result), file=output)
    return 0


def run_interactive(config: CalculatorConfig, input_stream: Optional[TextIO] = None, output: Optional[TextIO] = None) -> int:
    """Reads expressions line by line until ``exit``/``quit`` or end of input.

    Returns:
        Process exit code.
    """
    input_stream = input_stream or sys.stdin
    output = output or sys.stdout

    print("Calculator Interactive Mode", file=output)
    print("Enter an expression (or 'exit' to quit):", file=output)

    while True:
        print("> ", end="", file=output, flush=True)
        line = input_stream.readline()
        if not line:
            print(file=output)
            break
        text = line.strip()
        if text.lower() in EXIT_COMMANDS:
            break
        if not text:
            continue

        try:
            result = calculate(_prepare(text, config))
        except CalculationError as exc:
            print("Error: {}".format(exc), file=output)
            continue
        print(format_result(result), file=output)

    return 0


def run_api(config: CalculatorConfig, host: Optional[str] = None, port: Optional[int] = None) -> int:
    """Runs FastAPI server using Uvicorn.

    Args:
        config: Loaded settings.
        host: Bind host override.
        port: Bind port override.

    Returns:
        Process exit code.
    """
    import uvicorn

    from infix_calc.api import create_app

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    logger.info("api_start host=%s port=%s", bind_host, bind_port)
    uvicorn.run(create_app(config), host=bind_host, port=bind_port, log_config=None)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Application entrypoint for CLI, interactive and API modes.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_calculator_config(args.config)
        level = parse_log_level(args.log_level or config.logging.level)
    except ConfigError as exc:
        parser.error(str(exc))

    configure_logging(level, json_format=config.logging.json_format)

    if args.mode == "api":
        return run_api(config, host=args.host, port=args.port)
    if args.expr:
        return run_cli(args.expr, config, as_json=args.json)
    return run_interactive(config)


if __name__ == "__main__":
    raise SystemExit(main())
