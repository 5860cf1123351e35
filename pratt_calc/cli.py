# cli.py
"""Command-line entry point: evaluate expressions given as arguments, or start the shell."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from pratt_calc import __version__
from pratt_calc.config import CalculatorSettings, load_settings
from pratt_calc.errors import CalculatorError
from pratt_calc.interpreter import Interpreter
from pratt_calc.nodes import format_number
from pratt_calc.repl import REPL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pratt-calc",
        description="Evaluate arithmetic expressions with a Pratt parser.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        metavar="EXPR",
        help="Expressions to evaluate in order in one session. Starts the interactive shell when omitted.",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the parse tree of each expression instead of its value.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (overrides PRATT_CALC_LOG_LEVEL).",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the welcome banner in interactive mode.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_expressions(expressions: List[str], tree: bool = False) -> int:
    """Evaluate each expression against one session. Returns 1 if any failed."""
    interpreter = Interpreter()
    status = 0
    for expr in expressions:
        try:
            if tree:
                print(interpreter.to_tree_string(expr))
            else:
                print(format_number(interpreter.interpret(expr)))
        except CalculatorError as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1
    return status


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        updates = {}
        if args.log_level:
            updates['log_level'] = args.log_level
        if args.no_banner:
            updates['show_banner'] = False
        if updates:
            settings = CalculatorSettings.model_validate({**settings.model_dump(), **updates})
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.expressions:
        return run_expressions(args.expressions, tree=args.tree)

    REPL(settings).repl_loop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
