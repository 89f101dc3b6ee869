# cli.py

"""Command-line entry point: one-shot evaluation or the interactive REPL."""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import load_settings
from .errors import CalculatorError
from .evaluator import evaluate
from .repl import REPL, format_result

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linecalc",
        description="Evaluate an arithmetic expression. Without one, reads a line from "
                    "standard input, or starts an interactive prompt on a terminal.",
        epilog="Put -- before an expression that starts with a sign, e.g. linecalc -- -2+3",
    )
    parser.add_argument("expression", nargs="*", help="Expression to evaluate, e.g. '2 + 3 * 4'")
    parser.add_argument("--precision", type=int, default=None,
                        help="Significant digits when printing the result")
    parser.add_argument("--no-history", action="store_true",
                        help="Do not read or write the REPL history file")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    return parser


def run_once(text: str, precision: Optional[int] = None) -> int:
    """Evaluates one line and prints '= value' or the error."""
    try:
        value = evaluate(text)
    except CalculatorError as e:
        print(f"error: {e}")
        return EXIT_PARSE_ERROR
    print(f"= {format_result(value, precision)}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(
            precision=args.precision,
            log_level=args.log_level,
            history_file="" if args.no_history else None,
        )
    except ValidationError as e:
        print(f"linecalc: invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.expression:
        return run_once(" ".join(args.expression), settings.precision)
    if not sys.stdin.isatty():
        line = sys.stdin.readline()
        logger.info("Evaluating line read from standard input")
        return run_once(line.strip(), settings.precision)

    repl = REPL(settings)
    repl.repl_loop()
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
