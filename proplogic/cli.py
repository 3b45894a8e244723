"""
truthtable - print the truth table of a propositional expression.

Usage:
    # Tabulate an expression (default mode)
    truthtable -e "(A & B) | !C"

    # Rebuild an expression from literal rows (A column first, result last)
    truthtable -t "001, 011, 101, 110"

    # Machine-readable output
    truthtable -e "A | B" --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, NoReturn, Optional

from dotenv import load_dotenv

from .config import TruthTableConfig, resolve_config
from .errors import TruthTableError
from .render import render_json, render_table
from .truth_table import TruthTable

logger = logging.getLogger(__name__)

MODE_EXPRESSION = "expression"
MODE_ROWS = "rows"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="truthtable",
        description="Evaluate a propositional expression over A-D, or rebuild one from truth table rows.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Operators: '&' or '*' (and), '|' or '+' (or), '!' or '/' (not). AND and OR
share one precedence and are evaluated left to right.

Examples:
    truthtable -e "(A & B) | (C & D)"
    truthtable -t "001, 011, 101, 111"
        """,
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-e",
        "--expression",
        dest="mode",
        action="store_const",
        const=MODE_EXPRESSION,
        help="Treat INPUT as an expression (default)",
    )
    mode_group.add_argument(
        "-t",
        "--truth-table",
        dest="mode",
        action="store_const",
        const=MODE_ROWS,
        help="Treat INPUT as literal truth table rows",
    )
    parser.set_defaults(mode=MODE_EXPRESSION)

    parser.add_argument("input", metavar="INPUT", help="Expression text or truth table rows")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the table as JSON instead of a console table",
    )
    parser.add_argument(
        "--minterm",
        action="store_true",
        default=None,
        help="Reconstruct expressions as full minterms (negating unset propositions)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (overrides configuration)",
    )
    return parser


def run(mode: str, text: str, config: TruthTableConfig, as_json: bool = False) -> str:
    """Build the table for ``text`` and return the rendered output."""
    expression: Optional[str] = None
    if mode == MODE_ROWS:
        table = TruthTable.parse_rows(text, separator=config.row_separator)
        expression = table.to_expression_str(minterm=config.minterm)
        logger.info(f"Reconstructed expression from {len(table)} row(s)")
    else:
        table = TruthTable.parse_expression_str(text)
        logger.info(f"Evaluated {len(table)} permutation(s)")

    if as_json:
        return render_json(table, expression)

    output = render_table(table, config)
    if expression is not None:
        output += f"\n\nExpression: {expression}"
    return output


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the truthtable CLI.

    Returns:
        Exit code (0 for success, 1 for invalid input or configuration).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args.config)
    except TruthTableError as e:
        logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
        logger.error(str(e))
        return 1

    if args.log_level:
        config = replace(config, log_level=args.log_level)
    if args.minterm:
        config = replace(config, minterm=True)

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        output = run(args.mode, args.input, config, as_json=args.json)
    except TruthTableError as e:
        logger.error(str(e))
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
