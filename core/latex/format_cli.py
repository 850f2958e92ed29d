#!/usr/bin/env python3
"""
Expression Formatter CLI

Command-line interface for converting math engine output to LaTeX.

Usage:
    python -m core.latex.format_cli "(x + 1) ^ 1/2" "2 * x"
    echo "x = 3/4" | python -m core.latex.format_cli --wrap inline
    python -m core.latex.format_cli --trace --stats < results.txt
"""

import argparse
import sys
from typing import List, Optional, TextIO

from config.constants import WRAP_MODES
from config.logging_config import setup_logger
from config.settings import settings
from core.latex.expression_formatter import (
    FormatResult,
    format_expressions,
    get_formatter_statistics,
    wrap_math,
)


def read_expressions(stream: TextIO) -> List[str]:
    """Read one expression per non-empty line"""
    return [line.strip() for line in stream if line.strip()]


def print_result(result: FormatResult, wrap: str, trace: bool = False):
    """Print a formatted expression"""
    output = result.latex
    if not result.is_passthrough:
        output = wrap_math(output, wrap)

    if trace:
        stages = ", ".join(result.stages_applied) or "-"
        print(f"{output}\t[{stages}]")
    else:
        print(output)


def print_statistics(stats: dict):
    """Print batch statistics"""
    print("=" * 40)
    print(f"Total:       {stats['total']}")
    print(f"Passthrough: {stats['passthrough']}")
    print(f"Changed:     {stats['changed']} ({stats['changed_rate']:.1f}%)")
    for name, count in stats['stage_counts'].items():
        print(f"  {name:<12} {count}")
    print("=" * 40)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathfmt",
        description="Convert math engine output to LaTeX"
    )
    parser.add_argument("expressions", nargs="*",
                        help="Engine expressions (read from stdin when omitted)")
    parser.add_argument("-w", "--wrap", default=settings.wrap_mode,
                        choices=WRAP_MODES,
                        help="Math delimiters around each result")
    parser.add_argument("--trace", action="store_true",
                        help="Show the rewrite stages applied to each result")
    parser.add_argument("--stats", action="store_true",
                        help="Print batch statistics after the results")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else settings.log_level
    logger = setup_logger("core", level=level, log_file=settings.log_file)

    expressions = args.expressions or read_expressions(sys.stdin)
    logger.debug(f"Formatting {len(expressions)} expression(s)")

    results = format_expressions(expressions, sentinels=settings.sentinels)
    for result in results:
        print_result(result, args.wrap, trace=args.trace)

    if args.stats:
        print_statistics(get_formatter_statistics(results))

    return 0


if __name__ == "__main__":
    sys.exit(main())
