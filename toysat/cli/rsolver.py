"""CLI tool for checking satisfiability of a propositional formula."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from toysat import TOYSAT_DEBUG
from toysat.bool.sat.checker import check_formula
from toysat.bool.sat.config import CheckerConfig
from toysat.utils.exceptions import NothingToSolveError
from toysat.utils.types import SolverResult

# Same exit codes as minisat, except 0 (not 10) for satisfiable
EXIT_SATISFIABLE = 0
EXIT_CANNOT_READ_INPUT = 1
EXIT_CANNOT_SOLVE = 2  # valid input, but the check itself failed
EXIT_CANNOT_PARSE_INPUT = 3
EXIT_UNSATISFIABLE = 20

DESCRIPTION = """\
A toy SAT (boolean SATisfiability) solver
https://en.wikipedia.org/wiki/Satisfiability

You can put the logic expression on the command line (in quotes) or send it via stdin

Example expressions:
a & ~b
x & ~x
mike & sally & ~peter
~(mike & sally) & ~peter

The following are supported: &=and, |=or, ~=not, ()=brackets, letters=literals
There is no attempt at optimization or avoiding recursion
"""


def read_formula(stream: TextIO) -> str:
    """Read a whole stream as one line: CRs dropped, newlines become spaces."""
    return stream.read().replace("\r", "").replace("\n", " ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsolver",
        usage="rsolver '<logic-expression>'",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "-?", "--help", action="help",
                        help="show this help message and exit")
    parser.add_argument("expression", nargs="*",
                        help="Logic expression; read from stdin when omitted")
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Verify the verdict with z3"
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=CheckerConfig.recursion_limit,
        help="Minimum Python recursion limit during the search (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="DEBUG" if TOYSAT_DEBUG else "WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rsolver CLI."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.expression:
        text = " ".join(args.expression)
    else:
        try:
            text = read_formula(sys.stdin)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Cannot read input: {e}", file=sys.stderr)
            return EXIT_CANNOT_READ_INPUT

    config = CheckerConfig(recursion_limit=args.recursion_limit,
                           cross_check=args.cross_check)
    try:
        report = check_formula(text, config)
    except NothingToSolveError as e:
        print(e, file=sys.stderr)
        return EXIT_CANNOT_PARSE_INPUT
    except Exception as e:  # pylint: disable=broad-except
        print(f"Error: {e}", file=sys.stderr)
        if args.log_level == "DEBUG":
            import traceback  # pylint: disable=import-outside-toplevel
            traceback.print_exc()
        return EXIT_CANNOT_SOLVE

    print(f"Parsed Input: {report.parsed_input}")
    print(f"Unique Literals: {report.universe}")

    if report.too_deep:
        print(f"Cannot solve -- {report.result}", file=sys.stderr)
        return EXIT_CANNOT_SOLVE
    if report.status is SolverResult.ERROR:
        print(f"Formula has invalid syntax -- {report.result}", file=sys.stderr)
        return EXIT_CANNOT_PARSE_INPUT

    print(report.result)
    print(f"Number of Evals: {report.stats.expressions}")
    print(f"Number of Lookups: {report.stats.lookups}")
    print(f"Max Depth: {report.stats.max_depth}")
    if report.cross_checked is not None:
        print(f"Cross-check with z3: {'agrees' if report.cross_checked else 'DISAGREES'}")

    if report.status is SolverResult.SAT:
        return EXIT_SATISFIABLE
    return EXIT_UNSATISFIABLE


if __name__ == "__main__":
    sys.exit(main())
