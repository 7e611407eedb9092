#!/usr/bin/env python3
# run_deduction.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Command-line interface for deduction checking with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from solver import DeductionSolver, Verdict
from utils.premise_reader import (
    Problem,
    PremiseFormatError,
    read_premises,
    read_premise_stream,
)
from utils.logger import configure_logging, get_logger
from formula.exceptions import ParseError


def load_problem(premises_path: Optional[Path], deduction: Optional[str]) -> Problem:
    """Read the problem from a file, or from stdin when no path is given."""
    if premises_path is None:
        return read_premise_stream(sys.stdin, deduction)
    return read_premises(premises_path, deduction)


def print_problem_summary(problem: Problem) -> None:
    """Print the normalized premises that will be solved.

    Args:
        problem: Loaded problem
    """
    logger = get_logger()

    logger.info(f"📋 {len(problem.premises)} premise(s) loaded:")
    for source, premise in zip(problem.sources, problem.premises):
        logger.info(f"  {source}  ⇒  {premise}")
    logger.info(f"∴ {problem.deduction}")


def summarize_verdict(solver: DeductionSolver) -> List[str]:
    """Describe how the solver ended, for the verbose log.

    Args:
        solver: Finished solver

    Returns:
        Log lines; for an indeterminate verdict these list the premises that
        could not be reduced any further
    """
    verdict = solver.verdict
    if verdict.is_conclusive():
        return [
            f"✅ {solver.deduction} decided after {solver.iterations} iteration(s)"
        ]

    lines = [f"❓ {solver.deduction} not forced; unresolved premises:"]
    lines.extend(f"  {premise}" for premise in solver.premises)
    return lines


def render_result(verdict: Verdict) -> str:
    """Result line in the tool's reference wording."""
    return f"the deduction is {verdict.render()}."


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Deducer - decide a propositional deduction from its premises",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_deduction.py -p premises.txt
  python run_deduction.py -p premises.txt -d j -v
  python run_deduction.py --debug < premises.txt

Premise file format:
  One formula per line, then a deduction line, e.g.:

  premises.txt:
    (m ∧ ¬b) → j
    (f ∨ s) → m
    b → t
    f → ¬t
    f
    ∴ j
        """,
    )

    parser.add_argument(
        "-p",
        "--premises",
        type=Path,
        default=None,
        help="Path to premise file (reads stdin when omitted)",
    )

    parser.add_argument(
        "-d",
        "--deduction",
        default=None,
        help="Proposition to decide (overrides the ∴ line of the input)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only parse the premises and report, without solving",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the deduction checker.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        problem = load_problem(args.premises, args.deduction)
        print_problem_summary(problem)

        if args.validate_only:
            print(f"{len(problem.premises)} premise(s) are well-formed.")
            return 0

        solver = DeductionSolver(problem.premises, problem.deduction)
        verdict = solver.run()

        for line in summarize_verdict(solver):
            logger.info(line)
        logger.final_verdict(str(verdict))
        print(render_result(verdict))
        return 0

    except PremiseFormatError as e:
        logger.error(f"Premise input error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except FileNotFoundError as e:
        logger.error(f"Premise file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
