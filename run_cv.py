#!/usr/bin/env python3
# run_cv.py
# This file is part of Corvec - Correlation Vector tracing
#
# Command-line interface for creating and mutating correlation vectors

import sys
import argparse
import uuid
from typing import List, Optional

from model import CorrelationVector, SpinParams
from parser import parse, ParseError
from utils.logger import configure_logging, get_logger


def build_vector(args: argparse.Namespace) -> CorrelationVector:
    """Create or parse the vector the command operates on.

    Args:
        args: Parsed command line arguments

    Returns:
        Fresh vector for ``new``, parsed vector otherwise

    Raises:
        ParseError: The supplied vector string is malformed
        ValueError: The supplied seed is not a UUID
    """
    if args.command == "new":
        if args.seed:
            return CorrelationVector.create_from_seed(uuid.UUID(args.seed))
        return CorrelationVector.create()
    return parse(args.cv)


def apply_command(cv: CorrelationVector, args: argparse.Namespace) -> None:
    """Apply the requested mutation ``args.count`` times."""
    logger = get_logger()

    if args.command == "extend":
        operation = cv.extend
    elif args.command == "increment":
        operation = cv.increment
    elif args.command == "spin":
        params = SpinParams.from_names(
            entropy=args.entropy,
            interval=args.interval,
            periodicity=args.periodicity,
        )
        logger.info(f"Spin parameters: {params}")

        def operation():
            cv.spin(params)

    else:
        return

    for i in range(args.count):
        if cv.immutable:
            logger.info(f"Vector became immutable after {i} {args.command} call(s)")
            break
        operation()


def describe(cv: CorrelationVector) -> None:
    """Log a breakdown of the vector at INFO level."""
    logger = get_logger()
    logger.info(f"Base:              {cv.base}")
    logger.info(f"Counters:          {len(cv.vector)} ({', '.join(map(str, cv.vector))})")
    logger.info(f"State:             {cv.state}")
    logger.info(f"Serialized length: {cv.serialized_length}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    common.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser = argparse.ArgumentParser(
        description="Corvec correlation vector tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_cv.py new
  python run_cv.py extend wC71fJEqSPuHrPQ9ZoXrKg.0
  python run_cv.py increment wC71fJEqSPuHrPQ9ZoXrKg.0.0 -n 3
  python run_cv.py spin wC71fJEqSPuHrPQ9ZoXrKg.0 --entropy four --periodicity long
  python run_cv.py inspect wC71fJEqSPuHrPQ9ZoXrKg.0.1! -v
        """,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    new = sub.add_parser("new", parents=[common], help="Create a fresh vector")
    new.add_argument("--seed", help="UUID to derive the base from")

    sub.add_parser("inspect", parents=[common], help="Parse and describe a vector").add_argument(
        "cv", help="Correlation vector string"
    )

    for name, help_text in (
        ("extend", "Append a new counter"),
        ("increment", "Increment the last counter"),
        ("spin", "Append a time-based spin value"),
    ):
        cmd = sub.add_parser(name, parents=[common], help=help_text)
        cmd.add_argument("cv", help="Correlation vector string")
        cmd.add_argument(
            "-n", "--count", type=int, default=1, help="Number of times to apply"
        )
        if name == "spin":
            cmd.add_argument("--entropy", help="none, one, two, three or four")
            cmd.add_argument("--interval", help="coarse or fine")
            cmd.add_argument("--periodicity", help="none, short, medium or long")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the correlation vector tool.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        cv = build_vector(args)
        apply_command(cv, args)
        describe(cv)
        print(cv)
        return 0

    except ParseError as e:
        logger.error(f"Correlation vector parsing error: {e}")
        return 2

    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
