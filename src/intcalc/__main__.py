#!/usr/bin/env python3
"""Run the calculator demonstration.

Applies every operation to a fixed pair of operands, then repeats division
and remainder with a zero divisor.
"""

import argparse
import logging
import sys
from typing import Any, Optional, TextIO

from intcalc.arithmetic import OPERATIONS
from intcalc.display import BANNER, render
from intcalc.recorder import CallRecorder

logger = logging.getLogger(__name__)

A = 10
B = 5
C = 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="intcalc",
        description="Demonstrate 32-bit integer arithmetic with guarded division",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each recorded call to stderr",
    )
    return parser.parse_args(argv)


def _log_call(event_type: str, record: dict[str, Any]) -> None:
    logger.debug("%s %s(%s) -> %s", event_type, record["function_name"],
                 record["args"], record.get("result", record.get("error")))


def run_demo(out: Optional[TextIO] = None, recorder: Optional[CallRecorder] = None) -> CallRecorder:
    """Print the demonstration transcript to ``out`` (default: current stdout).

    Returns:
        The recorder holding every call made.
    """
    out = out if out is not None else sys.stdout
    recorder = recorder if recorder is not None else CallRecorder()
    recorder.add_observer(_log_call)
    try:
        ops = {symbol: recorder.wrap(func) for symbol, func in OPERATIONS.items()}

        print(BANNER, file=out)
        for symbol, op in ops.items():
            for line in render(A, symbol, B, op(A, B)):
                print(line, file=out)

        print("\nTesting error cases:", file=out)
        for symbol in ("/", "%"):
            for line in render(A, symbol, C, ops[symbol](A, C)):
                print(line, file=out)
    finally:
        recorder.remove_observer(_log_call)
    return recorder


def main(argv: Optional[list[str]] = None, out: Optional[TextIO] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(stream=sys.stderr, level=logging.DEBUG)
    run_demo(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
