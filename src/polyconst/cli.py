"""Command-line driver: print the constant term for each problem document.

Usage:
    polyconst problem1.json problem2.json [more.json ...]
"""

import argparse
import logging
import sys

from polyconst.basen import to_decimal
from polyconst.defaults import DEFAULT_METHOD, LOG_FORMAT, METHODS
from polyconst.errors import PolyConstError
from polyconst.problem import load_problem, solve_problem

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyconst",
        description="Recover the constant term of a polynomial from "
                    "base-encoded sample points.",
    )
    parser.add_argument("paths", nargs="*", metavar="FILE",
                        help="problem documents (at least two)")
    parser.add_argument("--method", choices=METHODS, default=DEFAULT_METHOD,
                        help="solver to use (default: %(default)s)")
    parser.add_argument("--cross-check", action="store_true",
                        help="verify the result with the other method")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def run(paths, method: str = DEFAULT_METHOD, cross_check: bool = False,
        out=None, err=None) -> int:
    """Solve each document in order. Returns 0, or 1 if any document failed."""
    out = out or sys.stdout
    err = err or sys.stderr
    failures = 0
    for path in paths:
        try:
            result = solve_problem(load_problem(path), method=method,
                                   cross_check=cross_check)
        except (PolyConstError, OSError) as e:
            failures += 1
            _logger.debug("%s failed", path, exc_info=True)
            print(f"error: {path}: {e}", file=err)
            continue
        print(to_decimal(result), file=out)
    return 1 if failures else 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.paths) < 2:
        parser.error("at least two input files are required")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=LOG_FORMAT)
    return run(args.paths, method=args.method, cross_check=args.cross_check)


if __name__ == "__main__":
    sys.exit(main())
