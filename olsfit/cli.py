"""
Command-line front end.

    olsfit x1 y1 x2 y2 ... xn yn
    olsfit -f data.csv
    olsfit -xf data.csv          (swap x and y after reading)

Exit status is 0 on success, 1 for usage errors and 2 when the input
file cannot be read or holds no usable points.
"""

from __future__ import annotations

import argparse
import sys
import warnings
from typing import Sequence, TextIO

from olsfit import __version__
from olsfit.core.exceptions import InputError, ValidationError
from olsfit.points.design import PointSequence
from olsfit.regression.solution import FitSolution
from olsfit.regression.solvers import CONVENTIONS, fit


EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INPUT = 2

# Two complete (x, y) pairs
MIN_COORDINATE_ARGS = 4

DESCRIPTION = """\
Ordinary Least Squares (OLS) linear regression analysis.
Calculates Y baseline b and slope m from set of {x,y} points."""

EPILOG = """\
usage:
  olsfit [x1] [y1] ... [xn] [yn]
  olsfit -f [csv_file]
  olsfit -xf [csv_file]

CSV files can use any non-digit separator."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with the usage status instead of 2."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='olsfit',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '-f',
        dest='file',
        metavar='FILE',
        help='read points from a CSV or other non-digit-separated file',
    )
    source.add_argument(
        '-xf',
        dest='swapped_file',
        metavar='FILE',
        help='same as -f, then swap x and y values',
    )
    parser.add_argument(
        '--convention',
        choices=CONVENTIONS,
        default='slope_intercept',
        help="report (b, m) for y = m*x + b, or (a, b) for y = a + b*x",
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        'values',
        nargs='*',
        metavar='COORD',
        help='coordinates as x1 y1 x2 y2 ...',
    )
    return parser


def format_report(solution: FitSolution) -> str:
    """Plain-text report of the coefficients and y at x̄."""
    first, second = solution.coefficient_names
    if solution.convention == 'slope_intercept':
        heading = "Best fit (OLS):"
    else:
        heading = "Least squares (OLS):"
    lines = [
        heading,
        f"{first}={solution.intercept:f}",
        f"{second}={solution.slope:f}",
        "",
        f"y={solution.y_at_mean:f} at x=x̄={solution.mean_x:f}",
    ]
    return "\n".join(lines)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the command and return its exit status."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    path = args.file or args.swapped_file

    if path is not None:
        if args.values:
            parser.error("coordinates cannot be combined with -f/-xf")
        try:
            points = PointSequence.from_file(path)
        except InputError as e:
            print(f"{parser.prog}: {e}", file=stderr)
            return EXIT_INPUT
        if points.n == 0:
            print(f"No (x, y) pairs found in file '{path}'", file=stderr)
            return EXIT_INPUT
        if args.swapped_file is not None:
            points = points.swapped()
    else:
        if len(args.values) < MIN_COORDINATE_ARGS:
            parser.print_help(stdout)
            return EXIT_USAGE
        try:
            points = PointSequence.from_arguments(args.values)
        except ValidationError as e:
            print(f"{parser.prog}: error: {e}", file=stderr)
            return EXIT_USAGE
        if len(args.values) % 2:
            print("\nWARNING: Ignoring last param!", file=stdout)

    # Degeneracy is reported below from the solution itself
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', RuntimeWarning)
        solution = fit(points, convention=args.convention)

    print(format_report(solution), file=stdout)
    for warning in solution.warnings:
        print(f"\nWARNING: {warning}", file=stdout)
    return EXIT_OK


def main_entry() -> None:
    """Console-script entry point."""
    raise SystemExit(main())
