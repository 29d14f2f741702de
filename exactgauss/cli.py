#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Command line front end: read a system, print the reduced matrix and the solution"""

from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
import logging
import sys

from .errors import ExactGaussError
from .matrix import CoefficientMatrix, Row
from .names import *
from .parse import format_matrix, format_solution, parse_count, parse_dimensions, parse_value, read_system
from .solver import solve_system


def prompt_system(read=input, out=sys.stdout) -> CoefficientMatrix:
    """
    Collect a system interactively.

    Asks for the number of variables and equations, checks them before
    anything else is asked, then for every equation the coefficients of X0..X(n-1)
    and the right-hand side.

    :param read: function that shows a prompt and returns the entered line
    :param out: stream for headings
    :return: CoefficientMatrix in input order
    """
    num_vars = parse_count(read(PROMPT_NUM_VARS))
    num_eqs = parse_count(read(PROMPT_NUM_EQS))
    num_vars, num_eqs = parse_dimensions(num_vars, num_eqs)

    rows = []
    print(PROMPT_COEFFS, file=out)
    for i in range(num_eqs):
        print("eq" + str(i) + ": ", file=out)
        values = [parse_value(read("   X" + str(j) + ": ")) for j in range(num_vars)]
        values.append(parse_value(read("   eq" + str(i) + " = ")))
        rows.append(Row(values))
    return CoefficientMatrix(num_vars, num_eqs, rows)


def build_parser() -> ArgumentParser:
    usage = '''usage: exactgauss [-i <system>.txt | -i -] [--no-sort] [--float] [-v]'''
    parser = ArgumentParser(prog='exactgauss',
                            description='Solve a square or overdetermined linear system exactly by Gaussian\n'
                                        'elimination over rational numbers. Values are written as p or p/q.\n'
                                        'Without --input the system is entered interactively.',
                            epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-i", "--input", help="path to a system file ('-' reads stdin). First line: "
                        "num_vars num_eqs, then one equation per line")
    parser.add_argument("--no-sort", action='store_true', help="keep the given row order")
    parser.add_argument("--float", action='store_true', help="also print decimal approximations of the solution")
    parser.add_argument("--setup", help="JSON file with solver options")
    parser.add_argument("-v", "--verbose", action='count', default=0, help="log progress (-vv for debug output)")
    return parser


def main(argv=None, read=input, out=None, err=None) -> int:
    """
    Entry point of the exactgauss command. Errors of the solver are reported on
    stderr and turn into exit status 1.

    :param argv: command line arguments (default sys.argv[1:])
    :return: exit status
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    args = build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=err, force=True)

    try:
        if args.input == '-':
            matrix = read_system(sys.stdin.read())
        elif args.input:
            with open(args.input, 'r') as fs:
                matrix = read_system(fs.read())
        else:
            matrix = prompt_system(read, out)
            print(file=out)

        if args.setup:
            solution = solve_system(matrix, setup=args.setup)
        else:
            solution = solve_system(matrix, **{SORT_ROWS: not args.no_sort})
    except (ExactGaussError, OSError, ValueError) as exc:
        print("error: " + str(exc), file=err)
        return 1
    except EOFError:
        print("error: input ended before the system was complete", file=err)
        return 1

    print(format_matrix(solution.matrix), file=out)
    print(format_solution(solution.values, as_float=args.float), file=out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
