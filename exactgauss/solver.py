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
"""Solve linear systems exactly: build, sort, reduce and back-substitute"""

import json
import logging
from typing import Dict, Iterable, Optional, Tuple

import numpy as np
from scipy import sparse

from .gauss import back_substitute, row_echelon, sort_rows
from .matrix import CoefficientMatrix
from .names import *
from .rational import Rational, ZERO


class SystemSolution:
    """
    Result of solve_system.

    Attributes:
        matrix (CoefficientMatrix):
            The reduced matrix in row echelon form.

        values (tuple of Rational):
            Entry i is the value of variable Xi.

        pivots (dict):
            Pivot column -> row index holding the normalized 1.

        stopped_at (int or None):
            Row that ended the reduction because no pivot was left for it.

        consistent (bool or None):
            False if some equation contradicts the others, True if every
            equation holds for values, None if that cannot be decided because
            a row without pivot remains and not every variable is determined.
    """

    def __init__(self, matrix: CoefficientMatrix, values: Tuple[Rational, ...], pivots: Dict[int, int],
                 stopped_at: Optional[int] = None, consistent: Optional[bool] = True):
        self.matrix = matrix
        self.values = tuple(values)
        self.pivots = dict(pivots)
        self.stopped_at = stopped_at
        self.consistent = consistent

    @property
    def num_vars(self) -> int:
        return self.matrix.num_vars

    @property
    def rank(self) -> int:
        return len(self.pivots)

    @property
    def determined(self) -> bool:
        """True if every variable owns a pivot, i.e. the solution is unique"""
        return self.rank == self.num_vars

    def to_float(self) -> np.ndarray:
        """Float approximation of the solution vector, for display only"""
        return np.array([v.double_value() for v in self.values], dtype=float)

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __repr__(self):
        return (f"SystemSolution(values=[{', '.join(str(v) for v in self.values)}], rank={self.rank}, "
                f"determined={self.determined}, consistent={self.consistent})")


def build_matrix(num_vars: int, num_eqs: int, rows: Optional[Iterable] = None) -> CoefficientMatrix:
    """Check the dimensions, then create the (optionally filled) coefficient matrix"""
    return CoefficientMatrix(num_vars, num_eqs, rows)


def solve_system(matrix, **kwargs) -> SystemSolution:
    """Solve a square or overdetermined linear system exactly

    The augmented matrix is sorted so that rows with larger leading
    coefficients come first, reduced to row echelon form with pivots equal to 1
    and solved by back-substitution. All arithmetic is exact.

    Example:
        sol = solve_system([[1, 1, 3], [1, -1, 1]])
        # sol.values == (Rational(2), Rational(1))

    Args:
        matrix (CoefficientMatrix, list of rows, numpy.ndarray or scipy sparse matrix):
            Augmented matrix: one row per equation, the coefficients of X0..X(n-1)
            followed by the right-hand side. Entries may be int, str ("p" or "p/q"),
            Rational, fractions.Fraction, sympy.Rational or float.

        sort_rows (optional (bool)): (Default: True)
            Sort the rows before reduction.

        in_place (optional (bool)): (Default: True)
            If a CoefficientMatrix is passed, reduce it in place. Otherwise a
            copy is reduced and the input is left unchanged.

        setup (optional (dict or str)):
            Dictionary of the options above, or the path to a JSON file
            containing one. Replaces all other keyword arguments.

    Returns:
        (SystemSolution):
        The reduced matrix, the solution vector and the pivot structure. If the
        system is under-determined or inconsistent, the values are computed only
        from the pivot rows and the flags determined / consistent tell so.

    Raises:
        ValueError: If an option is unknown or its value is not a bool
    """
    if SETUP in kwargs:
        if type(kwargs[SETUP]) is str:
            with open(kwargs[SETUP], 'r') as fs:
                kwargs = json.load(fs)
        else:
            kwargs = dict(kwargs[SETUP])

    options = dict(DEFAULT_OPTIONS)
    for key, value in kwargs.items():
        if key not in DEFAULT_OPTIONS:
            raise ValueError("Key " + key + " is not supported.")
        if not isinstance(value, (bool, np.bool_)):
            raise ValueError("Value of " + key + " must be true or false, got " + repr(value) + ".")
        options[key] = bool(value)

    if isinstance(matrix, CoefficientMatrix):
        if not options[IN_PLACE]:
            matrix = matrix.copy()
    elif sparse.issparse(matrix):
        matrix = CoefficientMatrix.from_sparse(matrix)
    elif isinstance(matrix, np.ndarray):
        matrix = CoefficientMatrix.from_numpy(matrix)
    else:
        matrix = CoefficientMatrix.from_rows(matrix)

    logging.info(f"Solving system of {matrix.num_eqs} equations in {matrix.num_vars} variables.")
    if options[SORT_ROWS]:
        sort_rows(matrix)
    else:
        logging.info("  Keeping the given row order.")

    echelon = row_echelon(matrix)
    logging.info(f"  Row echelon form with rank {echelon.rank}.")
    if echelon.rank < matrix.num_vars:
        logging.warning(f"Only {echelon.rank} of {matrix.num_vars} variables are determined. "
                        "Values of the remaining variables are not meaningful.")

    values = back_substitute(matrix, pivots=echelon.pivots)
    consistent = echelon.consistent
    if consistent and echelon.stopped_at is not None:
        consistent = check_unprocessed_rows(matrix, echelon.stopped_at, values, echelon.rank)
    return SystemSolution(matrix, values, echelon.pivots, echelon.stopped_at, consistent)


def check_unprocessed_rows(matrix: CoefficientMatrix, first_row: int, values: Tuple[Rational, ...],
                           rank: int) -> Optional[bool]:
    """Test the rows the reduction did not reach against the pivot-row solution

    The rows are not modified. A row with all-zero coefficients and a non-zero
    right-hand side is a contradiction regardless of the values. Any other row
    can only be decided if every variable has a pivot (rank == num_vars).

    Returns:
        (bool or None): False if a row is violated, None if a row could not be
        decided, else True
    """
    length = matrix.num_vars
    undecided = False
    for r_idx in range(first_row, len(matrix)):
        row = matrix[r_idx]
        if row.is_zero(length):
            if not row[length].is_zero():
                logging.warning(f"Equation {r_idx} reads 0 = {row[length]}; the system is inconsistent.")
                return False
            continue
        if rank < length:
            undecided = True
            continue
        lhs = ZERO
        for coeff, value in zip(row[:length], values):
            lhs = lhs + coeff * value
        if lhs != row[length]:
            logging.warning(f"Equation {r_idx} is violated by the solution ({lhs} != {row[length]}); "
                            "the system is inconsistent.")
            return False
    if undecided:
        logging.warning("Consistency of the remaining equations cannot be decided.")
        return None
    return True
