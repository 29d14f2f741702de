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
"""
Gaussian elimination over exact rationals.

Three steps operate on a CoefficientMatrix in place and in strict sequence:

1. sort_rows: rows with larger leading coefficients first
2. row_echelon: one top-to-bottom pass producing pivots equal to 1 in
   strictly increasing columns
3. back_substitute: solve from the last pivot row upwards

No step performs floating point arithmetic.
"""

import logging
from functools import cmp_to_key
from typing import Dict, Optional, Sequence, Tuple

from .matrix import CoefficientMatrix
from .rational import Rational, ZERO

LOG = logging.getLogger(__name__)


# =============================================================================
# Row canonicalization
# =============================================================================

def compare_rows(vec_a: Sequence[Rational], vec_b: Sequence[Rational]) -> int:
    """
    Order rows descending, position by position.

    At the first position where the rows differ, the larger value sorts first.
    If all positions of the shorter row are equal, the longer row sorts first.

    Returns:
        -1 if vec_a sorts before vec_b, 1 if after, 0 if equivalent
    """
    size_a = len(vec_a)
    size_b = len(vec_b)
    for i in range(min(size_a, size_b)):
        if vec_a[i] != vec_b[i]:
            return -1 if vec_a[i] > vec_b[i] else 1
    return (size_a < size_b) - (size_a > size_b)


def sort_rows(matrix: CoefficientMatrix) -> CoefficientMatrix:
    """Reorder the rows of the matrix in place using compare_rows"""
    matrix.sort(key=cmp_to_key(compare_rows))
    return matrix


# =============================================================================
# Row echelon form
# =============================================================================

class EchelonForm:
    """
    Outcome of row_echelon.

    pivots maps each pivot column to the row holding its normalized 1. Pivot
    rows always form the prefix 0..rank-1 of the matrix. stopped_at is the
    index of the row whose coefficients were eliminated to zero, after which
    no further rows were processed, or None if every row received a pivot.
    """

    def __init__(self, pivots: Dict[int, int], stopped_at: Optional[int] = None, consistent: bool = True):
        self.pivots = dict(pivots)
        self.stopped_at = stopped_at
        self.consistent = consistent

    @property
    def rank(self) -> int:
        return len(self.pivots)

    def __repr__(self):
        return f"EchelonForm(pivots={self.pivots}, stopped_at={self.stopped_at}, consistent={self.consistent})"


def row_echelon(matrix: CoefficientMatrix) -> EchelonForm:
    """
    Transform the (sorted) matrix into row echelon form in place.

    For each row, entries in already assigned pivot columns are eliminated by
    subtracting the owning pivot row scaled by that entry. The pivot cursor then
    advances over zero entries; the right-hand side column is never a pivot. A
    row whose coefficients are all zero at this point ends the pass and the
    remaining rows are left untouched. Otherwise the row is divided by its
    pivot entry.

    Args:
        matrix: Matrix to reduce (modified in-place)

    Returns:
        EchelonForm with the pivot map
    """
    pivots = {}
    next_pivot_column = 0
    # last column is the right-hand side
    row_length = matrix.num_vars
    num_rows = len(matrix)

    for r_idx in range(num_rows):
        row = matrix[r_idx]
        # pivots is ordered by column, so later entries are read after earlier subtractions
        for col, pivot_row in pivots.items():
            value = row[col]
            if value.is_zero():
                continue
            row.subtract(matrix[pivot_row].scaled(value))

        while next_pivot_column < row_length and row[next_pivot_column].is_zero():
            next_pivot_column += 1
        if next_pivot_column == row_length:
            remaining = num_rows - r_idx - 1
            consistent = True
            if not row.is_zero(row_length):
                # non-zero entries only in columns the cursor already passed
                LOG.warning(f"Equation {r_idx} has no pivot right of the assigned pivot columns; "
                            f"{remaining} remaining row(s) left unprocessed.")
            elif row[row_length].is_zero():
                LOG.info(f"Equation {r_idx} is redundant after elimination; "
                         f"{remaining} remaining row(s) left unprocessed.")
            else:
                consistent = False
                LOG.warning(f"Equation {r_idx} reduces to 0 = {row[row_length]}; the system is inconsistent. "
                            f"{remaining} remaining row(s) left unprocessed.")
            return EchelonForm(pivots, r_idx, consistent)

        row.divide_by(row[next_pivot_column])
        pivots[next_pivot_column] = r_idx
        LOG.debug(f"Row {r_idx}: pivot in column {next_pivot_column}")
        next_pivot_column += 1

    return EchelonForm(pivots)


# =============================================================================
# Back-substitution
# =============================================================================

def back_substitute(matrix: CoefficientMatrix, row_count: Optional[int] = None,
                    pivots: Optional[Dict[int, int]] = None) -> Tuple[Rational, ...]:
    """
    Compute variable values from a matrix in row echelon form.

    With a pivot map (as found by row_echelon), each pivot row is solved for
    its own pivot column, from the rightmost pivot to the leftmost, and
    row_count is ignored.

    Without one, rows are walked from last to first and a column cursor
    assigns variables. For each row the cursor skips backwards over zero
    entries, then all already solved variables right of the cursor are
    substituted and the result is assigned to the cursor column. Rows with
    all-zero coefficients are skipped. If the reduction skipped a column, the
    cursor cannot tell, and a row left of that column is assigned to a
    variable right of its pivot.

    Variables that no row determines stay 0. No consistency check is
    performed.

    Args:
        matrix: Matrix in row echelon form with pivots equal to 1
        row_count: Only use the first row_count rows (default: all rows)
        pivots: Pivot column -> row index, see EchelonForm

    Returns:
        Tuple of num_vars values, entry i is the value of Xi
    """
    length = matrix.num_vars
    calc_vals = [ZERO] * length

    if pivots is not None:
        for col in sorted(pivots, reverse=True):
            row = matrix[pivots[col]]
            value = row[length]
            for idx in range(length - 1, col, -1):
                value -= row[idx] * calc_vals[idx]
            calc_vals[col] = value
        return tuple(calc_vals)

    next_solve = length - 1
    if row_count is None:
        row_count = len(matrix)

    for r_idx in range(row_count - 1, -1, -1):
        row = matrix[r_idx]
        if row.is_zero(length):
            continue
        value = row[length]
        while next_solve >= 0 and row[next_solve].is_zero():
            next_solve -= 1
        if next_solve < 0:
            LOG.warning(f"Row {r_idx} has no pivot left of the solved columns; matrix is not in row echelon form.")
            break
        for idx in range(length - 1, next_solve, -1):
            value -= row[idx] * calc_vals[idx]
        calc_vals[next_solve] = value
        next_solve -= 1

    return tuple(calc_vals)
