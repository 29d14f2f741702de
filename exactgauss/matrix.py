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
Equation rows and augmented coefficient matrices with Rational entries.

A Row holds the coefficients of X0..X(n-1) followed by the right-hand side.
Its element-wise operations work in place and require rows of equal length.
A CoefficientMatrix owns num_eqs rows of identical length; rows may be
reordered and rewritten but the shape never changes.
"""

from typing import Iterable, List, Optional, Union
import numpy as np
from scipy import sparse

from .errors import InvalidDimensions
from .rational import Rational, ZERO

Scalar = Union[Rational, int]


def check_dimensions(num_vars: int, num_eqs: int) -> None:
    """
    Validate the shape of a system before anything is built.

    Raises:
        InvalidDimensions: If a count is not positive or num_eqs < num_vars
    """
    if num_vars < 1 or num_eqs < 1:
        raise InvalidDimensions(num_vars, num_eqs,
                                f"num_vars and num_eqs must be positive (got {num_vars} and {num_eqs})")
    if num_eqs < num_vars:
        raise InvalidDimensions(num_vars, num_eqs)


class Row:
    """Fixed-length sequence of Rationals with in-place element-wise arithmetic"""

    __slots__ = ('_values',)

    def __init__(self, values: Iterable = ()):
        self._values = [Rational.value_of(v) for v in values]

    @classmethod
    def zeros(cls, length: int) -> 'Row':
        row = cls()
        row._values = [ZERO] * length
        return row

    def copy(self) -> 'Row':
        row = Row()
        row._values = list(self._values)
        return row

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._values[index])
        return self._values[index]

    def __setitem__(self, index: int, value) -> None:
        self._values[index] = Rational.value_of(value)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, Row):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return len(self._values) == len(other) and all(a == b for a, b in zip(self._values, other))
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return "Row([" + ", ".join(str(v) for v in self._values) + "])"

    def is_zero(self, length: Optional[int] = None) -> bool:
        """True if the first ``length`` entries (default: all) are zero"""
        values = self._values if length is None else self._values[:length]
        return all(v.is_zero() for v in values)

    def _check_length(self, other: 'Row') -> None:
        if len(other) != len(self._values):
            raise ValueError(f"Row length mismatch: {len(self._values)} != {len(other)}")

    # element-wise operations with another row
    def add(self, other: 'Row') -> 'Row':
        self._check_length(other)
        self._values = [a.add(b) for a, b in zip(self._values, other)]
        return self

    def subtract(self, other: 'Row') -> 'Row':
        self._check_length(other)
        self._values = [a.subtract(b) for a, b in zip(self._values, other)]
        return self

    def multiply(self, other: 'Row') -> 'Row':
        self._check_length(other)
        self._values = [a.multiply(b) for a, b in zip(self._values, other)]
        return self

    def divide(self, other: 'Row') -> 'Row':
        """Element-wise division. Raises DivisionByZero (row unchanged) if other holds a zero."""
        self._check_length(other)
        self._values = [a.divide(b) for a, b in zip(self._values, other)]
        return self

    # scalar operations
    def scale(self, factor: Scalar) -> 'Row':
        self._values = [a.multiply(factor) for a in self._values]
        return self

    def divide_by(self, divisor: Scalar) -> 'Row':
        """Divide every entry by a scalar. Raises DivisionByZero (row unchanged) if divisor is 0."""
        self._values = [a.divide(divisor) for a in self._values]
        return self

    def scaled(self, factor: Scalar) -> 'Row':
        """Return a scaled copy, leaving this row untouched"""
        return self.copy().scale(factor)

    def to_list(self) -> List[Rational]:
        return list(self._values)


class CoefficientMatrix:
    """
    Augmented coefficient matrix of a linear system.

    Args:
        num_vars: Number of variables X0..X(num_vars-1)
        num_eqs: Number of equations, at least num_vars
        rows: Optional rows of num_vars + 1 values each; zeros if omitted

    Raises:
        InvalidDimensions: If num_eqs < num_vars or a count is not positive
        ValueError: If the given rows do not match the dimensions
    """

    def __init__(self, num_vars: int, num_eqs: int, rows: Optional[Iterable] = None):
        check_dimensions(num_vars, num_eqs)
        self.num_vars = num_vars
        self.num_eqs = num_eqs
        if rows is None:
            self._rows = [Row.zeros(num_vars + 1) for _ in range(num_eqs)]
        else:
            self._rows = [r.copy() if isinstance(r, Row) else Row(r) for r in rows]
            if len(self._rows) != num_eqs:
                raise ValueError(f"Expected {num_eqs} rows, got {len(self._rows)}")
            for i, row in enumerate(self._rows):
                if len(row) != num_vars + 1:
                    raise ValueError(f"Row {i} has {len(row)} entries, expected {num_vars + 1}")

    @classmethod
    def from_rows(cls, rows: Iterable) -> 'CoefficientMatrix':
        """Create a matrix from augmented rows, deriving the dimensions from them"""
        rows = [r if isinstance(r, Row) else Row(r) for r in rows]
        if not rows:
            raise InvalidDimensions(0, 0, "A system needs at least one equation")
        return cls(len(rows[0]) - 1, len(rows), rows)

    @classmethod
    def from_numpy(cls, array: np.ndarray, rhs: Optional[np.ndarray] = None) -> 'CoefficientMatrix':
        """
        Create a matrix from a numpy array.

        Args:
            array: Augmented matrix, or the coefficient part if rhs is given
            rhs: Optional right-hand side vector appended as last column

        Returns:
            CoefficientMatrix with the same values (floats via limit_denominator)
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError("array must be 2-dimensional")
        if rhs is not None:
            rhs = np.asarray(rhs).reshape(-1, 1)
            if rhs.shape[0] != array.shape[0]:
                raise ValueError(f"rhs has {rhs.shape[0]} entries, expected {array.shape[0]}")
            array = np.hstack((array.astype(object), rhs.astype(object)))
        return cls.from_rows(array.tolist())

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix, rhs: Optional[np.ndarray] = None) -> 'CoefficientMatrix':
        """Create a matrix from a scipy sparse matrix (augmented, or coefficients plus rhs)"""
        coo = sparse.coo_matrix(sparse_matrix)
        rows, cols = coo.shape
        if rhs is not None:
            cols += 1
        dense = [[0] * cols for _ in range(rows)]
        for i, j, v in zip(coo.row, coo.col, coo.data):
            dense[i][j] = v.item() if isinstance(v, np.generic) else v
        if rhs is not None:
            rhs = np.asarray(rhs).ravel()
            if rhs.shape[0] != rows:
                raise ValueError(f"rhs has {rhs.shape[0]} entries, expected {rows}")
            for i in range(rows):
                dense[i][-1] = rhs[i].item() if isinstance(rhs[i], np.generic) else rhs[i]
        return cls.from_rows(dense)

    def to_numpy(self) -> np.ndarray:
        """Float approximation of the matrix, for diagnostics"""
        return np.array([[v.double_value() for v in row] for row in self._rows], dtype=float)

    def copy(self) -> 'CoefficientMatrix':
        return CoefficientMatrix(self.num_vars, self.num_eqs, self._rows)

    @property
    def row_length(self) -> int:
        return self.num_vars + 1

    @property
    def shape(self):
        return (self.num_eqs, self.num_vars + 1)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> Row:
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoefficientMatrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None

    def __repr__(self) -> str:
        return f"CoefficientMatrix({self.num_vars}, {self.num_eqs}, {[r.to_list() for r in self._rows]!r})"

    def get_value_at(self, row: int, col: int) -> Rational:
        return self._rows[row][col]

    def set_value_at(self, row: int, col: int, value) -> None:
        self._rows[row][col] = value

    def set_row(self, index: int, values: Iterable) -> None:
        row = values if isinstance(values, Row) else Row(values)
        if len(row) != self.row_length:
            raise ValueError(f"Row has {len(row)} entries, expected {self.row_length}")
        self._rows[index] = row

    def swap_rows(self, row_a: int, row_b: int) -> None:
        self._rows[row_a], self._rows[row_b] = self._rows[row_b], self._rows[row_a]

    def sort(self, key) -> None:
        """Reorder the rows in place (stable)"""
        self._rows.sort(key=key)
