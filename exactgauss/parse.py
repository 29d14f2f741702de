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
"""Functions for reading linear systems from text and rendering results"""

from typing import Iterable, List, Tuple, Union
import re

from .errors import MalformedValue
from .matrix import CoefficientMatrix, Row, check_dimensions
from .names import COMMENT
from .rational import Rational


def parse_value(text: str) -> Rational:
    """Parses a single value written as "p" or "p/q"

    Raises:
        MalformedValue: If the text is not an integer or a p/q pair, or q is 0
    """
    return Rational.parse(text)


def parse_count(text: str) -> int:
    """Parses a variable or equation count"""
    try:
        return int(text.strip())
    except ValueError as exc:
        raise MalformedValue(text, "expected an integer count") from exc


def parse_dimensions(num_vars, num_eqs) -> Tuple[int, int]:
    """Validates the system size before any equation is read

    Args:
        num_vars (int or str): Number of variables
        num_eqs (int or str): Number of equations

    Returns:
        (Tuple): num_vars, num_eqs as integers

    Raises:
        InvalidDimensions: If num_eqs < num_vars or a count is not positive
    """
    if isinstance(num_vars, str):
        num_vars = parse_count(num_vars)
    if isinstance(num_eqs, str):
        num_eqs = parse_count(num_eqs)
    check_dimensions(num_vars, num_eqs)
    return num_vars, num_eqs


def _tokens(line: str) -> List[str]:
    line = line.split(COMMENT, 1)[0]
    # "1 / 2" is one value
    line = re.sub(r"\s*/\s*", "/", line)
    return line.split()


def read_system(source: Union[str, Iterable[str]]) -> CoefficientMatrix:
    """Reads a linear system in batch form

    The first non-blank line holds the number of variables and the number of
    equations. Each following non-blank line holds one equation: the
    coefficients of X0..X(n-1) followed by the right-hand side. Text after '#'
    is ignored.

    Example:
        2 2
        1  1 3
        1 -1 1

    Args:
        source (str or iterable of str): Whole text or its lines.

    Returns:
        (CoefficientMatrix): The augmented matrix in input order.

    Raises:
        InvalidDimensions: If the header is inconsistent; checked before any equation is parsed
        MalformedValue: If a value or a line length is wrong
    """
    if isinstance(source, str):
        source = source.splitlines()
    lines = [(num, _tokens(line)) for num, line in enumerate(source, start=1)]
    lines = [(num, tokens) for num, tokens in lines if tokens]
    if not lines:
        raise MalformedValue("", "empty input, expected 'num_vars num_eqs'")

    header_line, header = lines[0]
    if len(header) != 2:
        raise MalformedValue(" ".join(header), "expected 'num_vars num_eqs'", header_line)
    num_vars, num_eqs = parse_dimensions(*header)

    equations = lines[1:]
    if len(equations) != num_eqs:
        raise MalformedValue(str(len(equations)) + " equations", f"expected {num_eqs}",
                             equations[-1][0] if equations else header_line)
    rows = []
    for num, tokens in equations:
        if len(tokens) != num_vars + 1:
            raise MalformedValue(" ".join(tokens), f"expected {num_vars + 1} values, got {len(tokens)}", num)
        try:
            rows.append(Row(parse_value(t) for t in tokens))
        except MalformedValue as exc:
            raise MalformedValue(exc.text, exc.reason, num) from exc
    return CoefficientMatrix(num_vars, num_eqs, rows)


def format_row(row: Iterable[Rational]) -> str:
    """Renders values space separated in "p" / "p/q" form"""
    return " ".join(str(v) for v in row)


def format_matrix(matrix: CoefficientMatrix) -> str:
    """One row per line"""
    return "\n".join(format_row(row) for row in matrix)


def format_solution(values: Iterable[Rational], as_float: bool = False) -> str:
    """The solution vector on one line, optionally with decimal approximations"""
    if as_float:
        return " ".join(f"{v} (~{v.double_value():.6g})" for v in values)
    return format_row(values)
