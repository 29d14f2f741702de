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
"""exactgauss: exact Gaussian elimination over rational numbers"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .errors import *
from .rational import Rational, ZERO, ONE, MINUS_ONE
from .matrix import Row, CoefficientMatrix, check_dimensions
from .gauss import compare_rows, sort_rows, row_echelon, back_substitute, EchelonForm
from .solver import SystemSolution, build_matrix, check_unprocessed_rows, solve_system
from .parse import parse_value, parse_dimensions, read_system, format_row, format_matrix, format_solution
