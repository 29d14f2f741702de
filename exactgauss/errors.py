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
"""Exceptions raised by exactgauss

Each error also derives from the built-in exception a caller would expect,
so ``except ZeroDivisionError`` or ``except ValueError`` keep working.
"""


class ExactGaussError(Exception):
    """Base class of all exactgauss errors"""


class InvalidDimensions(ExactGaussError, ValueError):
    """Equation count below variable count, or a non-positive count"""

    def __init__(self, num_vars, num_eqs, message=None):
        self.num_vars = num_vars
        self.num_eqs = num_eqs
        if message is None:
            message = f"num_eqs must be >= num_vars (got {num_eqs} equations for {num_vars} variables)"
        super().__init__(message)


class DivisionByZero(ExactGaussError, ZeroDivisionError):
    """Zero denominator or division by a zero-valued operand"""


class MalformedValue(ExactGaussError, ValueError):
    """Text that is neither an integer nor a p/q pair"""

    def __init__(self, text, reason=None, line=None):
        self.text = text
        self.reason = reason
        self.line = line
        message = f"Invalid rational value: {text!r}"
        if reason:
            message += f" ({reason})"
        if line is not None:
            message = f"line {line}: " + message
        super().__init__(message)
