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
"""Static strings used in the exactgauss package

    Solver options

        SORT_ROWS = 'sort_rows'

        IN_PLACE = 'in_place'

        SETUP = 'setup'

    Text format

        FRACTION_SEP = '/'

        COMMENT = '#'

    Prompts of the interactive front end

        PROMPT_NUM_VARS = 'Enter number of variables, Xi: '

        PROMPT_NUM_EQS = 'Enter number of equations, Ej: '
"""

# Solver options
SORT_ROWS = 'sort_rows'
IN_PLACE = 'in_place'
SETUP = 'setup'

DEFAULT_OPTIONS = {SORT_ROWS: True, IN_PLACE: True}

# Text format
FRACTION_SEP = '/'
COMMENT = '#'

# Prompts of the interactive front end
PROMPT_NUM_VARS = 'Enter number of variables, Xi: '
PROMPT_NUM_EQS = 'Enter number of equations, Ej: '
PROMPT_COEFFS = 'Enter coefficients for variable Xi'
