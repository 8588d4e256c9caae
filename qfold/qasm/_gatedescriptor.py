# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Description of a single-qubit gate application to be spliced into a program.
"""

from collections import namedtuple

# name: gate name, params: tuple of sympy expressions, qubit: operand node
# (id or indexed id) copied into the new statement.
GateDescriptor = namedtuple('GateDescriptor', ['name', 'params', 'qubit'])
