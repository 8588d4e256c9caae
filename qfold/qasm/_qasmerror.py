# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Exception for errors raised while handling OPENQASM.
"""

from qfold.exceptions import QfoldError


class QasmError(QfoldError):
    """Raised when lexing, parsing or editing an OPENQASM program fails."""
    pass
