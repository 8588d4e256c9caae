# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Rotation folding for OPENQASM programs."""

from qfold.exceptions import QfoldError, QfoldUserConfigError
from qfold._logging import set_qfold_logger, unset_qfold_logger
from qfold.qasm import Qasm, QasmError, Program
import qfold.circuits
from qfold.transpiler import transpile, PassManager, TranspilerError
from qfold.transpiler.passes import RotationFolding, RotationFoldingAnalysis, fold_rotations

__version__ = '0.1.0'
