# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""QASM nodes."""
from ._node import Node, NodeException
from ._operands import Id, IndexedId, IdList, PrimaryList
from ._expressions import (ExpressionList, Int, Real, BinaryOp, BinaryOperator,
                           Prefix, UnaryOperator, External)
from ._declarations import Format, Qreg, Creg, Ancilla, Gate, GateBody, Opaque, Oracle
from ._statements import (UniversalUnitary, Cnot, CustomUnitary, Barrier, Measure,
                          Reset, If)
from ._program import Program
