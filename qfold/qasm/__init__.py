# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""OPENQASM front-end: lexer, parser, syntax tree and program editing."""
from ._qasm import Qasm
from ._qasmerror import QasmError
from ._gatedescriptor import GateDescriptor
from ._corelibs import CORE_LIBS, CORE_LIBS_PATH, is_core_lib
from ._node import Program, NodeException
