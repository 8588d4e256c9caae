# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Code for optimizing OPENQASM programs."""

from ._passmanager import PassManager, FlowController
from ._propertyset import PropertySet
from ._transpilererror import TranspilerError, TranspilerAccessError
from ._fencedobjs import FencedProgram, FencedPropertySet
from ._basepasses import AnalysisPass, TransformationPass
from ._transpiler import transpile, default_pass_manager
