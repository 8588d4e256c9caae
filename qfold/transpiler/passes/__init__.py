# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utils for transpiler."""

from .fixed_point import FixedPoint
from .rotation_folding_analysis import RotationFoldingAnalysis, RotationFolder
from .rotation_folding import RotationFolding, fold_rotations
