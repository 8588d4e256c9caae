# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Channel representation of circuits: Paulis, Cliffords and rotations."""

from .pauli import Pauli, Phase, PauliOp, pauli_product, paulis_commute
from .clifford import CliffordOp
from .channel import UninterpOp, RotationOp
from .angle import (DEFAULT_ANGLE_TOLERANCE, to_angle, pi_fraction, reduce_angle,
                    is_zero_angle, is_numeric, angle_to_qasm)
