# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Merge rotations separated by Clifford gates and opaque operations.
"""
import logging

from qfold.circuits.angle import reduce_angle
from qfold.transpiler._basepasses import TransformationPass
from qfold.transpiler._passmanager import PassManager
from qfold.user_config import get_config
from .rotation_folding_analysis import RotationFoldingAnalysis

logger = logging.getLogger(__name__)

CONFIG = get_config()


class RotationFolding(TransformationPass):
    """Apply the replacements computed by RotationFoldingAnalysis.

    The merges change the program by a global phase. It is always reported in
    property_set['global_phase']; it is added to Program.global_phase only
    when correct_global_phase is set.
    """

    def __init__(self, correct_global_phase=None, angle_tolerance=None):
        """
        Args:
            correct_global_phase (bool): accumulate the phase produced by the
                merges into Program.global_phase. Defaults to the
                fold_correct_global_phase user setting, or False.
            angle_tolerance (float): see RotationFoldingAnalysis.
        """
        super().__init__()
        if correct_global_phase is None:
            correct_global_phase = CONFIG.get('fold_correct_global_phase', False)
        self.correct_global_phase = correct_global_phase
        self.requires.append(RotationFoldingAnalysis(angle_tolerance=angle_tolerance))

    def run(self, program):
        """Run one folding round on `program`.

        Args:
            program (Program): the program to fold.

        Returns:
            Program: the same program, edited in place.
        """
        replacements = self.property_set["rotation_replacements"] or {}
        if replacements:
            program.bulk_replace(replacements)
        deleted = sum(1 for gates in replacements.values() if not gates)
        logger.info("Rotation folding deleted %d statement(s) and rewrote %d",
                    deleted, len(replacements) - deleted)

        if self.correct_global_phase:
            program.global_phase = reduce_angle(program.global_phase +
                                                self.property_set['global_phase'])
        return program


def fold_rotations(program, correct_global_phase=None):
    """Fold the rotations of a program in place.

    Args:
        program (Program): a parsed program.
        correct_global_phase (bool): see RotationFolding.

    Returns:
        sympy.Expr: the global phase produced at the top level of the program.
    """
    pass_manager = PassManager()
    pass_manager.append(RotationFolding(correct_global_phase=correct_global_phase))
    pass_manager.run(program)
    return pass_manager.property_set['global_phase']
