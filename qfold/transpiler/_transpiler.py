# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Tools for optimizing OPENQASM programs."""
import logging
import time

from qfold.user_config import get_config
from ._passmanager import PassManager
from .passes import FixedPoint, RotationFolding

logger = logging.getLogger(__name__)

CONFIG = get_config()

DEFAULT_MAX_ITERATIONS = 100


def default_pass_manager(correct_global_phase=None, max_iteration=None):
    """The pass manager used by transpile() when none is given.

    Rotation folding is repeated until the number of rotations stops
    decreasing.

    Args:
        correct_global_phase (bool): see RotationFolding.
        max_iteration (int): cap on the number of folding rounds. Defaults to
            the fold_max_iterations user setting, or 100.

    Returns:
        PassManager: the pass manager.
    """
    if max_iteration is None:
        max_iteration = CONFIG.get('fold_max_iterations', DEFAULT_MAX_ITERATIONS)

    def _not_fixed_point(property_set):
        return not property_set['rotation_count_fixed_point']

    pass_manager = PassManager()
    pass_manager.append([RotationFolding(correct_global_phase=correct_global_phase),
                         FixedPoint('rotation_count')],
                        max_iteration=max_iteration,
                        do_while=_not_fixed_point)
    return pass_manager


def transpile(program, pass_manager=None):
    """Optimize a program.

    Args:
        program (Program): the program, as returned by Qasm.parse().
        pass_manager (PassManager): the passes to run. Defaults to
            default_pass_manager().

    Returns:
        Program: the optimized program.
    """
    if pass_manager is None:
        pass_manager = default_pass_manager()
    start_time = time.time()
    program = pass_manager.run(program)
    end_time = time.time()
    logger.info("Total Transpile Time - %.5f (ms)", (end_time - start_time) * 1000)
    return program
