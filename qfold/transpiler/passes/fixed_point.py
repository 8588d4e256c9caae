# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

""" The FixedPoint pass tells when a property stopped changing between runs.
"""
import logging
from copy import deepcopy

from qfold.transpiler._basepasses import AnalysisPass

logger = logging.getLogger(__name__)


class FixedPoint(AnalysisPass):
    """ Compares a property with the value it had the last time this pass ran.

    The result is saved in property_set['<property>_fixed_point'] as a boolean,
    which is False the first time the pass runs.
    """

    def __init__(self, property_to_check):
        """
        Args:
            property_to_check (str): name of the property to watch, for instance
                'rotation_count'.
        """
        super().__init__()
        self._property = property_to_check

    def run(self, program):
        current_value = self.property_set[self._property]
        previous_key = '_fixed_point_previous_%s' % self._property
        previous_value = self.property_set[previous_key]

        reached = previous_value is not None and previous_value == current_value
        self.property_set['%s_fixed_point' % self._property] = reached
        self.property_set[previous_key] = deepcopy(current_value)
        logger.debug("%s: %s -> %s, fixed point: %s",
                     self._property, previous_value, current_value, reached)
