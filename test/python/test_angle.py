# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Tests for angle helpers."""

import unittest

import numpy as np
import sympy
from ddt import ddt, data, unpack

from qfold.circuits import (angle_to_qasm, is_numeric, is_zero_angle, pi_fraction,
                            reduce_angle)
from qfold.test import QfoldTestCase

THETA = sympy.Symbol('theta', real=True)


@ddt
class TestAngles(QfoldTestCase):
    """Exact, numeric and symbolic angles."""

    @data((sympy.pi / 4, (1, 4)),
          (9 * sympy.pi / 4, (1, 4)),
          (-sympy.pi / 4, (-1, 4)),
          (sympy.pi, (1, 1)),
          (-sympy.pi, (1, 1)),
          (3 * sympy.pi / 2, (-1, 2)),
          (sympy.Integer(0), (0, 1)))
    @unpack
    def test_pi_fraction(self, angle, fraction):
        """Exact angles are fractions of pi in (-1, 1]."""
        self.assertEqual(pi_fraction(angle), fraction)

    def test_pi_fraction_inexact(self):
        """Numeric and symbolic angles have no fraction."""
        self.assertIsNone(pi_fraction(sympy.Float(0.3)))
        self.assertIsNone(pi_fraction(THETA))

    def test_reduce_exact(self):
        """Exact angles reduce into (-pi, pi]."""
        self.assertEqual(reduce_angle(7 * sympy.pi / 4), -sympy.pi / 4)
        self.assertEqual(reduce_angle(2 * sympy.pi), 0)

    def test_reduce_numeric(self):
        """Numeric angles reduce modulo 2 pi."""
        self.assertAlmostEqual(float(reduce_angle(sympy.Float(2 * np.pi + 0.5))), 0.5)
        self.assertAlmostEqual(float(reduce_angle(sympy.Float(4.0))), 4.0 - 2 * np.pi)

    def test_reduce_symbolic(self):
        """Symbolic angles are left alone."""
        self.assertEqual(reduce_angle(2 * THETA), 2 * THETA)

    def test_zero_exact(self):
        """Exact multiples of 2 pi are zero."""
        self.assertTrue(is_zero_angle(2 * sympy.pi))
        self.assertTrue(is_zero_angle(sympy.Integer(0)))
        self.assertFalse(is_zero_angle(sympy.pi))

    def test_zero_numeric(self):
        """Numeric angles are zero up to the tolerance."""
        self.assertTrue(is_zero_angle(sympy.Float(1e-12)))
        self.assertTrue(is_zero_angle(sympy.Float(-1e-12)))
        self.assertTrue(is_zero_angle(sympy.Float(2 * np.pi)))
        self.assertFalse(is_zero_angle(sympy.Float(1e-3)))
        self.assertTrue(is_zero_angle(sympy.Float(1e-3), tolerance=1e-2))

    def test_zero_symbolic(self):
        """Symbolic angles are zero only when they cancel."""
        self.assertFalse(is_zero_angle(THETA))
        self.assertTrue(is_zero_angle(THETA - THETA))

    def test_numeric(self):
        """Only inexact constants are numeric."""
        self.assertTrue(is_numeric(sympy.Float(0.3)))
        self.assertFalse(is_numeric(sympy.pi / 2))
        self.assertFalse(is_numeric(THETA))

    @data((sympy.pi / 4, 'pi/4'),
          (-sympy.pi / 2, '-pi/2'),
          (3 * sympy.pi / 4, '3*pi/4'),
          (sympy.Float(0.5), '0.5'),
          (THETA ** 2, 'theta^2'),
          (sympy.log(THETA), 'ln(theta)'))
    @unpack
    def test_angle_to_qasm(self, angle, text):
        """Angles print with the OPENQASM expression syntax."""
        self.assertEqual(angle_to_qasm(angle), text)


if __name__ == '__main__':
    unittest.main()
