# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Rotation angles.

Angles are sympy expressions of one of three kinds: exact rational
multiples of pi, numeric values and expressions over free symbols (the
parameters of a gate declaration). Exact angles are reduced and compared
exactly, numeric ones up to a tolerance, symbolic ones are left as they are.
"""

import numpy as np
import sympy
from sympy.printing.str import StrPrinter

DEFAULT_ANGLE_TOLERANCE = 1e-10


def to_angle(value):
    """Convert a python number, a string or a sympy expression to an angle."""
    return sympy.sympify(value)


def pi_fraction(angle):
    """Express an exact angle as a fraction of pi reduced into (-1, 1].

    Args:
        angle (sympy.Expr): the angle.

    Returns:
        tuple(int, int) or None: (numerator, denominator) with a positive
            denominator, or None when the angle is not a rational multiple
            of pi.
    """
    ratio = sympy.sympify(angle) / sympy.pi
    if not ratio.is_Rational:
        return None
    ratio = ratio % 2
    if ratio > 1:
        ratio -= 2
    return int(ratio.p), int(ratio.q)


def is_numeric(angle):
    """True for angles without free symbols that are not rational multiples of pi."""
    angle = sympy.sympify(angle)
    return bool(angle.is_number) and pi_fraction(angle) is None


def reduce_angle(angle):
    """Reduce an exact or numeric angle into (-pi, pi]; symbolic angles are returned as is."""
    angle = sympy.sympify(angle)
    fraction = pi_fraction(angle)
    if fraction is not None:
        return sympy.Rational(*fraction) * sympy.pi
    if angle.is_number:
        value = float(np.mod(float(angle), 2 * np.pi))
        if value > np.pi:
            value -= 2 * np.pi
        return sympy.Float(value)
    return angle


def is_zero_angle(angle, tolerance=DEFAULT_ANGLE_TOLERANCE):
    """True if the angle is a multiple of 2 pi.

    Exact angles are tested exactly, numeric ones within `tolerance`.
    Symbolic angles are zero only when they simplify to the constant 0.
    """
    angle = sympy.sympify(angle)
    fraction = pi_fraction(angle)
    if fraction is not None:
        return fraction[0] == 0
    if angle.is_number:
        value = np.mod(float(angle), 2 * np.pi)
        return bool(value < tolerance or 2 * np.pi - value < tolerance)
    return False


class QasmAnglePrinter(StrPrinter):
    """Print sympy expressions with the OpenQASM 2.0 expression syntax."""

    def _print_Pow(self, expr, rational=False):
        return super()._print_Pow(expr, rational).replace('**', '^')

    def _print_Float(self, expr):
        return repr(float(expr))

    def _print_log(self, expr):
        return "ln(%s)" % self.stringify(expr.args, ", ")

    def _print_Exp1(self, expr):
        return "exp(1)"


def angle_to_qasm(angle):
    """Return the OpenQASM text of an angle."""
    return QasmAnglePrinter().doprint(sympy.sympify(angle))
