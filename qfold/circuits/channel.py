# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Operations of the channel representation of a circuit: opaque operations and
Pauli rotations.
"""

import sympy

from qfold.circuits.angle import angle_to_qasm
from qfold.circuits.pauli import PauliOp


class UninterpOp:
    """An operation the optimizer does not interpret, known only by its qubits."""

    def __init__(self, qubits):
        seen = set()
        ordered = []
        for qubit in qubits:
            if qubit not in seen:
                seen.add(qubit)
                ordered.append(qubit)
        self._qubits = tuple(ordered)

    @property
    def qubits(self):
        """The qubits the operation acts on, in order of first appearance."""
        return self._qubits

    def touches(self, qubit):
        """True if the operation acts on `qubit`."""
        return qubit in self._qubits

    def __eq__(self, other):
        if not isinstance(other, UninterpOp):
            return NotImplemented
        return self._qubits == other.qubits

    def __hash__(self):
        return hash(self._qubits)

    def __str__(self):
        return "U(%s)" % ", ".join(self._qubits)

    __repr__ = __str__


class RotationOp:
    """The rotation (1 + e^(i angle))/2 I + (1 - e^(i angle))/2 axis.

    With this convention T is R(pi/4, Z) exactly and R is 2 pi periodic in
    its angle.
    """

    def __init__(self, angle, axis):
        """Create a rotation.

        Args:
            angle (sympy.Expr or float): rotation angle.
            axis (PauliOp): rotation axis, a Hermitian Pauli operator.
        """
        self._angle = sympy.sympify(angle)
        self._axis = axis

    @classmethod
    def t(cls, qubit):
        """T gate."""
        return cls(sympy.pi / 4, PauliOp.z(qubit))

    @classmethod
    def tdg(cls, qubit):
        """Inverse T gate."""
        return cls(-sympy.pi / 4, PauliOp.z(qubit))

    @classmethod
    def rz(cls, angle, qubit):
        """Rotation about Z."""
        return cls(angle, PauliOp.z(qubit))

    @classmethod
    def rx(cls, angle, qubit):
        """Rotation about X."""
        return cls(angle, PauliOp.x(qubit))

    @classmethod
    def ry(cls, angle, qubit):
        """Rotation about Y."""
        return cls(angle, PauliOp.y(qubit))

    @property
    def angle(self):
        """The rotation angle."""
        return self._angle

    @property
    def axis(self):
        """The rotation axis."""
        return self._axis

    def is_z_type(self):
        """True if the axis is a product of Z's."""
        return self._axis.is_z_type()

    def commute_left(self, clifford):
        """Return R' such that R' C = C R, C being `clifford`."""
        return RotationOp(self._angle, clifford.conjugate(self._axis))

    def commutes_with(self, other):
        """Commutation with another rotation or with an uninterpreted operation.

        An uninterpreted operation is only known to commute when the axis is
        trivial on every qubit it touches.
        """
        if isinstance(other, UninterpOp):
            return all(self._axis.trivial_on(qubit) for qubit in other.qubits)
        return self._axis.commutes_with(other.axis)

    def try_merge(self, other):
        """Merge with a rotation about the same (or the negated) axis.

        Returns:
            tuple(sympy.Expr, RotationOp) or None: the global phase produced
                by the merge and the merged rotation, None when the axes
                differ.
        """
        if self._axis == other.axis:
            return sympy.Integer(0), RotationOp(self._angle + other.angle, self._axis)
        if self._axis == -other.axis:
            # R(b, -P) = e^(i b) R(-b, P)
            return other.angle, RotationOp(self._angle - other.angle, self._axis)
        return None

    def __eq__(self, other):
        if not isinstance(other, RotationOp):
            return NotImplemented
        return self._axis == other.axis and sympy.simplify(self._angle - other.angle) == 0

    def __hash__(self):
        return hash(self._axis)

    def __str__(self):
        return "R(%s, %s)" % (angle_to_qasm(self._angle), self._axis)

    __repr__ = __str__
