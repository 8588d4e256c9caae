# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Single-qubit Paulis, the phase group {1, i, -1, -i} and sparse n-qubit
Pauli operators.

Qubits are identified by the OpenQASM text of the operand (``"q[0]"`` or the
name of a gate formal such as ``"a"``).
"""

from enum import IntEnum


class Pauli(IntEnum):
    """A single-qubit Pauli, ignoring phase.

    The encoding makes the group product (modulo phase) a bitwise xor.
    """
    I = 0
    X = 1
    Z = 2
    Y = 3

    def __mul__(self, other):
        return Pauli(int(self) ^ int(other))

    def __str__(self):
        return self.name


class Phase(IntEnum):
    """An element of {1, i, -1, -i}, stored as the exponent of i."""
    ONE = 0
    I = 1
    MINUS_ONE = 2
    MINUS_I = 3

    def __mul__(self, other):
        return Phase((int(self) + int(other)) % 4)

    def __str__(self):
        return _PHASE_STRINGS[self]


_PHASE_STRINGS = {Phase.ONE: "", Phase.I: "i", Phase.MINUS_ONE: "-", Phase.MINUS_I: "-i"}

# (p, q) pairs whose operator product p*q carries a phase of -i. The reversed
# pairs carry +i.
_MINUS_I_PAIRS = frozenset([(Pauli.X, Pauli.Z), (Pauli.Z, Pauli.Y), (Pauli.Y, Pauli.X)])


def pauli_product(left, right):
    """Operator product of two single-qubit Paulis.

    Args:
        left (Pauli): left factor.
        right (Pauli): right factor.

    Returns:
        tuple(Pauli, Phase): the product and the phase it carries.
    """
    left, right = Pauli(left), Pauli(right)
    if left == Pauli.I or right == Pauli.I or left == right:
        return left * right, Phase.ONE
    if (left, right) in _MINUS_I_PAIRS:
        return left * right, Phase.MINUS_I
    return left * right, Phase.I


def paulis_commute(left, right):
    """Two single-qubit Paulis commute iff one is I or they are equal."""
    return left == Pauli.I or right == Pauli.I or left == right


class PauliOp:
    """A phase times a tensor product of single-qubit Paulis.

    Only the qubits carrying a non-identity Pauli are stored, every other
    qubit is implicitly acted on by I.
    """

    def __init__(self, paulis=None, phase=Phase.ONE):
        """Create a Pauli operator.

        Args:
            paulis (dict): qubit -> Pauli. Identity entries are dropped.
            phase (Phase): the global phase of the operator.
        """
        self._phase = Phase(phase)
        self._paulis = {}
        if paulis:
            for qubit, pauli in paulis.items():
                if pauli != Pauli.I:
                    self._paulis[qubit] = Pauli(pauli)

    @classmethod
    def single(cls, qubit, pauli):
        """The operator acting as `pauli` on `qubit` and trivially elsewhere."""
        return cls({qubit: pauli})

    @classmethod
    def i(cls, qubit):  # pylint: disable=unused-argument
        """The identity (on any qubit)."""
        return cls()

    @classmethod
    def x(cls, qubit):
        """X on a qubit."""
        return cls.single(qubit, Pauli.X)

    @classmethod
    def y(cls, qubit):
        """Y on a qubit."""
        return cls.single(qubit, Pauli.Y)

    @classmethod
    def z(cls, qubit):
        """Z on a qubit."""
        return cls.single(qubit, Pauli.Z)

    @property
    def phase(self):
        """The phase of the operator."""
        return self._phase

    def pauli(self, qubit):
        """The Pauli acting on `qubit`."""
        return self._paulis.get(qubit, Pauli.I)

    def qubits(self):
        """The support of the operator, sorted."""
        return sorted(self._paulis)

    def items(self):
        """(qubit, Pauli) pairs of the support, sorted by qubit."""
        return sorted(self._paulis.items())

    def trivial_on(self, qubit):
        """True if the operator acts as the identity on `qubit`."""
        return qubit not in self._paulis

    def is_z_type(self):
        """True if every non-trivial factor is Z."""
        return all(pauli == Pauli.Z for pauli in self._paulis.values())

    def compose(self, other):
        """Return the operator product self * other."""
        phase = self._phase * other.phase
        paulis = dict(self._paulis)
        for qubit, pauli in other._paulis.items():
            product, factor = pauli_product(paulis.get(qubit, Pauli.I), pauli)
            phase = phase * factor
            paulis[qubit] = product
        return PauliOp(paulis, phase)

    def negate(self):
        """Return -self."""
        return PauliOp(self._paulis, self._phase * Phase.MINUS_ONE)

    def commutes_with(self, other):
        """Two Pauli operators commute iff they anticommute on an even number of qubits."""
        anticommuting = 0
        for qubit, pauli in self._paulis.items():
            if not paulis_commute(pauli, other.pauli(qubit)):
                anticommuting += 1
        return anticommuting % 2 == 0

    def __mul__(self, other):
        return self.compose(other)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        if not isinstance(other, PauliOp):
            return NotImplemented
        return self._phase == other.phase and self._paulis == other._paulis

    def __hash__(self):
        return hash((self._phase, frozenset(self._paulis.items())))

    def __str__(self):
        terms = "".join("%s(%s)" % (pauli.name, qubit) for qubit, pauli in self.items())
        return str(self._phase) + (terms or "I")

    def __repr__(self):
        return "PauliOp(%r, %s)" % (dict(self.items()), self._phase.name)
