# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Clifford operators represented by their conjugation action on Pauli
generators.

A CliffordOp maps each generator (qubit, X|Z|Y) it touches to a PauliOp.
Generators without an entry are mapped to themselves. The factories store
the action P -> U^dagger P U of the named gate U, which is the action needed
to move a rotation that follows U in the circuit to the left of U.
"""

from qfold.circuits.pauli import Pauli, PauliOp


class CliffordOp:
    """A Clifford operator as a map from Pauli generators to PauliOps."""

    def __init__(self, images=None):
        """Create a Clifford operator.

        Args:
            images (dict): (qubit, Pauli) -> PauliOp. Missing generators are
                mapped to themselves. The default is the identity.
        """
        self._images = {}
        if images:
            for (qubit, pauli), image in images.items():
                self._images[(qubit, Pauli(pauli))] = image

    @classmethod
    def h(cls, qubit):
        """Hadamard."""
        return cls({
            (qubit, Pauli.X): PauliOp.z(qubit),
            (qubit, Pauli.Z): PauliOp.x(qubit),
            (qubit, Pauli.Y): -PauliOp.y(qubit),
        })

    @classmethod
    def s(cls, qubit):
        """Phase gate."""
        return cls({
            (qubit, Pauli.X): PauliOp.y(qubit),
            (qubit, Pauli.Y): -PauliOp.x(qubit),
        })

    @classmethod
    def sdg(cls, qubit):
        """Inverse phase gate."""
        return cls({
            (qubit, Pauli.X): -PauliOp.y(qubit),
            (qubit, Pauli.Y): PauliOp.x(qubit),
        })

    @classmethod
    def x(cls, qubit):
        """Pauli X."""
        return cls({
            (qubit, Pauli.Z): -PauliOp.z(qubit),
            (qubit, Pauli.Y): -PauliOp.y(qubit),
        })

    @classmethod
    def y(cls, qubit):
        """Pauli Y."""
        return cls({
            (qubit, Pauli.X): -PauliOp.x(qubit),
            (qubit, Pauli.Z): -PauliOp.z(qubit),
        })

    @classmethod
    def z(cls, qubit):
        """Pauli Z."""
        return cls({
            (qubit, Pauli.X): -PauliOp.x(qubit),
            (qubit, Pauli.Y): -PauliOp.y(qubit),
        })

    @classmethod
    def cnot(cls, control, target):
        """Controlled NOT."""
        return cls({
            (control, Pauli.X): PauliOp({control: Pauli.X, target: Pauli.X}),
            (target, Pauli.Z): PauliOp({control: Pauli.Z, target: Pauli.Z}),
            (control, Pauli.Y): PauliOp({control: Pauli.Y, target: Pauli.X}),
            (target, Pauli.Y): PauliOp({control: Pauli.Z, target: Pauli.Y}),
        })

    def image(self, qubit, pauli):
        """The image of the generator `pauli` on `qubit`."""
        pauli = Pauli(pauli)
        if pauli == Pauli.I:
            return PauliOp()
        return self._images.get((qubit, pauli), PauliOp.single(qubit, pauli))

    def conjugate(self, pauli_op):
        """Apply the conjugation action to a PauliOp.

        The phase of the input is kept and the images of its single-qubit
        factors are multiplied together.
        """
        ret = PauliOp(phase=pauli_op.phase)
        for qubit, pauli in pauli_op.items():
            ret = ret * self.image(qubit, pauli)
        return ret

    def compose(self, other):
        """Return self * other, the action of other followed by the action of self."""
        ret = CliffordOp(self._images)
        for generator, image in other._images.items():
            ret._images[generator] = self.conjugate(image)
        return ret

    def is_identity(self):
        """True if every generator is mapped to itself."""
        return all(image == PauliOp.single(qubit, pauli)
                   for (qubit, pauli), image in self._images.items())

    def __mul__(self, other):
        return self.compose(other)

    def __eq__(self, other):
        if not isinstance(other, CliffordOp):
            return NotImplemented
        generators = set(self._images) | set(other._images)
        return all(self.image(*generator) == other.image(*generator)
                   for generator in generators)

    def __hash__(self):
        return hash(frozenset((generator, image) for generator, image in self._images.items()
                              if image != PauliOp.single(*generator)))

    def __str__(self):
        lines = ["%s(%s) |-> %s" % (pauli.name, qubit, image)
                 for (qubit, pauli), image in sorted(self._images.items())]
        return "\n".join(lines) if lines else "I"

    def __repr__(self):
        return "CliffordOp(%r)" % {generator: str(image)
                                   for generator, image in sorted(self._images.items())}

