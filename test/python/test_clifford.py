# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Tests for Clifford operators."""

import unittest

from ddt import ddt, data

from qfold.circuits import CliffordOp, Pauli, PauliOp, Phase
from qfold.test import QfoldTestCase


@ddt
class TestCliffordOp(QfoldTestCase):
    """Conjugation action of Clifford gates."""

    def test_hadamard(self):
        """H exchanges X and Z and negates Y."""
        hadamard = CliffordOp.h('q')
        self.assertEqual(hadamard.conjugate(PauliOp.x('q')), PauliOp.z('q'))
        self.assertEqual(hadamard.conjugate(PauliOp.z('q')), PauliOp.x('q'))
        self.assertEqual(hadamard.conjugate(PauliOp.y('q')), -PauliOp.y('q'))

    def test_hadamard_squared(self):
        """H * H acts as the identity."""
        hadamard = CliffordOp.h('q')
        square = hadamard * hadamard
        self.assertEqual(square.conjugate(PauliOp.x('q')), PauliOp.x('q'))
        self.assertTrue(square.is_identity())
        self.assertEqual(square, CliffordOp())

    def test_s_sdg(self):
        """S * Sdg is the identity and S * S is Z."""
        self.assertTrue((CliffordOp.s('q') * CliffordOp.sdg('q')).is_identity())
        self.assertEqual(CliffordOp.s('q') * CliffordOp.s('q'), CliffordOp.z('q'))

    def test_paulis_negate_anticommuting(self):
        """X, Y and Z negate the generators they anticommute with."""
        self.assertEqual(CliffordOp.x('q').conjugate(PauliOp.z('q')), -PauliOp.z('q'))
        self.assertEqual(CliffordOp.x('q').conjugate(PauliOp.x('q')), PauliOp.x('q'))
        self.assertEqual(CliffordOp.y('q').conjugate(PauliOp.z('q')), -PauliOp.z('q'))
        self.assertEqual(CliffordOp.z('q').conjugate(PauliOp.z('q')), PauliOp.z('q'))

    def test_cnot(self):
        """CNOT copies X forward and Z backward."""
        cnot = CliffordOp.cnot('c', 't')
        self.assertEqual(cnot.conjugate(PauliOp.x('c')),
                         PauliOp({'c': Pauli.X, 't': Pauli.X}))
        self.assertEqual(cnot.conjugate(PauliOp.z('t')),
                         PauliOp({'c': Pauli.Z, 't': Pauli.Z}))
        self.assertEqual(cnot.conjugate(PauliOp.z('c')), PauliOp.z('c'))
        self.assertEqual(cnot.conjugate(PauliOp.x('t')), PauliOp.x('t'))

    def test_cnot_squared(self):
        """CNOT is self-inverse."""
        cnot = CliffordOp.cnot('c', 't')
        self.assertTrue((cnot * cnot).is_identity())

    @data(CliffordOp.h('a'), CliffordOp.s('a'), CliffordOp.sdg('a'),
          CliffordOp.cnot('a', 'b'), CliffordOp.cnot('b', 'a'))
    def test_conjugation_is_multiplicative(self, clifford):
        """C(P1 * P2) == C(P1) * C(P2)."""
        first = PauliOp({'a': Pauli.X, 'b': Pauli.Z})
        second = PauliOp({'a': Pauli.Z, 'b': Pauli.Y})
        self.assertEqual(clifford.conjugate(first * second),
                         clifford.conjugate(first) * clifford.conjugate(second))

    def test_compose_order(self):
        """(A * B) applies B's action first."""
        composed = CliffordOp.h('q') * CliffordOp.s('q')
        # s: X -> Y, then h: Y -> -Y
        self.assertEqual(composed.conjugate(PauliOp.x('q')), -PauliOp.y('q'))

    def test_phase_is_kept(self):
        """The phase of the conjugated operator is kept."""
        op = PauliOp({'q': Pauli.X}, Phase.I)
        self.assertEqual(CliffordOp.h('q').conjugate(op), PauliOp({'q': Pauli.Z}, Phase.I))
        self.assertEqual(CliffordOp.h('q').conjugate(PauliOp(phase=Phase.I)),
                         PauliOp(phase=Phase.I))

    def test_untouched_qubits(self):
        """Generators of other qubits are mapped to themselves."""
        self.assertEqual(CliffordOp.h('a').conjugate(PauliOp.x('b')), PauliOp.x('b'))
        self.assertEqual(CliffordOp.h('a').image('b', Pauli.Y), PauliOp.y('b'))
        self.assertEqual(CliffordOp.h('a').image('a', Pauli.I), PauliOp())

    def test_equality_and_str(self):
        """Equality ignores generators mapped to themselves."""
        explicit = CliffordOp({('a', Pauli.X): PauliOp.x('a')})
        self.assertEqual(explicit, CliffordOp())
        self.assertEqual(hash(explicit), hash(CliffordOp()))
        self.assertEqual(str(CliffordOp()), 'I')
        self.assertNotEqual(CliffordOp.h('a'), CliffordOp.h('b'))


if __name__ == '__main__':
    unittest.main()
