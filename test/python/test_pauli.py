# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Tests for the Pauli algebra."""

import unittest

from ddt import ddt, data, unpack

from qfold.circuits import Pauli, Phase, PauliOp, pauli_product, paulis_commute
from qfold.test import QfoldTestCase


@ddt
class TestPauli(QfoldTestCase):
    """Single-qubit Paulis and phases."""

    @data(Pauli.I, Pauli.X, Pauli.Y, Pauli.Z)
    def test_identity_and_square(self, pauli):
        """p * I == p and p * p == I."""
        self.assertEqual(pauli * Pauli.I, pauli)
        self.assertEqual(Pauli.I * pauli, pauli)
        self.assertEqual(pauli * pauli, Pauli.I)

    @data(Phase.ONE, Phase.I, Phase.MINUS_ONE, Phase.MINUS_I)
    def test_phase_order_divides_four(self, phase):
        """phase^4 == 1."""
        self.assertEqual(phase * phase * phase * phase, Phase.ONE)

    def test_phase_products(self):
        """i * i == -1 and i * -i == 1."""
        self.assertEqual(Phase.I * Phase.I, Phase.MINUS_ONE)
        self.assertEqual(Phase.I * Phase.MINUS_I, Phase.ONE)
        self.assertEqual(Phase.MINUS_ONE * Phase.MINUS_I, Phase.I)

    @data((Pauli.X, Pauli.Z, Pauli.Y, Phase.MINUS_I),
          (Pauli.Z, Pauli.X, Pauli.Y, Phase.I),
          (Pauli.Z, Pauli.Y, Pauli.X, Phase.MINUS_I),
          (Pauli.Y, Pauli.Z, Pauli.X, Phase.I),
          (Pauli.Y, Pauli.X, Pauli.Z, Phase.MINUS_I),
          (Pauli.X, Pauli.Y, Pauli.Z, Phase.I),
          (Pauli.X, Pauli.X, Pauli.I, Phase.ONE),
          (Pauli.I, Pauli.Y, Pauli.Y, Phase.ONE))
    @unpack
    def test_operator_product(self, left, right, product, phase):
        """Operator products carry +-i for distinct non-trivial Paulis."""
        self.assertEqual(pauli_product(left, right), (product, phase))

    def test_commutation(self):
        """Distinct non-trivial Paulis anticommute."""
        self.assertTrue(paulis_commute(Pauli.X, Pauli.X))
        self.assertTrue(paulis_commute(Pauli.I, Pauli.Y))
        self.assertFalse(paulis_commute(Pauli.X, Pauli.Z))
        self.assertFalse(paulis_commute(Pauli.Y, Pauli.Z))

    def test_str(self):
        """Paulis print by name, phases as prefixes."""
        self.assertEqual(str(Pauli.Y), 'Y')
        self.assertEqual(str(Phase.ONE), '')
        self.assertEqual(str(Phase.MINUS_I), '-i')


@ddt
class TestPauliOp(QfoldTestCase):
    """Sparse n-qubit Pauli operators."""

    def test_identity_drops_trivial_entries(self):
        """I entries are not stored."""
        op = PauliOp({'q[0]': Pauli.I, 'q[1]': Pauli.X})
        self.assertEqual(op.qubits(), ['q[1]'])
        self.assertTrue(op.trivial_on('q[0]'))
        self.assertEqual(op.pauli('q[0]'), Pauli.I)
        self.assertEqual(PauliOp.i('q[0]'), PauliOp())

    def test_square_is_identity(self):
        """Y * Y == I."""
        self.assertEqual(PauliOp.y('a') * PauliOp.y('a'), PauliOp())

    def test_product_on_one_qubit(self):
        """X * Z == -iY."""
        product = PauliOp.x('a') * PauliOp.z('a')
        self.assertEqual(product, PauliOp({'a': Pauli.Y}, Phase.MINUS_I))
        self.assertEqual(str(product), '-iY(a)')

    def test_product_on_two_qubits(self):
        """Factors on different qubits pass through."""
        product = PauliOp.x('q[0]') * PauliOp.z('q[1]')
        self.assertEqual(product.phase, Phase.ONE)
        self.assertEqual(product.items(), [('q[0]', Pauli.X), ('q[1]', Pauli.Z)])
        self.assertEqual(str(product), 'X(q[0])Z(q[1])')

    @data((PauliOp.x('a'), PauliOp.z('a'), PauliOp.y('a')),
          (PauliOp.x('a'), PauliOp({'a': Pauli.Z, 'b': Pauli.Y}), PauliOp.x('b')),
          (PauliOp({'a': Pauli.Y, 'b': Pauli.Y}), PauliOp.z('b'), -PauliOp.x('a')))
    @unpack
    def test_associativity(self, first, second, third):
        """(a * b) * c == a * (b * c)."""
        self.assertEqual((first * second) * third, first * (second * third))

    def test_commuting_products(self):
        """Commuting operators multiply to the same operator in both orders."""
        first = PauliOp({'a': Pauli.X, 'b': Pauli.X})
        second = PauliOp({'a': Pauli.Z, 'b': Pauli.Z})
        self.assertTrue(first.commutes_with(second))
        self.assertEqual(first * second, second * first)

    def test_anticommuting_products(self):
        """Anticommuting operators differ by a sign."""
        first, second = PauliOp.x('a'), PauliOp.z('a')
        self.assertFalse(first.commutes_with(second))
        self.assertEqual(first * second, -(second * first))
        self.assertTrue(PauliOp.x('a').commutes_with(PauliOp.z('b')))

    def test_negate(self):
        """-(-P) == P."""
        op = PauliOp.z('q')
        self.assertEqual(str(-op), '-Z(q)')
        self.assertEqual(-(-op), op)
        self.assertNotEqual(-op, op)

    def test_z_type(self):
        """Products of Z's, the identity included, are Z type."""
        self.assertTrue(PauliOp({'a': Pauli.Z, 'b': Pauli.Z}).is_z_type())
        self.assertTrue(PauliOp().is_z_type())
        self.assertFalse(PauliOp({'a': Pauli.Z, 'b': Pauli.X}).is_z_type())

    def test_hash(self):
        """Equal operators hash equally."""
        first = PauliOp.x('a') * PauliOp.x('b')
        second = PauliOp({'b': Pauli.X, 'a': Pauli.X})
        self.assertEqual(first, second)
        self.assertEqual(len({first, second}), 1)

    def test_identity_str(self):
        """The identity prints as I."""
        self.assertEqual(str(PauliOp()), 'I')
        self.assertEqual(str(PauliOp(phase=Phase.I)), 'iI')


if __name__ == '__main__':
    unittest.main()
