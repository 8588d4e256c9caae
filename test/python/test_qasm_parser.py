# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Test for the QASM parser"""

import os
import unittest

import ply
from ddt import ddt, data, unpack

from qfold.qasm import Qasm, QasmError, is_core_lib
from qfold.qasm._node import Node
from qfold.test import QfoldTestCase, Path

HEADER = 'OPENQASM 2.0;\ninclude "qelib1.inc";\n'


def parse(file_path):
    """
    Simple helper
    - file_path: Path to the OpenQASM file
    """
    qasm = Qasm(file_path)
    return qasm.parse().qasm()


@ddt
class TestParser(QfoldTestCase):
    """QasmParser"""

    def setUp(self):
        super().setUp()
        self.qasm_file_path = self._get_resource_path('example.qasm', Path.QASMS)
        self.qasm_file_path_fail = self._get_resource_path('example_fail.qasm', Path.QASMS)

    def test_parser(self):
        """should return a correct response for a valid circuit."""
        res = parse(self.qasm_file_path)
        self.log.info(res)
        starts_expected = "\n".join([
            "OPENQASM 2.0;",
            'include "qelib1.inc";',
            "gate majority a,b,c",
            "{",
            "  cx c,b;",
            ""])
        ends_expected = "\n".join([
            "}",
            "qreg q[3];",
            "qreg r[3];",
            "creg m[3];",
            "h q;",
            "cx q,r;",
            "majority q[0],q[1],q[2];",
            "phase_pair((pi/4)) r[0];",
            "t q[0];",
            "cx q[0],q[1];",
            "t q[0];",
            "barrier q;",
            "if(m==1) x q[0];",
            "reset r[1];",
            "measure q -> m;",
            ""])
        self.assertEqual(res[:len(starts_expected)], starts_expected)
        self.assertEqual(res[-len(ends_expected):], ends_expected)

    def test_parser_fail(self):
        """should fail a for a  not valid circuit."""
        self.assertRaisesRegex(QasmError, "Perhaps there is a missing",
                               parse, file_path=self.qasm_file_path_fail)

    def test_printed_program_parses(self):
        """The printed program parses back to the same text."""
        res = parse(self.qasm_file_path)
        self.assertEqual(Qasm(data=res).parse().qasm(), res)

    def test_all_valid_nodes(self):
        """Test that the tree contains only Node subclasses."""
        def inspect(node):
            """Inspect node children."""
            for child in node.children:
                self.assertTrue(isinstance(child, Node))
                inspect(child)

        inspect(Qasm(self.qasm_file_path).parse())
        inspect(self.load_qasm('example_oracle.qasm'))

    def test_statements_have_uids(self):
        """Top-level statements, gate bodies and if bodies are indexed."""
        program = Qasm(self.qasm_file_path).parse()
        uids = []
        for statement in program.statements():
            uids.append(statement.uid)
            if statement.type == 'gate':
                uids.extend(child.uid for child in statement.statements())
            elif statement.type == 'if':
                uids.append(statement.body.uid)
        self.assertNotIn(None, uids)
        self.assertEqual(len(set(uids)), len(uids))
        self.assertEqual(sorted(uids), sorted(program.uids()))

    def test_library_gates(self):
        """Gates of the bundled library are tagged with its path."""
        program = Qasm(self.qasm_file_path).parse()
        library = {gate.name for gate in program.gates() if is_core_lib(gate.file)}
        self.assertIn('ccx', library)
        self.assertNotIn('majority', library)

    def test_oracle_and_ancillas(self):
        """Oracles and gate body ancillas are parsed and printed."""
        res = self.load_qasm('example_oracle.qasm').qasm()
        self.assertIn('oracle lookup a,b,c { "lookup.v" }\n', res)
        self.assertIn('  ancilla clean[2];\n', res)
        self.assertIn('  dirty ancilla spare[1];\n', res)
        self.assertIn('  ccx clean[0],spare[0],b;\n', res)
        self.assertTrue(res.endswith('lookup q[0],q[1],q[2];\nborrow q[0],q[2];\n'))

    def test_relative_include(self):
        """Includes are looked up next to the including file."""
        program = self.load_qasm('example_include.qasm')
        gate, = [gate for gate in program.gates() if gate.name == 'toffoli_pair']
        self.assertEqual(os.path.basename(gate.file), 'toffoli_pair.inc')
        self.assertIn('gate toffoli_pair a,b,c\n{\n  ccx a,b,c;\n', program.qasm())

    def test_generate_tokens(self):
        """Test whether we get only valid tokens."""
        tokens = Qasm(data='OPENQASM 2.0;\nqreg q[1];\n').get_tokens()
        for token in tokens:
            self.assertTrue(isinstance(token, ply.lex.LexToken))
        self.assertEqual([token.type for token in tokens],
                         ['FORMAT', ';', 'QREG', 'ID', '[', 'NNINTEGER', ']', ';'])

    def test_expressions(self):
        """Expressions keep their structure when printed."""
        program = self.parse_qasm(HEADER + 'qreg q[1];\n'
                                           'u3(-pi/2,2^3*0.5,ln(2)+cos(pi)) q[0];\n')
        self.assertTrue(program.qasm().endswith(
            'u3((-(pi)/2),((2^3)*0.5),(ln(2)+cos(pi))) q[0];\n'))

    def test_missing_input(self):
        """Exactly one of filename and data is required."""
        self.assertRaises(QasmError, Qasm)
        self.assertRaises(QasmError, Qasm, filename='a.qasm', data='OPENQASM 2.0;')

    def test_unreadable_file(self):
        """Missing files raise a QasmError."""
        qasm = Qasm(filename=self._get_resource_path('no_such_file.qasm', Path.QASMS))
        self.assertRaisesRegex(QasmError, 'Unable to read', qasm.parse)

    @data(('qreg q[1];\nx r[0];', 'Cannot find definition for qreg'),
          ('qreg q[1];\nx q[1];', 'out of bounds'),
          ('qreg q[1];\nqreg q[2];', 'Duplicate declaration'),
          ('qreg q[1];\nfoo q[0];', "Cannot find gate definition for 'foo'"),
          ('qreg q[1];\nq q[0];', 'is used as a gate'),
          ('qreg q[2];\nx q[0],q[1];', 'uses 2 qubits but is declared for 1 qubits'),
          ('qreg q[1];\nrz q[0];', 'uses 0 arguments but is declared for 1 arguments'),
          ('qreg q[1];\ncreg c[1];\nif(c==1) if(c==1) x q[0];', 'Nested IF'),
          ('qreg q[1];\ncreg c[1];\nif(c==1) barrier q;', 'barrier not permitted'),
          ('qreg q[1];\nx q[0]', 'Perhaps there is a missing'),
          ('qreg q[1];\nx q[0] q[0];', 'Invalid syntax near'),
          ('gate g a { x b; }', "Cannot find symbol 'b'"),
          ('gate g a { x a[0]; }', "Cannot find ancilla 'a'"),
          ('gate g a { ancilla b[1]; cx a,b[1]; }', 'out of bounds'),
          ('qreg q[1];\nrz(theta) q[0];', "Argument 'theta' in expression cannot be found"),
          ('qreg q[1];\nrz(foo(1)) q[0];', 'Illegal external function call'),
          ('qreg q[2];\ncx q[0],q[0];', 'Duplicate argument'),
          ('qreg q[2];\nqreg r[3];\ncx q,r;', 'Registers of different sizes'),
          ('qreg q[0];', 'QREG size must be positive'),
          ('qreg q[1];\nmeasure q[0] -> q[0];', "should be 'creg'"),
          ('include "no_such_file.inc";', 'cannot be found'),
          ('qreg q[1];\n$', 'Unable to match any token rule'))
    @unpack
    def test_rejected(self, body, message):
        """Invalid programs are rejected with a QasmError."""
        qasm = Qasm(data=HEADER + body + '\n')
        self.assertRaisesRegex(QasmError, message, qasm.parse)


if __name__ == '__main__':
    unittest.main()
