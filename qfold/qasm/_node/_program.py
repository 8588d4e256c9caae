# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Node for an OPENQASM program.

The program owns every statement node and addresses it by an integer uid,
which lets passes refer to statements without holding on to the nodes.
"""
import sympy

from qfold.circuits.angle import angle_to_qasm
from .._corelibs import is_core_lib
from .._qasmerror import QasmError
from ._expressions import ExpressionList, Int, Real
from ._node import Node
from ._operands import Id, IndexedId, PrimaryList
from ._statements import CustomUnitary

LIBRARY_INCLUDE = 'include "qelib1.inc";'


class Program(Node):
    """Node for an OPENQASM program.

    children is a list of nodes (statements).

    Statements are the top-level nodes, the statements of gate bodies and the
    operation conditioned by an if. Each of them gets a uid.
    """

    def __init__(self, children):
        """Create the program node."""
        Node.__init__(self, 'program', children, None)
        self.global_phase = sympy.Integer(0)
        self._nodes = {}
        self._containers = {}
        self._next_uid = 0

    def _register(self, statement, container):
        statement.uid = self._next_uid
        self._next_uid += 1
        self._nodes[statement.uid] = statement
        self._containers[statement.uid] = container

    def index_statements(self):
        """Assign a uid to every statement of the program."""
        self._nodes = {}
        self._containers = {}
        for statement in self.children:
            self._register(statement, self.children)
            if statement.type == 'gate':
                for gate_statement in statement.statements():
                    self._register(gate_statement, statement.body.children)
            elif statement.type == 'if':
                # The conditioned operation can not be spliced.
                self._register(statement.body, None)

    def statements(self):
        """Return the top-level statements."""
        return self.children

    def gates(self):
        """Return the gate declarations, library gates included."""
        return [statement for statement in self.children if statement.type == 'gate']

    def node(self, uid):
        """Return the statement with the given uid."""
        try:
            return self._nodes[uid]
        except KeyError:
            raise QasmError("No statement with uid %s" % uid)

    def uids(self):
        """Return the uids of all statements."""
        return list(self._nodes)

    def bulk_replace(self, replacements):
        """Replace statements by sequences of gate applications.

        Args:
            replacements (dict): uid -> list of GateDescriptor. An empty list
                deletes the statement.

        Raises:
            QasmError: if a uid is unknown or names the operation of an if.
        """
        for uid in replacements:
            if uid not in self._nodes:
                raise QasmError("No statement with uid %s" % uid)
            if self._containers[uid] is None:
                raise QasmError("Cannot replace the operation of an if statement:",
                                self._nodes[uid].qasm())

        for uid, descriptors in replacements.items():
            statement = self._nodes.pop(uid)
            container = self._containers.pop(uid)
            position = next(i for i, child in enumerate(container) if child is statement)
            new_statements = [self._build(descriptor) for descriptor in descriptors]
            container[position:position + 1] = new_statements
            for new_statement in new_statements:
                self._register(new_statement, container)

    @staticmethod
    def _build(descriptor):
        operand = descriptor.qubit
        if operand.type == 'indexed_id':
            operand = IndexedId([Id(operand.name, operand.line, operand.file),
                                 Int(operand.index)])
        else:
            operand = Id(operand.name, operand.line, operand.file)
        children = [Id(descriptor.name, operand.line, operand.file)]
        if descriptor.params:
            children.append(ExpressionList([Real(param) for param in descriptor.params]))
        children.append(PrimaryList([operand]))
        return CustomUnitary(children)

    def qasm(self):
        """Return the corresponding OPENQASM string.

        Declarations read from the bundled library are printed back as the
        include statement that brought them in.
        """
        lines = []
        library_included = False
        for statement in self.children:
            if statement.type in ('gate', 'opaque') and is_core_lib(statement.file):
                if not library_included:
                    lines.append(LIBRARY_INCLUDE)
                    library_included = True
                continue
            lines.append(statement.qasm())
        if self.global_phase != 0:
            position = 1 if self.children and self.children[0].type == "format" else 0
            lines.insert(position, "// global phase: %s" % angle_to_qasm(self.global_phase))
        return "\n".join(lines) + "\n"
