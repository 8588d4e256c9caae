# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Nodes for OPENQASM declarations: the format line, registers, gates, opaque
gates, oracles and ancillas.
"""
import re

from ._node import Node


class Format(Node):
    """Node for an OPENQASM file identifier/version statement."""

    def __init__(self, value):
        """Create the version node."""
        Node.__init__(self, "format", None, None)
        match = re.match(r'(\w+)\s+(\d+)\.(\d+)', value)
        self.language = match.group(1)
        self.majorversion = match.group(2)
        self.minorversion = match.group(3)

    def version(self):
        """Return the version as 'major.minor'."""
        return "%s.%s" % (self.majorversion, self.minorversion)

    def qasm(self):
        """Return the corresponding format string."""
        return "%s %s;" % (self.language, self.version())


class Qreg(Node):
    """Node for an OPENQASM qreg statement.

    children[0] is an indexedid node, whose index is the register size.
    """

    keyword = "qreg"

    def __init__(self, children):
        """Create the register node."""
        Node.__init__(self, self.keyword, children, None)
        self.id = children[0]
        self.name = self.id.name
        self.line = self.id.line
        self.file = self.id.file
        self.index = self.id.index

    def size(self):
        """Return the number of bits of the register."""
        return self.index

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "%s %s;" % (self.keyword, self.id.qasm())


class Creg(Qreg):
    """Node for an OPENQASM creg statement."""

    keyword = "creg"


class Ancilla(Qreg):
    """Node for an ancilla declaration inside a gate body.

    A dirty ancilla may start in any state and must be restored to it.
    """

    keyword = "ancilla"

    def __init__(self, children, dirty=False):
        """Create the ancilla node."""
        Qreg.__init__(self, children)
        self.dirty = dirty

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        prefix = "dirty " if self.dirty else ""
        return prefix + Qreg.qasm(self)


class GateBody(Node):
    """Node for an OPENQASM custom gate body.

    children is a list of gate operation nodes.
    These are one of barrier, custom_unitary, U, CX or ancilla.
    """

    def __init__(self, children):
        """Create the gatebody node."""
        Node.__init__(self, 'gate_body', children, None)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "".join("  " + child.qasm() + "\n" for child in self.children)

    def calls(self):
        """Return a list of custom gate names in this gate body."""
        return [child.name for child in self.children if child.type == "custom_unitary"]


class Opaque(Node):
    """Node for an OPENQASM opaque gate declaration.

    children[0] is an id node.
    If len(children) is 3, children[1] is an idlist node with the
    parameters, and children[2] is an idlist node with the qubits.
    Otherwise, children[1] is an idlist node with the qubits.
    """

    def __init__(self, children, type='opaque'):
        """Create the gate declaration node."""
        # pylint: disable=redefined-builtin
        Node.__init__(self, type, children, None)
        self.id = children[0]
        # The next three fields are required by the symbtab
        self.name = self.id.name
        self.line = self.id.line
        self.file = self.id.file
        if len(children) == 3:
            self.arguments = children[1]
            self.bitlist = children[2]
        else:
            self.arguments = None
            self.bitlist = children[1]

    def n_args(self):
        """Return the number of parameter expressions."""
        if self.arguments:
            return self.arguments.size()
        return 0

    def n_bits(self):
        """Return the number of qubit arguments."""
        return self.bitlist.size()

    def parameter_names(self):
        """Return the names of the formal parameters."""
        if self.arguments is None:
            return []
        return [child.name for child in self.arguments.children]

    def _signature(self):
        string = self.name
        if self.arguments is not None:
            string += "(" + self.arguments.qasm() + ")"
        return string + " " + self.bitlist.qasm()

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "opaque %s;" % self._signature()


class Gate(Opaque):
    """Node for an OPENQASM gate definition.

    children[0] is an id node.
    If len(children) is 3, children[1] is an idlist node,
    and children[2] is a gatebody node.
    Otherwise, children[1] is an idlist node with the parameters,
    children[2] is an idlist node, and children[3] is a gatebody node.
    """

    def __init__(self, children):
        """Create the gate node."""
        Opaque.__init__(self, children[:-1], type='gate')
        self.children = children
        self.body = children[-1]

    def statements(self):
        """Return the statements of the gate body."""
        return self.body.children

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "gate %s\n{\n%s}" % (self._signature(), self.body.qasm())


class Oracle(Opaque):
    """Node for an oracle declaration, a gate defined by an external logic file.

    children[0] is an id node, children[1] is an idlist node with the
    qubits. The file name is in the filename field.
    """

    def __init__(self, children, filename):
        """Create the oracle node."""
        Opaque.__init__(self, children, type='oracle')
        self.filename = filename

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return 'oracle %s { "%s" }' % (self._signature(), self.filename)
