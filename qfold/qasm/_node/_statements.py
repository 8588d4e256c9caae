# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Nodes for OPENQASM quantum operations.

Every operation exposes `operands()`, the list of its quantum operand nodes
(ids or indexed ids) in order.
"""
from ._node import Node


class UniversalUnitary(Node):
    """Node for an OPENQASM U statement.

    children[0] is an expressionlist node.
    children[1] is a primary node (id or indexedid).
    """

    def __init__(self, children):
        """Create the U node."""
        Node.__init__(self, 'universal_unitary', children, None)
        self.arguments = children[0]

    def operands(self):
        """Return the quantum operands."""
        return [self.children[1]]

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "U(" + self.arguments.qasm() + ") " + self.children[1].qasm() + ";"


class Cnot(Node):
    """Node for an OPENQASM CNOT statement.

    children[0], children[1] are the control and target primary nodes.
    """

    def __init__(self, children):
        """Create the cnot node."""
        Node.__init__(self, 'cnot', children, None)

    def operands(self):
        """Return the quantum operands."""
        return list(self.children)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "CX " + self.children[0].qasm() + "," + self.children[1].qasm() + ";"


class CustomUnitary(Node):
    """Node for an OPENQASM custom gate statement.

    children[0] is an id node.
    children[1] is an exp_list (if len==3) or primary_list.
    children[2], if present, is a primary_list.

    Has properties:
    .id = id node
    .name = gate name string
    .arguments = None or exp_list node
    .bitlist = primary_list node
    """

    def __init__(self, children):
        """Create the custom gate node."""
        Node.__init__(self, 'custom_unitary', children, None)
        self.id = children[0]
        self.name = self.id.name
        if len(children) == 3:
            self.arguments = children[1]
            self.bitlist = children[2]
        else:
            self.arguments = None
            self.bitlist = children[1]

    def operands(self):
        """Return the quantum operands."""
        return list(self.bitlist.children)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = self.name
        if self.arguments is not None:
            string += "(" + self.arguments.qasm() + ")"
        return string + " " + self.bitlist.qasm() + ";"


class Barrier(Node):
    """Node for an OPENQASM barrier statement.

    children[0] is a primarylist node.
    """

    def __init__(self, children):
        """Create the barrier node."""
        Node.__init__(self, 'barrier', children, None)

    def operands(self):
        """Return the quantum operands."""
        return list(self.children[0].children)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "barrier " + self.children[0].qasm() + ";"


class Measure(Node):
    """Node for an OPENQASM measure statement.

    children[0] is a primary node (id or indexedid), the qubit.
    children[1] is a primary node (id or indexedid), the bit.
    """

    def __init__(self, children):
        """Create the measure node."""
        Node.__init__(self, 'measure', children, None)

    def operands(self):
        """Return the quantum operands."""
        return [self.children[0]]

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "measure " + self.children[0].qasm() + " -> " + self.children[1].qasm() + ";"


class Reset(Node):
    """Node for an OPENQASM reset statement.

    children[0] is a primary node (id or indexedid).
    """

    def __init__(self, children):
        """Create the reset node."""
        Node.__init__(self, 'reset', children, None)

    def operands(self):
        """Return the quantum operands."""
        return [self.children[0]]

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "reset " + self.children[0].qasm() + ";"


class If(Node):
    """Node for an OPENQASM if statement.

    children[0] is an id node, the classical register.
    children[1] is an integer node.
    children[2] is quantum operation node: U, CX, custom_unitary, measure
    or reset.
    """

    def __init__(self, children):
        """Create the if node."""
        Node.__init__(self, 'if', children, None)

    @property
    def body(self):
        """The conditioned operation."""
        return self.children[2]

    def operands(self):
        """Return the quantum operands of the conditioned operation."""
        return self.children[2].operands()

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "if(" + self.children[0].qasm() + "==" + \
               str(self.children[1].value) + ") " + self.children[2].qasm()
