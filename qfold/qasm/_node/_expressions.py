# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Nodes for OPENQASM parameter expressions.

Every expression node evaluates to a sympy expression with `sym` and to a
float with `real`. Both take the nested scope binding gate parameter names
to expression nodes.
"""
import operator

import sympy

from qfold.circuits.angle import angle_to_qasm
from ._node import Node, NodeException


class ExpressionList(Node):
    """Node for an OPENQASM expression list.

    children are expression nodes.
    """

    def __init__(self, children):
        """Create the expression list node."""
        Node.__init__(self, 'expression_list', children, None)

    def size(self):
        """Return the number of expressions."""
        return len(self.children)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return ",".join(child.qasm() for child in self.children)


class Int(Node):
    """Node for an OPENQASM non-negative integer.

    This node has no children. The data is in the value field.
    """

    def __init__(self, id):
        """Create the integer node."""
        # pylint: disable=redefined-builtin
        Node.__init__(self, "int", None, None)
        self.value = id
        self.expression = True

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "%d" % self.value

    def sym(self, nested_scope=None):
        """Return the correspond symbolic number."""
        # pylint: disable=unused-argument
        return sympy.Integer(self.value)

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        # pylint: disable=unused-argument
        return float(self.value)


class Real(Node):
    """Node for an OPENQASM real number.

    The value is a sympy expression: a Float for literals, pi, a symbol for
    a gate parameter, or any expression synthesized by an optimization.
    """

    def __init__(self, id):
        """Create the real node."""
        # pylint: disable=redefined-builtin
        Node.__init__(self, "real", None, None)
        self.value = sympy.sympify(id)
        self.expression = True

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return angle_to_qasm(self.value)

    def sym(self, nested_scope=None):
        """Return the correspond symbolic number."""
        # pylint: disable=unused-argument
        return self.value

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        # pylint: disable=unused-argument
        return float(self.value.evalf())


class BinaryOperator(Node):
    """Node for an OPENQASM binary operator.

    This node has no children. The data is in the value field.
    """

    VALID_OPERATORS = {
        '+': operator.add,
        '-': operator.sub,
        '*': operator.mul,
        '/': operator.truediv,
        '^': operator.pow
    }

    def __init__(self, operation):
        """Create the operator node."""
        Node.__init__(self, 'operator', None, None)
        self.value = operation

    def operation(self):
        """Return the operator as a function f(left, right)."""
        try:
            return self.VALID_OPERATORS[self.value]
        except KeyError:
            raise NodeException("internal error: undefined operator '%s'" % self.value)

    def qasm(self):
        """Return the QASM representation."""
        return self.value


class UnaryOperator(BinaryOperator):
    """Node for an OPENQASM unary operator."""

    VALID_OPERATORS = {
        '+': operator.pos,
        '-': operator.neg,
    }

    def __init__(self, operation):
        """Create the operator node."""
        BinaryOperator.__init__(self, operation)
        self.type = 'unary_operator'


class BinaryOp(Node):
    """Node for an OPENQASM binary operation expression.

    children[0] is the operation, as a binary operator node.
    children[1] is the left expression.
    children[2] is the right expression.
    """

    def __init__(self, children):
        """Create the binaryop node."""
        Node.__init__(self, 'binop', children, None)
        self.expression = True

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "(" + self.children[1].qasm() + self.children[0].value + \
               self.children[2].qasm() + ")"

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        operation = self.children[0].operation()
        lhs = self.children[1].real(nested_scope)
        rhs = self.children[2].real(nested_scope)
        return operation(lhs, rhs)

    def sym(self, nested_scope=None):
        """Return the correspond symbolic number."""
        operation = self.children[0].operation()
        lhs = self.children[1].sym(nested_scope)
        rhs = self.children[2].sym(nested_scope)
        return operation(lhs, rhs)


class Prefix(Node):
    """Node for an OPENQASM prefix expression.

    children[0] is a unary operator node.
    children[1] is an expression node.
    """

    def __init__(self, children):
        """Create the prefix node."""
        Node.__init__(self, 'prefix', children, None)
        self.expression = True

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.children[0].value + "(" + self.children[1].qasm() + ")"

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        return self.children[0].operation()(self.children[1].real(nested_scope))

    def sym(self, nested_scope=None):
        """Return the correspond symbolic number."""
        return self.children[0].operation()(self.children[1].sym(nested_scope))


class External(Node):
    """Node for an OPENQASM external function.

    children[0] is an id node with the name of the function.
    children[1] is an expression node.
    """

    FUNCTIONS = {
        'sin': sympy.sin,
        'cos': sympy.cos,
        'tan': sympy.tan,
        'asin': sympy.asin,
        'acos': sympy.acos,
        'atan': sympy.atan,
        'exp': sympy.exp,
        'ln': sympy.log,
        'sqrt': sympy.sqrt
    }

    def __init__(self, children):
        """Create the external node."""
        Node.__init__(self, 'external', children, None)
        self.expression = True

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.children[0].qasm() + "(" + self.children[1].qasm() + ")"

    def _function(self):
        name = self.children[0].name
        if name not in self.FUNCTIONS:
            raise NodeException("internal error: undefined external '%s'" % name)
        return self.FUNCTIONS[name]

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        return float(self._function()(self.children[1].real(nested_scope)))

    def sym(self, nested_scope=None):
        """Return the corresponding symbolic expression."""
        return self._function()(self.children[1].sym(nested_scope))
