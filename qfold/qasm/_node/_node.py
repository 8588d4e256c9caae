# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Base node object for the OPENQASM syntax tree.
"""

from qfold.exceptions import QfoldError


class NodeException(QfoldError):
    """Raised when evaluating a node fails (for instance, an unbound parameter)."""
    pass


class Node:
    """Base node object for the OPENQASM syntax tree.

    Statement nodes additionally carry a `uid`, assigned by the Program that
    owns them.
    """

    def __init__(self, type, children=None, root=None):
        """Construct a new node object."""
        # pylint: disable=redefined-builtin
        self.type = type
        if children:
            self.children = children
        else:
            self.children = []
        self.root = root
        # True if this node is an expression node, False otherwise
        self.expression = False
        self.uid = None

    def is_expression(self):
        """Return True if this is an expression node."""
        return self.expression

    def add_child(self, node):
        """Add a child node."""
        self.children.append(node)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        raise NotImplementedError

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.qasm())
