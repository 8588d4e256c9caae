# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Nodes for OPENQASM identifiers and lists of operands.
"""
from ._node import Node, NodeException


class Id(Node):
    """Node for an OPENQASM id.

    The node has no children but has fields name, line, and file.
    """

    def __init__(self, id, line, file):
        """Create the id node."""
        # pylint: disable=redefined-builtin
        Node.__init__(self, "id", None, None)
        self.name = id
        self.line = line
        self.file = file
        # Set when the id is a qubit formal of a gate declaration
        self.is_bit = False

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.name

    def _lookup(self, nested_scope):
        if not nested_scope or self.name not in nested_scope[-1]:
            raise NodeException("Expected local parameter name:",
                                "name=%s, line=%s, file=%s" % (
                                    self.name, self.line, self.file))
        return nested_scope[-1][self.name]

    def sym(self, nested_scope=None):
        """Return the correspond symbolic number."""
        return self._lookup(nested_scope).sym(nested_scope[0:-1])

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        return self._lookup(nested_scope).real(nested_scope[0:-1])


class IndexedId(Node):
    """Node for an OPENQASM indexed id.

    children[0] is an id node.
    children[1] is an Int node.
    """

    def __init__(self, children):
        """Create the indexed id node."""
        Node.__init__(self, 'indexed_id', children, None)
        self.id = children[0]
        self.name = self.id.name
        self.line = self.id.line
        self.file = self.id.file
        self.index = children[1].value

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "%s[%s]" % (self.name, self.index)


class IdList(Node):
    """Node for an OPENQASM idlist.

    children is a list of id nodes.
    """

    def __init__(self, children):
        """Create the idlist node."""
        Node.__init__(self, 'id_list', children, None)

    def size(self):
        """Return the length of the list."""
        return len(self.children)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return ",".join(child.qasm() for child in self.children)


class PrimaryList(IdList):
    """Node for an OPENQASM primarylist.

    children is a list of primary nodes. Primary nodes are indexedid or id.
    """

    def __init__(self, children):
        """Create the primarylist node."""
        IdList.__init__(self, children)
        self.type = 'primary_list'
