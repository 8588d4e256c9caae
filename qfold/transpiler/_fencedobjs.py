# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Read-only views handed to the passes.

An analysis pass gets the program as a FencedProgram: it can walk the
statements, look nodes up by uid and print the program, but it can not splice
statements, re-index them or change the global phase. A transformation pass
gets the property set as a FencedPropertySet.
"""

from ._transpilererror import TranspilerAccessError


class FencedObject():
    """Proxy forwarding to `instance`, except for the names in `hidden`.

    With `read_only` set, assigning attributes or items of the proxy is
    refused as well.
    """

    def __init__(self, instance, hidden=(), read_only=True):
        object.__setattr__(self, '_wrapped', instance)
        object.__setattr__(self, '_hidden', frozenset(hidden))
        object.__setattr__(self, '_read_only', read_only)

    def _refuse(self, what):
        wrapped = object.__getattribute__(self, '_wrapped')
        raise TranspilerAccessError("%s of the %s is not accessible from this pass" %
                                    (what, type(wrapped).__name__))

    def __getattribute__(self, name):
        if name in object.__getattribute__(self, '_hidden'):
            object.__getattribute__(self, '_refuse')(name)
        return getattr(object.__getattribute__(self, '_wrapped'), name)

    def __setattr__(self, name, value):
        if object.__getattribute__(self, '_read_only'):
            object.__getattribute__(self, '_refuse')("Setting %s" % name)
        setattr(object.__getattribute__(self, '_wrapped'), name, value)

    def __getitem__(self, key):
        return object.__getattribute__(self, '_wrapped')[key]

    def __setitem__(self, key, value):
        if object.__getattribute__(self, '_read_only'):
            object.__getattribute__(self, '_refuse')("Setting [%r]" % (key,))
        object.__getattribute__(self, '_wrapped')[key] = value

    def __contains__(self, key):
        return key in object.__getattribute__(self, '_wrapped')


class FencedPropertySet(FencedObject):
    """A property set whose values can be read but not written."""

    def __init__(self, property_set_instance):
        super().__init__(property_set_instance)


class FencedProgram(FencedObject):
    """A program whose statements and global phase can not be changed."""

    def __init__(self, program_instance):
        super().__init__(program_instance,
                         hidden=('bulk_replace', 'index_statements', 'add_child'))
