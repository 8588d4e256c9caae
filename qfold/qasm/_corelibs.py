# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
OPENQASM libraries bundled with qfold.
"""

import os

CORE_LIBS_PATH = os.path.join(os.path.dirname(__file__), 'libs')
CORE_LIBS = sorted(name for name in os.listdir(CORE_LIBS_PATH) if name.endswith('.inc'))


def core_lib_path(name):
    """Return the path of a bundled library, or None if `name` is not one."""
    if name in CORE_LIBS:
        return os.path.join(CORE_LIBS_PATH, name)
    return None


def is_core_lib(filename):
    """True if `filename` is the path of a bundled library."""
    if not filename:
        return False
    filename = os.path.abspath(filename)
    return (os.path.dirname(filename) == os.path.abspath(CORE_LIBS_PATH)
            and os.path.basename(filename) in CORE_LIBS)
