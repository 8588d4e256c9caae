# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
OPENQASM circuit object.
"""
from ._qasmerror import QasmError
from ._qasmparser import QasmParser


class Qasm:
    """OPENQASM circuit object."""

    def __init__(self, filename=None, data=None):
        """Create an OPENQASM circuit object."""
        if filename is None and data is None:
            raise QasmError("Missing input file and/or data")
        if filename is not None and data is not None:
            raise QasmError("File and data must not both be specified "
                            "initializing qasm")
        self._filename = filename
        self._data = data

    def get_filename(self):
        """Return the filename."""
        return self._filename

    def _read(self):
        if self._filename:
            try:
                with open(self._filename) as ifile:
                    self._data = ifile.read()
            except OSError as ex:
                raise QasmError("Unable to read", self._filename + ":", str(ex))

    def get_tokens(self):
        """Returns the list of tokens of the input."""
        self._read()
        with QasmParser(self._filename) as qasm_p:
            qasm_p.lexer.input(self._data)
            return list(qasm_p.read_tokens())

    def parse(self):
        """Parse the data.

        Returns:
            Program: the root node, with a uid on every statement.
        """
        self._read()
        with QasmParser(self._filename) as qasm_p:
            qasm_p.parse_debug(False)
            return qasm_p.parse(self._data)
