# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Exceptions raised by qfold.
"""


class QfoldError(Exception):
    """Base class for errors raised by qfold."""

    def __init__(self, *message):
        """Set the error message."""
        super().__init__(' '.join(message))
        self.message = ' '.join(message)

    def __str__(self):
        """Return the message."""
        return repr(self.message)


class QfoldUserConfigError(QfoldError):
    """Raised when an error is encountered reading a user config file."""
    message = "User config invalid"
