# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Tests for the package logging setup and the base exception."""

import logging
import unittest

import qfold
from qfold._logging import unset_qfold_logger, SimpleInfoFormatter
from qfold.exceptions import QfoldError, QfoldUserConfigError
from qfold.test import QfoldTestCase


class TestLogging(QfoldTestCase):
    """The 'qfold' logger configuration."""

    def setUp(self):
        super().setUp()
        self.logger = logging.getLogger('qfold')
        self.addCleanup(self.logger.setLevel, self.logger.level)
        self.addCleanup(unset_qfold_logger)

    def test_set_and_unset(self):
        """The handler is installed and removed."""
        qfold.set_qfold_logger()
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertIsInstance(self.logger.handlers[0].formatter, SimpleInfoFormatter)
        self.assertEqual(self.logger.level, logging.INFO)
        qfold.unset_qfold_logger()
        self.assertEqual(self.logger.handlers, [])

    def test_info_format(self):
        """INFO records print the bare message, the other levels carry details."""
        formatter = SimpleInfoFormatter('%(name)s:%(levelname)s: %(message)s')
        info = logging.LogRecord('qfold.x', logging.INFO, __file__, 1, 'folded %d', (3,), None)
        warning = logging.LogRecord('qfold.x', logging.WARNING, __file__, 1, 'odd', (), None)
        self.assertEqual(formatter.format(info), 'folded 3')
        self.assertEqual(formatter.format(warning), 'qfold.x:WARNING: odd')


class TestExceptions(unittest.TestCase):
    """Base error class."""

    def test_message_joined(self):
        error = QfoldError('Cannot replace', 'h q[0];')
        self.assertEqual(error.message, 'Cannot replace h q[0];')
        self.assertEqual(str(error), "'Cannot replace h q[0];'")

    def test_user_config_error(self):
        error = QfoldUserConfigError('bad value')
        self.assertIsInstance(error, QfoldError)
        self.assertEqual(error.message, 'bad value')


if __name__ == '__main__':
    unittest.main()
