# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utils for using with qfold unit tests."""

import logging
import os
from enum import Enum

from qfold import __path__ as qfold_path


class Path(Enum):
    """Helper with paths commonly used during the tests."""

    # Main package path:    qfold/
    SDK = qfold_path[0]
    # test.python path:     test/python/
    TEST = os.path.normpath(os.path.join(SDK, '..', 'test', 'python'))
    # Sample QASMs path:    test/python/qasm
    QASMS = os.path.normpath(os.path.join(TEST, 'qasm'))
    # Bundled includes:     qfold/qasm/libs
    LIBS = os.path.normpath(os.path.join(SDK, 'qasm', 'libs'))


def setup_test_logging(logger, log_level, filename):
    """Set logging to file and stdout for a logger.

    Args:
        logger (Logger): logger object to be updated.
        log_level (str): logging level.
        filename (str): name of the output file.
    """
    # Set up formatter.
    log_fmt = ('{}.%(funcName)s:%(levelname)s:%(asctime)s:'
               ' %(message)s'.format(logger.name))
    formatter = logging.Formatter(log_fmt)

    # Set up the file handler.
    file_handler = logging.FileHandler(filename)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if os.getenv('STREAM_LOG'):
        # Set up the stream handler.
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    # Set the logging level from the environment variable, defaulting
    # to INFO if it is not a valid level.
    level = logging._nameToLevel.get(log_level, logging.INFO)
    logger.setLevel(level)
