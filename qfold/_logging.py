# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utilities for logging."""

import logging
from logging.config import dictConfig


class SimpleInfoFormatter(logging.Formatter):
    """Custom Formatter that uses a simple format for INFO."""
    _style_info = logging._STYLES['%'][0]('%(message)s')

    def formatMessage(self, record):
        if record.levelno == logging.INFO:
            return self._style_info.format(record)
        return logging.Formatter.formatMessage(self, record)


QFOLD_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'f': {
            '()': SimpleInfoFormatter,
            'format': '%(asctime)s:%(name)s:%(levelname)s: %(message)s'
        },
    },
    'handlers': {
        'h': {
            'class': 'logging.StreamHandler',
            'formatter': 'f'
        }
    },
    'loggers': {
        'qfold': {
            'handlers': ['h'],
            'level': logging.INFO,
        },
    }
}


def set_qfold_logger():
    """Update the 'qfold' logger with the package default configuration.

    The configuration in `QFOLD_LOGGING_CONFIG` prints INFO records (pass
    timings, folding summaries) as bare messages and every other level with a
    timestamp, logger name and level.

    Warning:
        This function modifies the configuration of the standard logging system
        for the 'qfold.*' loggers, and might interfere with custom logger
        configurations.
    """
    dictConfig(QFOLD_LOGGING_CONFIG)


def unset_qfold_logger():
    """Remove the handlers for the 'qfold' logger."""
    qfold_logger = logging.getLogger('qfold')
    for handler in list(qfold_logger.handlers):
        qfold_logger.removeHandler(handler)
