# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Base classes of the passes run by the PassManager.

A pass runs on a Program. Analysis passes look the statements up by uid and
record what they find in the property set; transformation passes edit the
program through Program.bulk_replace and only read the property set.
"""

from abc import abstractmethod
from collections.abc import Hashable
from inspect import signature

from ._propertyset import PropertySet


class MetaPass(type):
    """Returns a single instance per pass class and constructor arguments.

    The PassManager tracks valid passes by identity, so two FixedPoint passes
    watching the same property are the same pass. Arguments left to their
    default and arguments given explicitly with the default value build the
    same key.
    """

    def __call__(cls, *args, **kwargs):
        cache = cls.__dict__.get('_pass_cache')
        if cache is None:
            cache = cls._pass_cache = {}
        key = MetaPass._pass_key(cls.__init__, args, kwargs)
        if key not in cache:
            cache[key] = type.__call__(cls, *args, **kwargs)
        return cache[key]

    @staticmethod
    def _pass_key(init_method, args, kwargs):
        bound = signature(init_method).bind(None, *args, **kwargs)
        bound.apply_defaults()
        # The first bound argument is self.
        arguments = list(bound.arguments.items())[1:]
        return tuple((name, type(value), value if isinstance(value, Hashable) else repr(value))
                     for name, value in arguments)


class BasePass(metaclass=MetaPass):
    """A step in the optimization of a Program.

    Attributes:
        requires (list[BasePass]): passes the PassManager runs before this one.
        preserves (list[BasePass]): passes whose results are still valid after
            this pass has edited the program.
        property_set (PropertySet): set by the PassManager before each run.
    """

    def __init__(self):
        self.requires = []
        self.preserves = []
        self.property_set = PropertySet()

    def name(self):
        """Name used in the pass manager logs."""
        return type(self).__name__

    @abstractmethod
    def run(self, program):
        """Run the pass.

        Args:
            program (Program): a FencedProgram for analysis passes, the
                program itself for transformation passes.

        Returns:
            Program: transformation passes return the program, usually the
            same object after its statements were replaced by uid. Analysis
            passes return nothing.
        """
        raise NotImplementedError

    @property
    def is_transformation_pass(self):
        """True if the pass edits the program."""
        return isinstance(self, TransformationPass)

    @property
    def is_analysis_pass(self):
        """True if the pass only writes the property set."""
        return isinstance(self, AnalysisPass)


class AnalysisPass(BasePass):  # pylint: disable=abstract-method
    """Reads the program and writes the property set. Preserves every pass."""
    pass


class TransformationPass(BasePass):  # pylint: disable=abstract-method
    """Edits the program and reads the property set."""
    pass
