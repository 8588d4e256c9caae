# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Find rotations that can be merged across Clifford gates and opaque operations.

Every scope of the program (the top level and each gate body) is linearized
into a list of channel operations: uninterpreted operations, Clifford
operators and Pauli rotations. Clifford gates are not kept in place, they
are accumulated into a running CliffordOp and every rotation is commuted to
the left of it. The accumulated Clifford is flushed into the list before each
uninterpreted operation and at the end of the scope.

The list is then folded from right to left: each rotation walks towards the
start of the list, conjugating its axis through Cliffords, skipping what it
commutes with and absorbing every rotation about the same (or the opposite)
axis it meets. Absorbed rotations are deleted and the surviving one is
replaced by the cheapest gate implementing the merged angle.
"""
import logging
from collections import namedtuple

import sympy

from qfold.circuits import CliffordOp, RotationOp, UninterpOp
from qfold.circuits.angle import (DEFAULT_ANGLE_TOLERANCE, is_zero_angle, pi_fraction,
                                  reduce_angle)
from qfold.qasm import GateDescriptor, NodeException, is_core_lib
from qfold.qasm._node import Real
from qfold.transpiler._basepasses import AnalysisPass
from qfold.transpiler._transpilererror import TranspilerError
from qfold.user_config import get_config

logger = logging.getLogger(__name__)

CONFIG = get_config()

# A literal s gate composes CliffordOp.sdg (and sdg composes s): a CliffordOp
# holds the inverse action of the gates it was built from. The other
# Cliffords are self-inverse.
_CLIFFORDS = {
    'h': CliffordOp.h,
    'x': CliffordOp.x,
    'y': CliffordOp.y,
    'z': CliffordOp.z,
    's': CliffordOp.sdg,
    'sdg': CliffordOp.s,
    'cx': CliffordOp.cnot,
}

# name -> (factory, axis, number of parameters)
_ROTATIONS = {
    't': (RotationOp.t, 'z', 0),
    'tdg': (RotationOp.tdg, 'z', 0),
    'rz': (RotationOp.rz, 'z', 1),
    'rx': (RotationOp.rx, 'x', 1),
    'ry': (RotationOp.ry, 'y', 1),
}

# (axis, fraction of pi) -> gate without parameters
_NAMED_ROTATIONS = {
    ('z', (1, 1)): 'z',
    ('z', (1, 2)): 's',
    ('z', (-1, 2)): 'sdg',
    ('z', (1, 4)): 't',
    ('z', (-1, 4)): 'tdg',
    ('x', (1, 1)): 'x',
    ('y', (1, 1)): 'y',
}

# axis: letter of the literal gate's rotation axis, qubit: its operand node
RotationInfo = namedtuple('RotationInfo', ['axis', 'qubit'])

# A rotation of the linearized scope, tagged with the statement it came from.
TaggedRotation = namedtuple('TaggedRotation', ['uid', 'rotation', 'info'])


class RotationFolder:
    """Linearizes the scopes of a program and folds their rotations.

    The per-scope state is the running Clifford, the list of channel
    operations and whether Cliffords and rotations can be merged in the
    current context (they can not inside an if).
    """

    def __init__(self, angle_tolerance=DEFAULT_ANGLE_TOLERANCE):
        self.angle_tolerance = angle_tolerance
        self.replacements = {}
        self.gate_phases = {}
        self.rotation_count = 0
        self._accum = []
        self._clifford = CliffordOp()
        self._mergeable = True
        self._nested_scope = None
        self._qregs = {}
        self._dispatch = {
            'gate': self._visit_gate,
            'if': self._visit_if,
            'measure': self._visit_uninterpreted,
            'reset': self._visit_uninterpreted,
            'barrier': self._visit_uninterpreted,
            'universal_unitary': self._visit_uninterpreted,
            'cnot': self._visit_cnot,
            'custom_unitary': self._visit_custom_unitary,
            'qreg': self._visit_qreg,
        }

    def fold(self, program):
        """Fold every scope of the program.

        Returns:
            sympy.Expr: the global phase collected in the top-level scope.
        """
        for statement in program.statements():
            self._visit(statement)
        self._flush()
        return self._fold(self._accum)

    # ---- Linearization ----

    def _visit(self, statement):
        handler = self._dispatch.get(statement.type)
        if handler is not None:
            handler(statement)
        # creg, opaque, oracle, ancilla and format statements have no effect
        # on the circuit.

    def _visit_qreg(self, statement):
        self._qregs[statement.name] = statement.size()

    def _visit_gate(self, statement):
        if is_core_lib(statement.file):
            return
        saved = (self._accum, self._clifford, self._mergeable, self._nested_scope)
        self._accum, self._clifford, self._mergeable = [], CliffordOp(), True
        self._nested_scope = [{name: Real(sympy.Symbol(name, real=True))
                               for name in statement.parameter_names()}]

        for body_statement in statement.statements():
            self._visit(body_statement)
        self._flush()
        self.gate_phases[statement.name] = self._fold(self._accum)

        self._accum, self._clifford, self._mergeable, self._nested_scope = saved

    def _visit_if(self, statement):
        mergeable = self._mergeable
        self._mergeable = False
        self._visit(statement.body)
        self._mergeable = mergeable

    def _visit_uninterpreted(self, statement):
        self._push_uninterp(statement.operands())

    def _visit_cnot(self, statement):
        operands = statement.operands()
        if not self._mergeable or self._is_broadcast(operands):
            self._push_uninterp(operands)
            return
        control, target = (self._qubit(operand) for operand in operands)
        self._clifford = self._clifford * CliffordOp.cnot(control, target)

    def _visit_custom_unitary(self, statement):
        operands = statement.operands()
        params = statement.arguments.children if statement.arguments else []
        name = statement.name
        if not self._mergeable or self._is_broadcast(operands):
            self._push_uninterp(operands)
        elif (name in _CLIFFORDS and not params
              and len(operands) == (2 if name == 'cx' else 1)):
            qubits = [self._qubit(operand) for operand in operands]
            self._clifford = self._clifford * _CLIFFORDS[name](*qubits)
        elif name in _ROTATIONS and len(params) == _ROTATIONS[name][2] and len(operands) == 1:
            factory, axis, _ = _ROTATIONS[name]
            qubit = self._qubit(operands[0])
            if params:
                angle = self._evaluate(params[0])
                if angle is None:
                    self._push_uninterp(operands)
                    return
                rotation = factory(angle, qubit)
            else:
                rotation = factory(qubit)
            self._accum.append(TaggedRotation(statement.uid,
                                              rotation.commute_left(self._clifford),
                                              RotationInfo(axis, operands[0])))
            self.rotation_count += 1
        else:
            self._push_uninterp(operands)

    def _evaluate(self, expression):
        try:
            return expression.sym(self._nested_scope)
        except NodeException as ex:
            logger.debug("Rotation angle %s is left alone: %s", expression.qasm(), ex)
            return None

    def _is_broadcast(self, operands):
        # Outside of gate bodies a plain id names a whole register.
        return self._nested_scope is None and any(op.type == 'id' for op in operands)

    @staticmethod
    def _qubit(operand):
        return operand.qasm()

    def _footprint(self, operands):
        qubits = []
        for operand in operands:
            if operand.type == 'id' and self._nested_scope is None:
                qubits.extend("%s[%d]" % (operand.name, index)
                              for index in range(self._qregs.get(operand.name, 0)))
            else:
                qubits.append(self._qubit(operand))
        return qubits

    def _flush(self):
        if not self._clifford.is_identity():
            self._accum.append(self._clifford)
        self._clifford = CliffordOp()

    def _push_uninterp(self, operands):
        self._flush()
        self._accum.append(UninterpOp(self._footprint(operands)))

    # ---- Folding ----

    def _fold(self, accum):
        """Fold the rotations of a linearized scope, from the last one to the first one.

        Returns:
            sympy.Expr: the global phase produced by the merges.
        """
        phase = sympy.Integer(0)
        index = len(accum) - 1
        while index >= 0:
            entry = accum[index]
            if isinstance(entry, TaggedRotation):
                merge_phase, rotation, merges, index = self._fold_left(accum, index)
                phase += merge_phase
                if merges:
                    self.replacements[entry.uid] = self._synthesize(entry.info, rotation.angle)
                    logger.debug("Statement %s absorbed %d rotation(s), new angle %s",
                                 entry.uid, merges, rotation.angle)
            index -= 1
        return phase

    def _fold_left(self, accum, index):
        """Walk the rotation at `index` to the left, absorbing rotations on the way.

        Absorbed rotations are removed from `accum` and deleted from the
        program.

        Returns:
            tuple: (phase, merged rotation, number of absorbed rotations,
                index of the walking rotation in the shortened list).
        """
        rotation = accum[index].rotation
        phase = sympy.Integer(0)
        merges = 0
        position = index - 1
        while position >= 0:
            entry = accum[position]
            if isinstance(entry, TaggedRotation):
                merged = rotation.try_merge(entry.rotation)
                if merged is not None:
                    phase += merged[0]
                    rotation = merged[1]
                    merges += 1
                    self.replacements[entry.uid] = []
                    del accum[position]
                    index -= 1
                elif not rotation.commutes_with(entry.rotation):
                    break
            elif isinstance(entry, CliffordOp):
                rotation = rotation.commute_left(entry)
            elif not rotation.commutes_with(entry):
                break
            position -= 1
        return phase, rotation, merges, index

    def _synthesize(self, info, angle):
        """Return the gates implementing a rotation about the axis of `info`."""
        qubit = info.qubit
        if qubit.type == 'indexed_id' and not isinstance(qubit.index, int):
            raise TranspilerError("Rotation operand %s has a non integer index" % qubit.qasm())
        if is_zero_angle(angle, self.angle_tolerance):
            return []
        fraction = pi_fraction(angle)
        if fraction is not None and (info.axis, fraction) in _NAMED_ROTATIONS:
            return [GateDescriptor(_NAMED_ROTATIONS[(info.axis, fraction)], (), qubit)]
        return [GateDescriptor('r' + info.axis, (reduce_angle(angle),), qubit)]


class RotationFoldingAnalysis(AnalysisPass):
    """Computes the rotation replacements of a program.

    Writes to the property set:

    * ``rotation_replacements``: {uid: [GateDescriptor]} for all scopes.
    * ``global_phase``: phase collected in the top-level scope.
    * ``gate_phases``: {gate name: phase collected in its body}.
    * ``rotation_count``: number of foldable rotations in the program.
    """

    def __init__(self, angle_tolerance=None):
        """
        Args:
            angle_tolerance (float): numeric angles closer than this to a
                multiple of 2 pi are zero. Defaults to the
                fold_angle_tolerance user setting, or 1e-10.
        """
        super().__init__()
        if angle_tolerance is None:
            angle_tolerance = CONFIG.get('fold_angle_tolerance', DEFAULT_ANGLE_TOLERANCE)
        self.angle_tolerance = angle_tolerance

    def run(self, program):
        folder = RotationFolder(self.angle_tolerance)
        global_phase = folder.fold(program)

        self.property_set['rotation_replacements'] = folder.replacements
        self.property_set['global_phase'] = global_phase
        self.property_set['gate_phases'] = folder.gate_phases
        self.property_set['rotation_count'] = folder.rotation_count
