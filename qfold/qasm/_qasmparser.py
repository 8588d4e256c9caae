# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
OPENQASM parser.
"""
import os
import shutil
import tempfile

import ply.yacc as yacc
import sympy

from . import _node as node
from ._qasmerror import QasmError
from ._qasmlexer import QasmLexer


class QasmParser:
    """OPENQASM Parser."""

    # pylint: disable=unused-argument,missing-docstring,invalid-name

    def __init__(self, filename):
        """Create the parser."""
        if filename is None:
            filename = ""
        self.lexer = QasmLexer(filename)
        self.tokens = self.lexer.tokens
        self.parse_dir = tempfile.mkdtemp(prefix='qfold')
        self.parser = yacc.yacc(module=self, debug=False,
                                outputdir=self.parse_dir)
        self.qasm = None
        self.parse_deb = False
        self.global_symtab = {}                          # global symtab
        self.current_symtab = self.global_symtab         # top of symbol stack
        self.symbols = []                                # symbol stack

    def __enter__(self):
        return self

    def __exit__(self, *args):
        if os.path.exists(self.parse_dir):
            shutil.rmtree(self.parse_dir)

    def update_symtab(self, obj):
        """Update a node in the symbol table.

        Everything in the symtab must be a node with these attributes:
        name - the string name of the object
        type - the string type of the object
        line - the source line where the type was first found
        file - the source file where the type was first found
        """
        if obj.name in self.current_symtab:
            prev = self.current_symtab[obj.name]
            raise QasmError("Duplicate declaration for", obj.type + " '"
                            + obj.name + "' at line", str(obj.line)
                            + ', file', str(obj.file)
                            + '.\nPrevious occurrence at line',
                            str(prev.line) + ', file', str(prev.file))
        self.current_symtab[obj.name] = obj

    def verify_declared_bit(self, obj):
        """Verify a qubit id against the gate prototype."""
        if obj.name not in self.current_symtab:
            raise QasmError("Cannot find symbol '" + obj.name
                            + "' in argument list for gate, line",
                            str(obj.line), 'file', str(obj.file))
        sym = self.current_symtab[obj.name]
        if not (sym.type == 'id' and sym.is_bit):
            raise QasmError("Bit", obj.name, 'is not declared as a bit in the gate.')

    def verify_gate_operand(self, obj):
        """Verify a qubit operand inside a gate body.

        Plain ids must be qubit formals, indexed ids must address an ancilla
        declared in the body.
        """
        if obj.type != 'indexed_id':
            self.verify_declared_bit(obj)
            return
        sym = self.current_symtab.get(obj.name)
        if sym is None or sym.type != 'ancilla':
            raise QasmError("Cannot find ancilla '" + obj.name + "' in gate body, line",
                            str(obj.line), 'file', str(obj.file))
        if obj.index >= sym.index:
            raise QasmError("Ancilla index for '" + obj.name
                            + "' out of bounds. Index is", str(obj.index),
                            "bound is 0 <= index <", str(sym.index),
                            "at line", str(obj.line), "file", str(obj.file))

    def verify_gate_operand_list(self, obj):
        """Verify each operand of a list inside a gate body."""
        for children in obj.children:
            self.verify_gate_operand(children)

    def verify_exp_list(self, obj):
        """Verify each expression in a list.

        Ids in expressions must name parameters of the enclosing gate.
        """
        for children in obj.children:
            if isinstance(children, node.Id):
                sym = self.current_symtab.get(children.name)
                if sym is None or sym.type != 'id' or sym.is_bit:
                    raise QasmError("Argument '" + children.name
                                    + "' in expression cannot be "
                                    + "found, line", str(children.line),
                                    "file", str(children.file))
            elif isinstance(children, node.External):
                self.verify_exp_list(node.ExpressionList([children.children[1]]))
            elif isinstance(children, node.Node):
                self.verify_exp_list(children)

    def verify_as_gate(self, obj, bitlist, arglist=None):
        """Verify a user defined gate call."""
        if obj.name not in self.global_symtab:
            raise QasmError("Cannot find gate definition for '" + obj.name
                            + "', line", str(obj.line), 'file', str(obj.file))
        g_sym = self.global_symtab[obj.name]
        if g_sym.type not in ('gate', 'opaque', 'oracle'):
            raise QasmError("'" + obj.name + "' is used as a gate "
                            + "or opaque call but the symbol is neither;"
                            + " it is a '" + g_sym.type + "' line",
                            str(obj.line), 'file', str(obj.file))

        if g_sym.n_bits() != bitlist.size():
            raise QasmError("Gate or opaque call to '" + obj.name
                            + "' uses", str(bitlist.size()),
                            "qubits but is declared for",
                            str(g_sym.n_bits()), "qubits", "line",
                            str(obj.line), 'file', str(obj.file))

        n_args = arglist.size() if arglist else 0
        if g_sym.n_args() != n_args:
            raise QasmError("Gate or opaque call to '" + obj.name
                            + "' uses", str(n_args),
                            "arguments but is declared for",
                            str(g_sym.n_args()), "arguments", "line",
                            str(obj.line), 'file', str(obj.file))

    def verify_reg(self, obj, object_type):
        """Verify a register."""
        if obj.name not in self.global_symtab:
            raise QasmError('Cannot find definition for', object_type, "'"
                            + obj.name + "'", 'at line', str(obj.line),
                            'file', str(obj.file))

        g_sym = self.global_symtab[obj.name]

        if g_sym.type != object_type:
            raise QasmError("Type for '" + g_sym.name + "' should be '"
                            + object_type + "' but was found to be '" + g_sym.type
                            + "'", "line", str(obj.line), "file", str(obj.file))

        if obj.type == 'indexed_id':
            bound = g_sym.index
            ndx = obj.index
            if ndx < 0 or ndx >= bound:
                raise QasmError("Register index for '" + g_sym.name
                                + "' out of bounds. Index is", str(ndx),
                                "bound is 0 <= index <", str(bound),
                                "at line", str(obj.line), "file", str(obj.file))

    def verify_reg_list(self, obj, object_type):
        """Verify a list of registers."""
        for children in obj.children:
            self.verify_reg(children, object_type)

    def verify_distinct(self, operands):
        """Verify that the quantum operands of a gate call do not overlap."""
        whole = set()
        bits = set()
        for obj in operands:
            if obj.type == 'indexed_id':
                clash = obj.name in whole or (obj.name, obj.index) in bits
                bits.add((obj.name, obj.index))
            else:
                clash = obj.name in whole or any(name == obj.name for name, _ in bits)
                whole.add(obj.name)
            if clash:
                raise QasmError("Duplicate argument '" + obj.qasm()
                                + "' in gate call, line", str(obj.line),
                                "file", str(obj.file))

    def verify_broadcast(self, operands):
        """Verify that the whole registers of a gate call have the same size."""
        sizes = {self.global_symtab[obj.name].index
                 for obj in operands if obj.type == 'id'}
        if len(sizes) > 1:
            raise QasmError("Registers of different sizes in gate call, line",
                            str(operands[0].line), "file", str(operands[0].file))

    def pop_scope(self):
        """Return to the previous scope."""
        self.current_symtab = self.symbols.pop()

    def push_scope(self):
        """Enter a new scope."""
        self.symbols.append(self.current_symtab)
        self.current_symtab = {}

    # ---- Begin the PLY parser ----
    start = 'main'

    def p_main(self, program):
        '''
            main : program
        '''
        self.qasm = program[1]
        self.qasm.index_statements()

    # ----------------------------------------
    #  program : statement
    #          | program statement
    # ----------------------------------------
    def p_program_0(self, program):
        '''
           program : statement
        '''
        program[0] = node.Program([program[1]])

    def p_program_1(self, program):
        '''
           program : program statement
        '''
        program[0] = program[1]
        program[0].add_child(program[2])

    # ----------------------------------------
    #  statement : decl
    #            | quantum_op ';'
    #            | format ';'
    # ----------------------------------------
    def p_statement(self, program):
        '''
           statement : decl
                     | quantum_op ';'
                     | format ';'
        '''
        program[0] = program[1]

    def p_format(self, program):
        '''
           format : FORMAT
        '''
        program[0] = node.Format(program[1])

    # ----------------------------------------
    #  id : ID
    # ----------------------------------------
    def p_id(self, program):
        '''
           id : ID
        '''
        program[0] = program[1]

    # ----------------------------------------
    #  indexed_id : ID [ int ]
    # ----------------------------------------
    def p_indexed_id(self, program):
        '''
           indexed_id : id '[' NNINTEGER ']'
        '''
        program[0] = node.IndexedId([program[1], node.Int(program[3])])

    # ----------------------------------------
    #  primary : id
    #          | indexed_id
    # ----------------------------------------
    def p_primary(self, program):
        '''
           primary : id
                   | indexed_id
        '''
        program[0] = program[1]

    # ----------------------------------------
    #  gate_id_list : id
    #               | gate_id_list ',' id
    # ----------------------------------------
    def p_gate_id_list_0(self, program):
        '''
           gate_id_list : id
        '''
        program[0] = node.IdList([program[1]])
        self.update_symtab(program[1])

    def p_gate_id_list_1(self, program):
        '''
           gate_id_list : gate_id_list ',' id
        '''
        program[0] = program[1]
        program[0].add_child(program[3])
        self.update_symtab(program[3])

    # ----------------------------------------
    #  bit_list : id
    #           | bit_list ',' id
    # ----------------------------------------
    def p_bit_list_0(self, program):
        '''
           bit_list : id
        '''
        program[0] = node.IdList([program[1]])
        program[1].is_bit = True
        self.update_symtab(program[1])

    def p_bit_list_1(self, program):
        '''
           bit_list : bit_list ',' id
        '''
        program[0] = program[1]
        program[0].add_child(program[3])
        program[3].is_bit = True
        self.update_symtab(program[3])

    # ----------------------------------------
    #  primary_list : primary
    #               | primary_list ',' primary
    # ----------------------------------------
    def p_primary_list_0(self, program):
        '''
           primary_list : primary
        '''
        program[0] = node.PrimaryList([program[1]])

    def p_primary_list_1(self, program):
        '''
           primary_list : primary_list ',' primary
        '''
        program[0] = program[1]
        program[0].add_child(program[3])

    # ----------------------------------------
    #  decl : qreg_decl ';'
    #       | creg_decl ';'
    #       | opaque_decl ';'
    #       | gate_decl
    #       | oracle_decl
    # ----------------------------------------
    def p_decl(self, program):
        '''
           decl : qreg_decl ';'
                | creg_decl ';'
                | opaque_decl ';'
                | gate_decl
                | oracle_decl
        '''
        program[0] = program[1]

    def p_qreg_decl(self, program):
        '''
           qreg_decl : QREG indexed_id
        '''
        program[0] = node.Qreg([program[2]])
        if program[2].index == 0:
            raise QasmError("QREG size must be positive, line", str(program[2].line))
        self.update_symtab(program[0])

    def p_creg_decl(self, program):
        '''
           creg_decl : CREG indexed_id
        '''
        program[0] = node.Creg([program[2]])
        if program[2].index == 0:
            raise QasmError("CREG size must be positive, line", str(program[2].line))
        self.update_symtab(program[0])

    # ----------------------------------------
    #  gate_decl : GATE id gate_scope bit_list gate_body
    #            | GATE id gate_scope '(' ')' bit_list gate_body
    #            | GATE id gate_scope '(' gate_id_list ')' bit_list gate_body
    # ----------------------------------------
    def p_gate_decl_0(self, program):
        '''
           gate_decl : GATE id gate_scope bit_list gate_body
        '''
        program[0] = node.Gate([program[2], program[4], program[5]])
        self.pop_scope()
        self.update_symtab(program[0])

    def p_gate_decl_1(self, program):
        '''
           gate_decl : GATE id gate_scope '(' ')' bit_list gate_body
        '''
        program[0] = node.Gate([program[2], program[6], program[7]])
        self.pop_scope()
        self.update_symtab(program[0])

    def p_gate_decl_2(self, program):
        '''
           gate_decl : GATE id gate_scope '(' gate_id_list ')' bit_list gate_body
        '''
        program[0] = node.Gate([program[2], program[5], program[7], program[8]])
        self.pop_scope()
        self.update_symtab(program[0])

    def p_gate_scope(self, program):
        '''
           gate_scope :
        '''
        self.push_scope()

    # ----------------------------------------
    #  gate_body : '{' gate_op_list '}'
    #            | '{' '}'
    # ----------------------------------------
    def p_gate_body_0(self, program):
        '''
           gate_body : '{' '}'
        '''
        program[0] = node.GateBody(None)

    def p_gate_body_1(self, program):
        '''
           gate_body : '{' gate_op_list '}'
        '''
        program[0] = node.GateBody(program[2])

    def p_gate_op_list_0(self, program):
        '''
            gate_op_list : gate_op
        '''
        program[0] = [program[1]]

    def p_gate_op_list_1(self, program):
        '''
            gate_op_list : gate_op_list gate_op
        '''
        program[0] = program[1]
        program[0].append(program[2])

    # ----------------------------------------
    # These are the statements allowed inside a gate body.
    # ----------------------------------------
    def p_gate_op_0(self, program):
        '''
            gate_op : U '(' exp_list ')' primary ';'
        '''
        program[0] = node.UniversalUnitary([program[3], program[5]])
        self.verify_gate_operand(program[5])
        self.verify_exp_list(program[3])

    def p_gate_op_1(self, program):
        '''
            gate_op : CX primary ',' primary ';'
        '''
        program[0] = node.Cnot([program[2], program[4]])
        self.verify_gate_operand_list(program[0])
        self.verify_distinct([program[2], program[4]])

    def p_gate_op_2(self, program):
        '''
            gate_op : id primary_list ';'
        '''
        program[0] = node.CustomUnitary([program[1], program[2]])
        self.verify_as_gate(program[1], program[2])
        self.verify_gate_operand_list(program[2])
        self.verify_distinct(program[2].children)

    def p_gate_op_3(self, program):
        '''
            gate_op : id '(' ')' primary_list ';'
        '''
        program[0] = node.CustomUnitary([program[1], program[4]])
        self.verify_as_gate(program[1], program[4])
        self.verify_gate_operand_list(program[4])
        self.verify_distinct(program[4].children)

    def p_gate_op_4(self, program):
        '''
            gate_op : id '(' exp_list ')' primary_list ';'
        '''
        program[0] = node.CustomUnitary([program[1], program[3], program[5]])
        self.verify_as_gate(program[1], program[5], arglist=program[3])
        self.verify_gate_operand_list(program[5])
        self.verify_exp_list(program[3])
        self.verify_distinct(program[5].children)

    def p_gate_op_5(self, program):
        '''
            gate_op : BARRIER primary_list ';'
        '''
        program[0] = node.Barrier([program[2]])
        self.verify_gate_operand_list(program[2])

    def p_gate_op_6(self, program):
        '''
            gate_op : ancilla_decl ';'
        '''
        program[0] = program[1]

    def p_ancilla_decl_0(self, program):
        '''
            ancilla_decl : ANCILLA indexed_id
        '''
        program[0] = node.Ancilla([program[2]])
        self.update_symtab(program[0])

    def p_ancilla_decl_1(self, program):
        '''
            ancilla_decl : DIRTY ANCILLA indexed_id
        '''
        program[0] = node.Ancilla([program[3]], dirty=True)
        self.update_symtab(program[0])

    # ----------------------------------------
    #  opaque_decl : OPAQUE id gate_scope bit_list
    #              | OPAQUE id gate_scope '(' ')' bit_list
    #              | OPAQUE id gate_scope '(' gate_id_list ')' bit_list
    # ----------------------------------------
    def p_opaque_decl_0(self, program):
        '''
           opaque_decl : OPAQUE id gate_scope bit_list
        '''
        program[0] = node.Opaque([program[2], program[4]])
        self.pop_scope()
        self.update_symtab(program[0])

    def p_opaque_decl_1(self, program):
        '''
           opaque_decl : OPAQUE id gate_scope '(' ')' bit_list
        '''
        program[0] = node.Opaque([program[2], program[6]])
        self.pop_scope()
        self.update_symtab(program[0])

    def p_opaque_decl_2(self, program):
        '''
           opaque_decl : OPAQUE id gate_scope '(' gate_id_list ')' bit_list
        '''
        program[0] = node.Opaque([program[2], program[5], program[7]])
        self.pop_scope()
        self.update_symtab(program[0])

    # ----------------------------------------
    #  oracle_decl : ORACLE id gate_scope bit_list '{' STRING '}'
    # ----------------------------------------
    def p_oracle_decl(self, program):
        '''
           oracle_decl : ORACLE id gate_scope bit_list '{' STRING '}'
        '''
        program[0] = node.Oracle([program[2], program[4]], program[6])
        self.pop_scope()
        self.update_symtab(program[0])

    # ----------------------------------------
    # These are the statements allowed outside of a gate declaration.
    # ----------------------------------------
    def p_unitary_op_0(self, program):
        '''
            unitary_op : U '(' exp_list ')' primary
        '''
        program[0] = node.UniversalUnitary([program[3], program[5]])
        self.verify_reg(program[5], 'qreg')
        self.verify_exp_list(program[3])

    def p_unitary_op_1(self, program):
        '''
            unitary_op : CX primary ',' primary
        '''
        program[0] = node.Cnot([program[2], program[4]])
        self.verify_reg(program[2], 'qreg')
        self.verify_reg(program[4], 'qreg')
        self.verify_distinct([program[2], program[4]])
        self.verify_broadcast([program[2], program[4]])

    def p_unitary_op_2(self, program):
        '''
            unitary_op : id primary_list
        '''
        program[0] = node.CustomUnitary([program[1], program[2]])
        self.verify_as_gate(program[1], program[2])
        self.verify_reg_list(program[2], 'qreg')
        self.verify_distinct(program[2].children)
        self.verify_broadcast(program[2].children)

    def p_unitary_op_3(self, program):
        '''
            unitary_op : id '(' ')' primary_list
        '''
        program[0] = node.CustomUnitary([program[1], program[4]])
        self.verify_as_gate(program[1], program[4])
        self.verify_reg_list(program[4], 'qreg')
        self.verify_distinct(program[4].children)
        self.verify_broadcast(program[4].children)

    def p_unitary_op_4(self, program):
        '''
            unitary_op : id '(' exp_list ')' primary_list
        '''
        program[0] = node.CustomUnitary([program[1], program[3], program[5]])
        self.verify_as_gate(program[1], program[5], arglist=program[3])
        self.verify_reg_list(program[5], 'qreg')
        self.verify_exp_list(program[3])
        self.verify_distinct(program[5].children)
        self.verify_broadcast(program[5].children)

    def p_measure(self, program):
        '''
           measure : MEASURE primary ASSIGN primary
        '''
        program[0] = node.Measure([program[2], program[4]])
        self.verify_reg(program[2], 'qreg')
        self.verify_reg(program[4], 'creg')

    def p_barrier(self, program):
        '''
           barrier : BARRIER primary_list
        '''
        program[0] = node.Barrier([program[2]])
        self.verify_reg_list(program[2], 'qreg')

    def p_reset(self, program):
        '''
           reset : RESET primary
        '''
        program[0] = node.Reset([program[2]])
        self.verify_reg(program[2], 'qreg')

    def p_if(self, program):
        '''
           if : IF '(' id MATCHES NNINTEGER ')' quantum_op
        '''
        if program[7].type == 'if':
            raise QasmError("Nested IF statements not allowed, line", str(program[3].line))
        if program[7].type == 'barrier':
            raise QasmError("barrier not permitted in IF statement, line",
                            str(program[3].line))
        self.verify_reg(program[3], 'creg')
        program[0] = node.If([program[3], node.Int(program[5]), program[7]])

    def p_quantum_op(self, program):
        '''
            quantum_op : unitary_op
                       | measure
                       | barrier
                       | reset
                       | if
        '''
        program[0] = program[1]

    # ----------------------------------------
    # Expressions, from the loosest to the tightest binding:
    #   expression : expression '+' term | expression '-' term | term
    #   term : term '*' factor | term '/' factor | factor
    #   factor : '-' factor | '+' factor | power
    #   power : unary '^' factor | unary
    # ----------------------------------------
    def p_unary_0(self, program):
        '''
           unary : NNINTEGER
        '''
        program[0] = node.Int(program[1])

    def p_unary_1(self, program):
        '''
           unary : REAL
        '''
        program[0] = node.Real(program[1])

    def p_unary_2(self, program):
        '''
           unary : PI
        '''
        program[0] = node.Real(sympy.pi)

    def p_unary_3(self, program):
        '''
           unary : id
        '''
        program[0] = program[1]

    def p_unary_4(self, program):
        '''
           unary : '(' expression ')'
        '''
        program[0] = program[2]

    def p_unary_5(self, program):
        '''
           unary : id '(' expression ')'
        '''
        if program[1].name not in node.External.FUNCTIONS:
            raise QasmError("Illegal external function call: ",
                            str(program[1].name), "line", str(program[1].line))
        program[0] = node.External([program[1], program[3]])

    def p_power_0(self, program):
        '''
           power : unary
        '''
        program[0] = program[1]

    def p_power_1(self, program):
        '''
           power : unary '^' factor
        '''
        program[0] = node.BinaryOp([node.BinaryOperator(program[2]),
                                    program[1], program[3]])

    def p_factor_0(self, program):
        '''
           factor : power
        '''
        program[0] = program[1]

    def p_factor_1(self, program):
        '''
           factor : '-' factor
                  | '+' factor
        '''
        program[0] = node.Prefix([node.UnaryOperator(program[1]), program[2]])

    def p_term_0(self, program):
        '''
           term : factor
        '''
        program[0] = program[1]

    def p_term_1(self, program):
        '''
           term : term '*' factor
                | term '/' factor
        '''
        program[0] = node.BinaryOp([node.BinaryOperator(program[2]),
                                    program[1], program[3]])

    def p_expression_0(self, program):
        '''
           expression : term
        '''
        program[0] = program[1]

    def p_expression_1(self, program):
        '''
           expression : expression '+' term
                      | expression '-' term
        '''
        program[0] = node.BinaryOp([node.BinaryOperator(program[2]),
                                    program[1], program[3]])

    def p_exp_list_0(self, program):
        '''
           exp_list : expression
        '''
        program[0] = node.ExpressionList([program[1]])

    def p_exp_list_1(self, program):
        '''
           exp_list : exp_list ',' expression
        '''
        program[0] = program[1]
        program[0].add_child(program[3])

    def p_error(self, program):
        # EOF is a special case because the error token isn't placed
        # on the stack
        if not program:
            raise QasmError("Error at end of file. "
                            + "Perhaps there is a missing ';'")

        col = self.find_column(self.lexer.data, program)
        value = program.value.name if isinstance(program.value, node.Id) else program.value
        raise QasmError("Invalid syntax near '%s' at line %s, column %s, file %s" %
                        (value, program.lineno, col, self.lexer.filename))

    def find_column(self, input_, token):
        """Compute the column.

        Input is the input text string.
        token is a token instance.
        """
        if token is None or input_ is None:
            return 0
        last_cr = input_.rfind('\n', 0, token.lexpos)
        if last_cr < 0:
            last_cr = 0
        column = (token.lexpos - last_cr) + 1
        return column

    def read_tokens(self):
        """Return a generator of the tokens of the input."""
        while True:
            token = self.lexer.token()
            if not token:
                break
            yield token

    def parse_debug(self, val):
        """Set the parse_deb field."""
        if val is True:
            self.parse_deb = True
        elif val is False:
            self.parse_deb = False
        else:
            raise QasmError("Illegal debug value '" + str(val)
                            + "' must be True or False.")

    def parse(self, data):
        """Parse some data."""
        self.parser.parse(data, lexer=self.lexer, debug=self.parse_deb)
        if self.qasm is None:
            raise QasmError("Uncaught exception in parser; "
                            + "see previous messages for details.")
        return self.qasm
