"""Generation of stack machine code for the objects of a symbol table."""

from __future__ import annotations

import os

from .instructions import CodeBlock, Instruction, OpCode
from .symtab import (
    FunctionObject,
    ParameterObject,
    ProcedureObject,
    Scope,
    SymbolObject,
    SymbolTable,
    VariableObject,
)

RETURN_VALUE_OFFSET = 0
DYNAMIC_LINK_OFFSET = 1
RETURN_ADDRESS_OFFSET = 2
STATIC_LINK_OFFSET = 3


class CodeGenerator:
    """Emits instructions into a code block, resolving frame addresses."""

    def __init__(self, symtab: SymbolTable, code_block: CodeBlock | None = None) -> None:
        self.symtab = symtab
        self.code_block = code_block if code_block is not None else CodeBlock()

    def compute_nested_level(self, scope: Scope) -> int:
        """Return how many static links lead from the current scope to ``scope``."""
        level = 0
        current = self.symtab.current_scope
        while current is not scope:
            if current is None:
                raise ValueError("scope does not enclose the current scope")
            current = current.outer
            level += 1
        return level

    def gen_variable_address(self, var: VariableObject) -> None:
        self.gen_la(self.compute_nested_level(var.scope), var.local_offset)

    def gen_variable_value(self, var: VariableObject) -> None:
        self.gen_lv(self.compute_nested_level(var.scope), var.local_offset)

    def gen_parameter_address(self, param: ParameterObject) -> None:
        self.gen_la(self.compute_nested_level(param.scope), param.local_offset)

    def gen_parameter_value(self, param: ParameterObject) -> None:
        self.gen_lv(self.compute_nested_level(param.scope), param.local_offset)

    def gen_return_value_address(self, func: FunctionObject) -> None:
        self.gen_la(self.compute_nested_level(func.scope), RETURN_VALUE_OFFSET)

    def gen_return_value_value(self, func: FunctionObject) -> None:
        self.gen_lv(self.compute_nested_level(func.scope), RETURN_VALUE_OFFSET)

    def gen_predefined_procedure_call(self, proc: ProcedureObject) -> None:
        """Emit the instruction that implements a built-in procedure."""
        if proc is self.symtab.writei_procedure:
            self.gen_wri()
        elif proc is self.symtab.writec_procedure:
            self.gen_wrc()
        elif proc is self.symtab.writeln_procedure:
            self.gen_wln()
        else:
            raise ValueError(f"{proc.name} is not a built-in procedure")

    def gen_procedure_call(self, proc: ProcedureObject) -> None:
        level = self.compute_nested_level(proc.scope.outer)
        self.gen_call(level, proc.code_address)

    def gen_predefined_function_call(self, func: FunctionObject) -> None:
        """Emit the instruction that implements a built-in function."""
        if func is self.symtab.readi_function:
            self.gen_ri()
        elif func is self.symtab.readc_function:
            self.gen_rc()
        else:
            raise ValueError(f"{func.name} is not a built-in function")

    def gen_function_call(self, func: FunctionObject) -> None:
        level = self.compute_nested_level(func.scope.outer)
        self.gen_call(level, func.code_address)

    def gen_la(self, level: int, offset: int) -> None:
        self.code_block.emit(OpCode.LA, level, offset)

    def gen_lv(self, level: int, offset: int) -> None:
        self.code_block.emit(OpCode.LV, level, offset)

    def gen_lc(self, constant: int) -> None:
        self.code_block.emit(OpCode.LC, q=constant)

    def gen_li(self) -> None:
        self.code_block.emit(OpCode.LI)

    def gen_int(self, delta: int) -> None:
        self.code_block.emit(OpCode.INT, q=delta)

    def gen_dct(self, delta: int) -> None:
        self.code_block.emit(OpCode.DCT, q=delta)

    def gen_j(self, label: int) -> Instruction:
        """Emit a jump and return it so its target can be patched."""
        return self.code_block.emit(OpCode.J, q=label)

    def gen_fj(self, label: int) -> Instruction:
        """Emit a false-jump and return it so its target can be patched."""
        return self.code_block.emit(OpCode.FJ, q=label)

    def gen_hl(self) -> None:
        self.code_block.emit(OpCode.HL)

    def gen_st(self) -> None:
        self.code_block.emit(OpCode.ST)

    def gen_call(self, level: int, label: int) -> None:
        self.code_block.emit(OpCode.CALL, level, label)

    def gen_ep(self) -> None:
        self.code_block.emit(OpCode.EP)

    def gen_ef(self) -> None:
        self.code_block.emit(OpCode.EF)

    def gen_rc(self) -> None:
        self.code_block.emit(OpCode.RC)

    def gen_ri(self) -> None:
        self.code_block.emit(OpCode.RI)

    def gen_wrc(self) -> None:
        self.code_block.emit(OpCode.WRC)

    def gen_wri(self) -> None:
        self.code_block.emit(OpCode.WRI)

    def gen_wln(self) -> None:
        self.code_block.emit(OpCode.WLN)

    def gen_ad(self) -> None:
        self.code_block.emit(OpCode.AD)

    def gen_sb(self) -> None:
        self.code_block.emit(OpCode.SB)

    def gen_ml(self) -> None:
        self.code_block.emit(OpCode.ML)

    def gen_dv(self) -> None:
        self.code_block.emit(OpCode.DV)

    def gen_neg(self) -> None:
        self.code_block.emit(OpCode.NEG)

    def gen_cv(self) -> None:
        self.code_block.emit(OpCode.CV)

    def gen_eq(self) -> None:
        self.code_block.emit(OpCode.EQ)

    def gen_ne(self) -> None:
        self.code_block.emit(OpCode.NE)

    def gen_gt(self) -> None:
        self.code_block.emit(OpCode.GT)

    def gen_ge(self) -> None:
        self.code_block.emit(OpCode.GE)

    def gen_lt(self) -> None:
        self.code_block.emit(OpCode.LT)

    def gen_le(self) -> None:
        self.code_block.emit(OpCode.LE)

    def update_jump(self, jmp: Instruction, label: int) -> None:
        """Set the target of a jump emitted earlier."""
        jmp.q = label

    def current_code_address(self) -> int:
        """Return the address the next instruction will be emitted at."""
        return len(self.code_block)

    def is_predefined_function(self, func: SymbolObject) -> bool:
        return func is self.symtab.readi_function or func is self.symtab.readc_function

    def is_predefined_procedure(self, proc: SymbolObject) -> bool:
        return (
            proc is self.symtab.writei_procedure
            or proc is self.symtab.writec_procedure
            or proc is self.symtab.writeln_procedure
        )

    def dump(self) -> str:
        """Return a numbered listing of the generated code."""
        return self.code_block.format()

    def serialize(self, path: str | os.PathLike[str]) -> None:
        """Write the generated code to ``path``; raises ``OSError`` on failure."""
        with open(path, "wb") as stream:
            self.code_block.save(stream)