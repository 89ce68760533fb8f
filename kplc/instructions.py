"""Stack machine instructions and code blocks."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

DC_VALUE = 0
INT_SIZE = 1
CHAR_SIZE = 1
CODE_SIZE = 10000

_RECORD = struct.Struct("<iii")


class OpCode(IntEnum):
    """Instruction operation codes; values are those stored in code files."""

    LA = 0  # load address: push base(p) + q
    LV = 1  # load value: push s[base(p) + q]
    LC = 2  # load constant q
    LI = 3  # load indirect: s[t] := s[s[t]]
    INT = 4  # t := t + q
    DCT = 5  # t := t - q
    J = 6  # pc := q
    FJ = 7  # if s[t] = 0 then pc := q; pop
    HL = 8  # halt
    ST = 9  # s[s[t-1]] := s[t]; pop two
    CALL = 10
    EP = 11  # exit procedure
    EF = 12  # exit function
    RC = 13  # read char
    RI = 14  # read integer
    WRC = 15  # write char
    WRI = 16  # write integer
    WLN = 17  # write newline
    AD = 18
    SB = 19
    ML = 20
    DV = 21
    NEG = 22
    CV = 23  # copy top
    EQ = 24
    NE = 25
    GT = 26
    LT = 27
    GE = 28
    LE = 29
    BP = 30  # breakpoint


_TWO_OPERANDS = frozenset({OpCode.LA, OpCode.LV, OpCode.CALL})
_ONE_OPERAND = frozenset({OpCode.LC, OpCode.INT, OpCode.DCT, OpCode.J, OpCode.FJ})


@dataclass
class Instruction:
    """One machine instruction with its two operands."""

    op: OpCode
    p: int = DC_VALUE
    q: int = DC_VALUE

    def __str__(self) -> str:
        if self.op in _TWO_OPERANDS:
            return f"{self.op.name} {self.p},{self.q}"
        if self.op in _ONE_OPERAND:
            return f"{self.op.name} {self.q}"
        return self.op.name


class CodeBlockFullError(Exception):
    """Raised when an instruction does not fit in a code block."""


class CodeBlock:
    """A bounded sequence of instructions."""

    def __init__(self, max_size: int = CODE_SIZE) -> None:
        self.max_size = max_size
        self._code: list[Instruction] = []

    def __len__(self) -> int:
        return len(self._code)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._code)

    def __getitem__(self, index: int) -> Instruction:
        return self._code[index]

    def emit(self, op: OpCode, p: int = DC_VALUE, q: int = DC_VALUE) -> Instruction:
        """Append an instruction and return it so it can be patched later."""
        if len(self._code) >= self.max_size:
            raise CodeBlockFullError(
                f"code block is full ({self.max_size} instructions)"
            )
        instruction = Instruction(OpCode(op), p, q)
        self._code.append(instruction)
        return instruction

    def format(self) -> str:
        """Return a numbered listing of the instructions, one per line."""
        return "".join(f"{i}:  {inst}\n" for i, inst in enumerate(self._code))

    def save(self, stream: BinaryIO) -> None:
        """Write the instructions to a binary stream."""
        for inst in self._code:
            stream.write(_RECORD.pack(int(inst.op), inst.p, inst.q))

    @classmethod
    def load(cls, stream: BinaryIO, max_size: int = CODE_SIZE) -> "CodeBlock":
        """Read instructions written by :meth:`save`; a trailing partial record is ignored."""
        data = stream.read()
        usable = len(data) - len(data) % _RECORD.size
        block = cls(max_size)
        for op, p, q in _RECORD.iter_unpack(data[:usable]):
            block.emit(OpCode(op), p, q)
        return block