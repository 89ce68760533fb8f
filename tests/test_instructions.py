import io

import pytest

from kplc.instructions import (
    DC_VALUE,
    CodeBlock,
    CodeBlockFullError,
    Instruction,
    OpCode,
)


def test_emit_appends_and_returns_instruction():
    block = CodeBlock(10)
    inst = block.emit(OpCode.LA, 1, 2)
    assert len(block) == 1
    assert block[0] is inst
    assert (inst.op, inst.p, inst.q) == (OpCode.LA, 1, 2)


def test_emit_defaults_to_dont_care_operands():
    block = CodeBlock(10)
    inst = block.emit(OpCode.HL)
    assert inst.p == DC_VALUE
    assert inst.q == DC_VALUE


def test_full_block_raises():
    block = CodeBlock(2)
    block.emit(OpCode.HL)
    block.emit(OpCode.HL)
    with pytest.raises(CodeBlockFullError):
        block.emit(OpCode.HL)
    assert len(block) == 2


def test_returned_instruction_can_be_patched():
    block = CodeBlock(10)
    jump = block.emit(OpCode.J, DC_VALUE, DC_VALUE)
    block.emit(OpCode.HL)
    jump.q = len(block)
    assert block[0].q == len(block)


@pytest.mark.parametrize(
    "inst, text",
    [
        (Instruction(OpCode.LA, 1, 2), "LA 1,2"),
        (Instruction(OpCode.LV, 0, 4), "LV 0,4"),
        (Instruction(OpCode.CALL, 1, 7), "CALL 1,7"),
        (Instruction(OpCode.LC, 0, 5), "LC 5"),
        (Instruction(OpCode.INT, 0, 4), "INT 4"),
        (Instruction(OpCode.DCT, 0, 3), "DCT 3"),
        (Instruction(OpCode.J, 0, 9), "J 9"),
        (Instruction(OpCode.FJ, 0, 8), "FJ 8"),
        (Instruction(OpCode.WRI), "WRI"),
        (Instruction(OpCode.EP), "EP"),
        (Instruction(OpCode.BP), "BP"),
    ],
)
def test_instruction_text(inst, text):
    assert str(inst) == text


def test_format_listing():
    block = CodeBlock(10)
    block.emit(OpCode.LA, 1, 2)
    block.emit(OpCode.LC, DC_VALUE, 5)
    block.emit(OpCode.HL)
    assert block.format() == "0:  LA 1,2\n1:  LC 5\n2:  HL\n"


def test_empty_format():
    assert CodeBlock(5).format() == ""


def test_save_bytes_of_one_instruction():
    block = CodeBlock(10)
    block.emit(OpCode.LC, DC_VALUE, 5)
    out = io.BytesIO()
    block.save(out)
    assert out.getvalue() == b"\x02\x00\x00\x00\x00\x00\x00\x00\x05\x00\x00\x00"


def test_save_load_round_trip():
    block = CodeBlock(100)
    block.emit(OpCode.INT, DC_VALUE, 4)
    block.emit(OpCode.LA, 0, 4)
    block.emit(OpCode.LC, DC_VALUE, -7)
    block.emit(OpCode.ST)
    block.emit(OpCode.CALL, 1, 3)
    block.emit(OpCode.HL)
    out = io.BytesIO()
    block.save(out)
    loaded = CodeBlock.load(io.BytesIO(out.getvalue()), 100)
    assert list(loaded) == list(block)
    assert loaded.format() == block.format()


def test_saved_size_is_proportional():
    out_one, out_three = io.BytesIO(), io.BytesIO()
    one = CodeBlock(10)
    one.emit(OpCode.HL)
    three = CodeBlock(10)
    for _ in range(3):
        three.emit(OpCode.HL)
    one.save(out_one)
    three.save(out_three)
    assert len(out_three.getvalue()) == 3 * len(out_one.getvalue())


def test_load_ignores_partial_record():
    block = CodeBlock(10)
    block.emit(OpCode.WLN)
    out = io.BytesIO()
    block.save(out)
    loaded = CodeBlock.load(io.BytesIO(out.getvalue() + b"\x01\x02"), 10)
    assert list(loaded) == list(block)


def test_load_too_many_instructions():
    block = CodeBlock(10)
    for _ in range(3):
        block.emit(OpCode.HL)
    out = io.BytesIO()
    block.save(out)
    with pytest.raises(CodeBlockFullError):
        CodeBlock.load(io.BytesIO(out.getvalue()), 2)