# kplc

Building blocks of a compiler for KPL, a small Pascal-like teaching
language. It covers symbol-table management, frame layout and code generation
for a simple stack machine.

## Modules

- `kplc.charcode`: `CharCode` and `char_code(ch)` sort one source
  character into a lexical class, such as `LETTER`, `DIGIT`, `SPACE`, `LPAR`,
  or `UNKNOWN` for anything else. Only ASCII letters and digits count as
  letters and digits. `char_code` raises `ValueError` unless it is given
  exactly one character.
- `kplc.reader`: `Reader` reads text one character at a time and keeps
  track of the position:
  - `current_char` is `None` at end of input.
  - `line` starts at 1, and `column` is reset to 0 after a newline.
  - `Reader.from_path(path)` opens a file.
  - A `Reader` works as a context manager.
- `kplc.instructions`: the stack-machine instruction set:
  - `OpCode`, `Instruction` and `CodeBlock`, a bounded list of
    instructions that holds 10000 by default.
  - `CodeBlock.emit` raises `CodeBlockFullError` when the block is full.
  - `CodeBlock.format()` gives a numbered listing.
  - `save(stream)` and `CodeBlock.load(stream)` write and read the binary
    form. Each instruction is three little-endian signed 32-bit integers:
    opcode, `p` and `q`.
- `kplc.symtab`: types (`Type`, `make_int_type`, `make_char_type`,
  `make_array_type`, `compare_type`, `size_of_type`), constants
  (`ConstantValue`, `make_int_constant`, `make_char_constant`), scopes and
  declared objects. These are `ConstantObject`, `TypeObject`,
  `VariableObject`, `ParameterObject`, `FunctionObject`, `ProcedureObject`
  and `ProgramObject`. `SymbolTable` works as follows:
  - It starts with the built-ins `READC`, `READI`, `WRITEI`, `WRITEC` and
    `WRITELN`.
  - Every frame reserves 4 words.
  - Declaring a variable or a parameter gives it the next local offset.
  - `lookup` searches the current scope, then each enclosing scope, then
    the globals.
- `kplc.debug`: `format_type`, `format_constant_value`, `format_object`,
  `format_object_list` and `format_scope` render the symbol table as text.
- `kplc.codegen`: `CodeGenerator` emits instructions into a `CodeBlock`.
  It works out static nesting levels from the symbol table's current scope.
  It also patches jump targets, lists the code with `dump()` and writes it
  to a file with `serialize(path)`.

## Example

```python
from kplc.codegen import CodeGenerator
from kplc.debug import format_scope
from kplc.symtab import SymbolTable, VariableObject, make_array_type, make_int_type

table = SymbolTable()
program = table.create_program("EXAMPLE")
table.enter_block(program.scope)

x = VariableObject("X", type=make_int_type())
table.declare(x)                       # x.local_offset == 4
a = VariableObject("A", type=make_array_type(10, make_int_type()))
table.declare(a)                       # a.local_offset == 5, frame size 15

print(format_scope(program.scope, 0))
# Var X : Int at offset 4
# Var A : Arr(10,Int) at offset 5

gen = CodeGenerator(table)
gen.gen_variable_address(x)            # LA 0,4
gen.gen_lc(1)
gen.gen_st()
gen.gen_variable_value(x)
gen.gen_predefined_procedure_call(table.lookup("WRITEI"))   # WRI
jump = gen.gen_fj(0)
gen.gen_wln()
gen.update_jump(jump, gen.current_code_address())
gen.gen_hl()

print(gen.dump())                      # "0:  LA 0,4", "1:  LC 1", ...
gen.serialize("example.bin")
```

Code saved this way can be read back with `CodeBlock.load`:

```python
from kplc.instructions import CodeBlock

with open("example.bin", "rb") as stream:
    block = CodeBlock.load(stream)
print(block.format())
```

## Errors

The modules report misuse by raising standard exceptions:

- `SymbolTable.declare` raises `ValueError` for a variable without a type.
- `SymbolTable.exit_block` raises `RuntimeError` when there is no current
  scope.
- `CodeGenerator.compute_nested_level` raises `ValueError` for a scope that
  does not enclose the current one.
- `gen_predefined_procedure_call` and `gen_predefined_function_call` raise
  `ValueError` for anything that is not a built-in.

## What the package does not do

The package has no tokenizer, parser or semantic checker. It also has no
command-line program. It does not turn KPL source text into code by itself.
The caller builds the symbol table and drives `CodeGenerator` directly.
There is also no interpreter for the generated stack-machine code.

## Running the tests

The test suite uses pytest, which the `test` extra provides:

```
pip install .[test]
pytest
```