"""Symbol table: types, constants, declared objects and nested scopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union

from .instructions import CHAR_SIZE, DC_VALUE, INT_SIZE

# Words at the bottom of every stack frame: return value, dynamic link,
# return address and static link.
RESERVED_WORDS = 4


class TypeClass(Enum):
    """Class of a KPL type."""

    INT = auto()
    CHAR = auto()
    ARRAY = auto()


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = auto()
    VARIABLE = auto()
    TYPE = auto()
    FUNCTION = auto()
    PROCEDURE = auto()
    PARAMETER = auto()
    PROGRAM = auto()


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = auto()
    REFERENCE = auto()


@dataclass
class Type:
    """A KPL type; arrays carry a size and an element type."""

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None

    def duplicate(self) -> Type:
        """Return a deep copy of this type."""
        if self.type_class is TypeClass.ARRAY:
            return Type(TypeClass.ARRAY, self.array_size, self.element_type.duplicate())
        return Type(self.type_class)


def make_int_type() -> Type:
    """Return a new integer type."""
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    """Return a new char type."""
    return Type(TypeClass.CHAR)


def make_array_type(array_size: int, element_type: Type) -> Type:
    """Return a new array type of ``array_size`` elements."""
    return Type(TypeClass.ARRAY, array_size, element_type)


def compare_type(type1: Type, type2: Type) -> bool:
    """Return whether two types are structurally the same."""
    if type1.type_class is not type2.type_class:
        return False
    if type1.type_class is TypeClass.ARRAY:
        return type1.array_size == type2.array_size and compare_type(
            type1.element_type, type2.element_type
        )
    return True


def size_of_type(type: Type) -> int:
    """Return the number of stack words a value of ``type`` occupies."""
    if type.type_class is TypeClass.INT:
        return INT_SIZE
    if type.type_class is TypeClass.CHAR:
        return CHAR_SIZE
    return type.array_size * size_of_type(type.element_type)


@dataclass
class ConstantValue:
    """A constant: an ``int`` for integer constants, a one-character ``str`` for chars."""

    type: TypeClass
    value: Union[int, str]

    def duplicate(self) -> ConstantValue:
        """Return a copy of this constant."""
        return ConstantValue(self.type, self.value)


def make_int_constant(value: int) -> ConstantValue:
    """Return an integer constant."""
    return ConstantValue(TypeClass.INT, value)


def make_char_constant(ch: str) -> ConstantValue:
    """Return a char constant holding the single character ``ch``."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ConstantValue(TypeClass.CHAR, ch)


@dataclass(eq=False)
class Scope:
    """Objects declared in one block, with a link to the enclosing scope."""

    objects: list[SymbolObject] = field(default_factory=list)
    owner: SymbolObject | None = field(default=None, repr=False)
    outer: Scope | None = field(default=None, repr=False)
    frame_size: int = RESERVED_WORDS

    def find(self, name: str) -> SymbolObject | None:
        """Return the object named ``name`` declared directly in this scope."""
        return next((obj for obj in self.objects if obj.name == name), None)


@dataclass(eq=False)
class SymbolObject:
    """Base of every declared object."""

    kind: ClassVar[ObjectKind]
    name: str


@dataclass(eq=False)
class ConstantObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.CONSTANT
    value: ConstantValue | None = None


@dataclass(eq=False)
class TypeObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.TYPE
    actual_type: Type | None = None


@dataclass(eq=False)
class VariableObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.VARIABLE
    type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)
    local_offset: int = 0


@dataclass(eq=False)
class ParameterObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.PARAMETER
    param_kind: ParamKind = ParamKind.VALUE
    type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)
    local_offset: int = 0


@dataclass(eq=False)
class FunctionObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.FUNCTION
    return_type: Type | None = None
    params: list[ParameterObject] = field(default_factory=list, repr=False)
    code_address: int = DC_VALUE
    scope: Scope = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.scope = Scope(owner=self)

    @property
    def param_count(self) -> int:
        return len(self.params)


@dataclass(eq=False)
class ProcedureObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.PROCEDURE
    params: list[ParameterObject] = field(default_factory=list, repr=False)
    code_address: int = DC_VALUE
    scope: Scope = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.scope = Scope(owner=self)

    @property
    def param_count(self) -> int:
        return len(self.params)


@dataclass(eq=False)
class ProgramObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.PROGRAM
    code_address: int = DC_VALUE
    scope: Scope = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.scope = Scope(owner=self)


class SymbolTable:
    """Holds the program, the global built-ins and the current scope."""

    def __init__(self) -> None:
        self.program: ProgramObject | None = None
        self.current_scope: Scope | None = None
        self.global_objects: list[SymbolObject] = []

        self.readc_function = FunctionObject("READC", return_type=make_char_type())
        self.declare(self.readc_function)
        self.readi_function = FunctionObject("READI", return_type=make_int_type())
        self.declare(self.readi_function)

        self.writei_procedure = self._declare_writer(
            "WRITEI", "i", make_int_type()
        )
        self.writec_procedure = self._declare_writer(
            "WRITEC", "ch", make_char_type()
        )
        self.writeln_procedure = ProcedureObject("WRITELN")
        self.declare(self.writeln_procedure)

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def _declare_writer(self, name: str, param_name: str, type: Type) -> ProcedureObject:
        proc = ProcedureObject(name)
        self.declare(proc)
        self.enter_block(proc.scope)
        self.declare(ParameterObject(param_name, ParamKind.VALUE, type))
        self.exit_block()
        return proc

    def create_program(self, name: str) -> ProgramObject:
        """Create the program object and record it as this table's program."""
        self.program = ProgramObject(name)
        return self.program

    def enter_block(self, scope: Scope) -> None:
        """Make ``scope`` the current scope."""
        self.current_scope = scope

    def exit_block(self) -> None:
        """Return to the scope enclosing the current one."""
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def declare(self, obj: SymbolObject) -> None:
        """Add ``obj`` to the current scope, laying out its frame slot if any."""
        scope = self.current_scope
        if scope is None:
            self.global_objects.append(obj)
            return
        if isinstance(obj, VariableObject):
            if obj.type is None:
                raise ValueError(f"variable {obj.name} has no type")
            obj.scope = scope
            obj.local_offset = scope.frame_size
            scope.frame_size += size_of_type(obj.type)
        elif isinstance(obj, ParameterObject):
            obj.scope = scope
            obj.local_offset = scope.frame_size
            scope.frame_size += 1
            if isinstance(scope.owner, (FunctionObject, ProcedureObject)):
                scope.owner.params.append(obj)
        elif isinstance(obj, (FunctionObject, ProcedureObject)):
            obj.scope.outer = scope
        scope.objects.append(obj)

    def lookup(self, name: str) -> SymbolObject | None:
        """Find ``name`` in the current scope, its enclosing scopes, then globals."""
        scope = self.current_scope
        while scope is not None:
            obj = scope.find(name)
            if obj is not None:
                return obj
            scope = scope.outer
        return next((obj for obj in self.global_objects if obj.name == name), None)