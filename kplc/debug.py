"""Readable listings of types, constants and symbol-table contents."""

from __future__ import annotations

from collections.abc import Iterable

from .symtab import (
    ConstantObject,
    ConstantValue,
    FunctionObject,
    ParameterObject,
    ParamKind,
    ProcedureObject,
    ProgramObject,
    Scope,
    SymbolObject,
    Type,
    TypeClass,
    TypeObject,
    VariableObject,
)


def format_type(type: Type) -> str:
    """Return a type as ``Int``, ``Char`` or ``Arr(size,element)``."""
    if type.type_class is TypeClass.INT:
        return "Int"
    if type.type_class is TypeClass.CHAR:
        return "Char"
    return f"Arr({type.array_size},{format_type(type.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Return a constant as an integer or a quoted character."""
    if value.type is TypeClass.INT:
        return str(value.value)
    if value.type is TypeClass.CHAR:
        return f"'{value.value}'"
    return ""


def format_object(obj: SymbolObject, indent: int) -> str:
    """Return the listing of one object, nested scopes included."""
    pad = " " * indent
    if isinstance(obj, ConstantObject):
        return f"{pad}Const {obj.name} = {format_constant_value(obj.value)}"
    if isinstance(obj, TypeObject):
        return f"{pad}Type {obj.name} = {format_type(obj.actual_type)}"
    if isinstance(obj, VariableObject):
        return (
            f"{pad}Var {obj.name} : {format_type(obj.type)}"
            f" at offset {obj.local_offset}"
        )
    if isinstance(obj, ParameterObject):
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return (
            f"{pad}{label} {obj.name} : {format_type(obj.type)}"
            f" at offset {obj.local_offset}"
        )
    if isinstance(obj, FunctionObject):
        return (
            f"{pad}Function {obj.name} : {format_type(obj.return_type)}"
            f" at address {obj.code_address}\n"
            + format_scope(obj.scope, indent + 4)
        )
    if isinstance(obj, ProcedureObject):
        return (
            f"{pad}Procedure {obj.name} at address {obj.code_address}\n"
            + format_scope(obj.scope, indent + 4)
        )
    if isinstance(obj, ProgramObject):
        return (
            f"{pad}Program {obj.name} at address {obj.code_address}\n"
            + format_scope(obj.scope, indent + 4)
        )
    raise TypeError(f"cannot format {obj!r}")


def format_object_list(objects: Iterable[SymbolObject], indent: int) -> str:
    """Return the listings of ``objects``, each followed by a newline."""
    return "".join(format_object(obj, indent) + "\n" for obj in objects)


def format_scope(scope: Scope, indent: int) -> str:
    """Return the listing of every object declared in ``scope``."""
    return format_object_list(scope.objects, indent)