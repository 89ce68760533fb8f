"""Character classes, a source reader, a symbol table, debug listings and stack-machine code generation for KPL."""

__version__ = "0.1.0"