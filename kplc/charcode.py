"""Classification of source characters into lexical classes."""

from __future__ import annotations

from enum import Enum, auto


class CharCode(Enum):
    """Lexical class of a single source character."""

    SPACE = auto()
    LETTER = auto()
    DIGIT = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EXCLAIMATION = auto()
    EQ = auto()
    COMMA = auto()
    PERIOD = auto()
    COLON = auto()
    SEMICOLON = auto()
    SINGLEQUOTE = auto()
    LPAR = auto()
    RPAR = auto()
    UNKNOWN = auto()


_SYMBOLS: dict[str, CharCode] = {
    " ": CharCode.SPACE,
    "\t": CharCode.SPACE,
    "\n": CharCode.SPACE,
    "\v": CharCode.SPACE,
    "\f": CharCode.SPACE,
    "\r": CharCode.SPACE,
    "!": CharCode.EXCLAIMATION,
    "'": CharCode.SINGLEQUOTE,
    "(": CharCode.LPAR,
    ")": CharCode.RPAR,
    "*": CharCode.TIMES,
    "+": CharCode.PLUS,
    ",": CharCode.COMMA,
    "-": CharCode.MINUS,
    ".": CharCode.PERIOD,
    "/": CharCode.SLASH,
    ":": CharCode.COLON,
    ";": CharCode.SEMICOLON,
    "<": CharCode.LT,
    "=": CharCode.EQ,
    ">": CharCode.GT,
}


def char_code(ch: str) -> CharCode:
    """Return the lexical class of the single character ``ch``."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch in _SYMBOLS:
        return _SYMBOLS[ch]
    if ch.isascii():
        if ch.isalpha():
            return CharCode.LETTER
        if ch.isdigit():
            return CharCode.DIGIT
    return CharCode.UNKNOWN