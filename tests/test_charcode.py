import string

import pytest

from kplc.charcode import CharCode, char_code


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_ascii_letters(ch):
    assert char_code(ch) is CharCode.LETTER


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert char_code(ch) is CharCode.DIGIT


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_whitespace(ch):
    assert char_code(ch) is CharCode.SPACE


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("+", CharCode.PLUS),
        ("-", CharCode.MINUS),
        ("*", CharCode.TIMES),
        ("/", CharCode.SLASH),
        ("<", CharCode.LT),
        (">", CharCode.GT),
        ("!", CharCode.EXCLAIMATION),
        ("=", CharCode.EQ),
        (",", CharCode.COMMA),
        (".", CharCode.PERIOD),
        (":", CharCode.COLON),
        (";", CharCode.SEMICOLON),
        ("'", CharCode.SINGLEQUOTE),
        ("(", CharCode.LPAR),
        (")", CharCode.RPAR),
    ],
)
def test_symbols(ch, expected):
    assert char_code(ch) is expected


@pytest.mark.parametrize("ch", ["@", "?", "_", "\x00", "\x7f", "\xe9", "\u0100", "[", "~"])
def test_unknown(ch):
    assert char_code(ch) is CharCode.UNKNOWN


@pytest.mark.parametrize("bad", ["", "ab", None, 65])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        char_code(bad)