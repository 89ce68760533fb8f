import io

import pytest

from kplc.reader import Reader


def drain(reader):
    chars = [reader.current_char]
    while reader.current_char is not None:
        chars.append(reader.read_char())
    return chars


def test_first_character_is_read_on_construction():
    reader = Reader(io.StringIO("xyz"))
    assert reader.current_char == "x"
    assert reader.line == 1
    assert reader.column == 1


def test_reads_all_characters_in_order():
    text = "PROGRAM p;\nBEGIN END."
    reader = Reader(io.StringIO(text))
    chars = drain(reader)
    assert "".join(chars[:-1]) == text
    assert chars[-1] is None
    assert reader.at_eof


def test_newline_advances_line_and_resets_column():
    reader = Reader(io.StringIO("a\nb"))
    assert reader.read_char() == "\n"
    assert (reader.line, reader.column) == (2, 0)
    assert reader.read_char() == "b"
    assert (reader.line, reader.column) == (2, 1)


def test_line_count_matches_newlines():
    text = "one\ntwo\n\nfour"
    reader = Reader(io.StringIO(text))
    drain(reader)
    assert reader.line == text.count("\n") + 1


def test_column_tracks_position_within_line():
    text = "abcdef"
    reader = Reader(io.StringIO(text))
    for index, ch in enumerate(text):
        assert reader.current_char == ch
        assert reader.column == index + 1
        reader.read_char()


def test_empty_input_is_eof_immediately():
    reader = Reader(io.StringIO(""))
    assert reader.current_char is None
    assert reader.at_eof
    assert reader.read_char() is None


def test_from_path_reads_file(tmp_path):
    path = tmp_path / "prog.kpl"
    path.write_text("BEGIN\nEND.")
    with Reader.from_path(path) as reader:
        chars = drain(reader)
    assert "".join(chars[:-1]) == "BEGIN\nEND."


def test_from_path_missing_file(tmp_path):
    with pytest.raises(OSError):
        Reader.from_path(tmp_path / "absent.kpl")


def test_close_closes_stream():
    stream = io.StringIO("abc")
    reader = Reader(stream)
    reader.close()
    assert stream.closed


def test_context_manager_closes_stream():
    stream = io.StringIO("abc")
    with Reader(stream) as reader:
        assert reader.current_char == "a"
    assert stream.closed