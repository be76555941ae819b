import pytest

from lyrickit.strings import split_lines, trim, trim_length


def test_trim_default_removes_spaces_and_tabs():
    assert trim("  \tabc de \t ") == "abc de"


def test_trim_only_removable_characters_gives_empty():
    assert trim(" \t \t") == ""
    assert trim("") == ""


def test_trim_custom_characters():
    assert trim("xxhixx", "x") == "hi"
    assert trim("\r\nline\r\n", " \t\r\n") == "line"


def test_trim_single_kept_character():
    assert trim("  a  ") == "a"
    assert trim("a   ") == "a"


def test_trim_keeps_inner_characters():
    text = "  a \t b  "
    result = trim(text)
    assert result.startswith("a") and result.endswith("b")
    assert result in text


def test_trim_without_characters_changes_nothing():
    assert trim("  keep  ", "") == "  keep  "


@pytest.mark.parametrize("text", ["", "  x ", "\tab\t", "none"])
def test_trim_length_matches_trim(text):
    assert trim_length(text) == len(trim(text))


def test_split_lines_keeps_separator():
    assert split_lines("a\nb\n", "\n") == ["a\n", "b\n", ""]


def test_split_lines_without_separator():
    assert split_lines("single", "\n") == ["single"]


@pytest.mark.parametrize("text", ["one\ntwo\nthree", "\n\n", "x;y;", ""])
def test_split_lines_round_trip(text):
    sep = ";" if ";" in text else "\n"
    pieces = split_lines(text, sep)
    assert "".join(pieces) == text
    assert all(piece.endswith(sep) for piece in pieces[:-1])
    assert sep not in pieces[-1]


def test_split_lines_rejects_bad_separator():
    with pytest.raises(ValueError):
        split_lines("abc", "")
    with pytest.raises(ValueError):
        split_lines("abc", "ab")