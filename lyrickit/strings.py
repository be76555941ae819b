"""Small string helpers for lyric lines."""

from __future__ import annotations

DEFAULT_TRIM_CHARS = " \t"


def trim(text: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def trim_length(text: str, chars: str = DEFAULT_TRIM_CHARS) -> int:
    """Length of ``text`` once trimmed."""
    return len(trim(text, chars))


def split_lines(text: str, split_char: str) -> list[str]:
    """Split ``text`` after each ``split_char``, keeping the separator.

    The piece after the last separator is always included, even when empty.
    """
    if len(split_char) != 1:
        raise ValueError("split_char must be a single character")
    pieces = text.split(split_char)
    return [piece + split_char for piece in pieces[:-1]] + [pieces[-1]]