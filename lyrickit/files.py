"""Reading and writing lyric text files, and small path helpers."""

from __future__ import annotations

import locale
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from lyrickit.defines import EncodingType
from lyrickit.strings import split_lines, trim

# Longest line, in bytes, that a narrow read takes at once; wide reads take half.
MAX_CHAR_COUNT_OF_LINE = 1000
MAX_WCHAR_COUNT_OF_LINE = MAX_CHAR_COUNT_OF_LINE // 2

# How many bytes are inspected to tell UTF-8 without BOM from ANSI text.
_DETECT_SAMPLE_SIZE = 1000

_SEPARATORS = "/\\"

_DECODERS = {
    EncodingType.UTF_8: lambda data: data.decode("utf-8-sig", errors="replace"),
    EncodingType.UTF_8_NO_BOM: lambda data: data.decode("utf-8", errors="replace"),
    EncodingType.UNICODE_LITTLE_ENDIAN: lambda data: data[2:].decode("utf-16-le", errors="replace"),
    EncodingType.UNICODE_BIG_ENDIAN: lambda data: data[2:].decode("utf-16-be", errors="replace"),
}


@dataclass(frozen=True)
class PathParts:
    """The pieces of a path: drive, directory (with trailing separator), name and extension."""

    drive: str = ""
    directory: str = ""
    name: str = ""
    ext: str = ""


def is_utf8_without_bom(data: bytes) -> bool:
    """Whether ``data`` looks like UTF-8; a sequence cut off at the end still counts."""
    end = len(data)
    pos = 0
    while pos < end:
        lead = data[pos]
        if lead < 0x80:
            pos += 1
            continue
        if lead < 0xC0:
            return False
        if lead < 0xE0:
            width = 2
        elif lead < 0xF0:
            width = 3
        else:
            return False
        if pos >= end - (width - 1):
            return True
        if any(byte & 0xC0 != 0x80 for byte in data[pos + 1 : pos + width]):
            return False
        pos += width
    return True


def detect_encoding(data: bytes) -> EncodingType:
    """Guess the encoding of a text file from its leading bytes.

    Data shorter than two bytes cannot be judged and gives ``OTHER``.
    """
    if len(data) < 2:
        return EncodingType.OTHER
    head = data[:2]
    if head == b"\xef\xbb":
        return EncodingType.UTF_8
    if head == b"\xff\xfe":
        return EncodingType.UNICODE_LITTLE_ENDIAN
    if head == b"\xfe\xff":
        return EncodingType.UNICODE_BIG_ENDIAN
    if is_utf8_without_bom(data[:_DETECT_SAMPLE_SIZE]):
        return EncodingType.UTF_8_NO_BOM
    return EncodingType.ASCII


def _decode(data: bytes, encoding: EncodingType) -> str:
    decoder = _DECODERS.get(encoding)
    if decoder is not None:
        return decoder(data)
    return data.decode(locale.getpreferredencoding(False), errors="replace")


def read_encoded_text(path: str | os.PathLike) -> tuple[str, EncodingType]:
    """Read a text file in any of the four notepad encodings.

    Returns the text, with line ends as ``\\n``, and the detected encoding.
    Raises ``ValueError`` when the file is too short to detect its encoding.
    """
    data = Path(path).read_bytes()
    encoding = detect_encoding(data)
    if encoding is EncodingType.OTHER:
        raise ValueError(f"{os.fspath(path)!r} is too short to detect its encoding")
    text = _decode(data, encoding).replace("\r\n", "\n")
    return text, encoding


def _chunks(line: str, limit: int) -> list[str]:
    return [line[start : start + limit] for start in range(0, len(line), limit)]


def _strip_each(line: str, chars: str) -> str:
    for char in chars:
        line = line.strip(char)
    return line


def read_nonblank_lines(path: str | os.PathLike) -> list[str]:
    """Read every non-blank line of an encoded text file, trimmed.

    Each line loses newlines, then spaces, then tabs at both ends, in that
    order. Over-long lines are taken in pieces, as a fixed line buffer would.
    """
    text, encoding = read_encoded_text(path)
    limit = (MAX_CHAR_COUNT_OF_LINE if encoding is EncodingType.ASCII else MAX_WCHAR_COUNT_OF_LINE) - 1
    lines = []
    for raw in text.splitlines(keepends=True):
        for piece in _chunks(raw, limit):
            cleaned = _strip_each(piece, "\n \t")
            if cleaned:
                lines.append(cleaned)
    return lines


def read_all_text(path: str | os.PathLike) -> str:
    """Read a file line by line, giving every line, the last included, a ``\\n``."""
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    return "".join(line + "\n" for line in content.split("\n"))


def read_all_lines(path: str | os.PathLike) -> list[str]:
    """Read every line of a file; a trailing newline yields a final empty line."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().split("\n")


def write_all_text(path: str | os.PathLike, content: str) -> None:
    """Write ``content`` to ``path`` as text."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content)


def read_buffer(path: str | os.PathLike, size: int) -> bytes:
    """Read at most ``size`` bytes from the start of a file."""
    if size < 0:
        raise ValueError("size must not be negative")
    with open(path, "rb") as handle:
        return handle.read(size)


def write_buffer(path: str | os.PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing what was there."""
    with open(path, "wb") as handle:
        handle.write(data)
        handle.flush()


def write_utf8_file(path: str | os.PathLike, content: str | Iterable[str]) -> None:
    """Write lines as UTF-8 with a BOM, one per ``\\r\\n``-ended line.

    ``content`` is either one string, split after each ``\\n``, or the lines
    themselves. Every line is trimmed of spaces, tabs and line ends first.
    """
    lines = split_lines(content, "\n") if isinstance(content, str) else list(content)
    body = "".join(trim(line, " \t\r\n") + "\r\n" for line in lines)
    with open(path, "wb") as handle:
        handle.write(EncodingType.UTF_8.bom)
        handle.write(body.encode("utf-8"))


def application_directory() -> str:
    """Directory of the running program, ending with a separator."""
    main = sys.argv[0] if sys.argv else ""
    directory = os.path.dirname(os.path.abspath(main)) if main else os.getcwd()
    return os.path.join(directory, "")


def check_path_name(pattern: str, path: str) -> bool:
    """Check ``path`` against a pattern such as ``*.mp3``, or ``..`` for a directory.

    Only the name is checked for file patterns: the text after the last dot
    must equal the pattern's extension.
    """
    is_folder = pattern == ".."
    if not is_folder and (len(pattern) < 3 or not pattern.startswith("*.")):
        return False
    if not path:
        return False
    if is_folder:
        return is_directory(path)
    ext = path[path.rfind(".") + 1 :]
    return pattern[2:] == ext


def is_directory(path: str | os.PathLike) -> bool:
    """Whether ``path`` names an existing directory."""
    return os.path.isdir(path)


def file_exists(path: str | os.PathLike) -> bool:
    """Whether anything, file or directory, exists at ``path``."""
    return os.path.exists(path)


def folder_exists(path: str) -> bool:
    """Whether ``path`` is an existing directory.

    A path ending with a separator is never reported as existing.
    """
    if not path or path[-1] in _SEPARATORS:
        return False
    return os.path.isdir(path)


def find_all_files(path: str, recursive: bool = False) -> list[str]:
    """List the entries of a directory, sorted by name.

    Without ``recursive`` every entry, directories included, is listed. With
    it, subdirectories are descended into instead of listed, and those whose
    name starts with a dot are skipped. Raises ``NotADirectoryError`` or
    ``FileNotFoundError`` when ``path`` is not a readable directory.
    """
    base = path.rstrip(_SEPARATORS) or path
    found = []
    with os.scandir(path) as entries:
        for entry in sorted(entries, key=lambda item: item.name):
            if recursive and entry.is_dir():
                if not entry.name.startswith("."):
                    found.extend(find_all_files(os.path.join(base, entry.name), recursive))
            else:
                found.append(os.path.join(base, entry.name))
    return found


def split_path(path: str) -> PathParts:
    """Split a full or relative path into drive, directory, name and extension.

    A dot at the very start of the name, as in ``..`` or ``.hidden``, does not
    begin an extension.
    """
    colon = path.find(":")
    drive = path[:colon] if colon != -1 else ""

    last_sep = max(path.rfind("/"), path.rfind("\\"))
    if last_sep != -1:
        directory = path[: last_sep + 1]
        name_start = last_sep + 1
    else:
        directory = ""
        name_start = 0

    dot = path.rfind(".")
    if dot != -1 and dot > name_start:
        ext = path[dot:]
        name_end = dot
    else:
        ext = ""
        name_end = len(path)
    return PathParts(drive, directory, path[name_start:name_end], ext)


def ensure_directory(path: str | os.PathLike) -> None:
    """Create ``path`` and any missing parents."""
    target = os.fspath(path).rstrip(_SEPARATORS) or os.fspath(path)
    if os.path.isdir(target):
        return
    os.makedirs(target, exist_ok=True)