"""Splitting a file into numbered parts for upload, and joining them again.

Splitting ``song.mp3`` under the name ``song`` with block size ``n`` writes
``song.1.zip``, ``song.2.zip``, ... each holding at most ``n`` bytes, and a
description file ``song.ext.zip`` whose first line is the original extension
(``.mp3``) and whose second line is the original size in bytes.
"""

from __future__ import annotations

import os
import re

from lyrickit.defines import SERVER_FILE_EXTENSION
from lyrickit.files import file_exists, folder_exists, split_path

_DESCRIPTION_SUFFIX = ".ext"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SplitFileError(Exception):
    """Raised when a file cannot be split or its parts cannot be merged."""


def _leading_int(text: str) -> int:
    """The integer at the start of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _description_path(directory: str, name: str) -> str:
    return os.path.join(directory, name + _DESCRIPTION_SUFFIX + SERVER_FILE_EXTENSION)


def _part_path(directory: str, name: str, number: int) -> str:
    return os.path.join(directory, f"{name}.{number}{SERVER_FILE_EXTENSION}")


def split_file(source: str, target_dir: str, target_name: str, block_size: int) -> list[str]:
    """Split ``source`` into parts of ``block_size`` bytes inside ``target_dir``.

    ``target_dir`` must exist and must not end with a separator. Returns the
    paths of the parts written, in order.
    """
    if block_size < 1:
        raise ValueError("block_size must be at least 1")
    if not file_exists(source):
        raise SplitFileError(f"source file {source!r} does not exist")
    if not folder_exists(target_dir):
        raise SplitFileError(f"target directory {target_dir!r} does not exist")

    source_ext = split_path(source).ext
    try:
        size = os.path.getsize(source)
        with open(_description_path(target_dir, target_name), "w", encoding="utf-8") as handle:
            handle.write(f"{source_ext}\n{size}")

        parts = []
        with open(source, "rb") as src:
            number = 1
            while block := src.read(block_size):
                part = _part_path(target_dir, target_name, number)
                with open(part, "wb") as out:
                    out.write(block)
                parts.append(part)
                number += 1
    except OSError as exc:
        raise SplitFileError(f"cannot split {source!r}: {exc}") from exc
    return parts


def _count_parts(split_dir: str, name: str) -> int:
    """Highest part number found for ``name`` among the server files of ``split_dir``."""
    try:
        entries = os.listdir(split_dir)
    except OSError as exc:
        raise SplitFileError(f"cannot list {split_dir!r}: {exc}") from exc

    highest = 0
    for entry in entries:
        outer = split_path(entry)
        if outer.ext != SERVER_FILE_EXTENSION:
            continue
        inner = split_path(outer.name)
        if inner.name != name:
            continue
        if len(inner.ext) < 2:
            raise SplitFileError(f"unexpected file {entry!r} among the parts of {name!r}")
        highest = max(highest, _leading_int(inner.ext[1:]))
    return highest


def _read_description(path: str) -> tuple[str, int]:
    try:
        with open(path, encoding="utf-8") as handle:
            ext_line = handle.readline()
            size_line = handle.readline()
    except OSError as exc:
        raise SplitFileError(f"cannot read description {path!r}: {exc}") from exc
    return ext_line.rstrip("\r\n"), _leading_int(size_line)


def merge_file(split_dir: str, name: str, merge_dir: str) -> str:
    """Join the parts of ``name`` found in ``split_dir`` into one file in ``merge_dir``.

    The description file ``<name>.ext.zip`` is read from ``merge_dir``. The
    merged file is ``<merge_dir>/<name><ext>``; its path is returned. Raises
    ``SplitFileError`` when parts are missing or the joined size differs from
    the recorded one.
    """
    if not folder_exists(split_dir):
        raise SplitFileError(f"split directory {split_dir!r} does not exist")
    if not folder_exists(merge_dir):
        raise SplitFileError(f"merge directory {merge_dir!r} does not exist")

    count = _count_parts(split_dir, name)
    if count == 0:
        raise SplitFileError(f"no parts of {name!r} found in {split_dir!r}")

    ext, recorded_size = _read_description(_description_path(merge_dir, name))
    merged_path = os.path.join(merge_dir, name + ext)

    total = 0
    try:
        with open(merged_path, "wb") as out:
            for number in range(1, count + 1):
                with open(_part_path(split_dir, name, number), "rb") as part:
                    block = part.read()
                out.write(block)
                total += len(block)
    except OSError as exc:
        raise SplitFileError(f"cannot merge parts of {name!r}: {exc}") from exc

    if total != recorded_size:
        raise SplitFileError(
            f"merged size {total} differs from recorded size {recorded_size}"
        )
    return merged_path