"""Downloading files and text over HTTP, including songs from the music service."""

from __future__ import annotations

import os
import time
import urllib.request
from collections.abc import Callable
from typing import Optional

from lyrickit.defines import TEMP_MP3_FOLDER_NAME
from lyrickit.files import application_directory

NET_DATA_BLOCK_SIZE = 1024 * 10
# Each read asks for one byte less than a block, as the receiving buffer allows.
_READ_SIZE = NET_DATA_BLOCK_SIZE - 1
# Speed is measured over this many reads (about one megabyte).
_SPEED_WINDOW = 100

USER_AGENT = "RookIE/1.0"
NCM_MP3_LINK_PREFIX = "http://music.163.com/song/media/outer/url?id="
MP3_EXTENSION = ".mp3"

ProgressCallback = Callable[[int, Optional[float]], None]


class DownloadError(Exception):
    """Raised when a download cannot be started, read or saved."""


def _open(url: str):
    request = urllib.request.Request(
        url, headers={"User-Agent": USER_AGENT, "Cache-Control": "no-cache"}
    )
    try:
        return urllib.request.urlopen(request)
    except (OSError, ValueError) as exc:
        raise DownloadError(f"cannot open {url!r}: {exc}") from exc


def _read(response, size: int) -> bytes:
    try:
        return response.read(size)
    except OSError as exc:
        raise DownloadError(f"reading the download failed: {exc}") from exc


def download_file(
    url: str,
    save_as: str | os.PathLike,
    progress: Optional[ProgressCallback] = None,
) -> int:
    """Download ``url`` into the file ``save_as`` and return the number of bytes.

    When ``progress`` is given it is called after every read with the total
    bytes received so far and, once every hundred reads, the speed of that
    stretch in bytes per millisecond (``None`` otherwise). The last call
    carries the final total.
    """
    response = _open(url)
    with response:
        try:
            out = open(save_as, "wb")
        except OSError as exc:
            raise DownloadError(f"cannot write {os.fspath(save_as)!r}: {exc}") from exc
        with out:
            total = 0
            loop = 0
            window_start = time.monotonic()
            window_total = 0
            while True:
                if progress is not None and loop % _SPEED_WINDOW == 0:
                    window_start = time.monotonic()
                    window_total = total

                chunk = _read(response, _READ_SIZE)
                total += len(chunk)

                speed: Optional[float] = None
                if progress is not None and loop % _SPEED_WINDOW == _SPEED_WINDOW - 1:
                    elapsed_ms = (time.monotonic() - window_start) * 1000.0
                    received = total - window_total
                    speed = received / elapsed_ms if elapsed_ms > 0 else float(received)
                loop += 1

                if chunk:
                    out.write(chunk)
                if progress is not None:
                    progress(total, speed)
                if not chunk:
                    break
    return total


def download_string(url: str, max_size: Optional[int] = None) -> str:
    """Download ``url`` and return its body decoded as UTF-8.

    At most ``max_size`` bytes are fetched when it is given; a ``max_size`` of
    zero returns an empty string without any request. The text ends at the
    first NUL character.
    """
    if max_size is not None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        if max_size == 0:
            return ""

    received = bytearray()
    response = _open(url)
    with response:
        while True:
            want = _READ_SIZE
            if max_size is not None:
                want = min(want, max_size - len(received))
                if want == 0:
                    break
            chunk = _read(response, want)
            if not chunk:
                break
            received.extend(chunk)

    text = received.decode("utf-8", errors="replace")
    nul = text.find("\0")
    return text if nul == -1 else text[:nul]


def ncm_mp3_link(song_id: str | int) -> str:
    """The link from which the music service serves the mp3 of ``song_id``."""
    return f"{NCM_MP3_LINK_PREFIX}{song_id}{MP3_EXTENSION}"


def download_ncm_mp3(
    name: str, song_id: str | int, directory: Optional[str | os.PathLike] = None
) -> str:
    """Download the song ``song_id`` as ``<directory>/<name>.mp3`` and return its path.

    ``directory`` defaults to the ``mp3`` folder beside the program.
    """
    if directory is None:
        directory = os.path.join(application_directory(), TEMP_MP3_FOLDER_NAME)
    target = os.path.join(os.fspath(directory), name + MP3_EXTENSION)
    download_file(ncm_mp3_link(song_id), target)
    return target