"""Shared constants and record types used across the lyric tools."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

VERSION_NUMBER = "2.2.5"

MAX_BUFFER_SIZE = 260 * 2
MAX_PATH = 260

FOLDER_NAME_ETC = "etc"
FILE_NAME_LAST_VERSION_INFO = "version"
FILE_NAME_TEMP = "temp"
FILE_NAME_NEED_UPDATE = "needUpdate"
FILE_NAME_LAST_EXE_TEMP = "BesLyric"
SETTING_FILE_NAME = "setting"
NCM_ID_FILE_NAME = "ncm_id"

TEMP_WAV_FOLDER_NAME = "wav"
TEMP_MP3_FOLDER_NAME = "mp3"

SERVER_FILE_EXTENSION = ".zip"

GUESS_SONG_AND_ARTIST = 1
GUESS_SONG_ONLY = 2
GUESS_NOTHING = 3


class EncodingType(enum.Enum):
    """Text file encodings recognised when reading lyric files."""

    ASCII = 0
    UNICODE_LITTLE_ENDIAN = 1
    UNICODE_BIG_ENDIAN = 2
    UTF_8 = 3
    UTF_8_NO_BOM = 4
    OTHER = 5

    @property
    def bom(self) -> bytes:
        """The byte order mark that starts a file in this encoding, if any."""
        return _BOMS.get(self, b"")

    @property
    def has_bom(self) -> bool:
        return bool(self.bom)


_BOMS = {
    EncodingType.UTF_8: b"\xef\xbb\xbf",
    EncodingType.UNICODE_LITTLE_ENDIAN: b"\xff\xfe",
    EncodingType.UNICODE_BIG_ENDIAN: b"\xfe\xff",
}


@dataclass
class PathState:
    """A chosen path (music, lyric or output) and whether it has been chosen."""

    name_of_path: str = ""
    is_inited: bool = False

    def __post_init__(self) -> None:
        _check_path_length(self.name_of_path)

    def choose(self, path: str) -> None:
        """Record ``path`` as the selected path."""
        _check_path_length(path)
        self.name_of_path = path
        self.is_inited = True


def _check_path_length(path: str) -> None:
    if len(path) >= MAX_PATH:
        raise ValueError(f"path is longer than {MAX_PATH - 1} characters")


@dataclass
class LyricInfo:
    """One lyric found by a search."""

    plain_text: str = ""
    label_text: str = ""
    song: str = ""
    artist: str = ""
    lyric_from: str = ""


@dataclass
class LyricSearchResult:
    """The outcome of one lyric search."""

    current_search_done: bool = False
    append_to_list: bool = False
    lyric_infos: list[LyricInfo] = field(default_factory=list)
    show_unexpected_result_tip: bool = False
    unexpected_result_tip: str = ""


@dataclass
class IDInfo:
    """One song id found by a search."""

    song: str = ""
    artist: str = ""
    id: str = ""


@dataclass
class IDSearchResult:
    """The outcome of one song id search."""

    id_infos: list[IDInfo] = field(default_factory=list)
    show_unexpected_result_tip: bool = False
    unexpected_result_tip: str = ""


@dataclass
class SongInfo:
    """A song as described by the music service."""

    id: int = 0
    artists: str = ""
    song: str = ""


@dataclass
class SongInfoGuessResult:
    """A guess at song name and artist, typically made from a file name.

    ``result_type`` is 1 when both song and artist were guessed, 2 when only
    the song was guessed and 3 when nothing was guessed.
    """

    result_type: int = GUESS_NOTHING
    song_name: str = ""
    artist: str = ""

    @classmethod
    def from_guess(cls, song_name: str, artist: str) -> "SongInfoGuessResult":
        """Build a result whose type follows from which parts are present."""
        if song_name and artist:
            kind = GUESS_SONG_AND_ARTIST
        elif song_name:
            kind = GUESS_SONG_ONLY
        else:
            kind = GUESS_NOTHING
        return cls(kind, song_name, artist)


@dataclass
class UpdateItem:
    """One entry of the update description file."""

    file_name: str = ""
    link: str = ""
    local: str = ""
    md5: str = ""