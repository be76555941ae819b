# lyrickit

Helpers for a lyric-making workflow: trimming and splitting lyric text,
reading lyric files in whatever encoding a text editor saved them in,
URL-encoding search terms, splitting files into numbered parts and joining
them again, making simple HTTP/1.0 requests and downloading songs.

Only the standard library is needed at runtime.

## Modules

- `lyrickit.defines`: shared constants (`VERSION_NUMBER`,
  `SERVER_FILE_EXTENSION`, `TEMP_MP3_FOLDER_NAME`, ...), the `EncodingType`
  enum (with `bom` and `has_bom`), and the records `PathState`, `LyricInfo`,
  `LyricSearchResult`, `IDInfo`, `IDSearchResult`, `SongInfo`,
  `SongInfoGuessResult` (with `from_guess`) and `UpdateItem`.
- `lyrickit.strings`: `trim`, `trim_length` and `split_lines`.
- `lyrickit.urlencoding`: `url_encode_utf8`, `url_encode_gb2312`,
  `url_decode_utf8` and `url_decode_gb2312`; letters and digits are kept,
  whitespace becomes `+`, every other byte becomes `%XX`. Malformed `%`
  escapes raise `ValueError`. `gb2312_to_utf8` and `utf8_to_gb2312`
  re-encode raw bytes.
- `lyrickit.files`: encoding detection (`detect_encoding`,
  `is_utf8_without_bom`), `read_encoded_text` and `read_nonblank_lines` for
  files saved as ANSI, UTF-8 with or without BOM, or UTF-16 LE/BE;
  `read_all_text`, `read_all_lines`, `write_all_text`, `read_buffer`,
  `write_buffer`, `write_utf8_file` (UTF-8 with BOM, `\r\n` line ends);
  path helpers `split_path` (returning a `PathParts`), `check_path_name`,
  `is_directory`, `file_exists`, `folder_exists`, `find_all_files`,
  `ensure_directory` and `application_directory`.
- `lyrickit.splitfile`: `split_file` and `merge_file`; failures raise
  `SplitFileError`.
- `lyrickit.http`: `build_request`, `http_get` and `http_post`. URLs are given
  as `host/path` without a scheme; requests go to port 80 and the whole raw
  reply, headers included, is returned. Connection failures raise
  `HttpRequestError`.
- `lyrickit.downloader`: `download_file` (with an optional progress callback
  receiving the total bytes and, every hundred reads, a speed in bytes per
  millisecond), `download_string`, `ncm_mp3_link` and `download_ncm_mp3`;
  failures raise `DownloadError`.

## Examples

```python
from lyrickit.strings import trim, split_lines
from lyrickit.files import read_nonblank_lines, write_utf8_file, split_path
from lyrickit.urlencoding import url_encode_utf8

trim("  hello\t", " \t")          # "hello"
split_lines("a\nb", "\n")         # ["a\n", "b"]

lines = read_nonblank_lines("song.txt")   # trimmed, blank lines dropped
write_utf8_file("song.lrc", lines)

parts = split_path("C:\\music\\song.mp3")
parts.name, parts.ext             # ("song", ".mp3")

url_encode_utf8("a b")            # "a+b"
```

`read_nonblank_lines` and `read_encoded_text` raise `ValueError` for a file
shorter than two bytes, whose encoding cannot be detected.

### Splitting and merging

`split_file("big.bin", "parts", "big", 1024 * 1024)` writes `parts/big.1.zip`,
`parts/big.2.zip`, ... and a description file `parts/big.ext.zip` holding the
original extension and size. It returns the list of part paths.

`merge_file(split_dir, name, merge_dir)` reads the parts from `split_dir` and
the description file from `merge_dir`, writes `<merge_dir>/<name><ext>` and
returns its path. The description file must therefore be in `merge_dir`:

```python
from lyrickit.splitfile import split_file, merge_file

split_file("big.bin", "parts", "big", 1024 * 1024)
merge_file("parts", "big", "parts")   # writes parts/big.bin
```

Directory arguments must exist and must not end with a path separator.

## What the package does not do

It provides no program or command of its own and no user interface: there is
no lyric-making screen, no playback, no lyric or song search and no update
mechanism. The record types in `lyrickit.defines` describe search results and
update entries, but nothing in the package produces them.

## Running the tests

```
pip install -e ".[test]"
pytest
```