import os
import shutil

import pytest

from lyrickit.splitfile import SplitFileError, merge_file, split_file


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "input" / "track.mp3"
    path.parent.mkdir()
    path.write_bytes(bytes(range(256)) * 10 + b"tail")
    return path


@pytest.fixture
def parts_dir(tmp_path):
    path = tmp_path / "parts"
    path.mkdir()
    return path


def test_split_writes_numbered_parts(source, parts_dir):
    parts = split_file(str(source), str(parts_dir), "song", 1000)
    names = [os.path.basename(p) for p in parts]
    assert names[0] == "song.1.zip"
    assert len(parts) == -(-source.stat().st_size // 1000)
    assert b"".join(open(p, "rb").read() for p in parts) == source.read_bytes()


def test_split_writes_description(source, parts_dir):
    split_file(str(source), str(parts_dir), "song", 1000)
    description = (parts_dir / "song.ext.zip").read_text(encoding="utf-8")
    assert description.splitlines() == [".mp3", str(source.stat().st_size)]


def test_round_trip_in_same_directory(source, parts_dir):
    split_file(str(source), str(parts_dir), "song", 777)
    merged = merge_file(str(parts_dir), "song", str(parts_dir))
    assert os.path.basename(merged) == "song.mp3"
    assert open(merged, "rb").read() == source.read_bytes()


def test_round_trip_with_single_part(source, parts_dir):
    parts = split_file(str(source), str(parts_dir), "one", 10**6)
    assert len(parts) == 1
    merged = merge_file(str(parts_dir), "one", str(parts_dir))
    assert open(merged, "rb").read() == source.read_bytes()


def test_merge_into_other_directory_reads_description_there(source, parts_dir, tmp_path):
    split_file(str(source), str(parts_dir), "song", 500)
    out = tmp_path / "out"
    out.mkdir()
    with pytest.raises(SplitFileError):
        merge_file(str(parts_dir), "song", str(out))
    shutil.copy(parts_dir / "song.ext.zip", out / "song.ext.zip")
    merged = merge_file(str(parts_dir), "song", str(out))
    assert os.path.dirname(merged) == str(out)
    assert open(merged, "rb").read() == source.read_bytes()


def test_split_missing_source(parts_dir, tmp_path):
    with pytest.raises(SplitFileError):
        split_file(str(tmp_path / "nothing.mp3"), str(parts_dir), "song", 100)


def test_split_missing_target_directory(source, tmp_path):
    with pytest.raises(SplitFileError):
        split_file(str(source), str(tmp_path / "absent"), "song", 100)


def test_split_target_directory_with_trailing_separator(source, parts_dir):
    with pytest.raises(SplitFileError):
        split_file(str(source), str(parts_dir) + os.sep, "song", 100)


def test_split_rejects_zero_block_size(source, parts_dir):
    with pytest.raises(ValueError):
        split_file(str(source), str(parts_dir), "song", 0)


def test_merge_without_parts(parts_dir):
    with pytest.raises(SplitFileError):
        merge_file(str(parts_dir), "song", str(parts_dir))


def test_merge_missing_directory(parts_dir, tmp_path):
    with pytest.raises(SplitFileError):
        merge_file(str(tmp_path / "absent"), "song", str(parts_dir))


def test_merge_detects_size_mismatch(source, parts_dir):
    parts = split_file(str(source), str(parts_dir), "song", 1000)
    with open(parts[-1], "ab") as handle:
        handle.write(b"extra")
    with pytest.raises(SplitFileError):
        merge_file(str(parts_dir), "song", str(parts_dir))


def test_merge_detects_missing_middle_part(source, parts_dir):
    parts = split_file(str(source), str(parts_dir), "song", 500)
    os.remove(parts[1])
    with pytest.raises(SplitFileError):
        merge_file(str(parts_dir), "song", str(parts_dir))


def test_merge_rejects_bare_server_file(source, parts_dir):
    split_file(str(source), str(parts_dir), "song", 500)
    (parts_dir / "song.zip").write_bytes(b"stray")
    with pytest.raises(SplitFileError):
        merge_file(str(parts_dir), "song", str(parts_dir))


def test_merge_ignores_other_names(source, parts_dir):
    split_file(str(source), str(parts_dir), "song", 500)
    (parts_dir / "other.9.zip").write_bytes(b"unrelated")
    merged = merge_file(str(parts_dir), "song", str(parts_dir))
    assert open(merged, "rb").read() == source.read_bytes()