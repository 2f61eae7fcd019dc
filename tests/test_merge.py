"""Tests for concatenating bin files into one image."""

import logging

import pytest

from cuebin.cue import parse_cue_str
from cuebin.errors import (
    MergeError,
    MergeIOError,
    SourceNotFound,
    TargetAlreadyExists,
)
from cuebin.merge import merge_disc_image, merge_files


class TestMergeFiles:
    def test_concatenates_in_order(self, tmp_path):
        a = tmp_path / "a.bin"
        b = tmp_path / "b.bin"
        a.write_bytes(bytes(range(256)) * 3)
        b.write_bytes(b"second file" * 11)
        target = tmp_path / "merged.bin"

        written = merge_files(target, [a, b])

        data = target.read_bytes()
        assert written == len(data) == a.stat().st_size + b.stat().st_size
        assert data[: a.stat().st_size] == a.read_bytes()
        assert data[a.stat().st_size :] == b.read_bytes()

    def test_small_chunks(self, tmp_path):
        a = tmp_path / "a.bin"
        b = tmp_path / "b.bin"
        a.write_bytes(b"0123456789" * 5)
        b.write_bytes(b"abc")
        target = tmp_path / "merged.bin"

        assert merge_files(target, [b, a, b], chunk_size=7) == 56
        assert target.read_bytes() == b"abc" + b"0123456789" * 5 + b"abc"

    def test_no_sources_creates_empty_target(self, tmp_path):
        target = tmp_path / "merged.bin"
        assert merge_files(target, []) == 0
        assert target.read_bytes() == b""

    def test_accepts_string_paths(self, tmp_path):
        a = tmp_path / "a.bin"
        a.write_bytes(b"xyz")
        target = tmp_path / "merged.bin"
        merge_files(str(target), [str(a)])
        assert target.read_bytes() == b"xyz"

    def test_refuses_existing_target(self, tmp_path):
        a = tmp_path / "a.bin"
        a.write_bytes(b"new data")
        target = tmp_path / "merged.bin"
        target.write_bytes(b"previous merge")

        with pytest.raises(TargetAlreadyExists) as excinfo:
            merge_files(target, [a])

        assert excinfo.value.path == target
        assert target.read_bytes() == b"previous merge"

    def test_second_run_is_refused(self, tmp_path):
        a = tmp_path / "a.bin"
        a.write_bytes(b"data")
        target = tmp_path / "merged.bin"
        merge_files(target, [a])
        with pytest.raises(TargetAlreadyExists):
            merge_files(target, [a])
        assert target.read_bytes() == b"data"

    def test_missing_source_keeps_partial_target(self, tmp_path):
        a = tmp_path / "a.bin"
        c = tmp_path / "c.bin"
        a.write_bytes(b"first")
        c.write_bytes(b"third")
        target = tmp_path / "merged.bin"

        with pytest.raises(SourceNotFound) as excinfo:
            merge_files(target, [a, tmp_path / "b.bin", c])

        assert excinfo.value.path == tmp_path / "b.bin"
        assert target.read_bytes() == b"first"

    def test_unreadable_source(self, tmp_path):
        a = tmp_path / "a.bin"
        a.write_bytes(b"first")
        target = tmp_path / "merged.bin"

        with pytest.raises(MergeIOError):
            merge_files(target, [a, tmp_path])

        assert target.read_bytes() == b"first"

    def test_target_in_missing_directory(self, tmp_path):
        a = tmp_path / "a.bin"
        a.write_bytes(b"first")
        with pytest.raises(MergeIOError):
            merge_files(tmp_path / "nowhere" / "merged.bin", [a])

    def test_errors_share_a_base(self):
        assert issubclass(TargetAlreadyExists, MergeError)
        assert issubclass(SourceNotFound, MergeError)
        assert issubclass(MergeIOError, MergeError)


class TestMergeDiscImage:
    def test_merges_files_in_sheet_order(self, tmp_path):
        (tmp_path / "t1.bin").write_bytes(b"\x01" * 2352)
        (tmp_path / "t2.bin").write_bytes(b"\x02" * 2352 * 2)
        result = parse_cue_str(
            'FILE "t2.bin" BINARY\nTRACK 01 MODE1/2352\nINDEX 01 00:00:00\n'
            'FILE "t1.bin" BINARY\nTRACK 02 AUDIO\nINDEX 01 00:00:00\n',
            tmp_path,
        )
        target = tmp_path / "merged.bin"

        assert merge_disc_image(result.disc, target) == 3 * 2352
        assert target.read_bytes() == b"\x02" * 2352 * 2 + b"\x01" * 2352

    def test_missing_bin_is_refused_before_writing(self, tmp_path):
        (tmp_path / "t1.bin").write_bytes(b"\x01")
        result = parse_cue_str(
            'FILE "t1.bin" BINARY\nFILE "t2.bin" BINARY\n', tmp_path
        )
        target = tmp_path / "merged.bin"

        with pytest.raises(SourceNotFound) as excinfo:
            merge_disc_image(result.disc, target)

        assert excinfo.value.path.name == "t2.bin"
        assert not target.exists()

    def test_missing_bin_is_logged(self, tmp_path, caplog):
        result = parse_cue_str('FILE "gone.bin" BINARY\n', tmp_path)

        with caplog.at_level(logging.ERROR, logger="cuebin"):
            with pytest.raises(SourceNotFound):
                merge_disc_image(result.disc, tmp_path / "merged.bin")

        assert "Error: Source bin file not found:" in caplog.text
        assert "gone.bin" in caplog.text
