"""Tests for chunked file copy."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from disk_ops.copier import copy_file

if TYPE_CHECKING:
    from pathlib import Path

PAYLOAD = bytes(range(256)) * 40


class TestCopyFile:
    @pytest.fixture(autouse=True)
    def _setup(self, disk_tmp: Path) -> None:
        self.tmp_dir = disk_tmp
        self.source = disk_tmp / "source.bin"
        self.source.write_bytes(PAYLOAD)
        self.dest_dir = disk_tmp / "dest"
        self.dest_dir.mkdir()

    def test_copy_is_byte_identical(self) -> None:
        result = copy_file(str(self.source), str(self.dest_dir), "copy.bin", chunk_size=100)
        assert result.success is True
        assert result.overwritten is False
        assert result.bytes_copied == len(PAYLOAD)
        assert (self.dest_dir / "copy.bin").read_bytes() == PAYLOAD

    def test_copy_with_default_chunk_size(self) -> None:
        result = copy_file(self.source, self.dest_dir, "copy.bin")
        assert result.success is True
        assert (self.dest_dir / "copy.bin").read_bytes() == PAYLOAD

    def test_empty_source(self) -> None:
        empty = self.tmp_dir / "empty.bin"
        empty.write_bytes(b"")
        result = copy_file(str(empty), str(self.dest_dir), "empty.bin")
        assert result.success is True
        assert result.bytes_copied == 0
        assert (self.dest_dir / "empty.bin").read_bytes() == b""

    def test_existing_destination_without_overwrite_fails(self) -> None:
        copy_file(str(self.source), str(self.dest_dir), "copy.bin")
        self.source.write_bytes(b"new content")

        result = copy_file(str(self.source), str(self.dest_dir), "copy.bin")
        assert result.success is False
        assert result.error == "File Exists"
        assert result.error_kind == "destination_exists"
        assert (self.dest_dir / "copy.bin").read_bytes() == PAYLOAD

    def test_overwrite_replaces_destination(self) -> None:
        copy_file(str(self.source), str(self.dest_dir), "copy.bin")
        self.source.write_bytes(b"short")

        result = copy_file(str(self.source), str(self.dest_dir), "copy.bin", overwrite=True)
        assert result.success is True
        assert result.overwritten is True
        assert (self.dest_dir / "copy.bin").read_bytes() == b"short"

    def test_overwrite_onto_itself_is_refused(self) -> None:
        result = copy_file(str(self.source), str(self.tmp_dir), "source.bin", overwrite=True)
        assert result.success is False
        assert result.error_kind == "destination_exists"
        assert self.source.read_bytes() == PAYLOAD

    def test_missing_destination_directory(self) -> None:
        result = copy_file(str(self.source), str(self.tmp_dir / "nowhere"), "copy.bin")
        assert result.success is False
        assert result.error == "Destination path not valid."
        assert result.error_kind == "destination_invalid"

    def test_destination_that_is_a_file(self) -> None:
        result = copy_file(str(self.source), str(self.source), "copy.bin")
        assert result.success is False
        assert result.error_kind == "destination_invalid"

    def test_missing_source(self) -> None:
        result = copy_file(str(self.tmp_dir / "ghost.bin"), str(self.dest_dir), "copy.bin")
        assert result.success is False
        assert result.error == "Cannot open source file"
        assert result.error_kind == "source_unreadable"
        assert not (self.dest_dir / "copy.bin").exists()

    def test_non_positive_chunk_size_raises(self) -> None:
        with pytest.raises(ValueError):
            copy_file(str(self.source), str(self.dest_dir), "copy.bin", chunk_size=0)

    def test_chunk_size_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISK_OPS_CHUNK_SIZE", "7")
        result = copy_file(str(self.source), str(self.dest_dir), "copy.bin")
        assert result.success is True
        assert (self.dest_dir / "copy.bin").read_bytes() == PAYLOAD

    @pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
    def test_write_failure_is_reported(self) -> None:
        result = copy_file(str(self.source), "/dev/", "full", overwrite=True)
        assert result.success is False
        assert result.error_kind == "write_failure"
        assert result.error is not None
        assert result.error.startswith("Error writing file: ")
