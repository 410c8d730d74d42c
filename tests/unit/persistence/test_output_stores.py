"""Unit tests for the directory and memory output stores."""

from __future__ import annotations

import pytest

from hoursheet.core.config import AppSettings
from hoursheet.core.protocols import IOutputStore
from hoursheet.persistence import create_output_store
from hoursheet.persistence.directory_backend import DirectoryOutputStore
from hoursheet.persistence.memory_backend import MemoryOutputStore


class TestDirectoryOutputStore:
    def test_writes_into_directory(self, tmp_path):
        store = DirectoryOutputStore(str(tmp_path))
        with store.open_text("2023-01-02.csv") as stream:
            stream.write("a,b\nc,d\n")
        assert (tmp_path / "2023-01-02.csv").read_bytes() == b"a,b\nc,d\n"

    def test_overwrites_existing_file(self, tmp_path):
        (tmp_path / "out.csv").write_text("old contents\n")
        store = DirectoryOutputStore(str(tmp_path))
        with store.open_text("out.csv") as stream:
            stream.write("new\n")
        assert (tmp_path / "out.csv").read_text() == "new\n"

    def test_location(self, tmp_path):
        store = DirectoryOutputStore(str(tmp_path))
        assert store.location("x.csv") == str(tmp_path / "x.csv")

    def test_missing_directory_raises_oserror(self, tmp_path):
        store = DirectoryOutputStore(str(tmp_path / "missing"))
        with pytest.raises(OSError):
            store.open_text("x.csv")

    def test_satisfies_protocol(self, tmp_path):
        assert isinstance(DirectoryOutputStore(str(tmp_path)), IOutputStore)


class TestMemoryOutputStore:
    def test_keeps_written_text(self):
        store = MemoryOutputStore()
        with store.open_text("a.csv") as stream:
            stream.write("x\n")
        assert store.read("a.csv") == "x\n"
        assert store.list_files() == ["a.csv"]

    def test_satisfies_protocol(self):
        assert isinstance(MemoryOutputStore(), IOutputStore)


class TestCreateOutputStore:
    def test_uses_settings(self, tmp_path):
        store = create_output_store(AppSettings(output_dir=str(tmp_path)))
        assert store.output_dir == tmp_path

    def test_explicit_output_dir_wins(self, tmp_path):
        store = create_output_store(AppSettings(output_dir="elsewhere"), output_dir=str(tmp_path))
        assert store.output_dir == tmp_path
