"""Tests for JSON snapshot files."""

import json
from pathlib import Path

import pytest

from collector.storage.json_store import ensure_directory, read_json_file, write_json_file


class TestJsonStore:
    def test_ensure_directory_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b"
        assert ensure_directory(target) == target
        assert target.is_dir()
        # Existing directory is fine
        ensure_directory(target)

    def test_write_creates_directory(self, tmp_path: Path):
        path = write_json_file("out.json", {"k": 1}, tmp_path / "data")
        assert path == tmp_path / "data" / "out.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": 1}

    def test_write_keeps_unicode_and_indents(self, tmp_path: Path):
        path = write_json_file("out.json", {"sign": "白羊座"}, tmp_path)
        text = path.read_text(encoding="utf-8")
        assert "白羊座" in text
        assert '\n  "sign"' in text

    def test_round_trip(self, tmp_path: Path):
        write_json_file("x.json", [1, "二"], tmp_path)
        assert read_json_file("x.json", tmp_path) == [1, "二"]

    def test_read_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_json_file("missing.json", tmp_path)
