"""Tests for the filesystem scanner."""

from __future__ import annotations

import os

import pytest

from code2prompt_manager.core import scanner
from code2prompt_manager.core.scanner import scan


def _by_path(entries):
    return {e.path: e for e in entries}


class TestScan:
    def test_files_and_directory_sizes(self, tmp_path):
        (tmp_path / "top.txt").write_bytes(b"t" * 10)
        sub = tmp_path / "src"
        (sub / "inner").mkdir(parents=True)
        (sub / "a.py").write_bytes(b"a" * 100)
        (sub / "inner" / "b.py").write_bytes(b"b" * 50)

        entries = _by_path(scan(tmp_path, []))

        assert set(entries) == {"top.txt", "src", "src/a.py", "src/inner", "src/inner/b.py"}
        assert entries["src"].is_directory
        assert entries["src"].size == 150
        assert entries["src/inner"].size == 50
        assert entries["top.txt"].size == 10
        assert not entries["top.txt"].is_directory

    def test_sorted_by_size_descending(self, tmp_path):
        (tmp_path / "small").write_bytes(b"s")
        (tmp_path / "big").write_bytes(b"b" * 1000)
        (tmp_path / "dir").mkdir()
        (tmp_path / "dir" / "mid").write_bytes(b"m" * 500)

        sizes = [e.size for e in scan(tmp_path, [])]
        assert sizes == sorted(sizes, reverse=True)

    def test_paths_are_posix_relative(self, tmp_path):
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "c.txt").write_bytes(b"c")

        paths = {e.path for e in scan(str(tmp_path), [])}
        assert "a/b/c.txt" in paths
        assert not any(p.startswith("/") for p in paths)

    def test_skipped_directory_is_recorded_empty(self, project):
        entries = _by_path(scan(project, ["node_modules"]))

        assert entries["node_modules"].size == 0
        assert entries["node_modules"].is_directory
        assert not any(p.startswith("node_modules/") for p in entries)

    def test_skip_name_only_applies_at_top_level(self, tmp_path):
        nested = tmp_path / "pkg" / "node_modules"
        nested.mkdir(parents=True)
        (nested / "dep.js").write_bytes(b"d" * 20)

        entries = _by_path(scan(tmp_path, ["node_modules"]))
        assert "pkg/node_modules/dep.js" in entries
        assert entries["pkg/node_modules"].size == 20

    def test_skip_by_nested_path(self, tmp_path):
        fonts = tmp_path / "assets" / "fonts"
        fonts.mkdir(parents=True)
        (fonts / "a.woff").write_bytes(b"f" * 300)
        (tmp_path / "assets" / "logo.svg").write_bytes(b"l" * 5)

        entries = _by_path(scan(tmp_path, ["assets/fonts"]))
        assert entries["assets/fonts"].size == 0
        assert "assets/fonts/a.woff" not in entries
        assert entries["assets"].size == 5

    def test_empty_directory(self, tmp_path):
        (tmp_path / "empty").mkdir()
        entries = _by_path(scan(tmp_path, []))
        assert entries["empty"].size == 0

    def test_unreadable_subdirectory_is_omitted(self, tmp_path, monkeypatch, caplog):
        (tmp_path / "ok.txt").write_bytes(b"o" * 3)
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "secret.txt").write_bytes(b"s" * 7)

        real_scandir = os.scandir

        def fake_scandir(path):
            if str(path).endswith("locked"):
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(scanner.os, "scandir", fake_scandir)

        with caplog.at_level("WARNING"):
            entries = _by_path(scan(tmp_path, []))

        assert set(entries) == {"ok.txt"}
        assert "Could not read directory" in caplog.text

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_file_that_cannot_be_stat_is_omitted(self, tmp_path, caplog):
        src = tmp_path / "src"
        src.mkdir()
        (src / "ok.py").write_bytes(b"o" * 12)
        (src / "dangling.py").symlink_to(tmp_path / "gone.py")

        with caplog.at_level("WARNING"):
            entries = _by_path(scan(tmp_path, []))

        assert "src/dangling.py" not in entries
        assert entries["src/ok.py"].size == 12
        assert entries["src"].size == 12
        assert "Could not access" in caplog.text

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(OSError):
            scan(tmp_path / "does-not-exist", [])

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_directory_symlinks_not_followed(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "f.txt").write_bytes(b"f" * 4)
        (tmp_path / "link").symlink_to(real, target_is_directory=True)

        entries = _by_path(scan(tmp_path, []))
        assert "link" not in entries
        assert "real/f.txt" in entries
