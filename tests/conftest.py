"""Shared test fixtures."""

from __future__ import annotations

import pytest

KB = 1024


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path_factory, monkeypatch):
    """Point the settings file lookup at an empty temp directory."""
    config_home = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def project(tmp_path):
    """A small project: two source files and a heavy node_modules."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_bytes(b"a" * 300 * KB)
    (root / "b.txt").write_bytes(b"b" * 200 * KB)
    node_modules = root / "node_modules"
    node_modules.mkdir()
    (node_modules / "x.js").write_bytes(b"x" * 1024 * KB)
    return root
