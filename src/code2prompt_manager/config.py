"""Built-in defaults, run options and the JSON-backed user settings."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from code2prompt_manager.utils import dedupe, xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "code2prompt-manager"
_SETTINGS_FILE = "settings.json"

DEFAULT_LIMIT_KB = 400

# Directories skipped during scanning and excluded as ``dir/**``.
COMMON_EXCLUDE_DIRS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "vendor",
    ".next",
    "dist",
    "build",
    ".husky",
    "public",
    "docs",
    "assets/fonts",
    "assets/images",
    "assets/svg",
    "src/assets/images",
    "assets/icons",
    "languages",
    "images",
    "tests",
)

COMMON_EXCLUDE_FILES: tuple[str, ...] = (
    "screenshot.png",
    "screenshot.jpg",
    "package-lock.json",
    "composer.lock",
    "yarn.lock",
    "*.min.js",
    "*.min.css",
)

OUTPUT_FORMATS = ("markdown", "json", "xml")


@dataclass(frozen=True, slots=True)
class Options:
    """Everything one run needs, passed explicitly to each stage."""

    limit_kb: int = DEFAULT_LIMIT_KB
    directory: str = "."
    extra_exclude: str | None = None
    include: str | None = None
    auto_exclude: bool = False
    output_file: str | None = None
    output_format: str = "markdown"
    include_priority: bool = False
    full_directory_tree: bool = False
    encoding: str | None = None
    line_numbers: bool = False
    execute: bool = True
    exclude_dirs: tuple[str, ...] = COMMON_EXCLUDE_DIRS
    exclude_files: tuple[str, ...] = COMMON_EXCLUDE_FILES

    @property
    def limit_bytes(self) -> int:
        return self.limit_kb * 1024


class Settings:
    """User defaults read from a JSON file.

    Uses dot-notation keys for nested access::

        settings.get("exclude.dirs")  # reads data["exclude"]["dirs"]

    Recognised keys are ``limit_kb``, ``exclude.dirs`` and ``exclude.files``.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    @property
    def limit_kb(self) -> int:
        value = self.get("limit_kb", DEFAULT_LIMIT_KB)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            log.warning("Ignoring invalid limit_kb %r in %s", value, self._path)
            return DEFAULT_LIMIT_KB
        return value

    @property
    def exclude_dirs(self) -> tuple[str, ...]:
        """Built-in skip directories plus any configured ones."""
        return tuple(dedupe([*COMMON_EXCLUDE_DIRS, *self._string_list("exclude.dirs", strip="/")]))

    @property
    def exclude_files(self) -> tuple[str, ...]:
        """Built-in file patterns plus any configured ones."""
        return tuple(dedupe([*COMMON_EXCLUDE_FILES, *self._string_list("exclude.files")]))

    def _string_list(self, key: str, strip: str = "") -> list[str]:
        value = self.get(key, [])
        if not isinstance(value, list):
            log.warning("Ignoring %s in %s: expected a list", key, self._path)
            return []
        items = (v.strip().strip(strip) for v in value if isinstance(v, str))
        return [v for v in items if v]

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Could not load settings from %s: top level is not an object", self._path)
            return
        self._data = data
