"""Shared utility functions."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def has_command(name: str) -> bool:
    """Check if a command exists on the system."""
    return shutil.which(name) is not None


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def bytes_to_human(size_bytes: int | float) -> str:
    """Convert byte count to a human-readable string (``"1.50 KB"``)."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"

    units = ("B", "KB", "MB", "GB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if value < 1024:
            return f"{value:.2f} {unit}"
        value /= 1024
    return f"{value:.2f} {units[-1]}"


def split_patterns(raw: str | None) -> list[str]:
    """Split a comma-separated pattern option, dropping blanks.

    A trailing ``/`` is removed so ``dir/`` names the same directory for the
    scan and for the ``dir/**`` exclude pattern.
    """
    if not raw:
        return []
    patterns = (part.strip().rstrip("/") for part in raw.split(","))
    return [p for p in patterns if p]


def dedupe(items) -> list[str]:
    """Remove duplicates while keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def default_output_file() -> str:
    """Return ``<current directory name>.md``."""
    return f"{Path.cwd().name}.md"
