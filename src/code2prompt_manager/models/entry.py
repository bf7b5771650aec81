"""Scanned filesystem entry dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Entry:
    """Single file or directory discovered during a scan.

    ``path`` is POSIX-style and relative to the scan root.  For directories
    ``size`` is the recursive sum of descendant file sizes, or 0 when the
    directory was skipped and never traversed.
    """

    path: str
    is_directory: bool
    size: int
