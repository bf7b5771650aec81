"""Projected bundle size for a set of entries and exclude patterns."""

from __future__ import annotations

from collections.abc import Sequence

from code2prompt_manager.core.matcher import is_excluded
from code2prompt_manager.models.entry import Entry

# Per-entry formatting overhead in the generated bundle, and its cap.
OVERHEAD_PER_ENTRY = 100
MAX_OVERHEAD = 50 * 1024


def overhead(entry_count: int) -> int:
    return min(entry_count * OVERHEAD_PER_ENTRY, MAX_OVERHEAD)


def estimate(entries: Sequence[Entry], exclude_patterns: Sequence[str]) -> int:
    """Estimate the output size in bytes.

    Sums the sizes of files not matched by *exclude_patterns* and adds a
    formatting overhead of 100 bytes per entry, capped at 50 KiB.
    Directory sizes are informational and never counted.
    """
    total = sum(
        entry.size
        for entry in entries
        if not entry.is_directory and not is_excluded(entry.path, exclude_patterns)
    )
    return total + overhead(len(entries))
