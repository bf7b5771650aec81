"""Greedy largest-first auto-exclusion to meet a size budget."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from code2prompt_manager.core.matcher import is_excluded
from code2prompt_manager.models.entry import Entry

log = logging.getLogger(__name__)

# Aim below the budget to leave room for estimation error.
TARGET_RATIO = 0.95


def plan_projection(
    entries: Sequence[Entry],
    current_size: int,
    budget_bytes: int,
    enabled: bool,
    exclude_patterns: Sequence[str] = (),
) -> tuple[list[str], int]:
    """Pick files to exclude and return ``(paths, projected_size)``.

    Nothing is picked unless *enabled* and *current_size* exceeds
    *budget_bytes*.  Files already matched by *exclude_patterns* are not
    candidates; directories never are.  Candidates are taken largest first
    until the projected size is at or below 95% of the budget.
    """
    if not enabled or current_size <= budget_bytes:
        return [], current_size

    target = budget_bytes * TARGET_RATIO
    candidates = sorted(
        (e for e in entries if not e.is_directory and not is_excluded(e.path, exclude_patterns)),
        key=lambda e: e.size,
        reverse=True,
    )

    chosen: list[str] = []
    remaining = current_size
    for entry in candidates:
        if remaining <= target:
            break
        chosen.append(entry.path)
        remaining -= entry.size

    if remaining > target:
        log.info("Auto-exclusion ran out of candidates %d bytes above target", remaining - target)
    return chosen, remaining


def plan(
    entries: Sequence[Entry],
    current_size: int,
    budget_bytes: int,
    enabled: bool,
    exclude_patterns: Sequence[str] = (),
) -> list[str]:
    """Return the paths auto-excluded to meet the budget, largest first."""
    return plan_projection(entries, current_size, budget_bytes, enabled, exclude_patterns)[0]
