"""Baseline exclude preparation and merging with the user's selection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from code2prompt_manager.config import COMMON_EXCLUDE_DIRS, COMMON_EXCLUDE_FILES
from code2prompt_manager.models.selection import ExcludeSet, Reconciliation
from code2prompt_manager.utils import dedupe, split_patterns

log = logging.getLogger(__name__)

_DIR_SUFFIX = "/**"


def skip_dirs(
    extra_exclude: str | None,
    exclude_dirs: Iterable[str] = COMMON_EXCLUDE_DIRS,
) -> list[str]:
    """Directories the scanner should not descend into.

    Wildcard-free extra patterns and ``dir/**`` patterns add ``dir``; other
    wildcard patterns only affect estimation, not the walk.
    """
    dirs = list(exclude_dirs)
    for pattern in split_patterns(extra_exclude):
        if pattern.endswith(_DIR_SUFFIX):
            dirs.append(pattern[: -len(_DIR_SUFFIX)])
        elif "*" not in pattern:
            dirs.append(pattern)
    return dedupe(dirs)


def prepare_excludes(
    root_dir: Path | str,
    extra_exclude: str | None,
    exclude_dirs: Iterable[str] = COMMON_EXCLUDE_DIRS,
    exclude_files: Iterable[str] = COMMON_EXCLUDE_FILES,
) -> ExcludeSet:
    """Build the default and user-extra exclude patterns.

    A wildcard-free extra pattern naming an existing directory under
    *root_dir* becomes ``pattern/**``.
    """
    root = Path(root_dir)
    defaults = [f"{d}{_DIR_SUFFIX}" for d in exclude_dirs] + list(exclude_files)

    extras: list[str] = []
    for pattern in split_patterns(extra_exclude):
        if "*" not in pattern and (root / pattern).is_dir():
            log.debug("Treating extra exclude %r as a directory", pattern)
            extras.append(pattern + _DIR_SUFFIX)
        else:
            extras.append(pattern)

    return ExcludeSet(default_excludes=tuple(dedupe(defaults)), extra_excludes=tuple(dedupe(extras)))


def reconcile(
    default_excludes: Sequence[str],
    extra_excludes: Sequence[str],
    human_selection: Sequence[str],
    auto_excluded: Sequence[str] = (),
) -> Reconciliation:
    """Merge the baseline with the user's final choice.

    The user's selection is authoritative: an auto-excluded path the user
    unchecked is reported in ``overridden`` and stays included.
    """
    selected = set(human_selection)
    return Reconciliation(
        final_excludes=dedupe([*default_excludes, *extra_excludes, *human_selection]),
        overridden=[path for path in auto_excluded if path not in selected],
    )
