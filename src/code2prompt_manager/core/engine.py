"""Scan, estimate, plan and reconcile orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from code2prompt_manager.config import Options
from code2prompt_manager.core.estimator import estimate
from code2prompt_manager.core.planner import plan_projection
from code2prompt_manager.core.reconciler import prepare_excludes, reconcile, skip_dirs
from code2prompt_manager.core.scanner import scan
from code2prompt_manager.models.entry import Entry
from code2prompt_manager.models.selection import Choice, ExcludeSet, Reconciliation
from code2prompt_manager.prompt import build_choices

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]  # stage name


@dataclass(slots=True)
class Analysis:
    """Everything known before the user makes a selection."""

    entries: list[Entry]
    excludes: ExcludeSet
    baseline_size: int
    auto_excluded: list[str] = field(default_factory=list)
    projected_size: int = 0
    choices: list[Choice] = field(default_factory=list)

    @property
    def preselected(self) -> list[str]:
        """Values checked before the user touches anything."""
        return [c.value for c in self.choices if c.checked]


@dataclass(frozen=True, slots=True)
class Outcome:
    """Final exclude list and its estimated size."""

    reconciliation: Reconciliation
    final_size: int


class ExcludeEngine:
    """Runs the exclusion workflow for one set of options."""

    def __init__(self, options: Options) -> None:
        self.options = options

    def analyze(self, on_progress: ProgressCallback | None = None) -> Analysis:
        """Scan the directory, estimate the baseline and pre-select exclusions.

        Raises:
            OSError: If the root directory cannot be read.
        """
        opts = self.options

        if on_progress:
            on_progress("scanning")
        entries = scan(opts.directory, skip_dirs(opts.extra_exclude, opts.exclude_dirs))

        excludes = prepare_excludes(opts.directory, opts.extra_exclude, opts.exclude_dirs, opts.exclude_files)
        baseline = excludes.baseline

        if on_progress:
            on_progress("estimating")
        baseline_size = estimate(entries, baseline)
        log.info("Baseline estimate %d bytes for %d entries", baseline_size, len(entries))

        if on_progress:
            on_progress("planning")
        auto_excluded, projected = plan_projection(
            entries, baseline_size, opts.limit_bytes, opts.auto_exclude, baseline
        )

        return Analysis(
            entries=entries,
            excludes=excludes,
            baseline_size=baseline_size,
            auto_excluded=auto_excluded,
            projected_size=projected,
            choices=build_choices(entries, baseline, auto_excluded),
        )

    def finalize(self, analysis: Analysis, selection: list[str]) -> Outcome:
        """Merge the user's *selection* into the final exclude list."""
        result = reconcile(
            analysis.excludes.default_excludes,
            analysis.excludes.extra_excludes,
            selection,
            analysis.auto_excluded,
        )
        final_size = estimate(analysis.entries, result.final_excludes)
        log.info("Final estimate %d bytes with %d exclude patterns", final_size, len(result.final_excludes))
        return Outcome(reconciliation=result, final_size=final_size)
