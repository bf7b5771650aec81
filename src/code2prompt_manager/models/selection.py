"""Exclude-set and selection dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Choice:
    """One selectable row in the interactive exclude prompt."""

    label: str
    value: str
    size: int
    is_directory: bool = False
    checked: bool = False


@dataclass(frozen=True, slots=True)
class ExcludeSet:
    """Baseline exclude patterns before any interactive selection."""

    default_excludes: tuple[str, ...] = ()
    extra_excludes: tuple[str, ...] = ()

    @property
    def baseline(self) -> list[str]:
        """Default and extra patterns, in that order."""
        return [*self.default_excludes, *self.extra_excludes]


@dataclass(frozen=True, slots=True)
class Reconciliation:
    """Outcome of merging baseline excludes with the user's selection."""

    final_excludes: list[str] = field(default_factory=list)
    overridden: list[str] = field(default_factory=list)
