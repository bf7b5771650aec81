"""code2prompt-manager data models."""

from code2prompt_manager.models.entry import Entry
from code2prompt_manager.models.selection import Choice, ExcludeSet, Reconciliation

__all__ = [
    "Choice",
    "Entry",
    "ExcludeSet",
    "Reconciliation",
]
