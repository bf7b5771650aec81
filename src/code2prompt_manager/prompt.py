"""Interactive checkbox selection of files and directories to exclude."""

from __future__ import annotations

from collections.abc import Sequence

import click

from code2prompt_manager.core.matcher import is_excluded
from code2prompt_manager.models.entry import Entry
from code2prompt_manager.models.selection import Choice
from code2prompt_manager.utils import bytes_to_human


def build_choices(
    entries: Sequence[Entry],
    exclude_patterns: Sequence[str],
    auto_excluded: Sequence[str] = (),
) -> list[Choice]:
    """Create prompt rows: files first, then directories, each largest first.

    Rows matched by *exclude_patterns* or listed in *auto_excluded* start
    checked.  Directory values carry a ``/**`` suffix so they can be used as
    exclude patterns directly.
    """
    auto = set(auto_excluded)
    ordered = sorted(entries, key=lambda e: e.size, reverse=True)

    files = [
        Choice(
            label=f"{bytes_to_human(e.size):>10} │ {e.path}",
            value=e.path,
            size=e.size,
            checked=e.path in auto or is_excluded(e.path, exclude_patterns),
        )
        for e in ordered
        if not e.is_directory
    ]
    dirs = [
        Choice(
            label=f"{bytes_to_human(e.size):>10} │ {e.path}/",
            value=f"{e.path}/**",
            size=e.size,
            is_directory=True,
            checked=is_excluded(e.path, exclude_patterns),
        )
        for e in ordered
        if e.is_directory
    ]
    return files + dirs


def parse_toggles(raw: str, count: int) -> tuple[set[int], list[str]]:
    """Parse ``"1,4-6"`` into zero-based indexes below *count*.

    Returns ``(indexes, invalid_tokens)``.
    """
    indexes: set[int] = set()
    invalid: list[str] = []
    for token in raw.replace(" ", ",").split(","):
        token = token.strip()
        if not token:
            continue
        start, sep, end = token.partition("-")
        if not start.isdecimal() or (sep and not end.isdecimal()):
            invalid.append(token)
            continue
        lo = int(start)
        hi = int(end) if sep else lo
        if lo > hi:
            lo, hi = hi, lo
        if lo < 1 or hi > count:
            invalid.append(token)
            continue
        indexes.update(range(lo - 1, hi))
    return indexes, invalid


def _render(choices: Sequence[Choice], page_size: int) -> None:
    click.echo()
    shown_dirs_header = False
    click.echo(click.style(" === Files (sorted by size) === ", fg="bright_black"))
    total = len(choices)
    for i, choice in enumerate(choices, 1):
        if choice.is_directory and not shown_dirs_header:
            click.echo(click.style(" === Directories === ", fg="bright_black"))
            shown_dirs_header = True
        mark = click.style("[x]", fg="red") if choice.checked else "[ ]"
        click.echo(f"  {i:>{len(str(total))}} {mark} {choice.label}")
        if page_size and i % page_size == 0 and i < total:
            if not click.confirm("  More?", default=True):
                break


def select_excludes(choices: list[Choice], page_size: int = 20) -> list[str]:
    """Let the user toggle which rows to EXCLUDE and return the checked values.

    Blocks until the user confirms with an empty line.  Toggles the
    ``checked`` flag of *choices* in place.
    """
    click.echo(
        "\nSelect files/directories to EXCLUDE (sorted by size). Enter numbers or "
        "ranges to toggle (e.g. 1,3-5), 'a' for all, 'n' for none, Enter to confirm."
    )
    redraw = True
    while True:
        if redraw:
            _render(choices, page_size)
        raw = click.prompt("Toggle", default="", show_default=False).strip().lower()
        if not raw:
            break
        redraw = True
        if raw in ("a", "all"):
            for choice in choices:
                choice.checked = True
            continue
        if raw in ("n", "none"):
            for choice in choices:
                choice.checked = False
            continue
        indexes, invalid = parse_toggles(raw, len(choices))
        if invalid:
            click.echo(click.style(f"Ignoring invalid selection: {', '.join(invalid)}", fg="yellow"))
            redraw = bool(indexes)
        for idx in indexes:
            choices[idx].checked = not choices[idx].checked

    return [choice.value for choice in choices if choice.checked]
