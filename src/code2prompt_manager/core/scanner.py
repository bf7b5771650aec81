"""Filesystem walk producing sized entries for a directory tree."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from code2prompt_manager.models.entry import Entry

log = logging.getLogger(__name__)


def scan(root_dir: Path | str, skip_dirs: Iterable[str]) -> list[Entry]:
    """Walk *root_dir* and return every file and directory, largest first.

    A directory whose relative path equals one of *skip_dirs* is recorded
    with ``size=0`` and its contents are neither listed nor sized.  Other
    directories carry the total size of the files beneath them, accumulated
    in the same post-order pass.

    Unreadable files and subdirectories are logged and left out.  An
    ``OSError`` from reading *root_dir* itself propagates.
    """
    skip = {p.strip("/") for p in skip_dirs}
    entries: list[Entry] = []

    with os.scandir(root_dir) as it:
        children = sorted(it, key=lambda e: e.name)
    _scan_children(children, "", skip, entries)

    entries.sort(key=lambda e: e.size, reverse=True)
    log.debug("Scanned %s: %d entries", root_dir, len(entries))
    return entries


def _scan_dir(path: str, rel: str, skip: set[str], entries: list[Entry]) -> int | None:
    """Scan one subdirectory, returning its total size or None if unreadable."""
    try:
        with os.scandir(path) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        log.warning("Could not read directory %s: %s", path, e)
        return None
    return _scan_children(children, rel, skip, entries)


def _scan_children(children: list[os.DirEntry], base: str, skip: set[str], entries: list[Entry]) -> int:
    total = 0
    for child in children:
        rel = f"{base}/{child.name}" if base else child.name
        try:
            if child.is_symlink() and child.is_dir():
                log.debug("Not following directory symlink %s", rel)
                continue
            is_dir = child.is_dir(follow_symlinks=False)
            size = 0 if is_dir else child.stat().st_size
        except OSError as e:
            log.warning("Could not access %s: %s", child.path, e)
            continue

        if not is_dir:
            entries.append(Entry(path=rel, is_directory=False, size=size))
            total += size
            continue

        if rel in skip:
            log.debug("Skipping directory %s", rel)
            entries.append(Entry(path=rel, is_directory=True, size=0))
            continue

        dir_total = _scan_dir(child.path, rel, skip, entries)
        if dir_total is None:
            continue
        entries.append(Entry(path=rel, is_directory=True, size=dir_total))
        total += dir_total
    return total
