"""Glob-style matching of relative paths against exclude patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

_DIR_SUFFIX = "/**"
_WILDCARD_RE = re.compile(r"\*\*/|\*\*|\*")
_WILDCARD_REGEX = {
    "**/": "(?:.*/)?",  # zero or more leading directories
    "**": ".*",
    "*": "[^/]*",
}


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern[str]:
    """Translate a wildcard pattern into a regex for full-string matching.

    ``**`` matches any characters including ``/`` (so ``**/x`` also matches
    a top-level ``x``); a single ``*`` stops at path separators.  Everything
    else is matched literally.
    """
    parts = []
    pos = 0
    for token in _WILDCARD_RE.finditer(pattern):
        parts.append(re.escape(pattern[pos : token.start()]))
        parts.append(_WILDCARD_REGEX[token.group()])
        pos = token.end()
    parts.append(re.escape(pattern[pos:]))
    return re.compile("".join(parts), re.DOTALL)


def matches(path: str, pattern: str) -> bool:
    """Check whether *path* (POSIX, relative to the scan root) matches *pattern*.

    - ``dir/**`` matches ``dir`` itself and everything beneath it.
    - A pattern without ``*`` matches one path exactly.
    - Any other pattern is a wildcard glob, see :func:`_compile`.

    A path that contains a literal ``*`` cannot be told apart from a
    wildcard; no escaping syntax exists.
    """
    if pattern.endswith(_DIR_SUFFIX):
        dir_name = pattern[: -len(_DIR_SUFFIX)]
        return path == dir_name or path.startswith(dir_name + "/")
    if "*" not in pattern:
        return path == pattern
    return _compile(pattern).fullmatch(path) is not None


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    """Check whether any pattern in *patterns* matches *path*."""
    return any(matches(path, pattern) for pattern in patterns)
