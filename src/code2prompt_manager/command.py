"""Construction and execution of the code2prompt command."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from code2prompt_manager.config import Options
from code2prompt_manager.utils import has_command, split_patterns

log = logging.getLogger(__name__)

CODE2PROMPT = "code2prompt"

_BOOLEAN_FLAGS = (
    ("include_priority", "--include-priority"),
    ("full_directory_tree", "--full-directory-tree"),
    ("line_numbers", "--line-numbers"),
)


class CommandError(Exception):
    """Raised when code2prompt is missing or exits with an error."""


def build_command(options: Options, excludes: Sequence[str]) -> list[str]:
    """Build the code2prompt argv for *options* and the final *excludes*.

    Exclude and include patterns are each passed as a single
    comma-separated argument.  The scanned directory comes last.
    """
    argv = [CODE2PROMPT]

    if options.output_file:
        argv += ["-O", options.output_file]
    if options.output_format and options.output_format != "markdown":
        argv += ["-F", options.output_format]

    for attr, flag in _BOOLEAN_FLAGS:
        if getattr(options, attr):
            argv.append(flag)

    if options.encoding:
        argv += ["-c", options.encoding]

    if excludes:
        argv += ["-e", ",".join(excludes)]

    includes = split_patterns(options.include)
    if includes:
        argv += ["-i", ",".join(includes)]

    argv.append(options.directory)
    return argv


def format_command(argv: Sequence[str]) -> str:
    """Return *argv* as a copy-pasteable shell command line."""
    return shlex.join(argv)


def execute_command(argv: Sequence[str]) -> None:
    """Run the command with inherited stdio.

    Raises:
        CommandError: If the executable is missing or exits non-zero.
    """
    if not has_command(argv[0]):
        raise CommandError(f"Could not find '{argv[0]}' on PATH")

    log.debug("Running %s", format_command(argv))
    try:
        subprocess.run(list(argv), check=True)
    except subprocess.CalledProcessError as exc:
        raise CommandError(f"{argv[0]} failed (exit {exc.returncode})") from exc
    except OSError as exc:
        raise CommandError(f"Could not run {argv[0]}: {exc}") from exc
