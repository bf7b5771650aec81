"""CLI interface for code2prompt-manager."""

from __future__ import annotations

import logging
import sys

import click

from code2prompt_manager.command import CommandError, build_command, execute_command, format_command
from code2prompt_manager.config import OUTPUT_FORMATS, Options, Settings
from code2prompt_manager.core.engine import Analysis, ExcludeEngine
from code2prompt_manager.prompt import select_excludes
from code2prompt_manager.utils import bytes_to_human, default_output_file


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _info(msg: str) -> None:
    click.echo(click.style(msg, fg="blue"))


def _success(msg: str) -> None:
    click.echo(click.style(msg, fg="green"))


def _warning(msg: str) -> None:
    click.echo(click.style(msg, fg="yellow"))


def _error(msg: str) -> None:
    click.echo(click.style(msg, fg="red"), err=True)


def _show_size(size: int, limit: int, message: str) -> None:
    if size > limit:
        status = click.style(f"(exceeds limit by {bytes_to_human(size - limit)})", fg="red")
    else:
        status = click.style("(within limit)", fg="green")
    click.echo(f"\n{click.style(f'{message}: {bytes_to_human(size)}', fg='blue')} {status}")


def _show_baseline(analysis: Analysis, options: Options) -> None:
    limit = options.limit_bytes
    _success(f"Found {len(analysis.entries)} files and directories.")
    _info(f"\nSize limit: {bytes_to_human(limit)} ({options.limit_kb} KB)")
    _info(f"Estimated size with default excludes: {bytes_to_human(analysis.baseline_size)}")
    if analysis.baseline_size > limit:
        _warning(
            f"\nWARNING: Current selection exceeds size limit by "
            f"{bytes_to_human(analysis.baseline_size - limit)}"
        )

    if analysis.auto_excluded:
        _warning(f"\nAuto-excluded {len(analysis.auto_excluded)} files to meet size limit:")
        for path in analysis.auto_excluded:
            _warning(f"  - {path}")
        _success(f"New estimated size: {bytes_to_human(analysis.projected_size)}")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="code2prompt-manager")
@click.option("-l", "--limit", "limit_kb", type=click.IntRange(min=1), default=None,
              help="Size limit for the generated file in KB [default: 400]")
@click.option("-d", "--directory", default=".", show_default=True, help="Directory to scan")
@click.option("-e", "--extra-exclude", default=None, help="Additional exclude patterns (comma-separated)")
@click.option("-i", "--include", default=None, help="Include patterns (comma-separated)")
@click.option("-O", "--output-file", default=None, help="Output file name [default: <current dir>.md]")
@click.option("-F", "--output-format", type=click.Choice(OUTPUT_FORMATS), default="markdown", show_default=True,
              help="Output format")
@click.option("--include-priority", is_flag=True,
              help="Include files in case of conflict between include and exclude patterns")
@click.option("--full-directory-tree", is_flag=True, help="List the full directory tree")
@click.option("-c", "--encoding", default=None, help="Tokenizer to use for token count (cl100k, p50k, ...)")
@click.option("--line-numbers", is_flag=True, help="Add line numbers to the source code")
@click.option("-n", "--no-execute", is_flag=True, help="Only show the command, don't execute it")
@click.option("--auto-exclude", is_flag=True, help="Automatically exclude files to stay under the size limit")
@click.option("-y", "--yes", is_flag=True, help="Accept the pre-selected excludes without prompting")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(
    limit_kb: int | None,
    directory: str,
    extra_exclude: str | None,
    include: str | None,
    output_file: str | None,
    output_format: str,
    include_priority: bool,
    full_directory_tree: bool,
    encoding: str | None,
    line_numbers: bool,
    no_execute: bool,
    auto_exclude: bool,
    yes: bool,
    verbose: int,
) -> None:
    """Manage code2prompt output size by choosing what to exclude."""
    _setup_logging(verbose)
    settings = Settings()

    options = Options(
        limit_kb=limit_kb if limit_kb is not None else settings.limit_kb,
        directory=directory,
        extra_exclude=extra_exclude,
        include=include,
        auto_exclude=auto_exclude,
        output_file=output_file or default_output_file(),
        output_format=output_format,
        include_priority=include_priority,
        full_directory_tree=full_directory_tree,
        encoding=encoding,
        line_numbers=line_numbers,
        execute=not no_execute,
        exclude_dirs=settings.exclude_dirs,
        exclude_files=settings.exclude_files,
    )

    try:
        _run(options, interactive=not yes)
    except (CommandError, OSError) as exc:
        _error(f"Error: {exc}")
        sys.exit(1)


def _run(options: Options, interactive: bool) -> None:
    engine = ExcludeEngine(options)

    _info(f'Scanning directory "{options.directory}" for files...')
    _warning("This may take a while for large codebases...")
    analysis = engine.analyze()
    _show_baseline(analysis, options)

    if interactive:
        selection = select_excludes(analysis.choices)
    else:
        selection = analysis.preselected
    _info(f"\nFinal user selection: {len(selection)} items")

    outcome = engine.finalize(analysis, selection)
    overridden = outcome.reconciliation.overridden
    if overridden:
        _warning(f"You un-selected {len(overridden)} auto-excluded files that will be INCLUDED in the output:")
        for path in overridden:
            _warning(f"  + {path}")

    _show_size(outcome.final_size, options.limit_bytes, "Final estimated size")

    argv = build_command(options, outcome.reconciliation.final_excludes)
    click.echo("\n" + click.style("Generated code2prompt command:", fg="green"))
    click.echo(click.style(format_command(argv), fg="yellow"))

    if options.execute:
        _info("\nExecuting command...")
        execute_command(argv)
        _success("\nCommand executed successfully!")
