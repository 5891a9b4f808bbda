"""Run command implementation.

Executes the walk jobs defined in the TOML job file.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathsift.cli.display import print_walk_result
from pathsift.cli.types import FormatOption, OutputFormat, is_quiet
from pathsift.core.errors import PathsiftError
from pathsift.selection.config import JobConfigError, WalkJob, load_job_file
from pathsift.utils.formatting import console, print_error, print_info, print_warning
from pathsift.walker.tree import WalkMode, walk


def run_command(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Job file to read (default: ~/.config/pathsift/jobs.toml)."),
    ] = None,
    job_names: Annotated[
        list[str] | None,
        typer.Option("--job", "-j", help="Only run the named job. Repeatable."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Run delete jobs as find jobs."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt for delete jobs."),
    ] = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Run the walk jobs from the job file."""
    try:
        job_file = load_job_file(config_path)
    except JobConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    jobs = _select_jobs(job_file.jobs, job_names)
    if not jobs:
        print_info("No jobs to run.")
        return

    has_delete = any(job.mode == WalkMode.DELETE.value for job in jobs)
    if has_delete and not dry_run and not yes:
        confirmed = typer.confirm(
            "\nThe job file contains delete jobs. Proceed?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    quiet = is_quiet(ctx)
    failed = False
    for job in jobs:
        mode = WalkMode(job.mode)
        if dry_run and mode == WalkMode.DELETE:
            mode = WalkMode.FIND

        if not quiet and output_format == OutputFormat.TABLE:
            console.print(f"\n[bold_header]Job:[/] {job.name} ({mode.value})")

        try:
            result = walk(job.start_path, job.criteria.to_criteria(), mode)
        except PathsiftError as e:
            print_error(f"{job.name}: {e}")
            failed = True
            continue

        print_walk_result(result, output_format, quiet=quiet)
        failed = failed or result.has_errors

    if failed:
        raise typer.Exit(code=1)


def _select_jobs(jobs: list[WalkJob], names: list[str] | None) -> list[WalkJob]:
    """Filter jobs by name, warning about names that are not defined."""
    if not names:
        return jobs
    known = {job.name for job in jobs}
    for name in names:
        if name not in known:
            print_warning(f"No job named {name!r} in job file")
    return [job for job in jobs if job.name in names]
