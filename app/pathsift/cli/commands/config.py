"""Job file management commands."""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from pathsift.core.paths import get_job_file_path
from pathsift.selection.config import (
    JobConfigError,
    get_sample_job_file,
    load_job_file,
    save_job_file,
)
from pathsift.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Manage the walk job file.",
    no_args_is_help=True,
)

PathOption = Annotated[
    Path | None,
    typer.Option("--path", "-p", help="Job file path (default: ~/.config/pathsift/jobs.toml)."),
]


@app.command()
def init(
    path: PathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing job file."),
    ] = False,
) -> None:
    """Write a sample job file."""
    target = path or get_job_file_path()
    if target.exists() and not force:
        print_error(f"Job file already exists: {target}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_job_file(get_sample_job_file(), target)
    except JobConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Job file written to {saved}")


@app.command()
def show(path: PathOption = None) -> None:
    """Show the jobs defined in the job file."""
    target = path or get_job_file_path()
    try:
        job_file = load_job_file(target)
    except JobConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not job_file.jobs:
        print_info(f"No jobs defined in {target}")
        return

    table = Table(
        title=f"Jobs ({target})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", style="text", no_wrap=True)
    table.add_column("Mode")
    table.add_column("Start path", style="info")
    table.add_column("Criteria", style="muted")

    for job in job_file.jobs:
        mode = "[error]delete[/]" if job.mode == "delete" else "[success]find[/]"
        table.add_row(job.name, mode, job.start_path, job.criteria.to_criteria().describe())

    console.print(table)
