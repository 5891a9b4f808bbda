"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from pathsift import __version__
from pathsift.cli.commands import classify, config, copy, delete, find, run, split

# Create main Typer app
app = typer.Typer(
    name="pathsift",
    help="Classify path strings and find, delete or copy files by criteria.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathsift version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """pathsift - path classification and criteria-driven tree walking.

    Decide whether path strings name directories or files, and find or
    delete or copy files matching name, age and mode criteria.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="classify")(classify.classify_command)
app.command(name="split")(split.split_command)
app.command(name="find")(find.find_command)
app.command(name="delete")(delete.delete_command)
app.command(name="copy")(copy.copy_command)
app.command(name="run")(run.run_command)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
