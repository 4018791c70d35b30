"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from filediscard import __version__
from filediscard.cli.commands import config
from filediscard.cli.commands.rm import rm_command
from filediscard.cli.commands.where import where_command

# Create main Typer app
app = typer.Typer(
    name="filediscard",
    help="Move files into the trash instead of deleting them.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filediscard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
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
) -> None:
    """filediscard - move files into the trash instead of deleting them.

    Entries on the home volume go to the home trash; entries on other
    volumes go to a per-user trash at the root of that volume.
    """


# Register commands
app.command(name="rm")(rm_command)
app.command(name="where")(where_command)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
