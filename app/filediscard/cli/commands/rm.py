"""Discard command implementation.

Moves files and directories into the trash, with rm-like flags.
"""

from typing import Annotated

import typer

from filediscard.cli.types import get_cli_discarder
from filediscard.errors import DiscardError, TargetNotFoundError, TrashMissingError
from filediscard.models.options import DiscardOptions
from filediscard.utils.formatting import print_error, print_info


def rm_command(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files, directories or symlinks to discard."),
    ],
    directory: Annotated[
        bool,
        typer.Option("--dir", "-d", help="Allow discarding empty directories."),
    ] = False,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            "-R",
            help="Discard directories and their contents.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Report each move."),
    ] = False,
    force: Annotated[
        int,
        typer.Option(
            "--force",
            "-f",
            count=True,
            help="Ignore missing paths; give twice to delete permanently.",
        ),
    ] = 0,
    create_trash: Annotated[
        bool,
        typer.Option("--create-trash", help="Create a missing trash directory."),
    ] = False,
) -> None:
    """Move PATHS into the trash instead of deleting them."""
    discarder = get_cli_discarder(create_trash=create_trash)
    options = DiscardOptions(
        directory=directory,
        recursive=recursive,
        verbose=verbose,
        force=force or None,
    )

    failed = 0
    for path in paths:
        try:
            discarder.discard(path, options)
        except TargetNotFoundError as e:
            # A single -f ignores missing paths, like rm -f
            if force:
                continue
            print_error(f"cannot discard '{path}': {e.strerror}")
            failed += 1
        except TrashMissingError as e:
            print_error(f"cannot discard '{path}': {e.strerror}: {e.filename}")
            print_info("Create it first or pass --create-trash.")
            failed += 1
        except DiscardError as e:
            print_error(f"cannot discard '{path}': {e.strerror}")
            failed += 1
        except OSError as e:
            print_error(f"cannot discard '{path}': {e}")
            failed += 1

    if failed:
        raise typer.Exit(code=1)
