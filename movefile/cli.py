"""
Command‑line interface for the movefile package.

This module exposes two commands using :mod:`click`:

* ``move`` – pick a destination folder under the project roots and move a
  file there.
* ``folders`` – list the candidate folders ``move`` would offer.

Both commands accept ``--root`` (repeatable, defaults to the current working
directory) and ``--exclude`` to skip additional directory names on top of the
built‑in list.  Every option can also be given through an environment
variable prefixed with ``MOVEFILE_``, e.g. ``MOVEFILE_MOVE_ROOTS``.
"""

from __future__ import annotations

import asyncio
import logging
import os
import pathlib
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from .folders import EXCLUDED_FOLDERS, enumerate_folders, normalize_root
from .mover import move_active_file
from .picker import build_pick_items
from .terminal import TerminalHost
from .types import EditorSnapshot


def resolve_roots(roots: tuple[str, ...]) -> list[str]:
    """Return absolute, de‑duplicated project roots in the order given.

    ``roots`` defaults to the current working directory when empty.
    """
    if not roots:
        roots = (str(pathlib.Path.cwd()),)
    resolved: list[str] = []
    for root in roots:
        path = normalize_root(root)
        if path not in resolved:
            resolved.append(path)
    return resolved


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


root_option = click.option(
    "--root", "roots", multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Project root directory; repeat for several roots (defaults to current working directory).",
)
exclude_option = click.option(
    "--exclude", "exclude", multiple=True,
    help="Additional directory name to skip; may be repeated.",
)


@click.group(context_settings={"auto_envvar_prefix": "MOVEFILE"})
@click.version_option(package_name="movefile")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """Move a file into a folder picked from the project tree.

    Candidate folders are found by walking the project roots, skipping
    dependency and build directories such as node_modules and .git.
    """
    configure_logging(verbose)


@cli.command("move", help="Pick a destination folder and move FILE there.")
@click.argument("file", required=False, type=click.Path(exists=True, dir_okay=False))
@root_option
@exclude_option
@click.option(
    "--launch/--no-launch", default=False,
    help="Open the file at its new location with the default application.",
)
@click.pass_context
def move_cmd(
    ctx: click.Context,
    file: str | None,
    roots: tuple[str, ...],
    exclude: tuple[str, ...],
    launch: bool,
) -> None:
    """Move ``FILE`` into a folder chosen from an interactive list.

    The list shows every folder under the project roots.  Type a number to
    choose a folder, any other text to filter the list, or press Enter on
    an empty line to cancel without changing anything.
    """
    host = TerminalHost(resolve_roots(roots), launch=launch)
    snapshot = EditorSnapshot(active_file=os.path.abspath(file) if file else None)
    result = asyncio.run(
        move_active_file(
            host,
            snapshot,
            excluded=EXCLUDED_FOLDERS | set(exclude),
            # Nothing to close in a terminal, so no need to wait.
            settle_delay=0,
        )
    )
    if result.failed:
        ctx.exit(1)


@cli.command("folders", help="List the folders 'move' would offer.")
@root_option
@exclude_option
def folders_cmd(roots: tuple[str, ...], exclude: tuple[str, ...]) -> None:
    """Print each candidate folder's label and absolute path."""
    root_paths = resolve_roots(roots)
    folders = enumerate_folders(root_paths, EXCLUDED_FOLDERS | set(exclude))
    for item in build_pick_items(folders, root_paths):
        click.echo(f"{item.label}\t{item.full_path}")


def main(argv: list[str] | None = None) -> None:
    """Entrypoint for console_scripts.

    Allows the CLI to be executed via ``python -m movefile`` or when
    installed through a ``console_scripts`` entry point.
    """
    cli.main(args=argv, prog_name="movefile")


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
