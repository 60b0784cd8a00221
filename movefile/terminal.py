"""
A :class:`~movefile.host.Host` for running ``movefile`` from a shell.

The terminal has no editor buffers, so saving and closing documents are
no-ops.  The picker prints the candidate folders as a numbered table and
reads the answer with :func:`click.prompt`: a number picks that row, any
other text narrows the list, and an empty answer (or Ctrl-C) cancels.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import click
from rich.console import Console
from rich import box
from rich.table import Table
from rich.text import Text

from .host import Host
from .picker import filter_items
from .types import FolderPickItem, VisibleEditor

__all__ = ["TerminalHost"]

logger = logging.getLogger(__name__)


class TerminalHost(Host):
    """Command-line implementation of the host capabilities.

    Parameters
    ----------
    roots: sequence of str
        Project root directories.
    launch: bool
        Open the moved file with the system's default application.
    console, err_console: rich.console.Console, optional
        Where notices go; default to stdout and stderr.
    """

    def __init__(
        self,
        roots: Sequence[str],
        *,
        launch: bool = False,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self._roots = list(roots)
        self.launch = launch
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def roots(self) -> List[str]:
        return list(self._roots)

    def _show(self, items: Sequence[FolderPickItem], title: str) -> None:
        table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Folder", overflow="fold")
        for number, item in enumerate(items, 1):
            table.add_row(str(number), Text(item.label))
        self.console.print(table)

    async def pick(
        self, items: Sequence[FolderPickItem], placeholder: str
    ) -> Optional[FolderPickItem]:
        shown = list(items)
        while True:
            self._show(shown, placeholder)
            try:
                answer = click.prompt(
                    "Number or filter (empty to cancel)",
                    default="",
                    show_default=False,
                ).strip()
            except click.Abort:
                return None
            if not answer:
                return None
            if answer.isdigit():
                index = int(answer)
                if 1 <= index <= len(shown):
                    return shown[index - 1]
                self.err_console.print(f"No folder numbered {index}.", markup=False)
                continue
            matches = filter_items(items, answer)
            if not matches:
                self.err_console.print(f"No folder matches '{answer}'.", markup=False)
                continue
            shown = matches

    async def save_document(self, path: str) -> None:
        logger.debug("No buffer to save for %s", path)

    async def show_editor(self, editor: VisibleEditor) -> None:
        logger.debug("No editor to show for %s", editor.path)

    async def close_active_editor(self) -> None:
        logger.debug("No editor to close")

    async def open_document(self, path: str) -> None:
        if self.launch:
            click.launch(path)

    def info(self, message: str) -> None:
        self.console.print(message, markup=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self.err_console.print(message, style="red", markup=False, soft_wrap=True)
