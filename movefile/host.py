"""
The capabilities ``movefile`` needs from the environment it runs in.

An editor integration or the bundled terminal front end
(:class:`movefile.terminal.TerminalHost`) implements :class:`Host`.  The
orchestrator only talks to this interface, which keeps it testable without
a live editor.
"""

from __future__ import annotations

import abc
from typing import List, Optional, Sequence

from .types import FolderPickItem, VisibleEditor

__all__ = ["Host"]


class Host(abc.ABC):
    """Editor/UI primitives used by the move command."""

    @abc.abstractmethod
    def roots(self) -> List[str]:
        """Return the configured project root directories."""

    @abc.abstractmethod
    async def pick(
        self, items: Sequence[FolderPickItem], placeholder: str
    ) -> Optional[FolderPickItem]:
        """Show a modal, filterable single-choice list.

        Returns the chosen item, or ``None`` when the user dismissed the
        list.  Dismissal is a normal outcome and must not raise.
        """

    @abc.abstractmethod
    async def save_document(self, path: str) -> None:
        """Write the unsaved buffer for ``path`` to disk."""

    @abc.abstractmethod
    async def show_editor(self, editor: VisibleEditor) -> None:
        """Bring ``editor`` to the front so it becomes the active editor."""

    @abc.abstractmethod
    async def close_active_editor(self) -> None:
        """Close whichever editor is active."""

    @abc.abstractmethod
    async def open_document(self, path: str) -> None:
        """Open ``path`` and focus it."""

    @abc.abstractmethod
    def info(self, message: str) -> None:
        """Show an informational notice."""

    @abc.abstractmethod
    def error(self, message: str) -> None:
        """Show an error notice."""
