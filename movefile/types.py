"""
Data classes shared by the folder picker and the move orchestrator.

Everything here is created fresh for a single ``move`` invocation and thrown
away afterwards; nothing is cached between runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class FolderPickItem:
    """A folder as shown in the picker.

    ``label`` is derived from ``full_path`` and the project roots (see
    :func:`movefile.picker.folder_label`).  Two items may share a label in
    odd root layouts but never a ``full_path``.
    """

    label: str
    full_path: str


@dataclass(frozen=True)
class VisibleEditor:
    """An editor pane currently showing a document."""

    path: str
    view_column: Optional[int] = None


@dataclass(frozen=True)
class EditorSnapshot:
    """Read-only view of the host's editor state at invocation start.

    Parameters
    ----------
    active_file: str | None
        Absolute path of the file being edited, or ``None`` when nothing is
        open.
    dirty_files: frozenset[str]
        Paths whose in-memory buffer differs from the file on disk.
    visible_editors: tuple[VisibleEditor, ...]
        Editor panes that are currently on screen.
    """

    active_file: Optional[str] = None
    dirty_files: FrozenSet[str] = field(default_factory=frozenset)
    visible_editors: Tuple[VisibleEditor, ...] = ()

    def is_dirty(self, path: str) -> bool:
        path = os.path.normpath(path)
        return any(os.path.normpath(p) == path for p in self.dirty_files)

    def editors_showing(self, path: str) -> Tuple[VisibleEditor, ...]:
        path = os.path.normpath(path)
        return tuple(e for e in self.visible_editors if os.path.normpath(e.path) == path)


@dataclass(frozen=True)
class MoveRequest:
    """A file to move and the folder it should end up in."""

    source_path: str
    target_dir: str

    @property
    def target_path(self) -> str:
        return os.path.join(self.target_dir, os.path.basename(self.source_path))


class MoveStatus(Enum):
    """Outcome of a ``move`` invocation."""
    MOVED = "moved"
    NO_ACTIVE_FILE = "no_active_file"    # Nothing open, reported as an error
    NO_FOLDERS = "no_folders"            # Empty candidate set
    CANCELLED = "cancelled"              # Picker dismissed, silent
    SAME_LOCATION = "same_location"      # Already in the chosen folder
    ERROR = "error"


@dataclass
class MoveResult:
    """Result of a ``move`` invocation."""
    status: MoveStatus
    source_path: Optional[str] = None
    target_path: Optional[str] = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status in (MoveStatus.ERROR, MoveStatus.NO_ACTIVE_FILE)
