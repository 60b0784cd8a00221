"""
Moving the active file into a folder chosen from the picker.

:func:`move_active_file` drives a whole invocation: it enumerates candidate
folders under the host's project roots, lets the user pick one, moves the
file there and reopens it.  The host sends exactly one notice per
invocation (success, no-op or error); a dismissed picker produces none.

:func:`move_file_core` does the move itself.  Before the file is renamed any
unsaved edits are written out and editors showing the file are closed, so the
editor never holds a handle to a path that no longer exists.  The rename is
a plain :func:`os.rename`: it either happens completely or not at all and is
not retried or rolled back.  An existing file at the destination is never
overwritten.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Iterable

from .folders import EXCLUDED_FOLDERS, enumerate_folders, normalize_root
from .host import Host
from .picker import pick_folder
from .types import EditorSnapshot, MoveRequest, MoveResult, MoveStatus

__all__ = [
    "DEFAULT_SETTLE_DELAY",
    "move_active_file",
    "move_file_core",
    "target_path_for",
]

logger = logging.getLogger(__name__)

# Seconds to wait after closing an editor; hosts that report close
# completion can pass 0.
DEFAULT_SETTLE_DELAY = 0.1

NO_ACTIVE_FILE_MESSAGE = "No active file to move."
NO_FOLDERS_MESSAGE = "No suitable folders found in the workspace to move the file to."
SAME_LOCATION_MESSAGE = "File is already in the selected destination folder."


def target_path_for(source_path: str, target_dir: str) -> str:
    """Return where ``source_path`` ends up when moved into ``target_dir``."""
    return MoveRequest(source_path, target_dir).target_path


def _same_path(a: str, b: str) -> bool:
    return os.path.normcase(os.path.normpath(a)) == os.path.normcase(os.path.normpath(b))


async def move_file_core(
    host: Host,
    snapshot: EditorSnapshot,
    source_path: str,
    target_path: str,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
) -> bool:
    """Move ``source_path`` to ``target_path``.

    Parameters
    ----------
    host: Host
        Used to save and close the document before it is moved.
    snapshot: EditorSnapshot
        Editor state captured when the command started.
    source_path: str
        Absolute path of the file to move.
    target_path: str
        Absolute destination path, including the file name.
    settle_delay: float
        Seconds to wait after each editor close.

    Returns
    -------
    bool
        ``False`` if nothing was done because source and target are the
        same path, ``True`` once the file has been renamed.

    Raises
    ------
    FileExistsError
        If something already exists at ``target_path``.  Raised before
        the document is saved or any editor is closed.
    OSError
        If the rename fails (permissions, cross-device move, ...).  The
        source file is left where it was.
    """
    if _same_path(source_path, target_path):
        return False

    if os.path.lexists(target_path):
        raise FileExistsError(f"Destination already exists: {target_path}")

    if snapshot.is_dirty(source_path):
        logger.info("Saving unsaved changes to %s", source_path)
        await host.save_document(source_path)

    for editor in snapshot.editors_showing(source_path):
        await host.show_editor(editor)
        await host.close_active_editor()
        if settle_delay > 0:
            await asyncio.sleep(settle_delay)

    target_dir = os.path.dirname(target_path)
    try:
        os.makedirs(target_dir, exist_ok=True)
    except OSError as exc:
        # The rename below reports the real problem if the folder is unusable.
        logger.warning("Could not ensure target directory %s exists: %s", target_dir, exc)

    logger.info("Moving %s -> %s", source_path, target_path)
    os.rename(source_path, target_path)
    return True


async def move_active_file(
    host: Host,
    snapshot: EditorSnapshot,
    *,
    excluded: Iterable[str] = EXCLUDED_FOLDERS,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
) -> MoveResult:
    """Run the move command for the file that is active in ``snapshot``.

    All failures after the active-file check are reported through
    ``host.error`` and logged; nothing is raised to the caller.
    """
    source_path = snapshot.active_file
    if not source_path:
        host.error(NO_ACTIVE_FILE_MESSAGE)
        return MoveResult(MoveStatus.NO_ACTIVE_FILE, message=NO_ACTIVE_FILE_MESSAGE)

    source_path = os.path.abspath(source_path)
    file_name = os.path.basename(source_path)

    try:
        roots = [normalize_root(root) for root in host.roots()]
        folders = await asyncio.to_thread(enumerate_folders, roots, excluded)
        if not folders:
            host.info(NO_FOLDERS_MESSAGE)
            return MoveResult(MoveStatus.NO_FOLDERS, source_path, message=NO_FOLDERS_MESSAGE)

        choice = await pick_folder(host, folders, roots)
        if choice is None:
            logger.debug("Folder selection cancelled")
            return MoveResult(MoveStatus.CANCELLED, source_path)

        target_path = target_path_for(source_path, choice.full_path)
        if _same_path(source_path, target_path):
            host.info(SAME_LOCATION_MESSAGE)
            return MoveResult(MoveStatus.SAME_LOCATION, source_path, target_path, SAME_LOCATION_MESSAGE)

        await move_file_core(host, snapshot, source_path, target_path, settle_delay)
        await host.open_document(target_path)
    except Exception as exc:
        message = f"Error moving file: {exc}"
        host.error(message)
        logger.exception("Error moving file %s", source_path)
        return MoveResult(MoveStatus.ERROR, source_path, message=message)

    message = f"Moved '{file_name}' to '{choice.label}'."
    host.info(message)
    return MoveResult(MoveStatus.MOVED, source_path, target_path, message)
