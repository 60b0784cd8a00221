"""
Human-readable labels for candidate folders and the folder picker.

With a single project root every folder is shown relative to it::

    ./            the root itself
    ./src/lib     /proj/src/lib

With several roots the label is prefixed with the root's base name so that
identically named subfolders can be told apart (``b/./x`` for ``/b/x``).
Roots are consulted in the order they were supplied and the first one that
contains the folder wins.
"""

from __future__ import annotations

import os
from typing import List, Optional, Sequence

from rapidfuzz import fuzz, process

from .host import Host
from .types import FolderPickItem

__all__ = [
    "PLACEHOLDER",
    "build_pick_items",
    "filter_items",
    "folder_label",
    "pick_folder",
]

PLACEHOLDER = "Select destination folder (fuzzy search on path/name)"

# Minimum rapidfuzz score (0-100) for a non-substring match to be kept.
FUZZY_SCORE_CUTOFF = 60


def _relative_to(folder: str, root: str) -> Optional[str]:
    """Return ``folder`` relative to ``root``, or ``None`` if it lies outside."""
    if folder == root:
        return ""
    prefix = root if root.endswith(os.sep) else root + os.sep
    if folder.startswith(prefix):
        return folder[len(prefix):]
    return None


def folder_label(folder: str, roots: Sequence[str]) -> str:
    """Return the picker label for ``folder``.

    Parameters
    ----------
    folder: str
        Absolute folder path.
    roots: sequence of str
        Absolute project roots, in priority order.

    Returns
    -------
    str
        ``./<relative>`` for a single root, ``<root name><sep>./<relative>``
        for several roots, or ``folder`` unchanged if no root contains it.
    """
    for root in roots:
        relative = _relative_to(folder, root)
        if relative is None:
            continue
        prefix = "./" if len(roots) == 1 else f"{os.path.basename(root)}{os.sep}./"
        return prefix + relative
    return folder


def build_pick_items(folders: Sequence[str], roots: Sequence[str]) -> List[FolderPickItem]:
    """Pair every folder with its label, keeping the order of ``folders``."""
    return [FolderPickItem(label=folder_label(f, roots), full_path=f) for f in folders]


def filter_items(items: Sequence[FolderPickItem], query: str) -> List[FolderPickItem]:
    """Narrow ``items`` down to those whose label matches ``query``.

    Labels containing ``query`` (ignoring case) come first in their
    original order.  The remaining labels are scored with
    :func:`rapidfuzz.fuzz.partial_ratio` and those at or above
    ``FUZZY_SCORE_CUTOFF`` follow, best match first.
    """
    query = query.strip()
    if not query:
        return list(items)
    needle = query.lower()
    exact = [item for item in items if needle in item.label.lower()]
    rest = [item for item in items if needle not in item.label.lower()]
    scored = process.extract(
        needle,
        [item.label.lower() for item in rest],
        scorer=fuzz.partial_ratio,
        score_cutoff=FUZZY_SCORE_CUTOFF,
        limit=None,
    )
    scored = sorted(scored, key=lambda match: (-match[1], match[2]))
    return exact + [rest[index] for _, _, index in scored]


async def pick_folder(host: Host, folders: Sequence[str], roots: Sequence[str]) -> Optional[FolderPickItem]:
    """Let the user choose one of ``folders``.

    Parameters
    ----------
    host: Host
        Provides the modal picker.
    folders: sequence of str
        Candidate folders, as returned by
        :func:`movefile.folders.enumerate_folders`.
    roots: sequence of str
        Project roots used to label the folders.

    Returns
    -------
    FolderPickItem | None
        The chosen item rather than a bare path: its ``full_path`` is the
        destination folder and its ``label`` names that folder in the
        success notice.  ``None`` if the picker was dismissed.
    """
    items = build_pick_items(folders, roots)
    return await host.pick(items, PLACEHOLDER)
