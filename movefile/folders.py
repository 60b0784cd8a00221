"""
Discovery of candidate destination folders under the project roots.

The tree is re-walked on every call so the picker always reflects what is on
disk right now.  Directories named in :data:`EXCLUDED_FOLDERS` (build output,
dependency caches, VCS metadata) are neither listed nor descended into, but a
root is always listed even if its own name is excluded.

Symbolic links to directories are neither listed nor followed, so link
cycles cannot loop.  A directory path that has already been walked is not
walked a second time, so nested or overlapping roots do not cause duplicate
work.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Set

__all__ = [
    "EXCLUDED_FOLDERS",
    "enumerate_folders",
    "normalize_root",
]

logger = logging.getLogger(__name__)

EXCLUDED_FOLDERS = frozenset({
    "node_modules",
    ".git",
    ".vscode",
    "out",
    "dist",
    ".next",
    "__pycache__",
})


def normalize_root(path: str | os.PathLike) -> str:
    """Return ``path`` as an absolute, normalised string."""
    return os.path.normpath(os.path.abspath(os.fspath(path)))


def enumerate_folders(
    roots: Iterable[str | os.PathLike],
    excluded: Iterable[str] = EXCLUDED_FOLDERS,
) -> List[str]:
    """Return every candidate folder under ``roots``, sorted.

    Parameters
    ----------
    roots: iterable of paths
        Project root directories.  They may overlap or nest.
    excluded: iterable of str
        Directory names to skip.  Exclusions apply to descendants only;
        the roots themselves are always part of the result.

    Returns
    -------
    list[str]
        Absolute, normalised folder paths without duplicates in ascending
        lexicographic order.
    """
    skip = frozenset(excluded)
    found: Set[str] = set()
    walked: Set[str] = set()

    root_paths = [normalize_root(root) for root in roots]
    for root in root_paths:
        found.add(root)
        stack = [root]
        while stack:
            directory = stack.pop()
            if directory in walked:
                continue
            walked.add(directory)
            try:
                with os.scandir(directory) as entries:
                    children = [
                        os.path.normpath(entry.path) for entry in entries
                        if entry.name not in skip and entry.is_dir(follow_symlinks=False)
                    ]
            except OSError as exc:
                # Unreadable or vanished; leave the subtree out.
                logger.debug("Skipping %s: %s", directory, exc)
                continue
            for child in children:
                found.add(child)
            # Reversed so siblings are visited in listing order.
            stack.extend(reversed(children))

    logger.info("Found %d candidate folders under %d root(s)", len(found), len(root_paths))
    return sorted(found)
