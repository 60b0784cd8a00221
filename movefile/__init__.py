"""
Move the file you are working on into another folder of your project.

Instead of dragging a file around or typing out its new path, ``movefile``
lists every folder under the project roots (skipping dependency and build
directories such as ``node_modules`` or ``.git``), lets you fuzzy-search
that list and moves the file into the folder you pick.  Unsaved edits are
written out and open editors are closed before the move, and the file is
reopened at its new location afterwards.

Example::

    # Pick a folder under the current directory and move notes.txt there
    movefile move notes.txt

    # Offer folders from two project roots
    movefile move src/app.py --root ~/proj/api --root ~/proj/web

The editor integration points are described by :class:`movefile.host.Host`;
``movefile.terminal`` provides the command-line implementation used by
``movefile.cli``.
"""

__all__ = [
    "enumerate_folders",
    "folder_label",
    "move_active_file",
    "move_file_core",
    "pick_folder",
]

from .folders import enumerate_folders  # noqa: F401
from .mover import move_active_file, move_file_core  # noqa: F401
from .picker import folder_label, pick_folder  # noqa: F401
