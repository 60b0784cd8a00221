"""
Shared fixtures: an in-memory host standing in for an editor.
"""

import os
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from movefile.host import Host
from movefile.types import FolderPickItem, VisibleEditor


class FakeHost(Host):
    """Records every call and answers the picker with ``choose``.

    ``choose`` receives the offered items and returns one of them, or
    ``None`` to simulate the user dismissing the picker.  ``buffers`` maps
    paths to unsaved editor contents that ``save_document`` writes out.
    """

    def __init__(
        self,
        roots: Sequence[str],
        choose: Optional[Callable[[Sequence[FolderPickItem]], Optional[FolderPickItem]]] = None,
        buffers: Optional[Dict[str, str]] = None,
    ):
        self._roots = list(roots)
        self.choose = choose or (lambda items: None)
        self.buffers = dict(buffers or {})
        self.calls: List[tuple] = []
        self.offered: List[FolderPickItem] = []
        self.infos: List[str] = []
        self.errors: List[str] = []

    def roots(self):
        return list(self._roots)

    async def pick(self, items, placeholder):
        self.calls.append(("pick", placeholder))
        self.offered = list(items)
        return self.choose(self.offered)

    async def save_document(self, path):
        self.calls.append(("save", path))
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(self.buffers.pop(path))

    async def show_editor(self, editor: VisibleEditor):
        self.calls.append(("show", editor.path))

    async def close_active_editor(self):
        self.calls.append(("close",))

    async def open_document(self, path):
        self.calls.append(("open", path))

    def info(self, message):
        self.infos.append(message)

    def error(self, message):
        self.errors.append(message)

    @property
    def notices(self):
        return self.infos + self.errors


def choose_path(path):
    """Return a picker callback that selects the item for ``path``."""
    path = os.path.normpath(str(path))

    def choose(items):
        for item in items:
            if item.full_path == path:
                return item
        raise AssertionError(f"{path} was not offered")

    return choose


@pytest.fixture
def fake_host():
    """Factory for :class:`FakeHost` instances."""
    return FakeHost


@pytest.fixture
def choose():
    """Factory for picker callbacks selecting a given folder."""
    return choose_path
