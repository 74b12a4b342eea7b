"""Lookup and traversal of the read-only template store."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

SHARED_DIR = "shared"
SRC_DIR = "src"

_IGNORED_NAMES = frozenset({"__pycache__", ".DS_Store"})


class TemplateNotFoundError(LookupError):
    """Raised when a template identifier has no directory in the template store."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Template '{template_id}' not found in the template store.")
        self.template_id = template_id


def template_root(store: Traversable, template_id: str) -> Traversable:
    """Return the directory of *template_id*, raising if it does not exist."""
    root = store.joinpath(template_id)
    if not root.is_dir():
        raise TemplateNotFoundError(template_id)
    return root


def shared_root(store: Traversable) -> Traversable | None:
    """Return the shared subtree, or ``None`` when the store has none."""
    root = store.joinpath(SHARED_DIR)
    return root if root.is_dir() else None


def walk(
    root: Traversable, prefix: PurePosixPath = PurePosixPath()
) -> Iterator[tuple[PurePosixPath, Traversable]]:
    """Yield ``(relative path, entry)`` for every file under *root*, in sorted order."""
    for entry in sorted(root.iterdir(), key=lambda e: e.name):
        if entry.name in _IGNORED_NAMES:
            continue
        if entry.is_dir():
            yield from walk(entry, prefix / entry.name)
        elif entry.is_file():
            yield prefix / entry.name, entry
