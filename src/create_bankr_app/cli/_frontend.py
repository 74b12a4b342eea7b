"""Adds a frontend skeleton under ``frontend/`` in a generated project."""

from __future__ import annotations

import importlib.resources as ilr
import logging
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from create_bankr_app.cli._store import walk
from create_bankr_app.cli._types import Frontend

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

FRONTEND_DIR = "frontend"
TEMPLATE_NAME_PLACEHOLDER = "__TEMPLATE_NAME__"


def _framework(frontend: Frontend | str) -> Frontend | None:
    try:
        framework = Frontend(frontend)
    except ValueError:
        return None
    return None if framework is Frontend.NONE else framework


def _substitute(data: bytes, template_name: str) -> bytes:
    """Replace the placeholder in text files; binary assets are returned unchanged."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return data
    return text.replace(TEMPLATE_NAME_PLACEHOLDER, template_name).encode("utf-8")


def add_frontend(
    dest_root: Path,
    frontend: Frontend | str,
    template_name: str,
    frontends_root: Traversable | None = None,
) -> list[PurePosixPath]:
    """
    Copy the skeleton of *frontend* into ``dest_root/frontend``.

    Every file has ``__TEMPLATE_NAME__`` replaced by *template_name*. ``none``
    and unknown framework identifiers do nothing.

    Returns:
        Paths of the created files, relative to *dest_root*.
    """
    framework = _framework(frontend)
    if framework is None:
        return []

    store = frontends_root or ilr.files("create_bankr_app.cli").joinpath("frontends")
    source = store.joinpath(framework.value)
    if not source.is_dir():
        logger.debug("No skeleton for frontend %s", framework.value)
        return []

    created: list[PurePosixPath] = []
    for rel, entry in walk(source, PurePosixPath(FRONTEND_DIR)):
        target = dest_root.joinpath(*rel.parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(_substitute(entry.read_bytes(), template_name))
        created.append(rel)

    logger.debug("Added %s frontend (%d files)", framework.value, len(created))
    return created
