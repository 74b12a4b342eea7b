"""Decides which template files land where in a new project.

Resolution is a pure pass over the template store that yields a read-only
``destination -> source`` mapping. Writing happens separately in
:func:`write_files`, so variant rules can be tested without touching the
destination filesystem.

Variants are selected by filename only:

- language: ``name.ts`` (typed) and ``name.js`` (untyped) siblings in ``src/``;
- performance: ``name-rust.js`` next to ``name.js`` for the accelerated engine.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import TYPE_CHECKING

from create_bankr_app.cli._store import SHARED_DIR, SRC_DIR, TemplateNotFoundError, walk

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from create_bankr_app.cli._answers import Answers

logger = logging.getLogger(__name__)

TYPED_SUFFIX = ".ts"
UNTYPED_SUFFIX = ".js"
ACCELERATED_MARKER = "-rust"

ResolvedFileSet = Mapping[PurePosixPath, "Traversable"]

_SRC = PurePosixPath(SRC_DIR)


def _in_src(dest: PurePosixPath) -> bool:
    return dest.parts[:1] == (SRC_DIR,)


def _template_source(src_root: Traversable, dest: PurePosixPath) -> Traversable:
    return src_root.joinpath(*dest.relative_to(_SRC).parts)


def accelerated_name(dest: PurePosixPath) -> PurePosixPath:
    """``src/bot.js`` -> ``src/bot-rust.js``."""
    return dest.with_name(f"{dest.stem}{ACCELERATED_MARKER}{dest.suffix}")


def _plain_name(dest: PurePosixPath) -> PurePosixPath | None:
    if not dest.stem.endswith(ACCELERATED_MARKER):
        return None
    return dest.with_name(f"{dest.stem[: -len(ACCELERATED_MARKER)]}{dest.suffix}")


def _apply_language_variants(
    files: dict[PurePosixPath, Traversable], src_root: Traversable, typescript: bool
) -> None:
    typed = [d for d in files if _in_src(d) and d.suffix == TYPED_SUFFIX]
    for dest in typed:
        untyped_dest = dest.with_suffix(UNTYPED_SUFFIX)
        untyped_source = _template_source(src_root, untyped_dest)
        if not untyped_source.is_file():
            continue
        if typescript:
            files.pop(untyped_dest, None)
        else:
            files[untyped_dest] = untyped_source
            del files[dest]
            logger.debug("Using untyped variant %s for %s", untyped_dest, dest)


def _apply_accelerated_variants(
    files: dict[PurePosixPath, Traversable], src_root: Traversable
) -> None:
    for dest in [d for d in files if d.parent == _SRC]:
        if _plain_name(dest) is not None:
            continue
        sibling = _template_source(src_root, accelerated_name(dest))
        if sibling.is_file():
            files[dest] = sibling
            logger.debug("Using accelerated variant %s for %s", sibling.name, dest)


def _drop_accelerated_siblings(
    files: dict[PurePosixPath, Traversable], src_root: Traversable
) -> None:
    for dest in [d for d in files if d.parent == _SRC]:
        plain = _plain_name(dest)
        if plain is not None and _template_source(src_root, plain).is_file():
            del files[dest]


def resolve(
    template_root: Traversable,
    shared_root: Traversable | None,
    answers: Answers,
) -> ResolvedFileSet:
    """
    Compute the files of a new project without writing anything.

    Args:
        template_root: Directory of the chosen template.
        shared_root: Subtree copied under ``shared/`` for every template, if any.
        answers: The user's choices.

    Returns:
        Read-only mapping from destination path (relative to the project root)
        to the template file whose content goes there.

    Raises:
        TemplateNotFoundError: If *template_root* is not a directory.
    """
    if not template_root.is_dir():
        raise TemplateNotFoundError(template_root.name)

    files: dict[PurePosixPath, Traversable] = dict(walk(template_root))

    if shared_root is not None and shared_root.is_dir():
        files.update(walk(shared_root, PurePosixPath(SHARED_DIR)))

    src_root = template_root.joinpath(SRC_DIR)
    if src_root.is_dir():
        files.update(walk(src_root, _SRC))
        # Language first: the accelerated lookup uses whichever base file survived.
        _apply_language_variants(files, src_root, answers.typescript)
        if answers.accelerated:
            _apply_accelerated_variants(files, src_root)
        _drop_accelerated_siblings(files, src_root)

    logger.debug("Resolved %d files for template %s", len(files), answers.template.value)
    return MappingProxyType(files)


def write_files(project_dir: Path, resolved: ResolvedFileSet) -> list[PurePosixPath]:
    """Copy every resolved source to its destination under *project_dir*."""
    written: list[PurePosixPath] = []
    for dest, source in resolved.items():
        target = project_dir.joinpath(*dest.parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(source.read_bytes())
        written.append(dest)
    return written
