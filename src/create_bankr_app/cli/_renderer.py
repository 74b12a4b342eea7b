"""Orchestrates project generation on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from create_bankr_app.cli._answers import Answers
from create_bankr_app.cli._frontend import FRONTEND_DIR, add_frontend
from create_bankr_app.cli._git import init_repository
from create_bankr_app.cli._manifest import (
    GITIGNORE,
    build_tsconfig,
    render_env_example,
    render_manifest,
    to_json,
)
from create_bankr_app.cli._resolver import resolve, write_files
from create_bankr_app.cli._settings import Settings
from create_bankr_app.cli._store import shared_root, template_root

logger = logging.getLogger(__name__)


def _ensure_fresh(project_dir: Path) -> None:
    if project_dir.exists() and (not project_dir.is_dir() or any(project_dir.iterdir())):
        raise FileExistsError(f"Directory '{project_dir}' already exists and is not empty.")
    project_dir.mkdir(parents=True, exist_ok=True)


def _top_level(names: list[str]) -> list[str]:
    """``src/index.ts`` -> ``src/``, keeping first-seen order."""
    seen: dict[str, None] = {}
    for name in names:
        head, sep, _ = name.partition("/")
        seen[f"{head}/" if sep else head] = None
    return list(seen)


def render_project(
    project_dir: Path,
    answers: Answers,
    settings: Settings | None = None,
) -> list[str]:
    """Generate a project on disk. Returns the top-level files and directories created."""
    settings = settings or Settings()

    # Resolve before touching the destination so a bad template leaves no trace.
    resolved = resolve(
        template_root(settings.templates_dir, answers.template.value),
        shared_root(settings.templates_dir),
        answers,
    )

    _ensure_fresh(project_dir)
    created = [str(p) for p in write_files(project_dir, resolved)]

    if add_frontend(
        project_dir, answers.frontend, answers.template.value, settings.frontends_dir
    ):
        created.append(f"{FRONTEND_DIR}/")

    derived = {
        "package.json": render_manifest(answers),
        ".env.example": render_env_example(answers),
        ".gitignore": GITIGNORE,
    }
    if (tsconfig := build_tsconfig(answers)) is not None:
        derived["tsconfig.json"] = to_json(tsconfig)

    for name, content in derived.items():
        (project_dir / name).write_text(content, encoding="utf-8")
    created.extend(derived)

    if answers.git_init:
        init_repository(project_dir, settings.commit_message)

    logger.debug("Generated %s in %s", answers.template.value, project_dir)
    return _top_level(created)
