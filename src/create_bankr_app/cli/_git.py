"""Best-effort git initialization of a generated project."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from create_bankr_app.cli._settings import DEFAULT_COMMIT_MESSAGE

logger = logging.getLogger(__name__)

Runner = Callable[..., Any]


def _git_steps(message: str) -> Sequence[list[str]]:
    return (
        ["git", "init"],
        ["git", "add", "."],
        ["git", "commit", "-m", message],
    )


def init_repository(
    project_dir: Path,
    message: str = DEFAULT_COMMIT_MESSAGE,
    run: Runner = subprocess.run,
) -> bool:
    """Run ``git init``, ``git add .`` and ``git commit`` in *project_dir*.

    Failures are never raised: the repository is a convenience. Returns whether
    all three steps succeeded.
    """
    try:
        for cmd in _git_steps(message):
            run(
                cmd,
                cwd=project_dir,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git initialization skipped: %s", exc)
        return False
    return True
