"""The validated set of choices that drives project generation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from create_bankr_app.cli._types import Blockchain, Frontend, Performance, Template

DEFAULT_PROJECT_NAME = "my-bankr-app"

_PROJECT_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


def validate_project_name(value: str) -> str | None:
    """Return an error message for an invalid project name, ``None`` if it is valid."""
    if not value.strip():
        return "Project name is required"
    if _PROJECT_NAME_RE.fullmatch(value) is None:
        return "Project name can only contain letters, numbers, hyphens, and underscores"
    return None


@dataclass(frozen=True, kw_only=True)
class Answers:
    """
    Choices collected from the user.

    Attributes:
        project_name: Name of the project directory and package.
        template: Application template to copy.
        frontend: Frontend framework added under ``frontend/``.
        blockchain: Default chain written to the environment template.
        include_essentials: Whether to wire up tests and a file watcher.
        typescript: Typed (``.ts``) or untyped (``.js``) sources.
        performance: Plain or Rust-accelerated engine.
        git_init: Whether to initialize a git repository.
    """

    project_name: str
    template: Template
    frontend: Frontend = Frontend.NONE
    blockchain: Blockchain = Blockchain.BASE
    include_essentials: bool = True
    typescript: bool = True
    performance: Performance = Performance.ACCELERATED
    git_init: bool = True

    def __post_init__(self) -> None:
        error = validate_project_name(self.project_name)
        if error is not None:
            raise ValueError(f"{error}, got {self.project_name!r}.")

    @property
    def accelerated(self) -> bool:
        return self.performance is Performance.ACCELERATED
