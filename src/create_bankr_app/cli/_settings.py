"""Environment-driven settings and logging setup for the CLI."""

from __future__ import annotations

import importlib.resources as ilr
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

DEFAULT_COMMIT_MESSAGE = "Initial commit: Create Bankr app"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _packaged(name: str) -> Traversable:
    return ilr.files("create_bankr_app.cli").joinpath(name)


def _env_str(environ: Mapping[str, str], name: str) -> str:
    return str(environ.get(name) or "").strip()


@dataclass(frozen=True, kw_only=True)
class Settings:
    """
    Runtime configuration for the generator.

    Attributes:
        templates_dir: Root of the template store, one subdirectory per template.
        frontends_dir: Root of the frontend skeletons, one subdirectory per framework.
        log_level: Level for diagnostic logging on stderr.
        bankr_config: Credentials file written by the ``bankr`` CLI.
        commit_message: Message of the initial commit.
    """

    templates_dir: Traversable = field(default_factory=lambda: _packaged("scaffold"))
    frontends_dir: Traversable = field(default_factory=lambda: _packaged("frontends"))
    log_level: str = "WARNING"
    bankr_config: Path = field(default_factory=lambda: Path.home() / ".bankr" / "config.json")
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    def __post_init__(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}."
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``CREATE_BANKR_APP_*`` and ``BANKR_CONFIG`` variables."""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        if templates := _env_str(env, "CREATE_BANKR_APP_TEMPLATES"):
            overrides["templates_dir"] = Path(templates).expanduser()
        if frontends := _env_str(env, "CREATE_BANKR_APP_FRONTENDS"):
            overrides["frontends_dir"] = Path(frontends).expanduser()
        if level := _env_str(env, "CREATE_BANKR_APP_LOG_LEVEL"):
            overrides["log_level"] = level.upper()
        if bankr_config := _env_str(env, "BANKR_CONFIG"):
            overrides["bankr_config"] = Path(bankr_config).expanduser()
        if message := _env_str(env, "CREATE_BANKR_APP_COMMIT_MESSAGE"):
            overrides["commit_message"] = message

        return cls(**overrides)  # type: ignore[arg-type]


def configure_logging(level: str) -> None:
    """Route diagnostic logs for the package to stderr through Rich."""
    logger = logging.getLogger("create_bankr_app")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        logger.addHandler(handler)
    logger.propagate = False
