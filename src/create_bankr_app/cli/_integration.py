"""Detection of the optional ``bankr`` CLI and its stored credentials."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class IntegrationStatus(str, Enum):
    """State of the optional @bankr/cli integration."""

    READY = "ready"
    NOT_INSTALLED = "not-installed"
    NOT_AUTHENTICATED = "not-authenticated"


def _cli_installed(run: Callable[..., Any]) -> bool:
    try:
        run(
            ["bankr", "--version"],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.SubprocessError):
        return False
    return True


def _has_api_key(config_path: Path) -> bool:
    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return False
    return isinstance(config, dict) and bool(config.get("apiKey"))


def check_optional_integration(
    config_path: Path | None = None,
    run: Callable[..., Any] = subprocess.run,
) -> IntegrationStatus:
    """Probe for the ``bankr`` executable and an API key in its config file.

    Never raises; anything unexpected is reported as ``NOT_INSTALLED``.
    """
    path = config_path or Path.home() / ".bankr" / "config.json"
    try:
        if not _cli_installed(run):
            return IntegrationStatus.NOT_INSTALLED
        if not _has_api_key(path):
            return IntegrationStatus.NOT_AUTHENTICATED
    except Exception as exc:  # noqa: BLE001
        logger.debug("integration check failed: %s", exc)
        return IntegrationStatus.NOT_INSTALLED
    return IntegrationStatus.READY
