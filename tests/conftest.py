"""Shared fixtures for the create-bankr-app test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from create_bankr_app.cli._answers import Answers
from create_bankr_app.cli._types import Blockchain, Frontend, Performance, Template

AnswersFactory = Callable[..., Answers]


@pytest.fixture
def make_answers() -> AnswersFactory:
    def _make(**overrides: object) -> Answers:
        fields: dict[str, object] = {
            "project_name": "demo",
            "template": Template.TRADING_BOT,
            "frontend": Frontend.NONE,
            "blockchain": Blockchain.BASE,
            "include_essentials": True,
            "typescript": True,
            "performance": Performance.ACCELERATED,
            "git_init": False,
        }
        fields.update(overrides)
        return Answers(**fields)  # type: ignore[arg-type]

    return _make


def _write(root: Path, files: dict[str, str]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def fake_store(tmp_path: Path) -> Path:
    """A small template store exercising every variant rule."""
    store = tmp_path / "store"
    _write(
        store / "trading-bot",
        {
            "README.md": "readme",
            "shared/types.ts": "template types",
            "src/index.ts": "index ts",
            "src/index.js": "index js",
            "src/bot.ts": "bot ts",
            "src/bot.js": "bot js",
            "src/bot-rust.ts": "bot rust ts",
            "src/bot-rust.js": "bot rust js",
            "src/typed-only.ts": "typed only",
            "src/plain.js": "plain js",
            "src/plain-rust.js": "plain rust js",
            "src/lib/util.ts": "util ts",
            "src/lib/util.js": "util js",
            "src/lib/helper-rust.js": "nested rust",
            "src/lib/helper.js": "nested plain",
        },
    )
    _write(
        store / "shared",
        {
            "bankr-app.js": "shared js",
            "bankr-app.ts": "shared ts",
        },
    )
    return store
