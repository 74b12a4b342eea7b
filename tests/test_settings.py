"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_bankr_app.cli._settings import DEFAULT_COMMIT_MESSAGE, Settings


class TestSettings:
    def test_defaults_point_at_packaged_store(self) -> None:
        settings = Settings.from_env({})

        assert settings.templates_dir.joinpath("trading-bot").is_dir()
        assert settings.templates_dir.joinpath("shared").is_dir()
        assert settings.frontends_dir.joinpath("nextjs").is_dir()
        assert settings.log_level == "WARNING"
        assert settings.commit_message == DEFAULT_COMMIT_MESSAGE
        assert settings.bankr_config.name == "config.json"

    def test_overrides_from_env(self, tmp_path: Path) -> None:
        settings = Settings.from_env(
            {
                "CREATE_BANKR_APP_TEMPLATES": str(tmp_path / "templates"),
                "CREATE_BANKR_APP_FRONTENDS": str(tmp_path / "frontends"),
                "CREATE_BANKR_APP_LOG_LEVEL": "debug",
                "BANKR_CONFIG": str(tmp_path / "bankr.json"),
                "CREATE_BANKR_APP_COMMIT_MESSAGE": "chore: scaffold",
            }
        )

        assert settings.templates_dir == tmp_path / "templates"
        assert settings.frontends_dir == tmp_path / "frontends"
        assert settings.log_level == "DEBUG"
        assert settings.bankr_config == tmp_path / "bankr.json"
        assert settings.commit_message == "chore: scaffold"

    def test_blank_values_are_ignored(self) -> None:
        settings = Settings.from_env({"CREATE_BANKR_APP_LOG_LEVEL": "  "})
        assert settings.log_level == "WARNING"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level"):
            Settings.from_env({"CREATE_BANKR_APP_LOG_LEVEL": "loud"})
