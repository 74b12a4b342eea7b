"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from create_bankr_app.cli._answers import DEFAULT_PROJECT_NAME
from create_bankr_app.cli._prompts import (
    collect_answers,
    prompt_blockchain,
    prompt_essentials,
    prompt_frontend,
    prompt_git_init,
    prompt_performance,
    prompt_project_name,
    prompt_template,
    prompt_typescript,
)
from create_bankr_app.cli._types import Blockchain, Frontend, Performance, Template


class TestPromptTemplate:
    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_returns_selected_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0  # Trading Bot

        result = prompt_template()
        assert result is Template.TRADING_BOT

    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_returns_last_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 9  # DeFi Bank

        result = prompt_template()
        assert result is Template.DEFI_BANK

    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_lists_every_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        prompt_template()
        labels = mock_menu_cls.call_args.args[0]
        assert len(labels) == len(Template)

    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_template()


class TestPromptDefaults:
    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_frontend_cursor_starts_on_nextjs(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 4

        result = prompt_frontend()
        assert result is Frontend.NONE
        assert mock_menu_cls.call_args.kwargs["cursor_index"] == list(Frontend).index(
            Frontend.NEXTJS
        )

    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_blockchain_cursor_starts_on_base(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 4

        result = prompt_blockchain()
        assert result is Blockchain.SOLANA
        assert mock_menu_cls.call_args.kwargs["cursor_index"] == 0

    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_performance_cursor_starts_on_accelerated(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        result = prompt_performance()
        assert result is Performance.STANDARD
        assert mock_menu_cls.call_args.kwargs["cursor_index"] == 0


class TestPromptTypescript:
    @patch("builtins.input", return_value="")
    def test_default_yes(self, mock_input: MagicMock) -> None:
        result = prompt_typescript()
        assert result is True
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="n")
    def test_explicit_no(self, mock_input: MagicMock) -> None:
        result = prompt_typescript()
        assert result is False
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="yes")
    def test_explicit_yes(self, mock_input: MagicMock) -> None:
        result = prompt_typescript()
        assert result is True


class TestPromptProjectName:
    @patch("builtins.input", return_value="")
    def test_empty_input_takes_default(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == DEFAULT_PROJECT_NAME

    @patch("builtins.input", return_value="")
    def test_positional_default(self, mock_input: MagicMock) -> None:
        assert prompt_project_name("from-argv") == "from-argv"

    @patch("builtins.input", side_effect=["bad name!", "my/app", "good_name-1"])
    def test_asks_again_until_valid(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == "good_name-1"
        assert mock_input.call_count == 3


class TestCollectAnswers:
    @patch("builtins.input", side_effect=["swap-bot", "n", "", "n"])
    @patch("create_bankr_app.cli._prompts.TerminalMenu")
    def test_asks_in_order(self, mock_menu_cls: MagicMock, mock_input: MagicMock) -> None:
        # template, frontend, blockchain, performance
        mock_menu_cls.return_value.show.side_effect = [3, 1, 2, 1]

        answers = collect_answers()

        assert answers.project_name == "swap-bot"
        assert answers.template is Template.ARBITRAGE_BOT
        assert answers.frontend is Frontend.REACT
        assert answers.blockchain is Blockchain.POLYGON
        assert answers.include_essentials is False
        assert answers.typescript is True
        assert answers.performance is Performance.STANDARD
        assert answers.git_init is False


@pytest.mark.parametrize(
    "prompt",
    [
        prompt_project_name,
        prompt_template,
        prompt_frontend,
        prompt_blockchain,
        prompt_essentials,
        prompt_typescript,
        prompt_performance,
        prompt_git_init,
    ],
)
def test_every_prompt_has_docstring(prompt: object) -> None:
    assert (prompt.__doc__ or "").startswith("Prompt user")
