"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from create_bankr_app.cli._answers import DEFAULT_PROJECT_NAME, Answers, validate_project_name
from create_bankr_app.cli._types import Blockchain, Frontend, Performance, Template

_console = Console()

T = TypeVar("T")


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str], default: int = 0) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        cursor_index=default,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    answer = input(suffix).strip().lower()

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + │ bar + │ [Y/n] input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def _text(question: str, default: str, validate: Callable[[str], str | None]) -> str:
    """Display a clack-style text prompt, asking again until *validate* accepts."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    lines = 3
    while True:
        _console.print("[dim]│[/]  ", end="")
        value = input(f" ({default}) ").strip() or default
        error = validate(value)
        if error is None:
            break
        _console.print(f"[dim]│[/]  [bold red]{error}[/]")
        lines += 2

    # Overwrite the ◆ question + │ bar + every input/error line
    _clear_lines(lines)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {value}")
    _print_bar()

    return value


def _default_index(options: list[T], default: T) -> int:
    return options.index(default)


def prompt_project_name(default: str | None = None) -> str:
    """Prompt user for the project name."""
    return _text(
        "What is your project called?", default or DEFAULT_PROJECT_NAME, validate_project_name
    )


def prompt_template() -> Template:
    """Prompt user to choose an application template."""
    templates = list(Template)
    labels = [f"{t.label} - {t.description}" for t in templates]
    return _select("What type of app do you want to build?", templates, labels)


def prompt_frontend() -> Frontend:
    """Prompt user to choose a frontend framework."""
    frameworks = list(Frontend)
    labels = [f.label for f in frameworks]
    return _select(
        "Which frontend framework would you like?",
        frameworks,
        labels,
        default=_default_index(frameworks, Frontend.NEXTJS),
    )


def prompt_blockchain() -> Blockchain:
    """Prompt user to choose the target blockchain."""
    chains = list(Blockchain)
    labels = [c.label for c in chains]
    return _select(
        "Which blockchain do you prefer?",
        chains,
        labels,
        default=_default_index(chains, Blockchain.BASE),
    )


def prompt_essentials() -> bool:
    """Prompt user whether to include essential features."""
    return _confirm("Include essential features (environment config, testing)?", default=True)


def prompt_typescript() -> bool:
    """Prompt user whether to use TypeScript."""
    return _confirm("Would you like to use TypeScript?", default=True)


def prompt_performance() -> Performance:
    """Prompt user to choose the performance engine."""
    engines = list(Performance)
    labels = [p.label for p in engines]
    return _select(
        "Choose performance engine",
        engines,
        labels,
        default=_default_index(engines, Performance.ACCELERATED),
    )


def prompt_git_init() -> bool:
    """Prompt user whether to initialize a git repository."""
    return _confirm("Initialize a git repository?", default=True)


def collect_answers(project_name_default: str | None = None) -> Answers:
    """Ask every question in order and return the validated answers."""
    return Answers(
        project_name=prompt_project_name(project_name_default),
        template=prompt_template(),
        frontend=prompt_frontend(),
        blockchain=prompt_blockchain(),
        include_essentials=prompt_essentials(),
        typescript=prompt_typescript(),
        performance=prompt_performance(),
        git_init=prompt_git_init(),
    )
