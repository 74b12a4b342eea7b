"""Typer CLI application for create-bankr-app."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Typer

import create_bankr_app
from create_bankr_app.cli._answers import Answers
from create_bankr_app.cli._integration import IntegrationStatus, check_optional_integration
from create_bankr_app.cli._prompts import collect_answers
from create_bankr_app.cli._renderer import render_project
from create_bankr_app.cli._settings import Settings, configure_logging
from create_bankr_app.cli._store import TemplateNotFoundError
from create_bankr_app.cli._types import Frontend, Performance

app = Typer(
    add_completion=False,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
)
_console = Console()
_err_console = Console(stderr=True)


_FILE_DESCRIPTIONS: dict[str, str] = {
    "package.json": "dependencies and scripts",
    ".env.example": "environment template",
    ".gitignore": "ignore rules",
    "tsconfig.json": "TypeScript compiler options",
    "README.md": "template guide",
    "src/": "application source",
    "shared/": "Bankr SDK helpers",
    "frontend/": "frontend application",
}


def _print_integration_tip(status: IntegrationStatus) -> None:
    if status is IntegrationStatus.READY:
        _console.print("[bold green]◇[/]  @bankr/cli integration ready!")
        _console.print("[dim]│[/]")
        return

    if status is IntegrationStatus.NOT_INSTALLED:
        _console.print("[bold yellow]▲[/]  Tip: install @bankr/cli for enhanced features")
        _console.print("[dim]│[/]  [cyan]npm install -g @bankr/cli[/]")
    else:
        _console.print("[bold yellow]▲[/]  Tip: authenticate @bankr/cli for seamless integration")
    _console.print("[dim]│[/]  [cyan]bankr login email user@example.com[/]")
    _console.print("[dim]│[/]")


def _project_name_default(args: list[str] | None) -> str | None:
    if args and not args[0].startswith("--"):
        return args[0]
    return None


def _print_next_steps(answers: Answers, created: list[str]) -> None:
    for name in created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]— {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {name}{desc_str}")
    _console.print("[dim]│[/]")

    steps = [f"cd {answers.project_name}", "npm install"]
    if answers.frontend is not Frontend.NONE:
        steps.append("(cd frontend && npm install)")
    steps.append("npm run dev")

    _console.print("[bold green]◇[/]  Next steps")
    for step in steps:
        _console.print(f"[dim]│[/]  [cyan]{step}[/]")
    if answers.frontend.dev_url is not None:
        _console.print(f"[dim]│[/]  [dim]Frontend runs on {answers.frontend.dev_url}[/]")
    if answers.performance is Performance.ACCELERATED:
        _console.print("[dim]│[/]  [dim]Rust + WebAssembly engine enabled[/]")
    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! Your {answers.template.value} is ready.")
    _console.print()


def _create(
    args: list[str] | None,
    settings: Settings,
    integration_check: Callable[..., IntegrationStatus],
) -> None:
    _console.print()
    _console.print(f"[bold cyan]●[/]  create-bankr-app v{create_bankr_app.__version__}")
    _console.print("[dim]│[/]")

    _print_integration_tip(integration_check(settings.bankr_config))

    answers = collect_answers(_project_name_default(args))
    project_dir = Path.cwd() / answers.project_name

    try:
        with _console.status("Creating your Bankr application..."):
            created = render_project(project_dir, answers, settings)
    except (TemplateNotFoundError, OSError) as exc:
        _err_console.print("[bold red]✖[/]  Failed to create project")
        _err_console.print(str(exc), style="red", markup=False, highlight=False)
        raise Exit(code=1) from None

    _console.print(f"[bold green]◇[/]  Created {answers.project_name}/")
    _print_next_steps(answers, created)


@app.command()
def create(
    args: Annotated[
        list[str] | None,
        Argument(
            metavar="[PROJECT-NAME]",
            help="Default for the project name prompt. Other flags are reserved.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Create a new Bankr application."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        _err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None
    configure_logging(settings.log_level)
    _create(args, settings, check_optional_integration)
