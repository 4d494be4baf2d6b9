"""
create_tresjs.cli - Command Line Interface
==========================================

This module provides the ``create-tresjs`` command using Typer.

Usage Examples
--------------
Interactive mode (prompts for every choice):
    $ create-tresjs

Name given, remaining choices prompted:
    $ create-tresjs my-scene

Non-interactive mode:
    $ create-tresjs my-scene --template nuxt --no-lint -p cientos -p leches --yes

Exit Codes
----------
0  project created
1  invalid input, cancelled prompt, declined overwrite, or a failed
   filesystem operation (details on stderr)

See Also
--------
- prompts.py: Interactive questions
- generator.py: Project materialization
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from create_tresjs import __version__
from create_tresjs.exceptions import CreateTresError
from create_tresjs.generator import materialize, resolve_target_dir
from create_tresjs.models import PackageManager, ProjectIntent, ScaffoldDefaults, TemplateKind
from create_tresjs.naming import name_problems
from create_tresjs.prompts import IntentCollector, QuestionaryCollector, confirm_overwrite


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="create-tresjs",
    help="CLI wizard to create TresJS projects.",
    rich_markup_mode="rich",
    add_completion=False,
)

# Primary output
console = Console()

# Diagnostics and errors
err_console = Console(stderr=True)

USER_AGENT_ENV = "npm_config_user_agent"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"create-tresjs [cyan]{__version__}[/]")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send the package's debug logs to stderr through Rich."""
    if not verbose:
        return

    logger = logging.getLogger("create_tresjs")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG)


def detect_package_manager() -> PackageManager:
    """Detect the package manager that launched us, from the environment."""
    return PackageManager.from_user_agent(os.environ.get(USER_AGENT_ENV))


def fail(message: str) -> typer.Exit:
    """Print an error to stderr and return the exit to raise."""
    err_console.print(f"[bold red]Error:[/] {message}")
    return typer.Exit(1)


def print_banner() -> None:
    console.print("[bold blue][green]▲[/green] [dim]■[/dim] [yellow]●[/yellow] Tres[/bold blue]")
    console.print("[dim]Let's begin your journey with TresJS[/]")
    console.print()


def load_defaults(config: Path | None) -> ScaffoldDefaults:
    if config is None:
        return ScaffoldDefaults()

    try:
        return ScaffoldDefaults.from_toml(config)
    except FileNotFoundError:
        raise fail(f"Config file not found: {config}")
    except ValueError as e:  # pydantic and TOML errors are ValueErrors
        raise fail(f"Invalid config file {config}: {e}")


def build_intent(
    name: str | None,
    defaults: ScaffoldDefaults,
    package_manager: PackageManager,
) -> ProjectIntent:
    """Build the intent from defaults alone, without prompting."""
    return ProjectIntent(
        name=name or defaults.name,
        template=defaults.template,
        lint_enabled=defaults.lint,
        ecosystem_keys=defaults.packages,
        package_manager=package_manager,
    )


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def create(
    name: Annotated[
        str | None,
        typer.Argument(
            help="Name of the project to create",
            show_default=False,
        ),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-t",
            help="Template: vue, nuxt",
        ),
    ] = None,
    no_lint: Annotated[
        bool,
        typer.Option(
            "--no-lint",
            help="Skip ESLint configuration",
        ),
    ] = False,
    packages: Annotated[
        list[str] | None,
        typer.Option(
            "--package",
            "-p",
            help="Ecosystem package to add (cientos, post-processing, leches or any npm name). Repeatable.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML file with default answers",
            dir_okay=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip all prompts, use defaults",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing directory without asking",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logs",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Create a new [bold]TresJS[/] project.

    [bold]Examples:[/]

        create-tresjs

        create-tresjs my-scene --template nuxt -p cientos --yes
    """
    configure_logging(verbose)
    print_banner()

    problems = name_problems(name) if name is not None else []
    if problems:
        raise fail(f"Invalid package name '{name}': {'; '.join(problems)}")

    # Command line options override configured defaults
    defaults = load_defaults(config)
    overrides: dict[str, object] = {}
    if template is not None:
        try:
            overrides["template"] = TemplateKind(template.lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in TemplateKind)
            raise fail(f"Invalid template '{template}'. Valid: {valid}")
    if no_lint:
        overrides["lint"] = False
    if packages:
        overrides["packages"] = packages
    defaults = defaults.model_copy(update=overrides)

    package_manager = detect_package_manager()

    try:
        if yes:
            intent = build_intent(name, defaults, package_manager)
        else:
            collector: IntentCollector = QuestionaryCollector(name, defaults, package_manager)
            intent = collector.collect_intent()
    except ValueError as e:
        raise fail(str(e))

    # Check if directory already exists
    overwrite = force
    target = resolve_target_dir(intent.name)
    if target.exists() and not force:
        if yes:
            raise fail(f"Directory {intent.name} already exists. Use --force to overwrite it.")
        if not confirm_overwrite(intent.name):
            err_console.print("[red]Project creation cancelled[/]")
            raise typer.Exit(1)
        overwrite = True

    console.print("\n[blue]🚀 Creating project...[/]")

    try:
        materialize(intent, overwrite=overwrite, verbose=True)
    except CreateTresError as e:
        raise fail(f"Error creating project: {e}")
    except OSError as e:
        raise fail(f"Error creating project: {e}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
