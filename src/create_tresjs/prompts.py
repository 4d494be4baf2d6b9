"""
create_tresjs.prompts - Interactive Intent Collection
=====================================================

The questions asked before a project is created. The generator never
prompts; it receives a finished :class:`ProjectIntent`. Anything that
can produce one satisfies :class:`IntentCollector`, which is how tests
and scripted runs bypass the interactive session.

Question Flow
-------------
    Project name      (skipped when given on the command line)
    Template          (Vue + Vite / Nuxt)
    ESLint            (yes / no)
    Ecosystem         (multi-select, recommended packages pre-checked)

Cancelling any question (Ctrl+C) aborts with exit code 1.
"""

from __future__ import annotations

from typing import Protocol

import questionary
import typer

from create_tresjs.catalog import ECOSYSTEM_PACKAGES
from create_tresjs.models import PackageManager, ProjectIntent, ScaffoldDefaults, TemplateKind
from create_tresjs.naming import name_problems


class IntentCollector(Protocol):
    """Something that can produce the intent for one project creation."""

    def collect_intent(self) -> ProjectIntent: ...


def validate_name_answer(value: str) -> bool | str:
    """
    Validation callback for the project name question.

    Returns True when the name is usable, otherwise the message
    questionary shows below the input.
    """
    if not value.strip():
        return "Project name is required"
    problems = name_problems(value)
    if problems:
        return f"Invalid package name: {problems[0]}"
    return True


def prompt_project_name(default: str) -> str:
    result = questionary.text(
        "Project name:",
        default=default,
        validate=validate_name_answer,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_template(default: TemplateKind) -> TemplateKind:
    """
    Interactively prompt the user to select a template.

    Returns
    -------
    TemplateKind
        The selected template.
    """
    choices = [
        questionary.Choice(
            title=f"{kind.title:<12} - {kind.description}",
            value=kind,
        )
        for kind in TemplateKind
    ]

    result = questionary.select(
        "Select a template:",
        choices=choices,
        default=default,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_lint(default: bool) -> bool:
    result = questionary.confirm(
        "Add ESLint for code quality?",
        default=default,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_packages(default: list[str]) -> list[str]:
    """
    Prompt for TresJS ecosystem packages.

    Returns
    -------
    list[str]
        Selected package keys in catalog order.
    """
    result = questionary.checkbox(
        "Select TresJS ecosystem packages:",
        choices=[
            questionary.Choice(
                title=f"{pkg.full_name} - {pkg.description}",
                value=pkg.key,
                checked=pkg.key in default,
            )
            for pkg in ECOSYSTEM_PACKAGES
        ],
        instruction="(Space to select, Enter to confirm)",
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def confirm_overwrite(name: str) -> bool:
    """Ask whether an existing directory may be deleted and recreated."""
    result = questionary.confirm(
        f"Directory {name} already exists. Overwrite?",
        default=False,
    ).ask()

    return bool(result)


class QuestionaryCollector:
    """
    Collect a project intent through interactive questionary prompts.

    Parameters
    ----------
    name : str | None
        Project name given on the command line. When set, the name
        question is skipped.

    defaults : ScaffoldDefaults
        Pre-selected answers.

    package_manager : PackageManager
        Detected package manager, passed through to the intent.
    """

    def __init__(
        self,
        name: str | None,
        defaults: ScaffoldDefaults,
        package_manager: PackageManager,
    ) -> None:
        self.name = name
        self.defaults = defaults
        self.package_manager = package_manager

    def collect_intent(self) -> ProjectIntent:
        name = self.name or prompt_project_name(self.defaults.name)
        template = prompt_template(self.defaults.template)
        lint_enabled = prompt_lint(self.defaults.lint)
        packages = prompt_packages(self.defaults.packages)

        return ProjectIntent(
            name=name,
            template=template,
            lint_enabled=lint_enabled,
            ecosystem_keys=packages,
            package_manager=self.package_manager,
        )
