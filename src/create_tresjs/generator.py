"""
create_tresjs.generator - Template Materialization
==================================================

This module turns a :class:`~create_tresjs.models.ProjectIntent` into a
project directory on disk.

Architecture
------------
The generator follows a pipeline pattern:

    1. Resolve the target directory (``cwd / intent.name``)
    2. Refuse to continue if it exists, unless overwriting was confirmed
    3. Copy the template tree into a staging directory
    4. Substitute ``{{projectName}}`` in README.md and package.json
    5. Merge dependencies and scripts into package.json
    6. Write .eslintrc.json when linting is enabled
    7. Replace any existing target and move the staged project into place

Every step runs to completion before the next one starts and the first
failure aborts the run. The project is assembled next to the target and
only moved into place at the end, so a failed run leaves no half-written
project behind. An existing directory is renamed aside for the final
move and renamed back if that move fails; it is deleted only once the
new project is in place.

Template Trees
--------------
Template trees live in ``create_tresjs/templates/<kind>/`` and are
copied as-is. Only the files in :data:`SUBSTITUTED_FILES` are rewritten,
and only at the placeholder; everything else (images, models, fonts) is
copied byte for byte.
Files listed in :data:`RENAMED_FILES` get their real name after the copy,
since dotfiles don't survive packaging reliably.

Usage Example
-------------
>>> from create_tresjs.generator import materialize
>>> from create_tresjs.models import ProjectIntent
>>> result = materialize(ProjectIntent(name="demo-app"))
>>> result.project_path
PosixPath('/current/dir/demo-app')

See Also
--------
- manifest.py: Pure package.json merge rules
- models.py: ProjectIntent
"""

from __future__ import annotations

import json
import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from create_tresjs.catalog import resolve
from create_tresjs.exceptions import (
    CreateTresError,
    MaterializationError,
    ProjectNameError,
    TargetExistsError,
)
from create_tresjs.manifest import build_eslint_config, merge_manifest
from create_tresjs.models import ProjectIntent, TemplateKind
from create_tresjs.naming import name_problems


logger = logging.getLogger(__name__)


# =============================================================================
# Module-Level Configuration
# =============================================================================

# Console for rich output
console = Console()

TEMPLATES_ROOT = Path(__file__).parent / "templates"

MANIFEST_FILE = "package.json"
ESLINT_CONFIG_FILE = ".eslintrc.json"

PLACEHOLDER = "{{projectName}}"

# Files that may contain PLACEHOLDER; nothing else is opened
SUBSTITUTED_FILES: tuple[str, ...] = (MANIFEST_FILE, "README.md")

# Template file name -> name in the generated project
RENAMED_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}

JSON_INDENT = 2


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class MaterializationResult:
    """
    Outcome of a successful materialization.

    Attributes
    ----------
    project_path : Path
        Absolute path to the created project directory.

    template : TemplateKind
        Template the project was created from.

    files_created : list[Path]
        Files in the new project, relative to ``project_path``.

    eslint_config_path : Path | None
        Path of the written ESLint configuration, if linting is enabled.
    """

    project_path: Path
    template: TemplateKind
    files_created: list[Path] = field(default_factory=list)
    eslint_config_path: Path | None = None


# =============================================================================
# Pipeline Helpers
# =============================================================================


@contextmanager
def pipeline_step(step: str) -> Iterator[None]:
    """
    Run one pipeline step, converting low-level failures.

    ``OSError`` and JSON decoding errors raised inside the block are
    re-raised as :class:`MaterializationError` naming the step, chained
    to the original exception.
    """
    logger.debug("Starting step: %s", step)
    try:
        yield
    except CreateTresError:
        raise
    except (OSError, ValueError) as e:
        logger.debug("Step failed: %s", step, exc_info=True)
        raise MaterializationError(step, str(e)) from e


def resolve_target_dir(name: str, cwd: Path | None = None) -> Path:
    """Return the absolute directory a project called ``name`` is created in."""
    return ((cwd or Path.cwd()) / name).resolve()


def get_template_dir(template: TemplateKind, templates_root: Path | None = None) -> Path:
    """
    Locate the seed directory for a template kind.

    Raises
    ------
    MaterializationError
        If the template directory is missing from the installation.
    """
    template_dir = (templates_root or TEMPLATES_ROOT) / template.value
    if not template_dir.is_dir():
        raise MaterializationError(
            "locate template",
            f"Template directory not found: {template_dir}",
        )
    return template_dir


def copy_template_tree(template_dir: Path, destination: Path) -> list[Path]:
    """
    Recursively copy a template tree to a new directory.

    ``shutil.copytree`` copies file contents and permission bits, so
    executable scripts in a template stay executable.

    Parameters
    ----------
    template_dir : Path
        Source template tree. Never modified.

    destination : Path
        Directory to create. Must not exist yet.

    Returns
    -------
    list[Path]
        Copied files, relative to ``destination``, after renaming.
    """
    shutil.copytree(template_dir, destination)

    for template_name, real_name in RENAMED_FILES.items():
        for path in sorted(destination.rglob(template_name)):
            path.rename(path.with_name(real_name))

    return sorted(p.relative_to(destination) for p in destination.rglob("*") if p.is_file())


def replace_template_variables(project_dir: Path, project_name: str) -> list[Path]:
    """
    Replace ``{{projectName}}`` in the allow-listed text files.

    Only the exact token is replaced. The files are handled as bytes, so
    other mustache expressions (Vue's ``{{ count + 1 }}``), line endings
    and everything else stay as the template wrote them. Files from
    :data:`SUBSTITUTED_FILES` that the template doesn't ship are skipped.

    Returns
    -------
    list[Path]
        Files that were rewritten.
    """
    placeholder = PLACEHOLDER.encode("utf-8")
    replacement = project_name.encode("utf-8")
    rewritten: list[Path] = []

    for file_name in SUBSTITUTED_FILES:
        path = project_dir / file_name
        if not path.is_file():
            continue

        content = path.read_bytes()
        path.write_bytes(content.replace(placeholder, replacement))
        rewritten.append(path)

    return rewritten


def write_json(path: Path, data: dict) -> None:
    """Write JSON with two-space indentation and a trailing newline."""
    path.write_text(
        json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def update_manifest(project_dir: Path, intent: ProjectIntent) -> dict:
    """
    Load package.json, merge the intent into it and write it back.

    Returns
    -------
    dict
        The merged manifest as written.
    """
    manifest_path = project_dir / MANIFEST_FILE
    base = json.loads(manifest_path.read_text(encoding="utf-8"))
    if not isinstance(base, dict):
        raise ValueError(f"{MANIFEST_FILE} must contain a JSON object")

    manifest = merge_manifest(base, intent)
    write_json(manifest_path, manifest)
    return manifest


def write_eslint_config(project_dir: Path) -> Path:
    """Write the minimal ESLint configuration and return its path."""
    path = project_dir / ESLINT_CONFIG_FILE
    write_json(path, build_eslint_config())
    return path


def swap_into_place(staged: Path, target: Path, backup: Path) -> None:
    """
    Move ``staged`` to ``target``, keeping whatever was there until it works.

    An existing ``target`` is first renamed to ``backup``. If moving the
    staged project then fails, the backup is renamed back and the error
    propagates. Deleting the backup is left to the caller.
    """
    moved_aside = False
    if target.exists() or target.is_symlink():
        logger.debug("Moving existing %s aside to %s", target, backup)
        target.rename(backup)
        moved_aside = True

    try:
        staged.rename(target)
    except OSError:
        if moved_aside:
            logger.debug("Restoring %s", target)
            backup.rename(target)
        raise


# =============================================================================
# Main Materialization Function
# =============================================================================


def materialize(
    intent: ProjectIntent,
    *,
    cwd: Path | None = None,
    overwrite: bool = False,
    templates_root: Path | None = None,
    verbose: bool = False,
) -> MaterializationResult:
    """
    Create a new TresJS project from the given intent.

    Parameters
    ----------
    intent : ProjectIntent
        The user's choices.

    cwd : Path | None
        Directory the project is created in. Defaults to the current
        working directory.

    overwrite : bool, default=False
        Replace an existing directory with the same name. The caller is
        responsible for having asked the user first.

    templates_root : Path | None
        Alternative directory holding the template trees.

    verbose : bool, default=False
        If True, display progress and next steps on the console.

    Returns
    -------
    MaterializationResult
        Details about the created project.

    Raises
    ------
    ProjectNameError
        If the intent's name is not a valid package name.
    TargetExistsError
        If the target exists and ``overwrite`` is False.
    MaterializationError
        If any filesystem step fails. An existing target is left as it
        was and no partial project is left behind.

    Notes
    -----
    No network access happens and no subprocess is started. Installing
    dependencies is left to the user.
    """
    problems = name_problems(intent.name)
    if problems:
        raise ProjectNameError(intent.name, problems)

    target = resolve_target_dir(intent.name, cwd)
    if target.exists() and not overwrite:
        raise TargetExistsError(target)

    template_dir = get_template_dir(intent.template, templates_root)
    logger.debug("Materializing %s from %s into %s", intent.name, template_dir, target)

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Creating project:[/] [green]{intent.name}[/]\n"
                f"[dim]Template: {intent.template.title} | "
                f"ESLint: {'yes' if intent.lint_enabled else 'no'}[/]",
                title="[bold]create-tresjs[/]",
                border_style="blue",
            )
        )

    with pipeline_step("create staging directory"):
        staging_root = Path(tempfile.mkdtemp(prefix=f".{intent.name}-", dir=target.parent))

    try:
        staged = staging_root / intent.name
        result = MaterializationResult(project_path=target, template=intent.template)

        with pipeline_step("copy template"):
            copy_template_tree(template_dir, staged)
        if verbose:
            console.print(f"  Copied [cyan]{intent.template.value}[/] template")

        with pipeline_step("replace template variables"):
            replace_template_variables(staged, intent.name)

        with pipeline_step(f"update {MANIFEST_FILE}"):
            update_manifest(staged, intent)
        if verbose:
            console.print(f"  Updated {MANIFEST_FILE}")

        if intent.lint_enabled:
            with pipeline_step(f"write {ESLINT_CONFIG_FILE}"):
                write_eslint_config(staged)
            result.eslint_config_path = target / ESLINT_CONFIG_FILE
            if verbose:
                console.print(f"  Created {ESLINT_CONFIG_FILE}")

        with pipeline_step("move project into place"):
            if (target.exists() or target.is_symlink()) and not overwrite:
                raise TargetExistsError(target)
            swap_into_place(staged, target, staging_root / "previous")
    finally:
        # Also deletes the replaced directory, if there was one
        shutil.rmtree(staging_root, ignore_errors=True)

    result.files_created = sorted(
        p.relative_to(target) for p in target.rglob("*") if p.is_file()
    )
    logger.debug("Created %d files in %s", len(result.files_created), target)

    if verbose:
        print_next_steps(intent)

    return result


def print_next_steps(intent: ProjectIntent) -> None:
    """Show the success panel with install/run commands and added packages."""
    lines = [
        f"[bold green]✓ Project {intent.name} created successfully![/]",
        "",
        "[bold yellow]Next steps:[/]",
        f"  [blue]cd {intent.name}[/]",
        f"  [blue]{intent.package_manager.install_command}[/]",
        f"  [blue]{intent.package_manager.run_command}[/]",
    ]

    if intent.ecosystem_keys:
        lines += ["", "[bold green]Ecosystem packages included:[/]"]
        for key in intent.ecosystem_keys:
            pkg = resolve(key)
            if pkg:
                lines.append(f"  [dim]- {pkg.full_name}: {pkg.description}[/]")
            else:
                lines.append(f"  [dim]- {key}[/]")

    console.print()
    console.print(Panel("\n".join(lines), title="[bold green]Success[/]", border_style="green"))
