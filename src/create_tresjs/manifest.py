"""
create_tresjs.manifest - package.json Merging
=============================================

Pure functions that turn a template's base ``package.json`` into the
manifest of the generated project. Nothing here touches the filesystem;
the generator loads and writes the file.

Merge Rules
-----------
1. ``name`` is always replaced by the project name.
2. Ecosystem packages are added to ``dependencies`` at ``"latest"``.
3. The template's TypeScript toolchain is added to ``devDependencies``.
4. With linting enabled, ESLint packages and ``lint``/``lint:fix``
   scripts are added.

Merging is additive: keys already present in the template are kept, and
a key the merge also writes takes the merged value.

Example
-------
>>> from create_tresjs.models import ProjectIntent
>>> base = {"name": "{{projectName}}", "dependencies": {"vue": "^3.5.0"}}
>>> merged = merge_manifest(base, ProjectIntent(name="demo", ecosystem_keys=["cientos"]))
>>> merged["dependencies"]
{'vue': '^3.5.0', '@tresjs/cientos': 'latest'}
"""

from __future__ import annotations

import copy
from typing import Any

from create_tresjs.catalog import dependency_name
from create_tresjs.models import ProjectIntent, TemplateKind


LATEST = "latest"

# TypeScript is mandatory in every template
TEMPLATE_DEV_DEPENDENCIES: dict[TemplateKind, dict[str, str]] = {
    TemplateKind.VUE: {
        "typescript": LATEST,
        "@vitejs/plugin-vue": LATEST,
        "vue-tsc": LATEST,
        "@types/three": LATEST,
    },
    TemplateKind.NUXT: {
        "typescript": LATEST,
        "@types/three": LATEST,
    },
}

ESLINT_CONFIG_PACKAGE = "@tresjs/eslint-config"

LINT_DEV_DEPENDENCIES: dict[str, str] = {
    ESLINT_CONFIG_PACKAGE: "^1.1.0",
    "eslint": "^9.16.0",
}

DEFAULT_LINT_TARGET = "."


def build_lint_scripts(target: str = DEFAULT_LINT_TARGET) -> dict[str, str]:
    """
    Build the ``lint`` and ``lint:fix`` script entries.

    Parameters
    ----------
    target : str, default="."
        Path or glob ESLint should check. A blank target falls back to
        the whole project directory.

    Returns
    -------
    dict[str, str]
        Script name to command.

    Examples
    --------
    >>> build_lint_scripts()
    {'lint': 'eslint .', 'lint:fix': 'eslint . --fix'}
    >>> build_lint_scripts("src")["lint:fix"]
    'eslint src --fix'
    """
    target = target.strip() or DEFAULT_LINT_TARGET
    return {
        "lint": f"eslint {target}",
        "lint:fix": f"eslint {target} --fix",
    }


def build_eslint_config() -> dict[str, Any]:
    """Return the contents of the generated ``.eslintrc.json``."""
    return {
        "extends": [ESLINT_CONFIG_PACKAGE],
        "rules": {},
    }


def _merge_into(manifest: dict[str, Any], field: str, entries: dict[str, str]) -> None:
    existing = manifest.get(field) or {}
    manifest[field] = {**existing, **entries}


def merge_manifest(
    base: dict[str, Any],
    intent: ProjectIntent,
    *,
    lint_target: str = DEFAULT_LINT_TARGET,
) -> dict[str, Any]:
    """
    Produce the final manifest for a project.

    Parameters
    ----------
    base : dict[str, Any]
        The template's parsed ``package.json``. Not modified.

    intent : ProjectIntent
        The user's choices.

    lint_target : str, default="."
        Target passed to ESLint in the generated scripts.

    Returns
    -------
    dict[str, Any]
        A new manifest dictionary.

    Notes
    -----
    Unknown ecosystem keys are written as dependency names verbatim;
    no registry lookup happens here or anywhere else.
    """
    manifest = copy.deepcopy(base)
    manifest["name"] = intent.name

    dependencies = {dependency_name(key): LATEST for key in intent.ecosystem_keys}
    if dependencies:
        _merge_into(manifest, "dependencies", dependencies)

    _merge_into(manifest, "devDependencies", TEMPLATE_DEV_DEPENDENCIES[intent.template])

    if intent.lint_enabled:
        _merge_into(manifest, "devDependencies", LINT_DEV_DEPENDENCIES)
        _merge_into(manifest, "scripts", build_lint_scripts(lint_target))

    return manifest
