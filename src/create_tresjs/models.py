"""
create_tresjs.models - Pydantic Models for Project Intent
=========================================================

This module defines the data passed between the interactive layer and
the materialization pipeline. Pydantic gives us validation of user input
with clear error messages and immutable, hashable values.

Architecture Notes
------------------
    ProjectIntent (frozen, consumed once by the generator)
    ├── name: str               (validated package name)
    ├── template: TemplateKind  (enum)
    ├── lint_enabled: bool
    ├── ecosystem_keys: tuple[str, ...]
    └── package_manager: PackageManager (enum)

    ScaffoldDefaults (defaults for prompts and --yes runs, TOML loadable)

Usage Example
-------------
>>> intent = ProjectIntent(name="demo-app", template=TemplateKind.VUE)
>>> intent.ecosystem_keys
()
>>> intent.package_manager.install_command
'npm install'
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from create_tresjs.catalog import list_recommended
from create_tresjs.naming import name_problems


# =============================================================================
# Enumerations
# =============================================================================

class TemplateKind(str, Enum):
    """
    Project flavors shipped with create-tresjs.

    Each kind maps to a seed directory under ``create_tresjs/templates/``.
    TypeScript is always enabled; there is no JavaScript-only variant.

    Attributes
    ----------
    VUE : str
        Vue 3 single page app built with Vite.

    NUXT : str
        Nuxt 3 app using the ``@tresjs/nuxt`` module.
    """

    VUE = "vue"
    NUXT = "nuxt"

    @property
    def title(self) -> str:
        """Short label for CLI prompts."""
        titles = {
            TemplateKind.VUE: "Vue + Vite",
            TemplateKind.NUXT: "Nuxt",
        }
        return titles[self]

    @property
    def description(self) -> str:
        """Human-readable description for CLI prompts."""
        descriptions = {
            TemplateKind.VUE: "Vue 3 with Vite build tool",
            TemplateKind.NUXT: "Nuxt 3 with TresJS module",
        }
        return descriptions[self]


class PackageManager(str, Enum):
    """
    Package managers the generated project may be installed with.

    Only used to print the right "next steps"; create-tresjs never runs
    the package manager itself.
    """

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> str:
        commands = {
            PackageManager.NPM: "npm install",
            PackageManager.YARN: "yarn",
            PackageManager.PNPM: "pnpm install",
        }
        return commands[self]

    @property
    def run_command(self) -> str:
        commands = {
            PackageManager.NPM: "npm run dev",
            PackageManager.YARN: "yarn dev",
            PackageManager.PNPM: "pnpm dev",
        }
        return commands[self]

    @classmethod
    def from_user_agent(cls, user_agent: str | None) -> PackageManager:
        """
        Detect the invoking package manager from ``npm_config_user_agent``.

        Parameters
        ----------
        user_agent : str | None
            Value of the environment variable, e.g.
            ``"pnpm/9.1.0 npm/? node/v20.11.0 linux x64"``.

        Returns
        -------
        PackageManager
            yarn or pnpm when named in the user agent, npm otherwise.
        """
        user_agent = user_agent or ""
        if "yarn" in user_agent:
            return cls.YARN
        if "pnpm" in user_agent:
            return cls.PNPM
        return cls.NPM


# =============================================================================
# Project Intent
# =============================================================================

class ProjectIntent(BaseModel):
    """
    Fully resolved set of user choices driving one project creation.

    The intent is built by the interactive layer (or from CLI flags) and
    handed once to :func:`create_tresjs.generator.materialize`. It is
    frozen so the generator cannot observe a half-edited intent.

    Attributes
    ----------
    name : str
        Project name. Must be a valid npm package name and is also used
        as the directory name.

    template : TemplateKind
        Which template tree to copy.

    lint_enabled : bool
        Add ESLint dependencies, scripts and configuration.

    ecosystem_keys : tuple[str, ...]
        Ecosystem package keys, in selection order and without
        duplicates. Keys missing from the catalog are kept verbatim.

    package_manager : PackageManager
        Package manager used in the printed next steps.

    Examples
    --------
    >>> ProjectIntent(name="demo-app", ecosystem_keys=["cientos", "cientos"]).ecosystem_keys
    ('cientos',)
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(
        description="Project name (package.json name and directory name)",
        min_length=1,
    )]
    template: TemplateKind = Field(
        default=TemplateKind.VUE,
        description="Template tree to copy",
    )
    lint_enabled: bool = Field(
        default=True,
        description="Include ESLint configuration",
    )
    ecosystem_keys: tuple[str, ...] = Field(
        default=(),
        description="Selected ecosystem package keys",
    )
    package_manager: PackageManager = Field(
        default=PackageManager.NPM,
        description="Package manager for printed commands",
    )

    @field_validator("name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """Reject names npm would not accept for a new package."""
        problems = name_problems(v)
        if problems:
            msg = f"Invalid project name '{v}': {'; '.join(problems)}"
            raise ValueError(msg)
        return v

    @field_validator("ecosystem_keys", mode="before")
    @classmethod
    def dedupe_ecosystem_keys(cls, v: object) -> object:
        # Keep first occurrence, drop blanks
        if isinstance(v, (list, tuple)):
            seen: dict[str, None] = {}
            for key in v:
                if isinstance(key, str) and key.strip():
                    seen.setdefault(key, None)
            return tuple(seen)
        return v


# =============================================================================
# Defaults Configuration
# =============================================================================

def _recommended_keys() -> list[str]:
    return [pkg.key for pkg in list_recommended()]


class ScaffoldDefaults(BaseModel):
    """
    Default answers used to pre-fill prompts and for ``--yes`` runs.

    Can be loaded from a TOML file so teams can share their preferred
    setup::

        [defaults]
        template = "nuxt"
        lint = false
        packages = ["cientos", "leches"]

    Attributes
    ----------
    name : str
        Suggested project name when none is given.

    template : TemplateKind
        Pre-selected template.

    lint : bool
        Whether ESLint is pre-selected.

    packages : list[str]
        Pre-selected ecosystem package keys. Defaults to the catalog's
        recommended packages.
    """

    name: str = Field(default="my-tres-project")
    template: TemplateKind = Field(default=TemplateKind.VUE)
    lint: bool = Field(default=True)
    packages: list[str] = Field(default_factory=_recommended_keys)

    @classmethod
    def from_toml(cls, path: Path) -> ScaffoldDefaults:
        """
        Load defaults from a TOML file.

        Values may live in a ``[defaults]`` table or at the top level.

        Raises
        ------
        FileNotFoundError
            If the file doesn't exist.
        pydantic.ValidationError
            If the file has invalid values.
        """
        import tomli

        with open(path, "rb") as f:
            data = tomli.load(f)

        return cls(**data.get("defaults", data))
