"""
create_tresjs.catalog - TresJS Ecosystem Packages
=================================================

Static registry of the optional add-on packages a generated project can
depend on. The catalog is plain data: an ordered tuple of immutable
records, looked up by their short key.

Example
-------
>>> resolve("cientos").full_name
'@tresjs/cientos'
>>> resolve("not-a-real-package") is None
True
>>> [pkg.key for pkg in list_recommended()]
['cientos']
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EcosystemPackage:
    """
    A TresJS ecosystem package offered during project creation.

    Attributes
    ----------
    key : str
        Short identifier used on the command line and in prompts.

    full_name : str
        npm package name written to ``dependencies``.

    description : str
        One-line description shown next to the choice.

    recommended : bool
        Whether the package is pre-selected by default.
    """

    key: str
    full_name: str
    description: str
    recommended: bool = False


ECOSYSTEM_PACKAGES: tuple[EcosystemPackage, ...] = (
    EcosystemPackage(
        key="cientos",
        full_name="@tresjs/cientos",
        description="Collection of useful helpers and ready-made abstractions",
        recommended=True,
    ),
    EcosystemPackage(
        key="post-processing",
        full_name="@tresjs/post-processing",
        description="Post-processing effects for TresJS",
    ),
    EcosystemPackage(
        key="leches",
        full_name="@tresjs/leches",
        description="Tasty GUI controls for development",
    ),
)

_BY_KEY: dict[str, EcosystemPackage] = {pkg.key: pkg for pkg in ECOSYSTEM_PACKAGES}


def resolve(key: str) -> EcosystemPackage | None:
    """Look up a package by its exact key, or return None if unknown."""
    return _BY_KEY.get(key)


def list_recommended() -> list[EcosystemPackage]:
    """Return the packages selected by default, in catalog order."""
    return [pkg for pkg in ECOSYSTEM_PACKAGES if pkg.recommended]


def dependency_name(key: str) -> str:
    """
    Map a package key to the name written into ``dependencies``.

    Unknown keys are passed through verbatim so users can add any npm
    package by name.
    """
    pkg = resolve(key)
    return pkg.full_name if pkg else key
