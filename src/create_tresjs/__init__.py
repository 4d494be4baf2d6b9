"""
create_tresjs - TresJS Project Scaffolding
==========================================

A CLI wizard that creates ready-to-run TresJS projects from prebuilt
templates.

Features
--------
- **Templates**: Vue 3 + Vite or Nuxt 3, always with TypeScript
- **ESLint**: Optional ``@tresjs/eslint-config`` setup
- **Ecosystem**: Add cientos, post-processing, leches or any npm package
- **No surprises**: Nothing is installed; you run the install yourself

Quick Start
-----------
```bash
create-tresjs my-scene
cd my-scene
npm install
npm run dev
```

Example
-------
>>> from create_tresjs import ProjectIntent, materialize
>>> materialize(ProjectIntent(name="my-scene", ecosystem_keys=["cientos"]))

Architecture
------------
- ``cli``: Typer-based command line interface
- ``prompts``: Interactive questions (questionary)
- ``generator``: Template copying and project materialization
- ``manifest``: package.json merge rules
- ``catalog``: TresJS ecosystem packages
- ``naming``: Project name validation
- ``models``: Pydantic models for the project intent
- ``templates``: Template trees for each project flavor
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.0.1"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from create_tresjs.catalog import ECOSYSTEM_PACKAGES, EcosystemPackage, list_recommended, resolve
from create_tresjs.generator import MaterializationResult, materialize
from create_tresjs.manifest import merge_manifest
from create_tresjs.models import PackageManager, ProjectIntent, TemplateKind
from create_tresjs.naming import is_valid_name


__all__ = [
    "ECOSYSTEM_PACKAGES",
    "EcosystemPackage",
    "MaterializationResult",
    "PackageManager",
    "ProjectIntent",
    "TemplateKind",
    "__version__",
    "is_valid_name",
    "list_recommended",
    "materialize",
    "merge_manifest",
    "resolve",
]
