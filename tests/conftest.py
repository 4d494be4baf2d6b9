"""
pytest configuration and shared fixtures for create-tresjs tests.

Fixtures
--------
work_dir : Path
    Empty temporary directory that is also the current working directory.

template_root : Path
    A small fake template tree for the ``vue`` kind, with a binary asset
    and an executable script.

demo_intent : ProjectIntent
    The intent from the reference scenario (vue, ESLint, cientos).

snapshot : Callable[[Path], dict[str, bytes]]
    Captures a directory tree for byte-for-byte comparisons.
"""

import json
from pathlib import Path

import pytest

from create_tresjs.models import ProjectIntent, TemplateKind


PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89{{projectName}}\x00\xff"
)


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an empty directory and make it the current working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """
    Build a minimal template tree outside the working directory.

    Returns
    -------
    Path
        Directory containing a ``vue`` template.
    """
    root = tmp_path / "templates"
    vue = root / "vue"
    (vue / "src").mkdir(parents=True)
    (vue / "scripts").mkdir()

    (vue / "package.json").write_text(
        json.dumps(
            {
                "name": "{{projectName}}",
                "version": "0.0.0",
                "scripts": {"dev": "vite"},
                "dependencies": {"vue": "^3.5.0"},
            },
            indent=2,
        )
        + "\n",
        encoding="utf-8",
    )
    (vue / "README.md").write_text(
        "# {{projectName}}\n\nRendered as `{{count}}` in the template.\n",
        encoding="utf-8",
    )
    (vue / "src" / "main.ts").write_text(
        "console.log('{{projectName}}')\n",
        encoding="utf-8",
    )
    (vue / "src" / "logo.png").write_bytes(PNG_BYTES)
    (vue / "_gitignore").write_text("node_modules\n", encoding="utf-8")

    script = vue / "scripts" / "setup.sh"
    script.write_text("#!/bin/sh\necho ok\n", encoding="utf-8")
    script.chmod(0o755)

    return root


@pytest.fixture
def demo_intent() -> ProjectIntent:
    """The demo-app intent: vue template, ESLint and cientos."""
    return ProjectIntent(
        name="demo-app",
        template=TemplateKind.VUE,
        lint_enabled=True,
        ecosystem_keys=["cientos"],
    )


def _snapshot_tree(root: Path) -> dict[str, bytes]:
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot():
    """Return a function mapping every file below a directory to its bytes."""
    return _snapshot_tree


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line(
        "markers", "posix: marks tests relying on POSIX file permissions"
    )
