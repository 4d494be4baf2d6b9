"""
Tests for create_tresjs.manifest
================================

The merge is a pure function, so these tests only use dictionaries.
"""

import copy

import pytest

from create_tresjs.manifest import (
    ESLINT_CONFIG_PACKAGE,
    LATEST,
    LINT_DEV_DEPENDENCIES,
    TEMPLATE_DEV_DEPENDENCIES,
    build_eslint_config,
    build_lint_scripts,
    merge_manifest,
)
from create_tresjs.models import ProjectIntent, TemplateKind


@pytest.fixture
def base_manifest() -> dict:
    """A template package.json after placeholder substitution."""
    return {
        "name": "{{projectName}}",
        "private": True,
        "version": "0.0.0",
        "scripts": {"dev": "vite", "build": "vite build"},
        "dependencies": {"vue": "^3.5.13", "three": "^0.171.0"},
        "devDependencies": {"vite": "^6.0.5"},
    }


class TestName:
    def test_name_overwritten(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app"))
        assert merged["name"] == "demo-app"

    def test_name_added_when_missing(self) -> None:
        merged = merge_manifest({}, ProjectIntent(name="demo-app"))
        assert merged["name"] == "demo-app"

    def test_name_idempotent(self, base_manifest: dict) -> None:
        intent = ProjectIntent(name="demo-app")
        once = merge_manifest(base_manifest, intent)
        twice = merge_manifest(once, intent)
        assert once["name"] == twice["name"] == "demo-app"


class TestDependencies:
    def test_ecosystem_package_resolved(self, base_manifest: dict) -> None:
        intent = ProjectIntent(name="demo-app", ecosystem_keys=["cientos"])
        merged = merge_manifest(base_manifest, intent)
        assert merged["dependencies"]["@tresjs/cientos"] == LATEST

    def test_unknown_key_used_verbatim(self, base_manifest: dict) -> None:
        intent = ProjectIntent(name="demo-app", ecosystem_keys=["not-a-real-package"])
        merged = merge_manifest(base_manifest, intent)
        assert merged["dependencies"]["not-a-real-package"] == "latest"

    def test_existing_dependencies_preserved(self, base_manifest: dict) -> None:
        intent = ProjectIntent(name="demo-app", ecosystem_keys=["leches"])
        merged = merge_manifest(base_manifest, intent)
        assert list(merged["dependencies"]) == ["vue", "three", "@tresjs/leches"]
        assert merged["dependencies"]["vue"] == "^3.5.13"

    def test_new_entry_wins_on_conflict(self, base_manifest: dict) -> None:
        base_manifest["dependencies"]["@tresjs/cientos"] = "^3.0.0"
        intent = ProjectIntent(name="demo-app", ecosystem_keys=["cientos"])
        merged = merge_manifest(base_manifest, intent)
        assert merged["dependencies"]["@tresjs/cientos"] == LATEST

    def test_no_packages_leaves_dependencies_alone(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app"))
        assert merged["dependencies"] == base_manifest["dependencies"]

    def test_no_packages_no_dependencies_field(self) -> None:
        merged = merge_manifest({}, ProjectIntent(name="demo-app", lint_enabled=False))
        assert "dependencies" not in merged

    def test_dependencies_created_when_missing(self) -> None:
        intent = ProjectIntent(name="demo-app", ecosystem_keys=["cientos", "gsap"])
        merged = merge_manifest({"name": "x"}, intent)
        assert merged["dependencies"] == {"@tresjs/cientos": LATEST, "gsap": LATEST}


class TestDevDependencies:
    def test_vue_toolchain(self, base_manifest: dict) -> None:
        intent = ProjectIntent(name="demo-app", template=TemplateKind.VUE, lint_enabled=False)
        merged = merge_manifest(base_manifest, intent)

        assert merged["devDependencies"] == {
            "vite": "^6.0.5",
            "typescript": "latest",
            "@vitejs/plugin-vue": "latest",
            "vue-tsc": "latest",
            "@types/three": "latest",
        }

    def test_nuxt_toolchain(self) -> None:
        intent = ProjectIntent(name="demo-app", template=TemplateKind.NUXT, lint_enabled=False)
        merged = merge_manifest({"devDependencies": {"@nuxt/devtools": "latest"}}, intent)

        assert merged["devDependencies"] == {
            "@nuxt/devtools": "latest",
            "typescript": "latest",
            "@types/three": "latest",
        }

    def test_every_template_has_typescript(self) -> None:
        for kind in TemplateKind:
            assert "typescript" in TEMPLATE_DEV_DEPENDENCIES[kind]

    def test_lint_packages(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app", lint_enabled=True))

        assert merged["devDependencies"]["@tresjs/eslint-config"] == "^1.1.0"
        assert merged["devDependencies"]["eslint"] == "^9.16.0"

    def test_no_lint_packages_when_disabled(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app", lint_enabled=False))

        for package in LINT_DEV_DEPENDENCIES:
            assert package not in merged["devDependencies"]


class TestScripts:
    def test_lint_scripts_added(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app", lint_enabled=True))

        assert merged["scripts"] == {
            "dev": "vite",
            "build": "vite build",
            "lint": "eslint .",
            "lint:fix": "eslint . --fix",
        }

    def test_no_lint_scripts_when_disabled(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app", lint_enabled=False))

        assert "lint" not in merged["scripts"]
        assert "lint:fix" not in merged["scripts"]

    def test_custom_lint_target(self, base_manifest: dict) -> None:
        merged = merge_manifest(
            base_manifest,
            ProjectIntent(name="demo-app"),
            lint_target="src",
        )
        assert merged["scripts"]["lint"] == "eslint src"

    @pytest.mark.parametrize("target", ["", "   "])
    def test_blank_target_falls_back_to_project(self, target: str) -> None:
        assert build_lint_scripts(target) == {
            "lint": "eslint .",
            "lint:fix": "eslint . --fix",
        }


class TestPurity:
    def test_input_untouched(self, base_manifest: dict) -> None:
        original = copy.deepcopy(base_manifest)
        intent = ProjectIntent(name="demo-app", ecosystem_keys=["cientos", "leches"])

        merged = merge_manifest(base_manifest, intent)

        assert base_manifest == original
        assert merged is not base_manifest
        assert merged["dependencies"] is not base_manifest["dependencies"]

    def test_other_fields_carried_through(self, base_manifest: dict) -> None:
        merged = merge_manifest(base_manifest, ProjectIntent(name="demo-app"))
        assert merged["private"] is True
        assert merged["version"] == "0.0.0"

    def test_merge_twice_same_content(self, base_manifest: dict) -> None:
        intent = ProjectIntent(
            name="demo-app",
            lint_enabled=True,
            ecosystem_keys=["cientos", "not-a-real-package"],
        )
        once = merge_manifest(base_manifest, intent)
        twice = merge_manifest(once, intent)
        assert twice == once


class TestEslintConfig:
    def test_structure(self) -> None:
        assert build_eslint_config() == {
            "extends": [ESLINT_CONFIG_PACKAGE],
            "rules": {},
        }

    def test_fresh_object_each_call(self) -> None:
        config = build_eslint_config()
        config["rules"]["semi"] = "error"
        assert build_eslint_config()["rules"] == {}
