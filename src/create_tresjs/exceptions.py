"""
create_tresjs.exceptions - Error Types
======================================

Every error raised by create-tresjs derives from a built-in exception type
so callers can keep catching ``ValueError``, ``FileExistsError`` or
``RuntimeError`` as they would for any other library. ``CreateTresError``
is mixed in to allow catching everything the tool raises at once.

    CreateTresError
    ├── ProjectNameError      (ValueError)
    ├── TargetExistsError     (FileExistsError)
    └── MaterializationError  (RuntimeError)
"""

from __future__ import annotations

from pathlib import Path


class CreateTresError(Exception):
    """Base class for all create-tresjs errors."""


class ProjectNameError(CreateTresError, ValueError):
    """
    The proposed project name is not a valid package name.

    Attributes
    ----------
    name : str
        The rejected name.

    problems : list[str]
        Human-readable reasons the name was rejected.
    """

    def __init__(self, name: str, problems: list[str]) -> None:
        self.name = name
        self.problems = problems
        super().__init__(f"Invalid project name '{name}': {'; '.join(problems)}")


class TargetExistsError(CreateTresError, FileExistsError):
    """The target directory already exists and overwriting was not allowed."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Directory '{path}' already exists. "
            "Use a different name or allow overwriting it."
        )


class MaterializationError(CreateTresError, RuntimeError):
    """
    A filesystem step of the materialization pipeline failed.

    Attributes
    ----------
    step : str
        Short name of the pipeline step that failed (e.g. ``"copy"``).
    """

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"Failed to {step}: {message}")
