"""Shared pytest fixtures for the goscaffold test suite.

Provides reusable fixtures for:
- A template renderer bound to the packaged templates
- ``ProjectConfig`` factories for every template kind
- Helpers to list what a generated project contains
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from goscaffold.config import ProjectConfig, TemplateKind
from goscaffold.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    """Renderer over the templates shipped with the package."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory for ``ProjectConfig`` with ``widget`` defaults.

    Usage:
        def test_something(make_config):
            config = make_config(template=TemplateKind.API, include_tests=True)
    """

    def _make(**overrides: Any) -> ProjectConfig:
        values: dict[str, Any] = {
            "name": "widget",
            "module_path": "github.com/acme/widget",
            "template": TemplateKind.BASIC,
        }
        values.update(overrides)
        return ProjectConfig(**values)

    return _make


@pytest.fixture
def widget_config(make_config) -> ProjectConfig:
    """The basic ``widget`` project with every optional flag off."""
    return make_config()


@pytest.fixture
def full_config(make_config) -> ProjectConfig:
    """An ``api`` project with every file-producing flag on (no git)."""
    return make_config(
        template=TemplateKind.API,
        include_makefile=True,
        include_docker=True,
        include_ci=True,
        include_lint=True,
        include_precommit=True,
        include_tests=True,
    )


# ---------------------------------------------------------------------------
# Tree inspection
# ---------------------------------------------------------------------------

def list_files(root: Path) -> set[str]:
    """Every regular file below *root*, as POSIX paths relative to it."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


def list_dirs(root: Path) -> set[str]:
    """Every directory below *root*, as POSIX paths relative to it."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir()}


@pytest.fixture
def files_in() -> Callable[[Path], set[str]]:
    """Return the ``list_files`` helper for use inside tests."""
    return list_files


@pytest.fixture
def dirs_in() -> Callable[[Path], set[str]]:
    """Return the ``list_dirs`` helper for use inside tests."""
    return list_dirs
