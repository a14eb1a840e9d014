"""goscaffold scaffolder -- generates Go project structures.

This package takes a ``ProjectConfig`` and renders a Go project directory:
``go.mod``, the starter sources for one of the ``basic``, ``cli``, ``api``,
``grpc`` or ``library`` templates, and optional Makefile, Docker, CI, lint
and pre-commit files.

Quick usage::

    from goscaffold.config import ProjectConfig, TemplateKind
    from goscaffold.scaffolder import ProjectGenerator

    config = ProjectConfig(
        name="widget",
        module_path="github.com/acme/widget",
        template=TemplateKind.API,
        include_tests=True,
    )
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/output")
"""

from goscaffold.scaffolder.errors import GitInitError, ScaffoldError, ScaffoldWriteError
from goscaffold.scaffolder.generator import ProjectGenerator
from goscaffold.scaffolder.layout import plan_directories
from goscaffold.scaffolder.templates import FileArtifact, TemplateRenderer, write_file

__all__ = [
    "FileArtifact",
    "GitInitError",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldWriteError",
    "TemplateRenderer",
    "plan_directories",
    "write_file",
]
