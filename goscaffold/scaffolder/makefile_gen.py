"""Makefile generation."""

from __future__ import annotations

from goscaffold.config import ProjectConfig, TemplateKind

from .templates import FileArtifact, TemplateRenderer


def run_command_for(config: ProjectConfig) -> str:
    """Return the ``go run`` invocation that starts the generated project.

    ``basic`` runs the root package, ``library`` runs the bundled example and
    every other kind runs ``./cmd/<name>``.
    """
    kind = TemplateKind.coerce(config.template)
    if kind is TemplateKind.BASIC:
        return "go run ."
    if kind is TemplateKind.LIBRARY:
        return "go run ./examples/basic"
    return f"go run ./cmd/{config.name}"


class MakefileGenerator:
    """Builds a Makefile with build, clean, test, lint, run, tidy and help targets."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def build(self, config: ProjectConfig) -> FileArtifact:
        context = {
            "project_name": config.name,
            "module_path": config.module_path,
            "run_command": run_command_for(config),
        }
        return self.renderer.render_artifact("Makefile.j2", "Makefile", context)
