"""Code-quality tooling: golangci-lint and pre-commit configuration."""

from __future__ import annotations

from goscaffold.config import ProjectConfig

from .templates import FileArtifact, TemplateRenderer


class QualityGenerator:
    """Builds the linter and pre-commit configuration files.

    Both files are fixed; the project config is accepted so every feature
    builder has the same shape.
    """

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def build_lint_config(self, config: ProjectConfig) -> FileArtifact:
        """``.golangci.yml`` enabling a fixed analyzer set; errcheck is off for tests."""
        return self.renderer.render_artifact(
            "golangci.yml.j2", ".golangci.yml", {"project_name": config.name}
        )

    def build_precommit_config(self, config: ProjectConfig) -> FileArtifact:
        """``.pre-commit-config.yaml`` with hygiene hooks, golangci-lint and go mod tidy."""
        return self.renderer.render_artifact(
            "pre-commit-config.yaml.j2",
            ".pre-commit-config.yaml",
            {"project_name": config.name},
        )
