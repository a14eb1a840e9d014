"""GitHub Actions workflow generation."""

from __future__ import annotations

from goscaffold.config import ProjectConfig

from .layout import CI_WORKFLOW_DIR
from .templates import FileArtifact, TemplateRenderer


class CIGenerator:
    """Builds the CI workflow.

    A single ``build`` job checks out the code, sets up Go, downloads
    modules, runs golangci-lint, runs the race-enabled tests with coverage,
    and builds every package. It triggers on pushes and pull requests to
    ``main`` or ``master``.
    """

    WORKFLOW_PATH = f"{CI_WORKFLOW_DIR}/ci.yml"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def build(self, config: ProjectConfig) -> FileArtifact:
        return self.renderer.render_artifact(
            "ci.yml.j2", self.WORKFLOW_PATH, {"project_name": config.name}
        )
