"""Dockerfile and Docker Compose generation.

Renders ``Dockerfile.j2`` (two-stage build: a Go builder stage that compiles
a static binary, and an Alpine runtime stage that only carries the binary and
CA certificates) and ``docker-compose.yml.j2`` (one service on port 8080).
"""

from __future__ import annotations

from goscaffold.config import ProjectConfig

from .templates import FileArtifact, TemplateRenderer


class DockerGenerator:
    """Builds the container files for the generated project."""

    # Template name -> output file name
    _DOCKER_FILES: dict[str, str] = {
        "Dockerfile.j2": "Dockerfile",
        "docker-compose.yml.j2": "docker-compose.yml",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def build(self, config: ProjectConfig) -> list[FileArtifact]:
        """Return the Dockerfile and compose file, in that order."""
        context = {"project_name": config.name}
        return [
            self.renderer.render_artifact(template_name, output_name, context)
            for template_name, output_name in self._DOCKER_FILES.items()
        ]
