"""README generation.

The description and the usage snippet depend on the template kind; the
"Available Commands" section only appears when a Makefile is generated.
"""

from __future__ import annotations

from goscaffold.config import ProjectConfig, TemplateKind

from .templates import FileArtifact, TemplateRenderer


class ReadmeGenerator:
    """Builds ``README.md`` for the generated project."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def build(self, config: ProjectConfig) -> FileArtifact:
        kind = TemplateKind.coerce(config.template)
        context = {
            "project_name": config.name,
            "module_path": config.module_path,
            # Unknown kinds render the generic description and usage.
            "template": kind.value if kind is not None else str(config.template),
            "include_makefile": config.include_makefile,
        }
        return self.renderer.render_artifact("README.md.j2", "README.md", context)
