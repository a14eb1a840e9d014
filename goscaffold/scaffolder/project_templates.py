"""Per-template content builders.

Each builder is a pure function ``(config, renderer) -> list[FileArtifact]``
that produces the starter Go sources for one ``TemplateKind``. Only the
project name, the module path and ``include_tests`` influence the output;
``include_tests`` appends exactly one test file.
"""

from __future__ import annotations

from typing import Any, Callable

from goscaffold.config import ProjectConfig, TemplateKind

from .templates import FileArtifact, TemplateRenderer

TemplateBuilder = Callable[[ProjectConfig, TemplateRenderer], list[FileArtifact]]


def _context(config: ProjectConfig) -> dict[str, Any]:
    return {"project_name": config.name, "module_path": config.module_path}


def build_basic(config: ProjectConfig, renderer: TemplateRenderer) -> list[FileArtifact]:
    """Single ``main.go`` printing a greeting."""
    ctx = _context(config)
    artifacts = [renderer.render_artifact("basic/main.go.j2", "main.go", ctx)]
    if config.include_tests:
        artifacts.append(renderer.render_artifact("basic/main_test.go.j2", "main_test.go", ctx))
    return artifacts


def build_cli(config: ProjectConfig, renderer: TemplateRenderer) -> list[FileArtifact]:
    """Cobra application: entry point, root command and ``version`` subcommand."""
    ctx = _context(config)
    name = config.name
    artifacts = [
        renderer.render_artifact("cli/main.go.j2", f"cmd/{name}/main.go", ctx),
        renderer.render_artifact("cli/root.go.j2", "internal/cmd/root.go", ctx),
        renderer.render_artifact("cli/version.go.j2", "internal/cmd/version.go", ctx),
    ]
    if config.include_tests:
        artifacts.append(
            renderer.render_artifact("cli/root_test.go.j2", "internal/cmd/root_test.go", ctx)
        )
    return artifacts


def build_api(config: ProjectConfig, renderer: TemplateRenderer) -> list[FileArtifact]:
    """Chi REST API listening on :8080 with home, health and hello routes."""
    ctx = _context(config)
    name = config.name
    artifacts = [
        renderer.render_artifact("api/main.go.j2", f"cmd/{name}/main.go", ctx),
        renderer.render_artifact("api/router.go.j2", "internal/router/router.go", ctx),
        renderer.render_artifact("api/handler.go.j2", "internal/handler/handler.go", ctx),
        renderer.render_artifact(
            "api/middleware.go.j2", "internal/middleware/middleware.go", ctx
        ),
    ]
    if config.include_tests:
        artifacts.append(
            renderer.render_artifact(
                "api/handler_test.go.j2", "internal/handler/handler_test.go", ctx
            )
        )
    return artifacts


def build_grpc(config: ProjectConfig, renderer: TemplateRenderer) -> list[FileArtifact]:
    """gRPC service on :50051 plus the ``Greeter`` proto definition."""
    ctx = _context(config)
    name = config.name
    artifacts = [
        renderer.render_artifact("grpc/main.go.j2", f"cmd/{name}/main.go", ctx),
        renderer.render_artifact("grpc/server.go.j2", "internal/server/server.go", ctx),
        renderer.render_artifact("grpc/service.proto.j2", f"proto/{name}.proto", ctx),
    ]
    if config.include_tests:
        artifacts.append(
            renderer.render_artifact(
                "grpc/server_test.go.j2", "internal/server/server_test.go", ctx
            )
        )
    return artifacts


def build_library(config: ProjectConfig, renderer: TemplateRenderer) -> list[FileArtifact]:
    """Importable package under ``pkg/<name>`` and a non-compiled usage example."""
    ctx = _context(config)
    name = config.name
    artifacts = [
        renderer.render_artifact("library/library.go.j2", f"pkg/{name}/{name}.go", ctx),
        renderer.render_artifact("library/example_main.go.j2", "examples/basic/main.go", ctx),
    ]
    if config.include_tests:
        artifacts.append(
            renderer.render_artifact(
                "library/library_test.go.j2", f"pkg/{name}/{name}_test.go", ctx
            )
        )
    return artifacts


TEMPLATE_BUILDERS: dict[TemplateKind, TemplateBuilder] = {
    TemplateKind.BASIC: build_basic,
    TemplateKind.CLI: build_cli,
    TemplateKind.API: build_api,
    TemplateKind.GRPC: build_grpc,
    TemplateKind.LIBRARY: build_library,
}


def build_template_files(
    config: ProjectConfig, renderer: TemplateRenderer
) -> list[FileArtifact]:
    """Dispatch to the builder for ``config.template``.

    Unknown kinds fall back to the ``basic`` builder.
    """
    kind = TemplateKind.coerce(config.template)
    builder = TEMPLATE_BUILDERS.get(kind, build_basic)
    return builder(config, renderer)
