"""goscaffold configuration.

The generation engine consumes a single, fully-resolved ``ProjectConfig``.
It is a frozen Pydantic v2 model: the CLI layer builds it once (from flags,
prompts, or a saved JSON file) and the generator only ever reads it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TemplateKind(str, Enum):
    """Starter layouts the scaffolder knows how to generate."""

    BASIC = "basic"
    CLI = "cli"
    API = "api"
    GRPC = "grpc"
    LIBRARY = "library"

    @classmethod
    def coerce(cls, value: str | TemplateKind) -> TemplateKind | None:
        """Return the matching member, or ``None`` for an unknown value."""
        try:
            return cls(value)
        except ValueError:
            return None


TEMPLATE_DESCRIPTIONS: dict[TemplateKind, str] = {
    TemplateKind.BASIC: "Minimal Go project",
    TemplateKind.CLI: "CLI application with Cobra",
    TemplateKind.API: "REST API with Chi router",
    TemplateKind.GRPC: "gRPC service",
    TemplateKind.LIBRARY: "Reusable Go library",
}


class ProjectConfig(BaseModel):
    """Everything the generator needs to know about the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (root directory and binary name)")
    module_path: str = Field(..., description="Go module path written to go.mod")
    template: TemplateKind = Field(default=TemplateKind.BASIC, description="Starter layout")

    include_makefile: bool = Field(default=False, description="Write a Makefile")
    include_docker: bool = Field(default=False, description="Write Dockerfile and docker-compose.yml")
    include_ci: bool = Field(default=False, description="Write a GitHub Actions workflow")
    include_lint: bool = Field(default=False, description="Write a golangci-lint config")
    include_precommit: bool = Field(default=False, description="Write a pre-commit config")
    include_tests: bool = Field(default=False, description="Add a test file to the template")
    init_git: bool = Field(default=False, description="Run git init in the project root")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Persist the configuration as pretty-printed JSON.

        Returns:
            The path that was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: str | Path) -> ProjectConfig:
        """Load and validate a configuration previously written by :meth:`save`."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)


# ---------------------------------------------------------------------------
# Pre-processing helpers used by the CLI layer
# ---------------------------------------------------------------------------


def resolve_module_path(
    name: str, module: str | None = None, github_user: str | None = None
) -> str:
    """Pick the Go module path for a new project.

    An explicit *module* wins, then ``github.com/<github_user>/<name>``, and
    finally the bare project name.
    """
    if module:
        return module
    if github_user:
        return f"github.com/{github_user}/{name}"
    return name


def expand_aggregate_flags(
    flags: dict[str, Any],
    *,
    all_devops: bool = False,
    all_quality: bool = False,
) -> dict[str, Any]:
    """Expand the grouped toggles into the canonical per-file flags.

    ``all_devops`` turns on the Makefile, Docker and CI flags;
    ``all_quality`` turns on the lint, pre-commit and tests flags. Flags that
    are already set are never switched off.
    """
    expanded = dict(flags)
    if all_devops:
        expanded.update(include_makefile=True, include_docker=True, include_ci=True)
    if all_quality:
        expanded.update(include_lint=True, include_precommit=True, include_tests=True)
    return expanded
