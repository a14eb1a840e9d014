"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and writes a complete Go project below
``<output_dir>/<name>``: the planned directories, ``go.mod``, the template's
source files, ``.gitignore``, the optional DevOps and quality files, the
README, and finally an optional ``git init``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

from goscaffold.config import ProjectConfig
from goscaffold.utils import run_command

from .ci_gen import CIGenerator
from .docker_gen import DockerGenerator
from .errors import GitInitError
from .layout import plan_directories
from .makefile_gen import MakefileGenerator
from .project_templates import build_template_files
from .quality_gen import QualityGenerator
from .readme_gen import ReadmeGenerator
from .templates import FileArtifact, TemplateRenderer, make_directory, write_artifact

Reporter = Callable[[str], None]

# One planned step: the progress message and the files it writes.
Step = tuple[str, list[FileArtifact]]


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a directory tree containing:
    - ``go.mod`` and ``.gitignore``
    - The starter sources for the chosen template kind
    - Makefile, Dockerfile + docker-compose.yml, GitHub Actions workflow
      (each only when requested)
    - golangci-lint and pre-commit configs (each only when requested)
    - README.md

    All file content is rendered up front by :meth:`plan_steps`; the writes
    then happen one at a time in plan order and the first failure aborts
    the run. Files written before the failure are left in place.
    """

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.reporter = reporter
        self.makefile_gen = MakefileGenerator(self.renderer)
        self.docker_gen = DockerGenerator(self.renderer)
        self.ci_gen = CIGenerator(self.renderer)
        self.quality_gen = QualityGenerator(self.renderer)
        self.readme_gen = ReadmeGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path = ".") -> Path:
        """Generate the project.

        Args:
            output_dir: Parent directory. A subdirectory named after the
                project is created inside it. The caller is responsible for
                making sure it does not exist yet.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldWriteError: A directory or file could not be written.
            GitInitError: ``git init`` was requested and failed.
        """
        output = Path(output_dir)
        project_root = output / self.config.name
        steps = self.plan_steps()

        # 1. Create the directory skeleton
        self._report("Creating directories...")
        for directory in plan_directories(
            self.config.name, self.config.template, self.config.include_ci
        ):
            await asyncio.to_thread(make_directory, output / directory)

        # 2. Write files step by step
        for message, artifacts in steps:
            self._report(message)
            for artifact in artifacts:
                await write_artifact(project_root, artifact)

        # 3. Initialise version control
        if self.config.init_git:
            self._report("Initializing git repository...")
            await self._init_git(project_root)

        return project_root

    def plan_steps(self) -> list[Step]:
        """Render every file the project needs, grouped by generation step.

        Pure: nothing is written. The order is the order :meth:`generate`
        writes in.
        """
        cfg = self.config
        steps: list[Step] = [
            ("Creating go.mod...", [self._build_go_mod()]),
            ("Creating template files...", build_template_files(cfg, self.renderer)),
            ("Creating .gitignore...", [self._build_gitignore()]),
        ]

        if cfg.include_makefile:
            steps.append(("Creating Makefile...", [self.makefile_gen.build(cfg)]))
        if cfg.include_docker:
            steps.append(("Creating Docker files...", self.docker_gen.build(cfg)))
        if cfg.include_ci:
            steps.append(("Creating CI workflow...", [self.ci_gen.build(cfg)]))
        if cfg.include_lint:
            steps.append(("Creating linter config...", [self.quality_gen.build_lint_config(cfg)]))
        if cfg.include_precommit:
            steps.append(
                ("Creating pre-commit config...", [self.quality_gen.build_precommit_config(cfg)])
            )

        steps.append(("Creating README...", [self.readme_gen.build(cfg)]))
        return steps

    def plan_files(self) -> list[FileArtifact]:
        """Flatten :meth:`plan_steps` into the ordered list of artifacts."""
        return [artifact for _, artifacts in self.plan_steps() for artifact in artifacts]

    # -- Base files --------------------------------------------------------

    def _build_go_mod(self) -> FileArtifact:
        return self.renderer.render_artifact(
            "go.mod.j2", "go.mod", {"module_path": self.config.module_path}
        )

    def _build_gitignore(self) -> FileArtifact:
        return self.renderer.render_artifact("gitignore.j2", ".gitignore", {})

    # -- Version control ---------------------------------------------------

    async def _init_git(self, project_root: Path) -> None:
        """Run ``git init`` inside the project root."""
        cmd = ["git", "init"]
        try:
            returncode, _, stderr = await run_command(cmd, cwd=project_root)
        except OSError as exc:
            raise GitInitError(
                f"Could not run git init in {project_root}: {exc}",
                command="git init",
            ) from exc

        if returncode != 0:
            raise GitInitError(
                f"git init failed in {project_root} (exit code {returncode}): {stderr}",
                command="git init",
                returncode=returncode,
                stderr=stderr,
            )

    # -- Helpers -----------------------------------------------------------

    def _report(self, message: str) -> None:
        if self.reporter is not None:
            self.reporter(message)
