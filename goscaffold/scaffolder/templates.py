"""Jinja2 template rendering and file writing for project scaffolding.

Provides the TemplateRenderer class which loads the ``.j2`` files shipped in
``goscaffold/scaffolder/templates/`` and renders them into ``FileArtifact``
values, plus the low-level helpers that put those artifacts on disk.
Rendering never touches the filesystem; writing is a separate step so the
generator can decide the order of side effects.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .errors import ScaffoldWriteError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

DIR_MODE = 0o755


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileArtifact:
    """One file to write: a POSIX path relative to the project root and its body."""

    path: str
    content: str

    def target(self, root: str | Path) -> Path:
        """Resolve the artifact's path under *root*."""
        return Path(root).joinpath(*PurePosixPath(self.path).parts)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates only substitute values from the context (project name, module
    path, template kind, run command). Undefined variables raise instead of
    rendering as empty strings, so a typo in a template fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"api/router.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_artifact(
        self, template_path: str, output_path: str, context: dict[str, Any]
    ) -> FileArtifact:
        """Render *template_path* into an artifact destined for *output_path*."""
        return FileArtifact(path=output_path, content=self.render(template_path, context))

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# File writer
# ---------------------------------------------------------------------------


def make_directory(path: str | Path) -> Path:
    """Create *path* and any missing parents with ``0o755`` permissions."""
    directory = Path(path)
    try:
        directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldWriteError(directory, "create directory", exc) from exc
    return directory


def write_file(path: str | Path, content: str) -> Path:
    """Create parent dirs and write *content*, truncating any existing file.

    Raises:
        ScaffoldWriteError: If a parent directory cannot be created or the
            file cannot be written. The original ``OSError`` is chained.
    """
    out = Path(path)
    make_directory(out.parent)
    try:
        out.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ScaffoldWriteError(out, "write", exc) from exc
    return out


async def write_artifact(root: str | Path, artifact: FileArtifact) -> Path:
    """Write *artifact* below *root* without blocking the event loop."""
    return await asyncio.to_thread(write_file, artifact.target(root), artifact.content)
