"""Directory layout planning for each template kind."""

from __future__ import annotations

from goscaffold.config import TemplateKind

# Directories below the project root, per template kind. ``{name}`` is the
# project name.
_LAYOUTS: dict[TemplateKind, tuple[str, ...]] = {
    TemplateKind.BASIC: (),
    TemplateKind.CLI: ("cmd/{name}", "internal"),
    TemplateKind.API: (
        "cmd/{name}",
        "internal/handler",
        "internal/middleware",
        "internal/router",
        "pkg",
    ),
    TemplateKind.GRPC: ("cmd/{name}", "internal/server", "proto", "pkg"),
    TemplateKind.LIBRARY: ("pkg/{name}", "examples"),
}

_FALLBACK_LAYOUT: tuple[str, ...] = ("cmd", "internal", "pkg")

CI_WORKFLOW_DIR = ".github/workflows"


def plan_directories(
    name: str, template_kind: TemplateKind | str, include_ci: bool = False
) -> list[str]:
    """Return the directories a project needs, project root first.

    Paths are POSIX strings relative to the output directory, so the first
    entry is always *name* itself. Unknown template kinds get a generic
    ``cmd``/``internal``/``pkg`` layout rather than an error.
    """
    kind = TemplateKind.coerce(template_kind)
    subdirs = _LAYOUTS[kind] if kind is not None else _FALLBACK_LAYOUT

    planned = [name]
    planned.extend(f"{name}/{sub.format(name=name)}" for sub in subdirs)
    if include_ci:
        planned.append(f"{name}/{CI_WORKFLOW_DIR}")

    # dict preserves insertion order
    return list(dict.fromkeys(planned))
