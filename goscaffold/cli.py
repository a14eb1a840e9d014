"""goscaffold command-line interface.

Resolves a ``ProjectConfig`` from flags, interactive prompts, or a saved
config file, and hands it to the generator.

Usage::

    goscaffold new myapp
    goscaffold new myapi -t api -g username --all-devops
    goscaffold new mycli -t cli -g username -D -Q
    python -m goscaffold version
"""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
from pathlib import Path

from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from goscaffold import __version__
from goscaffold.config import (
    TEMPLATE_DESCRIPTIONS,
    ProjectConfig,
    TemplateKind,
    expand_aggregate_flags,
    resolve_module_path,
)
from goscaffold.scaffolder import ProjectGenerator, ScaffoldError
from goscaffold.utils import (
    console,
    print_error,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)

_VALID_NAME = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")
RESERVED_NAMES = ("internal", "pkg", "cmd", "vendor", "test", "main")


class CLIError(Exception):
    """Raised for invalid user input; reported as ``Error: ...`` with exit code 1."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_project_name(name: str) -> None:
    """Reject names that cannot be used as a project directory and Go package.

    Raises:
        CLIError: If the name is empty, malformed, or reserved.
    """
    if not name:
        raise CLIError("project name cannot be empty")
    if not _VALID_NAME.fullmatch(name):
        raise CLIError(
            "project name must start with a letter and contain only letters, "
            "numbers, hyphens, or underscores"
        )
    if name.lower() in RESERVED_NAMES:
        raise CLIError(f"'{name}' is a reserved name")


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def _prompt_template() -> TemplateKind:
    console.print("[bold]Select project template[/bold]")
    for kind, description in TEMPLATE_DESCRIPTIONS.items():
        console.print(f"  [cyan]{kind.value:<8}[/cyan] {description}")
    choice = Prompt.ask(
        "Template",
        choices=[kind.value for kind in TemplateKind],
        default=TemplateKind.BASIC.value,
    )
    return TemplateKind(choice)


# ---------------------------------------------------------------------------
# Configuration resolution
# ---------------------------------------------------------------------------


def resolve_config(args: argparse.Namespace) -> ProjectConfig:
    """Turn parsed ``new`` arguments into a validated ``ProjectConfig``.

    Prompts for anything missing unless ``--no-interactive`` was given.
    ``--config`` short-circuits flags and prompts entirely.
    """
    if args.config:
        try:
            config = ProjectConfig.load(args.config)
        except (OSError, ValueError) as exc:
            raise CLIError(f"could not load config file {args.config}: {exc}") from exc
        validate_project_name(config.name)
        return config

    interactive = not args.no_interactive

    name = args.name
    if not name:
        if not interactive:
            raise CLIError("project name is required")
        name = Prompt.ask("Project name", default="myproject")
    validate_project_name(name)

    github_user = args.github
    if not args.module and not github_user and interactive:
        github_user = Prompt.ask("GitHub username", default="")
    module_path = resolve_module_path(name, args.module, github_user)

    if args.template is not None:
        template = TemplateKind(args.template)
    elif interactive:
        template = _prompt_template()
    else:
        template = TemplateKind.BASIC

    flags = expand_aggregate_flags(
        {
            "include_makefile": args.makefile,
            "include_docker": args.docker,
            "include_ci": args.ci,
            "include_lint": args.lint,
            "include_precommit": args.precommit,
            "include_tests": args.tests,
        },
        all_devops=args.all_devops,
        all_quality=args.all_quality,
    )

    if interactive and not (args.all_devops or args.makefile or args.docker or args.ci):
        if Confirm.ask("Include DevOps files (Makefile, Docker, CI)?", default=True):
            flags = expand_aggregate_flags(flags, all_devops=True)

    if interactive and not (args.all_quality or args.lint or args.precommit or args.tests):
        if Confirm.ask("Include code quality tools (linter, pre-commit, tests)?", default=True):
            flags = expand_aggregate_flags(flags, all_quality=True)

    return ProjectConfig(
        name=name,
        module_path=module_path,
        template=template,
        init_git=args.git,
        **flags,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_command_hint(config: ProjectConfig) -> str:
    if config.template in (TemplateKind.API, TemplateKind.GRPC, TemplateKind.CLI):
        return f"go run ./cmd/{config.name}"
    return "go run ."


def cmd_new(args: argparse.Namespace) -> None:
    """Handle ``goscaffold new``."""
    console.print()
    console.print(Panel("[bold]goscaffold - Go Project Generator[/bold]", style="cyan"))

    config = resolve_config(args)

    output_dir = Path(args.output)
    project_root = output_dir / config.name
    if project_root.exists():
        raise CLIError(f"directory '{project_root}' already exists")

    print_summary_table(
        {
            "Project": config.name,
            "Module": config.module_path,
            "Template": config.template.value,
        },
        title="Configuration",
    )

    if args.save_config:
        saved = config.save(args.save_config)
        console.print(f"  Configuration saved to [bold]{saved}[/bold]")

    generator = ProjectGenerator(config, reporter=print_step)
    try:
        asyncio.run(generator.generate(output_dir))
    except ScaffoldError as exc:
        raise CLIError(f"failed to generate project: {exc}") from exc

    console.print()
    print_success(f"  ✓ Project '{config.name}' created successfully!")
    console.print()
    print_warning("  Next steps:")
    console.print(f"    cd {project_root}")
    console.print("    go mod tidy")
    console.print(f"    {_run_command_hint(config)}")
    console.print()


def cmd_version(args: argparse.Namespace) -> None:
    """Handle ``goscaffold version``."""
    console.print()
    console.print(f"  [cyan]goscaffold[/cyan] {__version__}")
    console.print()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goscaffold",
        description=(
            "A CLI tool to scaffold Go projects with best-practice directory "
            "structures, templates, and DevOps configurations."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            "  goscaffold new myproject -t api -g yourusername --all-devops\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command")

    templates_help = "\n".join(
        f"  {kind.value:<8} - {description}"
        for kind, description in TEMPLATE_DESCRIPTIONS.items()
    )
    new = subparsers.add_parser(
        "new",
        help="Create a new Go project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"Create a new Go project.\n\nTemplates:\n{templates_help}",
        epilog=(
            "Examples:\n"
            "  goscaffold new myapp\n"
            "  goscaffold new myapi -t api -g username --all-devops\n"
            "  goscaffold new mycli -t cli -g username -D -Q\n"
        ),
    )
    new.add_argument("name", nargs="?", default=None, help="Project name")
    new.add_argument(
        "--template", "-t",
        choices=[kind.value for kind in TemplateKind],
        default=None,
        help="Project template (default: basic)",
    )
    new.add_argument("--github", "-g", default=None, help="GitHub username for module path")
    new.add_argument("--module", "-m", default=None, help="Custom module path (overrides github)")
    new.add_argument(
        "--output", "-o",
        default=".",
        help="Parent directory for the project (default: current directory)",
    )

    devops = new.add_argument_group("DevOps")
    devops.add_argument("--makefile", action="store_true", help="Include Makefile")
    devops.add_argument("--docker", action="store_true", help="Include Dockerfile and docker-compose")
    devops.add_argument("--ci", action="store_true", help="Include GitHub Actions CI workflow")
    devops.add_argument("--all-devops", "-D", action="store_true", help="Include all DevOps files")

    quality = new.add_argument_group("Quality")
    quality.add_argument("--lint", action="store_true", help="Include golangci-lint config")
    quality.add_argument("--precommit", action="store_true", help="Include pre-commit hooks config")
    quality.add_argument("--tests", action="store_true", help="Include test file scaffolding")
    quality.add_argument("--all-quality", "-Q", action="store_true", help="Include all quality tools")

    new.add_argument("--git", action="store_true", help="Initialize git repository")
    new.add_argument("--no-interactive", action="store_true", help="Skip interactive prompts")
    new.add_argument("--config", default=None, help="Load the project config from a JSON file")
    new.add_argument("--save-config", default=None, help="Write the resolved config to a JSON file")
    new.set_defaults(handler=cmd_new)

    version = subparsers.add_parser("version", help="Print version information")
    version.set_defaults(handler=cmd_version)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``goscaffold`` and ``python -m goscaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    try:
        args.handler(args)
    except CLIError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
