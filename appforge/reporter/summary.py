"""Feature summary and next-step commands.

The same feature list is printed to the terminal after generation and
written into the generated project's ``README.md``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.panel import Panel

from appforge.catalog import AXIS_TITLES, Framework, PackageManager, label
from appforge.models import Configuration, FileSet
from appforge.utils import console

if TYPE_CHECKING:
    from appforge.scaffolder.templates import TemplateRenderer


# Package manager -> (install, dev)
COMMANDS: dict[PackageManager, tuple[str, str]] = {
    PackageManager.NPM: ("npm install", "npm run dev"),
    PackageManager.PNPM: ("pnpm install", "pnpm dev"),
    PackageManager.YARN: ("yarn install", "yarn dev"),
    PackageManager.BUN: ("bun install", "bun dev"),
}

_STACKS: dict[tuple[str, str], str] = {
    ("react", "node"): "React + Vite",
    ("vue3", "node"): "Vue 3 + Vite",
    ("react", "deno"): "Fresh (Preact, React-compatible)",
    ("vue3", "deno"): "Vue 3 from CDN, served by Deno",
}


def commands_for(package_manager: PackageManager) -> tuple[str, str]:
    """Return the literal ``(install, dev)`` command pair."""
    return COMMANDS[PackageManager(package_manager)]


def stack_name(config: Configuration) -> str:
    framework, runtime = config.quadrant
    return _STACKS[(framework.value, runtime.value)]


def feature_lines(config: Configuration) -> list[str]:
    """One base-structure line plus one line per non-``none`` optional axis."""
    lines = [
        f"Base structure: {stack_name(config)} on {label(config.runtime)}, "
        f"managed with {label(config.package_manager)}"
    ]
    for axis, value in config.selected_axes():
        lines.append(f"{AXIS_TITLES[axis]}: {label(value)}")
    return lines


def next_steps(config: Configuration) -> list[str]:
    install, dev = commands_for(config.package_manager)
    return [f"cd {config.project_name}", install, dev]


def render_readme(config: Configuration, renderer: "TemplateRenderer") -> str:
    """Render the generated project's README."""
    install, dev = commands_for(config.package_manager)
    return renderer.render(
        "README.md.j2",
        {
            "project_name": config.project_name,
            "framework_label": label(config.framework),
            "runtime_label": label(config.runtime),
            "install_command": install,
            "dev_command": dev,
            "features": feature_lines(config),
            "is_deno": config.is_deno,
            "is_react": config.framework is Framework.REACT,
        },
    )


def print_summary(
    config: Configuration,
    project_path: Path,
    fileset: Optional[FileSet] = None,
) -> None:
    """Pretty-print what was generated and how to start it."""
    body = [f"[bold]{config.project_name}[/bold]", f"Path: {project_path}"]
    if fileset is not None:
        body.append(f"Files: {len(fileset.files)}")
    body.append("")
    body.extend(f"  • {line}" for line in feature_lines(config))
    console.print(Panel("\n".join(body), title="Project generated", border_style="green"))

    console.print("[bold]Next steps:[/bold]")
    for command in next_steps(config):
        console.print(f"  [cyan]{command}[/cyan]")
    if config.is_deno:
        console.print("  [dim](or run it directly with: deno task start)[/dim]")
    console.print()
