"""Unit tests for the feature summary (appforge.reporter.summary).

Tests cover:
- Install/dev commands per package manager
- Feature lines: one base line plus one per non-``none`` axis
- README rendering: Features section and the command block
- Terminal summary output
"""

from __future__ import annotations

from pathlib import Path

import pytest

from appforge.catalog import PackageManager
from appforge.models import Configuration
from appforge.reporter import COMMANDS, commands_for, feature_lines, next_steps, print_summary, render_readme
from appforge.reporter.summary import stack_name


def _section(readme: str, heading: str) -> list[str]:
    """Lines between ``heading`` and the next ``## `` heading."""
    lines = readme.splitlines()
    start = lines.index(heading) + 1
    end = next((i for i in range(start, len(lines)) if lines[i].startswith("## ")), len(lines))
    return lines[start:end]


def _code_block(readme: str) -> list[str]:
    lines = readme.splitlines()
    start = lines.index("```bash") + 1
    end = lines.index("```", start)
    return lines[start:end]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestCommands:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "manager,install,dev",
        [
            ("npm", "npm install", "npm run dev"),
            ("pnpm", "pnpm install", "pnpm dev"),
            ("yarn", "yarn install", "yarn dev"),
            ("bun", "bun install", "bun dev"),
        ],
    )
    def test_commands_for(self, manager: str, install: str, dev: str) -> None:
        assert commands_for(PackageManager(manager)) == (install, dev)

    @pytest.mark.unit
    def test_every_manager_covered(self) -> None:
        assert set(COMMANDS) == set(PackageManager)

    @pytest.mark.unit
    def test_next_steps(self) -> None:
        config = Configuration(framework="vue3", runtime="bun", package_manager="bun")
        assert next_steps(config) == ["cd vue3-bun-app", "bun install", "bun dev"]


# ---------------------------------------------------------------------------
# Feature lines
# ---------------------------------------------------------------------------

class TestFeatureLines:
    @pytest.mark.unit
    def test_bare_configuration(self) -> None:
        config = Configuration(framework="react", runtime="node")
        assert feature_lines(config) == ["Base structure: React + Vite on Node.js, managed with npm"]

    @pytest.mark.unit
    def test_one_line_per_selected_axis(self, full_react_config: Configuration) -> None:
        lines = feature_lines(full_react_config)
        assert len(lines) == 6
        assert lines[1:] == [
            "Validation: Zod",
            "Error handling: neverthrow",
            "Testing: Vitest",
            "State management: Redux Toolkit",
            "UI library: Material UI",
        ]

    @pytest.mark.unit
    def test_stack_names(self) -> None:
        assert stack_name(Configuration(framework="react", runtime="deno")).startswith("Fresh")
        assert "CDN" in stack_name(Configuration(framework="vue3", runtime="deno"))
        assert stack_name(Configuration(framework="vue3", runtime="bun")) == "Vue 3 + Vite"


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------

class TestReadme:
    @pytest.mark.unit
    def test_feature_bullets(self, renderer, full_react_config: Configuration) -> None:
        readme = render_readme(full_react_config, renderer)
        bullets = [line for line in _section(readme, "## Features") if line.startswith("- ")]
        assert len(bullets) == 6

    @pytest.mark.unit
    def test_bare_feature_bullets(self, renderer) -> None:
        readme = render_readme(Configuration(framework="vue3", runtime="node"), renderer)
        bullets = [line for line in _section(readme, "## Features") if line.startswith("- ")]
        assert bullets == ["- Base structure: Vue 3 + Vite on Node.js, managed with npm"]

    @pytest.mark.unit
    def test_command_block(self, renderer) -> None:
        config = Configuration(framework="react", runtime="node", package_manager="yarn")
        assert _code_block(render_readme(config, renderer)) == ["yarn install", "yarn dev"]

    @pytest.mark.unit
    def test_title(self, renderer) -> None:
        readme = render_readme(Configuration(framework="react", runtime="deno"), renderer)
        assert readme.startswith("# react-deno-app\n")
        assert "deno task start" in readme


# ---------------------------------------------------------------------------
# Terminal output
# ---------------------------------------------------------------------------

class TestPrintSummary:
    @pytest.mark.unit
    def test_prints_features_and_steps(
        self, capsys: pytest.CaptureFixture, full_react_config: Configuration
    ) -> None:
        print_summary(full_react_config, Path("/tmp/out/react-node-app"))
        out = capsys.readouterr().out
        assert "State management: Redux Toolkit" in out
        assert "cd react-node-app" in out
        assert "pnpm install" in out
        assert "pnpm dev" in out

    @pytest.mark.unit
    def test_deno_hint(self, capsys: pytest.CaptureFixture) -> None:
        print_summary(Configuration(framework="vue3", runtime="deno"), Path("vue3-deno-app"))
        assert "deno task start" in capsys.readouterr().out
