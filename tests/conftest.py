"""Shared pytest fixtures for the appforge test suite.

Provides reusable fixtures for:
- A shared template renderer
- Configuration factories for every (framework, runtime) combination
- Resolved FileSets
- Isolation from APPFORGE_* environment variables
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from appforge.catalog import Framework, Runtime
from appforge.models import Configuration, FileSet
from appforge.scaffolder import TemplateRenderer, resolve


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's APPFORGE_* variables out of every test."""
    for name in ("APPFORGE_OUTPUT_DIR", "APPFORGE_OVERWRITE", "APPFORGE_ASSUME_YES"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    """One renderer for the whole session; Jinja caches compiled templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., Configuration]:
    """Factory: ``make_config("react", "node", state_library="redux")``."""

    def _make(framework: str = "react", runtime: str = "node", **choices: Any) -> Configuration:
        return Configuration(framework=Framework(framework), runtime=Runtime(runtime), **choices)

    return _make


@pytest.fixture
def react_node_config(make_config) -> Configuration:
    return make_config("react", "node")


@pytest.fixture
def vue_node_config(make_config) -> Configuration:
    return make_config("vue3", "node")


@pytest.fixture
def full_react_config(make_config) -> Configuration:
    """React on Node with every optional axis set."""
    return make_config(
        "react",
        "node",
        package_manager="pnpm",
        validation_library="zod",
        error_handling_library="neverthrow",
        testing_library="vitest",
        state_library="redux",
        ui_library="mui",
    )


# ---------------------------------------------------------------------------
# Resolution helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def resolve_with(renderer: TemplateRenderer, make_config) -> Callable[..., FileSet]:
    """Factory: build a configuration and resolve it with the shared renderer."""

    def _resolve(framework: str = "react", runtime: str = "node", **choices: Any) -> FileSet:
        return resolve(make_config(framework, runtime, **choices), renderer)

    return _resolve

