"""Shared resolution algorithm for every (framework, runtime) quadrant.

A concrete resolver only declares data: the quadrant it serves, its base
manifest, its skeleton files and one lookup table per optional axis.
:meth:`BaseResolver.resolve` turns a :class:`Configuration` into a
:class:`FileSet` in four steps:

1. merge the base manifest with each selected option's manifest entries,
   in ``OPTIONAL_AXES`` order (last write wins on key collisions);
2. render the skeleton files with the aggregated fragments;
3. render every file contributed by a selected option;
4. append the README produced by the summary reporter.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Mapping

from appforge.catalog import (
    OPTIONAL_AXES,
    PROVIDER_STATE_LIBRARIES,
    Framework,
    Runtime,
    UnsupportedOptionError,
    label,
    options_for,
)
from appforge.models import Configuration, FileSet
from appforge.reporter.summary import commands_for, feature_lines, render_readme

from .common import SourceLayout
from .options import AxisOption, merge_entries, merge_fragments
from .templates import TemplateRenderer


class BaseResolver:
    """Maps a configuration to a FileSet for one quadrant."""

    framework: ClassVar[Framework]
    runtime: ClassVar[Runtime]
    title: ClassVar[str]
    layout: ClassVar[SourceLayout]
    dev_url: ClassVar[str] = "http://localhost:5173"

    base_dependencies: ClassVar[Mapping[str, str]] = {}
    base_dev_dependencies: ClassVar[Mapping[str, str]] = {}
    base_scripts: ClassVar[Mapping[str, str]] = {}

    # Subclasses fill these from their option factories.
    skeleton: tuple[tuple[str, str], ...] = ()

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.tables: dict[str, Mapping[Enum, AxisOption]] = self.build_tables()
        self._check_tables()

    # -- To be provided by subclasses --------------------------------------

    def build_tables(self) -> dict[str, Mapping[Enum, AxisOption]]:
        """Return ``{axis: {value: AxisOption}}`` for every optional axis."""
        raise NotImplementedError

    def extra_context(self, config: Configuration, context: dict[str, Any]) -> dict[str, Any]:
        """Hook for quadrant-specific template variables."""
        return {}

    # -- Public API --------------------------------------------------------

    def supports(self, config: Configuration) -> bool:
        return config.quadrant == (self.framework, self.runtime)

    def option(self, axis: str, value: Enum) -> AxisOption:
        """Look up the option for *value* on *axis*.

        Raises:
            UnsupportedOptionError: If the table has no entry for *value*.
        """
        table = self.tables.get(axis)
        if table is None or value not in table:
            raise UnsupportedOptionError(axis, getattr(value, "value", str(value)), self.framework.value)
        return table[value]

    def selections(self, config: Configuration) -> list[tuple[str, AxisOption]]:
        """``(axis, option)`` for every optional axis, in merge order."""
        return [(axis, self.option(axis, getattr(config, axis))) for axis in OPTIONAL_AXES]

    def resolve(self, config: Configuration) -> FileSet:
        """Resolve *config* into a FileSet.  Pure; nothing touches the disk."""
        if not self.supports(config):
            raise UnsupportedOptionError(
                "quadrant", f"{config.framework.value}+{config.runtime.value}", self.framework.value
            )

        selections = self.selections(config)
        fileset = FileSet(
            dependencies=dict(self.base_dependencies),
            dev_dependencies=dict(self.base_dev_dependencies),
            scripts=dict(self.base_scripts),
        )

        # 1. Manifest
        for _, option in selections:
            _merge_into(fileset.dependencies, option.dependencies, fileset.overridden)
            _merge_into(fileset.dev_dependencies, option.dev_dependencies, fileset.overridden)
            fileset.scripts.update(option.scripts)

        context = self.build_context(config, selections, fileset)

        # 2. Skeleton
        for path, template in self.skeleton:
            fileset.add(path, self.renderer.render(template, context))

        # 3. Per-option files
        for _, option in selections:
            for path, template in option.files:
                fileset.add(path, self.renderer.render(template, context))

        # 4. README
        fileset.add("README.md", render_readme(config, self.renderer))
        return fileset

    # -- Context -----------------------------------------------------------

    def build_context(
        self,
        config: Configuration,
        selections: list[tuple[str, AxisOption]],
        fileset: FileSet,
    ) -> dict[str, Any]:
        """Build the template context shared by every file of the project."""
        options = dict(selections)
        install, dev = commands_for(config.package_manager)
        context: dict[str, Any] = {
            **self.layout.template_vars(),
            "config": config,
            "project_name": config.project_name,
            "title": self.title,
            "is_deno": config.is_deno,
            "install_command": install,
            "dev_command": dev,
            "dev_url": self.dev_url,
            "features": feature_lines(config),
            "choices": config.choices(),
            "labels": {axis: label(getattr(config, axis)) for axis in config.choices()},
            "dependencies": dict(sorted(fileset.dependencies.items())),
            "dev_dependencies": dict(sorted(fileset.dev_dependencies.items())),
            "scripts": dict(fileset.scripts),
            "entry": merge_entries(option.entry for _, option in selections),
            "page": merge_fragments(option.page for _, option in selections),
            "counter": merge_fragments([options["state_library"].counter]),
        }
        context.update(self.extra_context(config, context))
        return context

    # -- Invariants --------------------------------------------------------

    def _check_tables(self) -> None:
        """Every legal value has an entry, and provider-bearing state options
        are exactly the provider-requiring libraries of this framework."""
        for axis in OPTIONAL_AXES:
            table = self.tables.get(axis, {})
            missing = [v.value for v in options_for(axis, self.framework) if v not in table]
            if missing:
                raise UnsupportedOptionError(axis, ",".join(missing), self.framework.value)

        state_table = self.tables["state_library"]
        wrapping = {value for value, option in state_table.items() if option.entry.wraps_root}
        expected = {v for v in state_table if v in PROVIDER_STATE_LIBRARIES}
        if wrapping != expected:
            raise UnsupportedOptionError(
                "state_library",
                ",".join(sorted(v.value for v in wrapping ^ expected)),
                self.framework.value,
            )


def _merge_into(target: dict[str, str], extra: Mapping[str, str], overridden: list[str]) -> None:
    """Merge *extra* into *target*; a differing existing value is replaced and recorded."""
    for name, version in extra.items():
        if name in target and target[name] != version and name not in overridden:
            overridden.append(name)
        target[name] = version
