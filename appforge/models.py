"""Pydantic v2 models shared by the prompts, resolvers and reporter.

``Configuration`` is the single input to the resolver and is frozen once
built.  ``FileSet`` is the resolver's output: ordered file entries plus the
dependency manifest.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from appforge.catalog import (
    AXES,
    OPTIONAL_AXES,
    ErrorHandlingLibrary,
    Framework,
    PackageManager,
    Runtime,
    StateLibrary,
    TestingLibrary,
    UILibrary,
    ValidationLibrary,
    ensure_in_domain,
)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class Configuration(BaseModel):
    """One concrete choice per axis.

    ``state_library`` and ``ui_library`` must belong to the domain implied
    by ``framework``; anything else fails validation at construction.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    framework: Framework = Field(..., description="UI framework")
    runtime: Runtime = Field(..., description="JavaScript runtime")
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    validation_library: ValidationLibrary = Field(default=ValidationLibrary.NONE)
    error_handling_library: ErrorHandlingLibrary = Field(default=ErrorHandlingLibrary.NONE)
    testing_library: TestingLibrary = Field(default=TestingLibrary.NONE)
    state_library: StateLibrary = Field(default=StateLibrary.NONE)
    ui_library: UILibrary = Field(default=UILibrary.NONE)

    @model_validator(mode="after")
    def _check_framework_domains(self) -> "Configuration":
        ensure_in_domain("state_library", self.state_library, self.framework)
        ensure_in_domain("ui_library", self.ui_library, self.framework)
        return self

    # -- Derived values ----------------------------------------------------

    @property
    def project_name(self) -> str:
        """Directory name of the generated project, e.g. ``react-node-app``."""
        return f"{self.framework.value}-{self.runtime.value}-app"

    @property
    def quadrant(self) -> tuple[Framework, Runtime]:
        """``(framework, runtime)`` pair with bun folded into node."""
        runtime = Runtime.DENO if self.runtime is Runtime.DENO else Runtime.NODE
        return (self.framework, runtime)

    @property
    def is_deno(self) -> bool:
        return self.runtime is Runtime.DENO

    def selected_axes(self) -> list[tuple[str, Any]]:
        """Return ``(axis, value)`` for every optional axis not set to ``none``."""
        selected = []
        for axis in OPTIONAL_AXES:
            value = getattr(self, axis)
            if value.value != "none":
                selected.append((axis, value))
        return selected

    def choices(self) -> dict[str, str]:
        """Plain ``{axis: value}`` mapping in catalog order."""
        return {axis: getattr(self, axis).value for axis in AXES}

    # -- Serialisation -----------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Write the configuration as JSON, or YAML for ``.yml``/``.yaml``."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json", by_alias=True)
        if target.suffix in (".yml", ".yaml"):
            target.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        else:
            target.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: str | Path) -> "Configuration":
        """Load and validate a configuration saved by :meth:`save`.

        Both camelCase (``packageManager``) and snake_case keys are accepted.
        """
        source = Path(path)
        raw = source.read_text(encoding="utf-8")
        if source.suffix in (".yml", ".yaml"):
            data = yaml.safe_load(raw) or {}
        else:
            data = json.loads(raw)
        return cls.model_validate(data)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

PRESETS: dict[str, Configuration] = {
    "react-node-quickstart": Configuration(
        framework=Framework.REACT,
        runtime=Runtime.NODE,
        package_manager=PackageManager.NPM,
        validation_library=ValidationLibrary.ZOD,
        error_handling_library=ErrorHandlingLibrary.NEVERTHROW,
        testing_library=TestingLibrary.VITEST,
        state_library=StateLibrary.ZUSTAND,
        ui_library=UILibrary.NONE,
    ),
    "vue3-node-quickstart": Configuration(
        framework=Framework.VUE3,
        runtime=Runtime.NODE,
        package_manager=PackageManager.NPM,
        validation_library=ValidationLibrary.ZOD,
        error_handling_library=ErrorHandlingLibrary.NEVERTHROW,
        testing_library=TestingLibrary.VITEST,
        state_library=StateLibrary.PINIA,
        ui_library=UILibrary.NONE,
    ),
}

PRESET_TITLES: dict[str, str] = {
    "react-node-quickstart": "React + Node quick start (Zod, neverthrow, Vitest, Zustand)",
    "vue3-node-quickstart": "Vue 3 + Node quick start (Zod, neverthrow, Vitest, Pinia)",
}


# ---------------------------------------------------------------------------
# FileSet
# ---------------------------------------------------------------------------

class FileEntry(BaseModel):
    """A single generated file, relative to the project root."""

    path: str = Field(..., description="POSIX-style relative path")
    content: str = Field(default="")


class FileSet(BaseModel):
    """Resolved output of a template resolver."""

    files: list[FileEntry] = Field(default_factory=list)
    dependencies: dict[str, str] = Field(
        default_factory=dict, description="Package name -> version range or specifier"
    )
    dev_dependencies: dict[str, str] = Field(default_factory=dict)
    scripts: dict[str, str] = Field(default_factory=dict)
    overridden: list[str] = Field(
        default_factory=list,
        description="Dependency names replaced by a later axis (last write wins)",
    )

    def add(self, path: str, content: str) -> None:
        """Append a file, replacing an earlier entry with the same path in place."""
        for index, entry in enumerate(self.files):
            if entry.path == path:
                self.files[index] = FileEntry(path=path, content=content)
                return
        self.files.append(FileEntry(path=path, content=content))

    def paths(self) -> list[str]:
        return [entry.path for entry in self.files]

    def has(self, path: str) -> bool:
        return any(entry.path == path for entry in self.files)

    def get(self, path: str) -> Optional[str]:
        """Return the content of *path*, or ``None`` if it is not in the set."""
        for entry in self.files:
            if entry.path == path:
                return entry.content
        return None
