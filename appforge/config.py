"""appforge runtime settings.

These are the knobs that control *where* and *how* a project is written,
as opposed to :class:`appforge.models.Configuration`, which controls *what*
is generated.  Values come from defaults, then environment variables, then
CLI flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


class AppSettings(BaseModel):
    """Where the project goes and how cautiously it is written."""

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory in which the project folder is created",
    )
    overwrite: bool = Field(
        default=False,
        description="Write into an existing project directory instead of refusing",
    )
    assume_yes: bool = Field(
        default=False, description="Skip the final confirmation prompt"
    )

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            APPFORGE_OUTPUT_DIR, APPFORGE_OVERWRITE, APPFORGE_ASSUME_YES.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("APPFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["APPFORGE_OUTPUT_DIR"])
        overwrite = _env_flag("APPFORGE_OVERWRITE")
        if overwrite is not None:
            kwargs["overwrite"] = overwrite
        assume_yes = _env_flag("APPFORGE_ASSUME_YES")
        if assume_yes is not None:
            kwargs["assume_yes"] = assume_yes
        return cls(**kwargs)

