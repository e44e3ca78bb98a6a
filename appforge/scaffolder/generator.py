"""Main scaffolding orchestrator.

Takes a ``Configuration``, resolves it into a ``FileSet`` with the resolver
for its (framework, runtime) quadrant, and writes the files below
``<output_dir>/<project_name>``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from appforge.catalog import Framework, Runtime, UnsupportedOptionError
from appforge.models import Configuration, FileSet
from appforge.utils import write_file

from .base import BaseResolver
from .fresh import FreshResolver
from .templates import TemplateRenderer
from .vite_react import ViteReactResolver
from .vite_vue import ViteVueResolver
from .vue_cdn import VueCdnResolver


# Quadrant -> resolver class.  Bun projects use the Node quadrant.
RESOLVERS: dict[tuple[Framework, Runtime], type[BaseResolver]] = {
    (Framework.REACT, Runtime.NODE): ViteReactResolver,
    (Framework.VUE3, Runtime.NODE): ViteVueResolver,
    (Framework.REACT, Runtime.DENO): FreshResolver,
    (Framework.VUE3, Runtime.DENO): VueCdnResolver,
}


class ProjectExistsError(FileExistsError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Project directory already exists: {path}")


def resolver_for(config: Configuration, renderer: Optional[TemplateRenderer] = None) -> BaseResolver:
    """Instantiate the resolver serving *config*'s quadrant."""
    framework, runtime = config.quadrant
    resolver_cls = RESOLVERS.get((framework, runtime))
    if resolver_cls is None:
        raise UnsupportedOptionError("quadrant", f"{framework.value}+{runtime.value}")
    return resolver_cls(renderer)


def resolve(config: Configuration, renderer: Optional[TemplateRenderer] = None) -> FileSet:
    """Resolve *config* into a FileSet without touching the filesystem."""
    return resolver_for(config, renderer).resolve(config)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes the project described by a ``Configuration`` to disk.

    Resolution happens once, lazily, and is cached on the instance so the
    caller can inspect :attr:`fileset` (for the summary, or for overridden
    dependency warnings) before or after writing.
    """

    def __init__(self, config: Configuration, renderer: Optional[TemplateRenderer] = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self._fileset: Optional[FileSet] = None

    @property
    def fileset(self) -> FileSet:
        if self._fileset is None:
            self._fileset = resolve(self.config, self.renderer)
        return self._fileset

    def project_root(self, output_dir: str | Path) -> Path:
        return Path(output_dir) / self.config.project_name

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path, *, overwrite: bool = False) -> Path:
        """Generate the project below *output_dir*.

        Args:
            output_dir: Parent directory; a subdirectory named after the
                project is created inside it.
            overwrite: Write into an existing project directory instead of
                failing.  Files not in the FileSet are left alone.

        Returns:
            Path to the generated project root.

        Raises:
            ProjectExistsError: If the project directory exists and
                *overwrite* is false.
            OSError: On any write failure.  Files already written are kept.
        """
        fileset = self.fileset
        project_root = self.project_root(output_dir)

        exists = await asyncio.to_thread(project_root.exists)
        if exists and not overwrite:
            raise ProjectExistsError(project_root)

        await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=True)

        # One write at a time, in FileSet order.
        for entry in fileset.files:
            await asyncio.to_thread(write_file, project_root / entry.path, entry.content)

        return project_root
