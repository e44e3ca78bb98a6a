"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``appforge/scaffolder/templates/`` directory and renders them with the
resolver's context.  Rendering is pure: writing to disk is the
materializer's job.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_ESM_CDN = "https://esm.sh"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined variables raise instead of rendering as
    empty strings, so a template/context mismatch fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["tojson_pretty"] = _tojson_pretty_filter
        self.env.filters["deno_specifier"] = deno_specifier
        self.env.filters["esm_url"] = esm_url

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"vite-react/src/main.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _tojson_pretty_filter(value: Any, indent: int = 2) -> str:
    """Serialise *value* as JSON the way ``JSON.stringify(v, null, 2)`` does."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def _is_specifier(spec: str) -> bool:
    return spec.startswith(("http://", "https://", "npm:", "jsr:"))


def deno_specifier(spec: str, name: str) -> str:
    """Turn a version range into a Deno import-map specifier.

    ``"^3.22.4" | deno_specifier("zod")`` -> ``"npm:zod@^3.22.4"``.
    URLs and ``npm:``/``jsr:`` specifiers pass through unchanged.
    """
    if _is_specifier(spec):
        return spec
    return f"npm:{name}@{spec}"


def esm_url(spec: str, name: str, subpath: str = "") -> str:
    """Turn a version range into an esm.sh URL for a browser import map.

    ``vue`` is kept external so every package shares the page's single Vue
    instance.  *subpath* addresses a package export such as
    ``valtio/vanilla``.
    """
    if spec.startswith(("http://", "https://")):
        return spec
    if spec.startswith("npm:"):
        spec = spec.rsplit("@", 1)[-1]
    path = f"/{subpath}" if subpath else ""
    return f"{_ESM_CDN}/{name}@{spec}{path}?external=vue"
