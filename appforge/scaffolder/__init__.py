"""appforge scaffolder -- resolves a configuration into project files.

Quick usage::

    from appforge.models import PRESETS
    from appforge.scaffolder import ProjectGenerator

    generator = ProjectGenerator(PRESETS["react-node-quickstart"])
    project_path = await generator.generate("/tmp/output")
"""

from appforge.scaffolder.base import BaseResolver
from appforge.scaffolder.fresh import FreshResolver
from appforge.scaffolder.generator import (
    RESOLVERS,
    ProjectExistsError,
    ProjectGenerator,
    resolve,
    resolver_for,
)
from appforge.scaffolder.templates import TemplateRenderer
from appforge.scaffolder.vite_react import ViteReactResolver
from appforge.scaffolder.vite_vue import ViteVueResolver
from appforge.scaffolder.vue_cdn import VueCdnResolver

__all__ = [
    "BaseResolver",
    "FreshResolver",
    "ProjectExistsError",
    "ProjectGenerator",
    "RESOLVERS",
    "TemplateRenderer",
    "ViteReactResolver",
    "ViteVueResolver",
    "VueCdnResolver",
    "resolve",
    "resolver_for",
]
