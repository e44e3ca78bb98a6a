"""Vue 3 on Deno: Vue loaded from a CDN, static files served by ``Deno.serve``.

There is no bundler.  Browser-side packages are resolved through an import
map in ``index.html`` (one entry per module specifier the app imports);
``deno.json`` only maps what the Deno side needs: the file server and any
npm-based test tooling.
"""

from __future__ import annotations

from typing import Any

from appforge.catalog import Framework, Runtime
from appforge.models import Configuration

from .base import BaseResolver
from .common import SourceLayout, error_table, testing_table, validation_table
from .options import Fragment, StoreLayout
from .templates import deno_specifier, esm_url
from .vue_options import vue_state_table, vue_ui_table


VUE_VERSION = "3.4.21"
VUE_ROUTER_VERSION = "4.3.0"

# Packages imported by the Deno server rather than the browser.
SERVER_PACKAGES = frozenset({"@std/http"})

# Package exports imported by generated code, beyond the package root.
SUBPATHS: dict[str, tuple[str, ...]] = {
    "valtio": ("vanilla",),
    "@reduxjs/toolkit": ("query",),
    "vuetify": ("components", "directives"),
}

VALIDATION_PAGE = Fragment(
    imports=("import * as userValidation from '../validation/userSchema.js';",),
    setup=("const userCheck = userValidation.validateUser({ name: 'Ada', email: 'ada@example.com' });",),
    markup=("<p>Validation: {{ userCheck.success ? 'valid user' : userCheck.error }}</p>",),
    exposes=("userCheck",),
)

ERROR_PAGE = Fragment(
    imports=("import { safeDivide } from '../utils/result.js';",),
    setup=("const quotient = safeDivide(10, 2);",),
    markup=("<p>10 / 2 = {{ quotient }}</p>",),
    exposes=("quotient",),
)


class VueCdnResolver(BaseResolver):
    framework = Framework.VUE3
    runtime = Runtime.DENO
    title = "Vue 3 (CDN)"
    dev_url = "http://localhost:8000"
    layout = SourceLayout(
        framework=Framework.VUE3,
        src="",
        lang="js",
        hello_import="../components/HelloWorld.js",
        import_ext=".js",
        deno=True,
    )

    base_dependencies = {
        "vue": f"https://unpkg.com/vue@{VUE_VERSION}/dist/vue.esm-browser.js",
        "vue-router": (
            f"https://unpkg.com/vue-router@{VUE_ROUTER_VERSION}/dist/vue-router.esm-browser.js"
        ),
        "@std/http": "jsr:@std/http@^0.221.0",
    }
    base_scripts = {
        "start": "deno run --allow-net --allow-read --allow-env index.ts",
        "dev": "deno run --watch --allow-net --allow-read --allow-env index.ts",
    }

    skeleton = (
        ("deno.json", "vue-cdn/deno.json.j2"),
        (".gitignore", "shared/gitignore.j2"),
        ("index.ts", "vue-cdn/index.ts.j2"),
        ("index.html", "vue-cdn/index.html.j2"),
        ("styles.css", "shared/index.css.j2"),
        ("main.js", "vue-cdn/main.js.j2"),
        ("pages/Home.js", "vue-cdn/pages/Home.js.j2"),
        ("pages/About.js", "vue-cdn/pages/About.js.j2"),
        ("components/HelloWorld.js", "vue-cdn/components/HelloWorld.js.j2"),
        ("components/Counter.js", "vue-cdn/components/Counter.js.j2"),
        ("utils/greeting.js", "shared/greeting.j2"),
    )

    def build_tables(self):
        stores = StoreLayout(
            stores_dir="stores/",
            from_counter="../stores/",
            from_entry="./stores/",
            ts_ext=".js",
            lang="js",
        )
        return {
            "validation_library": validation_table(self.layout, VALIDATION_PAGE),
            "error_handling_library": error_table(self.layout, ERROR_PAGE),
            "testing_library": testing_table(self.layout, "vue"),
            "state_library": vue_state_table(stores),
            "ui_library": vue_ui_table(cdn=True),
        }

    def extra_context(self, config: Configuration, context: dict[str, Any]) -> dict[str, Any]:
        return {
            "import_map": {"imports": self.browser_imports(context["dependencies"])},
            "deno_config": self.deno_config(context),
        }

    def browser_imports(self, dependencies: dict[str, str]) -> dict[str, str]:
        """Import-map entries for every browser-side package (and used subpaths)."""
        imports: dict[str, str] = {}
        for name, spec in dependencies.items():
            if name in SERVER_PACKAGES:
                continue
            imports[name] = esm_url(spec, name)
            for subpath in SUBPATHS.get(name, ()):
                imports[f"{name}/{subpath}"] = esm_url(spec, name, subpath)
        return imports

    def deno_config(self, context: dict[str, Any]) -> dict[str, Any]:
        imports = {
            name: deno_specifier(spec, name)
            for name, spec in context["dependencies"].items()
            if name in SERVER_PACKAGES
        }
        imports.update(
            (name, deno_specifier(spec, name)) for name, spec in context["dev_dependencies"].items()
        )
        config: dict[str, Any] = {"tasks": context["scripts"], "imports": dict(sorted(imports.items()))}
        if context["dev_dependencies"]:
            config["nodeModulesDir"] = True
        return config
