"""React on Deno: a Fresh project (Preact with the React compatibility layer).

Fresh hydrates every island as a separate root, so provider wrappers and
UI-library components go into ``islands/Counter.tsx`` rather than the
server-rendered ``routes/_app.tsx`` shell.
"""

from __future__ import annotations

from typing import Any

from appforge.catalog import Framework, Runtime
from appforge.models import Configuration

from .base import BaseResolver
from .common import SourceLayout, error_table, testing_table, validation_table
from .options import Fragment, StoreLayout, merge_fragments, unique, wrap_lines
from .react_options import react_state_table, react_ui_table
from .templates import deno_specifier


FRESH_VERSION = "1.6.8"
PREACT_VERSION = "10.19.6"

_PREACT = f"https://esm.sh/preact@{PREACT_VERSION}"

VALIDATION_PAGE = Fragment(
    imports=("import * as userValidation from '../validation/userSchema.ts';",),
    setup=("const userCheck = userValidation.validateUser({ name: 'Ada', email: 'ada@example.com' });",),
    markup=("<p>Validation: {userCheck.success ? 'valid user' : userCheck.error}</p>",),
)

ERROR_PAGE = Fragment(
    imports=("import { safeDivide } from '../utils/result.ts';",),
    setup=("const quotient = safeDivide(10, 2);",),
    markup=("<p>10 / 2 = {quotient}</p>",),
)


def preact_esm_url(spec: str, name: str) -> str:
    """esm.sh URL for an npm package, with React imports aliased to Preact.

    URL and ``jsr:``/``npm:`` specifiers pass through unchanged.
    """
    if spec.startswith(("http://", "https://", "npm:", "jsr:")):
        return spec
    return (
        f"https://esm.sh/{name}@{spec}"
        f"?alias=react:preact/compat,react-dom:preact/compat&external=preact"
    )


class FreshResolver(BaseResolver):
    framework = Framework.REACT
    runtime = Runtime.DENO
    title = "Fresh"
    dev_url = "http://localhost:8000"
    layout = SourceLayout(
        framework=Framework.REACT,
        src="",
        lang="ts",
        hello_import="../components/Hello.tsx",
        import_ext=".ts",
        deno=True,
    )

    # Runtime import-map entries; Preact stands in for React.
    base_dependencies = {
        "$fresh/": f"https://deno.land/x/fresh@{FRESH_VERSION}/",
        "$std/": "https://deno.land/std@0.216.0/",
        "preact": _PREACT,
        "preact/": f"{_PREACT}/",
        "@preact/signals": "https://esm.sh/*@preact/signals@1.2.2",
        "@preact/signals-core": "https://esm.sh/*@preact/signals-core@1.5.1",
        "react": f"{_PREACT}/compat",
        "react-dom": f"{_PREACT}/compat",
        "react/jsx-runtime": f"{_PREACT}/jsx-runtime",
    }
    base_scripts = {
        "start": "deno run -A --watch=static/,routes/ dev.ts",
        "dev": "deno run -A --watch=static/,routes/ dev.ts",
        "build": "deno run -A dev.ts build",
        "preview": "deno run -A main.ts",
        "check": "deno fmt --check && deno lint && deno check **/*.ts && deno check **/*.tsx",
    }

    skeleton = (
        ("deno.json", "fresh/deno.json.j2"),
        (".gitignore", "shared/gitignore.j2"),
        ("dev.ts", "fresh/dev.ts.j2"),
        ("main.ts", "fresh/main.ts.j2"),
        ("fresh.config.ts", "fresh/fresh.config.ts.j2"),
        ("fresh.gen.ts", "fresh/fresh.gen.ts.j2"),
        ("static/styles.css", "shared/index.css.j2"),
        ("routes/_app.tsx", "fresh/routes/_app.tsx.j2"),
        ("routes/index.tsx", "fresh/routes/index.tsx.j2"),
        ("routes/about.tsx", "fresh/routes/about.tsx.j2"),
        ("components/Header.tsx", "fresh/components/Header.tsx.j2"),
        ("components/Footer.tsx", "fresh/components/Footer.tsx.j2"),
        ("components/Hello.tsx", "fresh/components/Hello.tsx.j2"),
        ("islands/Counter.tsx", "fresh/islands/Counter.tsx.j2"),
        ("utils/greeting.ts", "shared/greeting.j2"),
    )

    def build_tables(self):
        stores = StoreLayout(
            stores_dir="stores/",
            from_counter="../stores/",
            from_entry="../stores/",
            ts_ext=".ts",
            tsx_ext=".tsx",
        )
        return {
            "validation_library": validation_table(self.layout, VALIDATION_PAGE),
            "error_handling_library": error_table(self.layout, ERROR_PAGE),
            "testing_library": testing_table(self.layout, "preact"),
            "state_library": react_state_table(stores),
            "ui_library": react_ui_table(css_links=True),
        }

    def extra_context(self, config: Configuration, context: dict[str, Any]) -> dict[str, Any]:
        options = dict(self.selections(config))
        entry = context["entry"]

        # The route renders on the server; the island carries everything interactive.
        page = merge_fragments(
            [options["validation_library"].page, options["error_handling_library"].page]
        )
        island = merge_fragments([options["state_library"].counter, options["ui_library"].page])
        island = Fragment(
            uses=island.uses,
            imports=tuple(unique([*entry["imports"], *island.imports])),
            setup=tuple(entry["setup"]) + island.setup,
            markup=island.markup,
            export=island.export,
        )

        return {
            "page": page,
            "island": island,
            "root_lines": wrap_lines(entry["providers"], ["<View />"], level=2),
            "deno_config": self.deno_config(context),
        }

    def deno_config(self, context: dict[str, Any]) -> dict[str, Any]:
        imports = {
            name: preact_esm_url(spec, name) for name, spec in context["dependencies"].items()
        }
        imports.update(
            (name, deno_specifier(spec, name)) for name, spec in context["dev_dependencies"].items()
        )
        return {
            "lock": False,
            "tasks": context["scripts"],
            "lint": {"rules": {"tags": ["fresh", "recommended"]}},
            "exclude": ["**/_fresh/*"],
            "imports": dict(sorted(imports.items())),
            "compilerOptions": {"jsx": "react-jsx", "jsxImportSource": "preact"},
            "nodeModulesDir": True,
        }
