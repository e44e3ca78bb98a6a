"""Vue 3 on Node (or Bun), bundled with Vite."""

from __future__ import annotations

from typing import Any

from appforge.catalog import Framework, Runtime
from appforge.models import Configuration

from .base import BaseResolver
from .common import (
    SourceLayout,
    error_table,
    package_manifest,
    testing_table,
    validation_table,
)
from .options import Fragment, StoreLayout
from .vue_options import vue_state_table, vue_ui_table


VALIDATION_PAGE = Fragment(
    imports=("import * as userValidation from '../validation/userSchema';",),
    setup=("const userCheck = userValidation.validateUser({ name: 'Ada', email: 'ada@example.com' });",),
    markup=("<p>Validation: {{ userCheck.success ? 'valid user' : userCheck.error }}</p>",),
    exposes=("userCheck",),
)

ERROR_PAGE = Fragment(
    imports=("import { safeDivide } from '../utils/result';",),
    setup=("const quotient = safeDivide(10, 2);",),
    markup=("<p>10 / 2 = {{ quotient }}</p>",),
    exposes=("quotient",),
)


class ViteVueResolver(BaseResolver):
    framework = Framework.VUE3
    runtime = Runtime.NODE
    title = "Vue 3 + Vite"
    layout = SourceLayout(
        framework=Framework.VUE3,
        src="src/",
        lang="ts",
        hello_import="../components/HelloWorld.vue",
    )

    base_dependencies = {
        "vue": "^3.4.21",
        "vue-router": "^4.3.0",
    }
    base_dev_dependencies = {
        "@typescript-eslint/eslint-plugin": "^7.4.0",
        "@typescript-eslint/parser": "^7.4.0",
        "@vitejs/plugin-vue": "^5.0.4",
        "eslint": "^8.57.0",
        "eslint-config-prettier": "^9.1.0",
        "eslint-plugin-vue": "^9.23.0",
        "prettier": "^3.2.5",
        "typescript": "^5.4.3",
        "vite": "^5.2.0",
        "vue-tsc": "^2.0.6",
    }
    base_scripts = {
        "dev": "vite",
        "build": "vue-tsc --noEmit && vite build",
        "preview": "vite preview",
        "lint": "eslint src --ext ts,vue",
        "format": "prettier --write src",
    }

    skeleton = (
        ("package.json", "shared/package.json.j2"),
        (".gitignore", "shared/gitignore.j2"),
        (".prettierrc", "shared/prettierrc.j2"),
        (".eslintrc.json", "vite-vue/eslintrc.json.j2"),
        ("tsconfig.json", "shared/tsconfig.json.j2"),
        ("tsconfig.node.json", "shared/tsconfig.node.json.j2"),
        ("index.html", "vite-vue/index.html.j2"),
        ("vite.config.ts", "vite-vue/vite.config.ts.j2"),
        ("src/env.d.ts", "shared/vite-env.d.ts.j2"),
        ("src/index.css", "shared/index.css.j2"),
        ("src/main.ts", "vite-vue/src/main.ts.j2"),
        ("src/router.ts", "vite-vue/src/router.ts.j2"),
        ("src/App.vue", "vite-vue/src/App.vue.j2"),
        ("src/pages/Home.vue", "vite-vue/src/pages/Home.vue.j2"),
        ("src/pages/About.vue", "vite-vue/src/pages/About.vue.j2"),
        ("src/components/HelloWorld.vue", "vite-vue/src/components/HelloWorld.vue.j2"),
        ("src/components/Counter.vue", "vite-vue/src/components/Counter.vue.j2"),
        ("src/utils/greeting.ts", "shared/greeting.j2"),
    )

    def build_tables(self):
        stores = StoreLayout(
            stores_dir="src/stores/",
            from_counter="../stores/",
            from_entry="./stores/",
        )
        return {
            "validation_library": validation_table(self.layout, VALIDATION_PAGE),
            "error_handling_library": error_table(self.layout, ERROR_PAGE),
            "testing_library": testing_table(self.layout, "vue"),
            "state_library": vue_state_table(stores),
            "ui_library": vue_ui_table(),
        }

    def extra_context(self, config: Configuration, context: dict[str, Any]) -> dict[str, Any]:
        return {"manifest": package_manifest(context)}
