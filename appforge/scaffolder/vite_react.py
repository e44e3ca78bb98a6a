"""React on Node (or Bun), bundled with Vite."""

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
from .options import Fragment, StoreLayout, wrap_lines
from .react_options import react_state_table, react_ui_table


VALIDATION_PAGE = Fragment(
    imports=("import * as userValidation from '../validation/userSchema';",),
    setup=("const userCheck = userValidation.validateUser({ name: 'Ada', email: 'ada@example.com' });",),
    markup=("<p>Validation: {userCheck.success ? 'valid user' : userCheck.error}</p>",),
)

ERROR_PAGE = Fragment(
    imports=("import { safeDivide } from '../utils/result';",),
    setup=("const quotient = safeDivide(10, 2);",),
    markup=("<p>10 / 2 = {quotient}</p>",),
)


class ViteReactResolver(BaseResolver):
    framework = Framework.REACT
    runtime = Runtime.NODE
    title = "React + Vite"
    layout = SourceLayout(
        framework=Framework.REACT,
        src="src/",
        lang="ts",
        hello_import="../components/Hello",
    )

    base_dependencies = {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
        "react-router-dom": "^6.22.3",
    }
    base_dev_dependencies = {
        "@types/react": "^18.2.66",
        "@types/react-dom": "^18.2.22",
        "@typescript-eslint/eslint-plugin": "^7.4.0",
        "@typescript-eslint/parser": "^7.4.0",
        "@vitejs/plugin-react": "^4.2.1",
        "eslint": "^8.57.0",
        "eslint-config-prettier": "^9.1.0",
        "eslint-plugin-react-hooks": "^4.6.0",
        "prettier": "^3.2.5",
        "typescript": "^5.4.3",
        "vite": "^5.2.0",
    }
    base_scripts = {
        "dev": "vite",
        "build": "tsc && vite build",
        "preview": "vite preview",
        "lint": "eslint src --ext ts,tsx",
        "format": "prettier --write src",
    }

    skeleton = (
        ("package.json", "shared/package.json.j2"),
        (".gitignore", "shared/gitignore.j2"),
        (".prettierrc", "shared/prettierrc.j2"),
        (".eslintrc.json", "vite-react/eslintrc.json.j2"),
        ("tsconfig.json", "shared/tsconfig.json.j2"),
        ("tsconfig.node.json", "shared/tsconfig.node.json.j2"),
        ("index.html", "vite-react/index.html.j2"),
        ("vite.config.ts", "vite-react/vite.config.ts.j2"),
        ("src/vite-env.d.ts", "shared/vite-env.d.ts.j2"),
        ("src/index.css", "shared/index.css.j2"),
        ("src/main.tsx", "vite-react/src/main.tsx.j2"),
        ("src/App.tsx", "vite-react/src/App.tsx.j2"),
        ("src/routes/Home.tsx", "vite-react/src/routes/Home.tsx.j2"),
        ("src/routes/About.tsx", "vite-react/src/routes/About.tsx.j2"),
        ("src/components/Hello.tsx", "vite-react/src/components/Hello.tsx.j2"),
        ("src/components/Counter.tsx", "vite-react/src/components/Counter.tsx.j2"),
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
            "testing_library": testing_table(self.layout, "react"),
            "state_library": react_state_table(stores),
            "ui_library": react_ui_table(),
        }

    def extra_context(self, config: Configuration, context: dict[str, Any]) -> dict[str, Any]:
        wrappers = [
            ("<StrictMode>", "</StrictMode>"),
            *context["entry"]["providers"],
            ("<BrowserRouter>", "</BrowserRouter>"),
        ]
        return {
            "manifest": package_manifest(context),
            "root_lines": wrap_lines(wrappers, ["<App />"], level=1),
        }
