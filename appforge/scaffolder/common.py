"""Framework-independent lookup tables: validation, error handling, testing.

Validation and error-handling options contribute one module each plus a
usage snippet on the example page.  Testing options contribute dev
dependencies, scripts and test files.  The file contents come from the
``shared/`` templates; only paths and the page snippet vary per quadrant,
which is what :class:`SourceLayout` describes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from appforge.catalog import (
    ErrorHandlingLibrary,
    Framework,
    TestingLibrary,
    ValidationLibrary,
    label,
)
from appforge.utils import slugify

from .options import NONE_OPTION, AxisOption, Fragment


@dataclass(frozen=True)
class SourceLayout:
    """Where a quadrant keeps its sources and how relative imports look."""

    framework: Framework
    src: str                # "src/" for Vite projects, "" for Deno ones
    lang: str               # "ts" or "js"
    hello_import: str       # import path of the Hello component from a test file
    import_ext: str = ""    # extension spelled out in relative imports (Deno)
    deno: bool = False

    @property
    def unit_dir(self) -> str:
        return f"{self.src}__tests__/" if self.src else "tests/"

    @property
    def component_test_ext(self) -> str:
        if self.framework is Framework.REACT and self.lang == "ts":
            return "tsx"
        return self.lang

    def template_vars(self) -> dict[str, Any]:
        """Template variables used by the shared test and module templates."""
        return {
            "lang": self.lang,
            "import_ext": self.import_ext,
            "greeting_import": f"../utils/greeting{self.import_ext}",
            "hello_import": self.hello_import,
            "test_setup": f"./{self.src}setupTests.{self.lang}",
            "unit_dir": self.unit_dir,
        }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

VALIDATION_DEPENDENCIES: dict[ValidationLibrary, dict[str, str]] = {
    ValidationLibrary.ZOD: {"zod": "^3.22.4"},
    ValidationLibrary.YUP: {"yup": "^1.4.0"},
    # io-ts is built on fp-ts and needs it as a peer.
    ValidationLibrary.IO_TS: {"io-ts": "^2.2.21", "fp-ts": "^2.16.2"},
    ValidationLibrary.SUPERSTRUCT: {"superstruct": "^1.0.4"},
    ValidationLibrary.VALIBOT: {"valibot": "^0.30.0"},
    ValidationLibrary.RUNTYPES: {"runtypes": "^6.7.0"},
}


def validation_table(layout: SourceLayout, page: Fragment) -> dict[ValidationLibrary, AxisOption]:
    """Each library gets ``validation/userSchema.<lang>`` and the *page* snippet."""
    table: dict[ValidationLibrary, AxisOption] = {ValidationLibrary.NONE: NONE_OPTION}
    for value, deps in VALIDATION_DEPENDENCIES.items():
        table[value] = AxisOption(
            label=label(value),
            dependencies=deps,
            files=(
                (
                    f"{layout.src}validation/userSchema.{layout.lang}",
                    f"shared/validation/{slugify(value.value)}.{layout.lang}.j2",
                ),
            ),
            page=page,
        )
    return table


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------

ERROR_HANDLING_DEPENDENCIES: dict[ErrorHandlingLibrary, dict[str, str]] = {
    ErrorHandlingLibrary.NEVERTHROW: {"neverthrow": "^6.2.1"},
    ErrorHandlingLibrary.TS_RESULTS: {"ts-results": "^3.3.0"},
    ErrorHandlingLibrary.OXIDE_TS: {"oxide.ts": "^1.1.0"},
    ErrorHandlingLibrary.TRUE_MYTH: {"true-myth": "^7.3.0"},
    ErrorHandlingLibrary.PURIFY_TS: {"purify-ts": "^2.1.0"},
    ErrorHandlingLibrary.FP_TS: {"fp-ts": "^2.16.5"},
}


def error_table(layout: SourceLayout, page: Fragment) -> dict[ErrorHandlingLibrary, AxisOption]:
    """Each library gets ``utils/result.<lang>`` and the *page* snippet."""
    table: dict[ErrorHandlingLibrary, AxisOption] = {ErrorHandlingLibrary.NONE: NONE_OPTION}
    for value, deps in ERROR_HANDLING_DEPENDENCIES.items():
        table[value] = AxisOption(
            label=label(value),
            dependencies=deps,
            files=(
                (
                    f"{layout.src}utils/result.{layout.lang}",
                    f"shared/result/{slugify(value.value)}.{layout.lang}.j2",
                ),
            ),
            page=page,
        )
    return table


# ---------------------------------------------------------------------------
# Testing
# ---------------------------------------------------------------------------

_VITEST = {"vitest": "^1.4.0"}

_COMPONENT_TESTING: dict[str, dict[str, str]] = {
    "react": {"@testing-library/react": "^14.2.2"},
    "preact": {"@testing-library/preact": "^3.2.3"},
    "vue": {"@testing-library/vue": "^8.0.3"},
}


def _run(layout: SourceLayout, command: str) -> str:
    """Script body for an npm binary; Deno goes through ``npm:`` specifiers."""
    if not layout.deno:
        return command
    binary, _, rest = command.partition(" ")
    return f"deno run -A npm:{binary} {rest}".rstrip()


def testing_table(layout: SourceLayout, flavour: str) -> dict[TestingLibrary, AxisOption]:
    """Testing options for one quadrant.

    Args:
        layout: Source layout of the quadrant.
        flavour: ``"react"``, ``"preact"`` or ``"vue"``; picks the component
            testing binding and the Vitest config template.
    """
    lang = layout.lang
    unit_test = f"{layout.unit_dir}greeting.test.{lang}"
    jest_files: tuple[tuple[str, str], ...] = ((unit_test, "shared/testing/greeting.jest.test.j2"),)
    if not layout.deno:
        jest_files = (("jest.config.ts", "shared/testing/jest.config.ts.j2"),) + jest_files
    puppeteer_cmd = "deno run -A" if layout.deno else "node"

    return {
        TestingLibrary.NONE: NONE_OPTION,
        TestingLibrary.JEST: AxisOption(
            label=label(TestingLibrary.JEST),
            dev_dependencies=(
                {"jest": "^29.7.0", "@jest/globals": "^29.7.0"}
                if layout.deno
                else {
                    "jest": "^29.7.0",
                    "@jest/globals": "^29.7.0",
                    "ts-jest": "^29.1.2",
                    "@types/jest": "^29.5.12",
                }
            ),
            scripts={"test": _run(layout, "jest")},
            files=jest_files,
        ),
        TestingLibrary.VITEST: AxisOption(
            label=label(TestingLibrary.VITEST),
            dev_dependencies=_VITEST,
            scripts={"test": _run(layout, "vitest")},
            files=((unit_test, "shared/testing/greeting.vitest.test.j2"),),
        ),
        TestingLibrary.CYPRESS: AxisOption(
            label=label(TestingLibrary.CYPRESS),
            dev_dependencies={"cypress": "^13.7.1"},
            scripts={
                "test:e2e": _run(layout, "cypress run"),
                "cypress:open": _run(layout, "cypress open"),
            },
            files=(
                (f"cypress.config.{lang}", "shared/testing/cypress.config.j2"),
                (f"cypress/e2e/home.cy.{lang}", "shared/testing/home.cy.j2"),
            ),
        ),
        TestingLibrary.PLAYWRIGHT: AxisOption(
            label=label(TestingLibrary.PLAYWRIGHT),
            dev_dependencies={"@playwright/test": "^1.42.1"},
            scripts={"test:e2e": _run(layout, "playwright test")},
            files=(
                (f"playwright.config.{lang}", "shared/testing/playwright.config.j2"),
                (f"e2e/home.spec.{lang}", "shared/testing/home.spec.j2"),
            ),
        ),
        TestingLibrary.PUPPETEER: AxisOption(
            label=label(TestingLibrary.PUPPETEER),
            dev_dependencies={"puppeteer": "^22.6.0"},
            scripts={"test:e2e": f"{puppeteer_cmd} e2e/home.puppeteer.mjs"},
            files=(("e2e/home.puppeteer.mjs", "shared/testing/home.puppeteer.mjs.j2"),),
        ),
        TestingLibrary.REACT_TESTING_LIBRARY: AxisOption(
            label=label(TestingLibrary.REACT_TESTING_LIBRARY),
            dev_dependencies={
                **_COMPONENT_TESTING[flavour],
                "@testing-library/jest-dom": "^6.4.2",
                **_VITEST,
                "jsdom": "^24.0.0",
            },
            scripts={"test": _run(layout, "vitest")},
            files=(
                (f"vitest.config.{lang}", f"testing/{flavour}/vitest.config.j2"),
                (f"{layout.src}setupTests.{lang}", "shared/testing/setupTests.j2"),
                (
                    f"{layout.unit_dir}Hello.test.{layout.component_test_ext}",
                    f"testing/{flavour}/Hello.test.j2",
                ),
            ),
        ),
    }


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

def package_manifest(context: dict[str, Any]) -> dict[str, Any]:
    """``package.json`` contents for the Vite quadrants."""
    return {
        "name": context["project_name"],
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": context["scripts"],
        "dependencies": context["dependencies"],
        "devDependencies": context["dev_dependencies"],
    }
