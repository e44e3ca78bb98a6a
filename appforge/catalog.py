"""Option catalog: the legal values for every configurable axis.

Most axes are framework-independent.  ``state_library`` and ``ui_library``
have a domain that depends on the chosen framework; use
:func:`state_options` / :func:`ui_options` (or :func:`options_for`) to get
the list for a given framework.
"""

from __future__ import annotations

from enum import Enum


class UnsupportedOptionError(ValueError):
    """Raised when a value is outside the domain of an axis.

    This is a programmer or config-file error; the interactive prompts only
    ever offer legal values.
    """

    def __init__(self, axis: str, value: str, framework: str | None = None) -> None:
        self.axis = axis
        self.value = value
        self.framework = framework
        scope = f" for framework '{framework}'" if framework else ""
        super().__init__(f"Unsupported {axis} '{value}'{scope}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Framework(str, Enum):
    REACT = "react"
    VUE3 = "vue3"


class Runtime(str, Enum):
    NODE = "node"
    BUN = "bun"
    DENO = "deno"


class PackageManager(str, Enum):
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


class ValidationLibrary(str, Enum):
    NONE = "none"
    ZOD = "zod"
    YUP = "yup"
    IO_TS = "io-ts"
    SUPERSTRUCT = "superstruct"
    VALIBOT = "valibot"
    RUNTYPES = "runtypes"


class ErrorHandlingLibrary(str, Enum):
    NONE = "none"
    NEVERTHROW = "neverthrow"
    TS_RESULTS = "ts-results"
    OXIDE_TS = "oxide.ts"
    TRUE_MYTH = "true-myth"
    PURIFY_TS = "purify-ts"
    FP_TS = "fp-ts"


class TestingLibrary(str, Enum):
    __test__ = False  # not a pytest class

    NONE = "none"
    JEST = "jest"
    VITEST = "vitest"
    CYPRESS = "cypress"
    PLAYWRIGHT = "playwright"
    PUPPETEER = "puppeteer"
    REACT_TESTING_LIBRARY = "react-testing-library"


class StateLibrary(str, Enum):
    """Union of the React and Vue state-management choices."""

    NONE = "none"
    REDUX = "redux"
    ZUSTAND = "zustand"
    RECOIL = "recoil"
    JOTAI = "jotai"
    MOBX = "mobx"
    VALTIO = "valtio"
    NANOSTORES = "nanostores"
    REDUX_TOOLKIT_QUERY = "redux-toolkit-query"
    PINIA = "pinia"


class UILibrary(str, Enum):
    """Union of the React and Vue component libraries."""

    NONE = "none"
    MUI = "mui"
    ANTD = "antd"
    CHAKRA_UI = "chakra-ui"
    MANTINE = "mantine"
    ELEMENT_PLUS = "element-plus"
    VUETIFY = "vuetify"
    NAIVE_UI = "naive-ui"
    ANT_DESIGN_VUE = "ant-design-vue"


# ---------------------------------------------------------------------------
# Framework-dependent domains
# ---------------------------------------------------------------------------

_STATE_DOMAINS: dict[Framework, tuple[StateLibrary, ...]] = {
    Framework.REACT: (
        StateLibrary.NONE,
        StateLibrary.REDUX,
        StateLibrary.ZUSTAND,
        StateLibrary.RECOIL,
        StateLibrary.JOTAI,
        StateLibrary.MOBX,
        StateLibrary.VALTIO,
        StateLibrary.NANOSTORES,
        StateLibrary.REDUX_TOOLKIT_QUERY,
    ),
    Framework.VUE3: (
        StateLibrary.NONE,
        StateLibrary.PINIA,
        StateLibrary.VALTIO,
        StateLibrary.NANOSTORES,
        StateLibrary.MOBX,
        StateLibrary.REDUX_TOOLKIT_QUERY,
    ),
}

_UI_DOMAINS: dict[Framework, tuple[UILibrary, ...]] = {
    Framework.REACT: (
        UILibrary.NONE,
        UILibrary.MUI,
        UILibrary.ANTD,
        UILibrary.CHAKRA_UI,
        UILibrary.MANTINE,
    ),
    Framework.VUE3: (
        UILibrary.NONE,
        UILibrary.ELEMENT_PLUS,
        UILibrary.VUETIFY,
        UILibrary.NAIVE_UI,
        UILibrary.ANT_DESIGN_VUE,
    ),
}

# State libraries whose idiomatic usage wraps the app root in a provider
# (React) or installs/provides a store on the app instance (Vue).
PROVIDER_STATE_LIBRARIES: frozenset[StateLibrary] = frozenset({
    StateLibrary.REDUX,
    StateLibrary.REDUX_TOOLKIT_QUERY,
    StateLibrary.RECOIL,
    StateLibrary.MOBX,
    StateLibrary.PINIA,
})

# Axis name -> enum, for every axis.  The optional axes are listed in merge
# order; later axes win dependency-key collisions.
AXES: dict[str, type[Enum]] = {
    "framework": Framework,
    "runtime": Runtime,
    "package_manager": PackageManager,
    "validation_library": ValidationLibrary,
    "error_handling_library": ErrorHandlingLibrary,
    "testing_library": TestingLibrary,
    "state_library": StateLibrary,
    "ui_library": UILibrary,
}

OPTIONAL_AXES: tuple[str, ...] = (
    "validation_library",
    "error_handling_library",
    "testing_library",
    "state_library",
    "ui_library",
)

AXIS_TITLES: dict[str, str] = {
    "framework": "Framework",
    "runtime": "Runtime",
    "package_manager": "Package manager",
    "validation_library": "Validation",
    "error_handling_library": "Error handling",
    "testing_library": "Testing",
    "state_library": "State management",
    "ui_library": "UI library",
}

LABELS: dict[str, str] = {
    "react": "React",
    "vue3": "Vue 3",
    "node": "Node.js",
    "deno": "Deno",
    "npm": "npm",
    "pnpm": "pnpm",
    "yarn": "Yarn",
    "bun": "Bun",
    "none": "None",
    "zod": "Zod",
    "yup": "Yup",
    "io-ts": "io-ts",
    "superstruct": "Superstruct",
    "valibot": "Valibot",
    "runtypes": "Runtypes",
    "neverthrow": "neverthrow",
    "ts-results": "ts-results",
    "oxide.ts": "oxide.ts",
    "true-myth": "True Myth",
    "purify-ts": "purify-ts",
    "fp-ts": "fp-ts",
    "jest": "Jest",
    "vitest": "Vitest",
    "cypress": "Cypress",
    "playwright": "Playwright",
    "puppeteer": "Puppeteer",
    "react-testing-library": "Testing Library",
    "redux": "Redux Toolkit",
    "zustand": "Zustand",
    "recoil": "Recoil",
    "jotai": "Jotai",
    "mobx": "MobX",
    "valtio": "Valtio",
    "nanostores": "Nano Stores",
    "redux-toolkit-query": "RTK Query",
    "pinia": "Pinia",
    "mui": "Material UI",
    "antd": "Ant Design",
    "chakra-ui": "Chakra UI",
    "mantine": "Mantine",
    "element-plus": "Element Plus",
    "vuetify": "Vuetify",
    "naive-ui": "Naive UI",
    "ant-design-vue": "Ant Design Vue",
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def state_options(framework: Framework | str) -> list[StateLibrary]:
    """Return the legal state libraries for *framework*."""
    return list(_STATE_DOMAINS[Framework(framework)])


def ui_options(framework: Framework | str) -> list[UILibrary]:
    """Return the legal UI libraries for *framework*."""
    return list(_UI_DOMAINS[Framework(framework)])


def options_for(axis: str, framework: Framework | str | None = None) -> list[Enum]:
    """List the values of *axis*, restricted to *framework* where relevant.

    Raises:
        UnsupportedOptionError: If *axis* is unknown, or a framework-dependent
            axis is requested without a framework.
    """
    if axis not in AXES:
        raise UnsupportedOptionError("axis", axis)
    if axis in ("state_library", "ui_library"):
        if framework is None:
            raise UnsupportedOptionError(axis, "*", None)
        if axis == "state_library":
            return list(state_options(framework))
        return list(ui_options(framework))
    return list(AXES[axis])


def ensure_in_domain(axis: str, value: Enum | str, framework: Framework | str | None = None) -> None:
    """Raise :class:`UnsupportedOptionError` if *value* is not legal for *axis*."""
    raw = value.value if isinstance(value, Enum) else value
    legal = {option.value for option in options_for(axis, framework)}
    if raw not in legal:
        fw = Framework(framework).value if framework is not None else None
        raise UnsupportedOptionError(axis, raw, fw)


def label(value: Enum | str) -> str:
    """Display name for an option value."""
    raw = value.value if isinstance(value, Enum) else value
    return LABELS.get(raw, raw)
