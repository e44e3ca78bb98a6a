"""Tests for the framework-independent option tables."""

from __future__ import annotations

import pytest

from appforge import catalog
from appforge.catalog import (
    ErrorHandlingLibrary,
    Framework,
    ValidationLibrary,
)
from appforge.scaffolder import common
from appforge.scaffolder.options import NONE_OPTION, Fragment

pytestmark = pytest.mark.unit

VITE = common.SourceLayout(framework=Framework.REACT, src="src/", lang="ts", hello_import="../components/Hello")
DENO_JS = common.SourceLayout(
    framework=Framework.VUE3, src="", lang="js", hello_import="../components/HelloWorld.js",
    import_ext=".js", deno=True,
)


class TestSourceLayout:
    def test_unit_dir(self) -> None:
        assert VITE.unit_dir == "src/__tests__/"
        assert DENO_JS.unit_dir == "tests/"

    def test_component_test_ext(self) -> None:
        assert VITE.component_test_ext == "tsx"
        assert DENO_JS.component_test_ext == "js"

    def test_template_vars(self) -> None:
        assert DENO_JS.template_vars()["greeting_import"] == "../utils/greeting.js"
        assert VITE.template_vars()["test_setup"] == "./src/setupTests.ts"


class TestValidationTable:
    def test_every_library_present(self) -> None:
        table = common.validation_table(VITE, Fragment())
        assert set(table) == set(ValidationLibrary)
        assert table[ValidationLibrary.NONE] is NONE_OPTION

    def test_paths_follow_layout(self) -> None:
        option = common.validation_table(DENO_JS, Fragment())[ValidationLibrary.ZOD]
        assert option.files == (("validation/userSchema.js", "shared/validation/zod.js.j2"),)

    def test_io_ts_brings_fp_ts(self) -> None:
        option = common.validation_table(VITE, Fragment())[ValidationLibrary.IO_TS]
        assert set(option.dependencies) == {"io-ts", "fp-ts"}


class TestErrorTable:
    def test_slugged_template_name(self) -> None:
        option = common.error_table(VITE, Fragment())[ErrorHandlingLibrary.OXIDE_TS]
        assert option.files == (("src/utils/result.ts", "shared/result/oxide-ts.ts.j2"),)
        assert option.dependencies == {"oxide.ts": "^1.1.0"}


class TestTestingTable:
    def test_none_adds_nothing(self) -> None:
        assert common.testing_table(VITE, "react")[catalog.TestingLibrary.NONE] is NONE_OPTION

    def test_deno_scripts_use_npm_specifiers(self) -> None:
        table = common.testing_table(DENO_JS, "vue")
        assert table[catalog.TestingLibrary.VITEST].scripts == {"test": "deno run -A npm:vitest"}
        assert table[catalog.TestingLibrary.CYPRESS].scripts["test:e2e"] == "deno run -A npm:cypress run"

    def test_deno_jest_has_no_ts_jest(self) -> None:
        option = common.testing_table(DENO_JS, "vue")[catalog.TestingLibrary.JEST]
        assert "ts-jest" not in option.dev_dependencies
        assert [path for path, _ in option.files] == ["tests/greeting.test.js"]

    @pytest.mark.parametrize(
        "flavour,binding",
        [
            ("react", "@testing-library/react"),
            ("preact", "@testing-library/preact"),
            ("vue", "@testing-library/vue"),
        ],
    )
    def test_component_binding(self, flavour: str, binding: str) -> None:
        option = common.testing_table(VITE, flavour)[catalog.TestingLibrary.REACT_TESTING_LIBRARY]
        assert binding in option.dev_dependencies
        assert ("vitest.config.ts", f"testing/{flavour}/vitest.config.j2") in option.files


def test_package_manifest() -> None:
    context = {
        "project_name": "react-node-app",
        "scripts": {"dev": "vite"},
        "dependencies": {"react": "^18.2.0"},
        "dev_dependencies": {"vite": "^5.2.0"},
    }
    manifest = common.package_manifest(context)
    assert manifest["private"] is True
    assert manifest["devDependencies"] == {"vite": "^5.2.0"}
