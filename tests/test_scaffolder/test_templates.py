"""Tests for the Jinja2 TemplateRenderer and its custom filters."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jinja2 import UndefinedError

from appforge.scaffolder.templates import TemplateRenderer, deno_specifier, esm_url

pytestmark = pytest.mark.unit


class TestRenderer:
    @pytest.fixture
    def scratch(self, tmp_path: Path) -> TemplateRenderer:
        (tmp_path / "data.json.j2").write_text("{{ data | tojson_pretty }}\n", encoding="utf-8")
        (tmp_path / "tag.tsx.j2").write_text("{{ tag }}", encoding="utf-8")
        (tmp_path / "tag.html.j2").write_text("{{ tag }}", encoding="utf-8")
        (tmp_path / "missing.j2").write_text("{{ missing }}", encoding="utf-8")
        return TemplateRenderer(tmp_path)

    def test_tojson_pretty(self, scratch: TemplateRenderer) -> None:
        out = scratch.render("data.json.j2", {"data": {"a": [1, 2]}})
        assert json.loads(out) == {"a": [1, 2]}
        assert '\n  "a"' in out

    def test_undefined_variable_raises(self, scratch: TemplateRenderer) -> None:
        with pytest.raises(UndefinedError):
            scratch.render("missing.j2", {})

    @pytest.mark.parametrize("name", ["tag.tsx.j2", "tag.html.j2"])
    def test_no_html_escaping(self, scratch: TemplateRenderer, name: str) -> None:
        out = scratch.render(name, {"tag": "<Provider store={store}>"})
        assert out == "<Provider store={store}>"

    def test_keeps_trailing_newline(self, renderer: TemplateRenderer) -> None:
        context = {"choices": {"testing_library": "cypress"}, "is_deno": False}
        out = renderer.render("shared/gitignore.j2", context)
        assert out.endswith("\n")
        assert "cypress/videos/" in out
        assert "_fresh/" not in out

    def test_custom_template_dir(self, tmp_path: Path) -> None:
        (tmp_path / "hello.j2").write_text("Hello {{ who }}!\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"who": "Deno"}) == "Hello Deno!\n"


class TestDenoSpecifier:
    def test_version_range(self) -> None:
        assert deno_specifier("^3.22.4", "zod") == "npm:zod@^3.22.4"

    def test_scoped_package(self) -> None:
        assert deno_specifier("^1.42.1", "@playwright/test") == "npm:@playwright/test@^1.42.1"

    @pytest.mark.parametrize(
        "spec",
        ["https://esm.sh/preact@10.19.6", "npm:jest@29", "jsr:@std/http@^0.221.0"],
    )
    def test_passthrough(self, spec: str) -> None:
        assert deno_specifier(spec, "whatever") == spec


class TestEsmUrl:
    def test_version_range(self) -> None:
        assert esm_url("^2.1.7", "pinia") == "https://esm.sh/pinia@^2.1.7?external=vue"

    def test_subpath(self) -> None:
        assert (
            esm_url("^1.13.2", "valtio", "vanilla")
            == "https://esm.sh/valtio@^1.13.2/vanilla?external=vue"
        )

    def test_url_passthrough(self) -> None:
        url = "https://unpkg.com/vue@3.4.21/dist/vue.esm-browser.js"
        assert esm_url(url, "vue") == url

    def test_npm_prefix_is_stripped(self) -> None:
        assert esm_url("npm:zod@^3.22.4", "zod") == "https://esm.sh/zod@^3.22.4?external=vue"
