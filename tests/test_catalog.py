"""Tests for appforge.catalog -- axis domains and labels."""

from __future__ import annotations

import pytest

from appforge.catalog import (
    AXES,
    AXIS_TITLES,
    LABELS,
    OPTIONAL_AXES,
    PROVIDER_STATE_LIBRARIES,
    Framework,
    StateLibrary,
    UILibrary,
    UnsupportedOptionError,
    ensure_in_domain,
    label,
    options_for,
    state_options,
    ui_options,
)

pytestmark = pytest.mark.unit


class TestDomains:
    def test_react_state_domain(self) -> None:
        values = [v.value for v in state_options(Framework.REACT)]
        assert values == [
            "none", "redux", "zustand", "recoil", "jotai",
            "mobx", "valtio", "nanostores", "redux-toolkit-query",
        ]

    def test_vue_state_domain(self) -> None:
        values = [v.value for v in state_options("vue3")]
        assert values == ["none", "pinia", "valtio", "nanostores", "mobx", "redux-toolkit-query"]

    def test_ui_domains_are_disjoint_apart_from_none(self) -> None:
        react = set(ui_options(Framework.REACT))
        vue = set(ui_options(Framework.VUE3))
        assert react & vue == {UILibrary.NONE}

    def test_none_is_first_for_every_optional_axis(self) -> None:
        for framework in Framework:
            for axis in OPTIONAL_AXES:
                assert options_for(axis, framework)[0].value == "none"

    def test_framework_independent_axis(self) -> None:
        assert [v.value for v in options_for("runtime")] == ["node", "bun", "deno"]

    def test_framework_dependent_axis_needs_framework(self) -> None:
        with pytest.raises(UnsupportedOptionError):
            options_for("ui_library")

    def test_unknown_axis(self) -> None:
        with pytest.raises(UnsupportedOptionError) as exc_info:
            options_for("database")
        assert exc_info.value.axis == "axis"

    def test_provider_libraries_are_legal_somewhere(self) -> None:
        legal = set(state_options("react")) | set(state_options("vue3"))
        assert PROVIDER_STATE_LIBRARIES <= legal


class TestEnsureInDomain:
    def test_accepts_legal_value(self) -> None:
        ensure_in_domain("state_library", StateLibrary.PINIA, Framework.VUE3)

    def test_accepts_raw_string(self) -> None:
        ensure_in_domain("ui_library", "mantine", "react")

    def test_rejects_cross_framework_value(self) -> None:
        with pytest.raises(UnsupportedOptionError) as exc_info:
            ensure_in_domain("state_library", StateLibrary.PINIA, Framework.REACT)
        err = exc_info.value
        assert err.value == "pinia"
        assert err.framework == "react"
        assert "pinia" in str(err)

    def test_error_is_a_value_error(self) -> None:
        assert issubclass(UnsupportedOptionError, ValueError)


class TestLabels:
    def test_every_enum_value_has_a_label(self) -> None:
        for enum_cls in AXES.values():
            for value in enum_cls:
                assert value.value in LABELS, value

    def test_every_axis_has_a_title(self) -> None:
        assert set(AXIS_TITLES) == set(AXES)

    def test_label_lookup(self) -> None:
        assert label(Framework.VUE3) == "Vue 3"
        assert label("redux-toolkit-query") == "RTK Query"

    def test_unknown_label_falls_back_to_value(self) -> None:
        assert label("something-else") == "something-else"
