"""Tests for the Vue 3 + Vite resolver."""

from __future__ import annotations

import json

import pytest

from appforge.scaffolder import ViteVueResolver

pytestmark = pytest.mark.unit


def _manifest(fileset) -> dict:
    return json.loads(fileset.get("package.json"))


class TestSkeleton:
    def test_bare_project_files(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node")
        expected = {path for path, _ in ViteVueResolver.skeleton} | {"README.md"}
        assert set(fileset.paths()) == expected

    def test_manifest(self, resolve_with) -> None:
        manifest = _manifest(resolve_with("vue3", "node", package_manager="yarn"))
        assert manifest["name"] == "vue3-node-app"
        assert set(manifest["dependencies"]) == {"vue", "vue-router"}
        assert "@vitejs/plugin-vue" in manifest["devDependencies"]

    def test_main_mounts_router_only(self, resolve_with) -> None:
        main = resolve_with("vue3", "node").get("src/main.ts")
        assert "app.use(router);" in main
        assert main.count("app.use(") == 1
        assert "app.mount('#app');" in main

    def test_home_keeps_vue_interpolation(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node")
        assert "<h1>vue3-node-app</h1>" in fileset.get("src/pages/Home.vue")
        assert "Count: {{ count }}" in fileset.get("src/components/Counter.vue")
        assert "{{ greet(name) }}" in fileset.get("src/components/HelloWorld.vue")


class TestState:
    def test_default_counter_uses_ref(self, resolve_with) -> None:
        counter = resolve_with("vue3", "node").get("src/components/Counter.vue")
        assert "import { ref } from 'vue';" in counter
        assert "const count = ref(0);" in counter

    def test_pinia_installs_plugin(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", state_library="pinia")
        main = fileset.get("src/main.ts")
        assert "import { createPinia } from 'pinia';" in main
        assert "app.use(createPinia());" in main
        assert fileset.has("src/stores/counter.ts")
        assert "useCounterStore" in fileset.get("src/components/Counter.vue")

    def test_valtio_needs_no_install(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", state_library="valtio")
        main = fileset.get("src/main.ts")
        assert main.count("app.use(") == 1
        assert "app.provide(" not in main
        assert "from 'valtio/vanilla'" in fileset.get("src/components/Counter.vue")

    def test_mobx_provides_store(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", state_library="mobx")
        assert "app.provide('counterStore', counterStore);" in fileset.get("src/main.ts")
        counter = fileset.get("src/components/Counter.vue")
        assert "inject<CounterStore>('counterStore')!" in counter
        assert "import { inject, onUnmounted, ref } from 'vue';" in counter

    def test_rtk_query_files(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", state_library="redux-toolkit-query")
        for path in ("src/stores/api.ts", "src/stores/counterSlice.ts", "src/stores/store.ts"):
            assert fileset.has(path)
        assert "app.provide('store', store);" in fileset.get("src/main.ts")
        assert _manifest(fileset)["dependencies"]["@reduxjs/toolkit"] == "^2.2.1"


class TestUI:
    def test_element_plus(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", ui_library="element-plus")
        main = fileset.get("src/main.ts")
        assert "app.use(ElementPlus);" in main
        assert "import 'element-plus/dist/index.css';" in main
        assert "<el-button" in fileset.get("src/pages/Home.vue")

    def test_vuetify_created_before_install(self, resolve_with) -> None:
        main = resolve_with("vue3", "node", ui_library="vuetify").get("src/main.ts")
        assert main.index("createVuetify({") < main.index("app.use(vuetify);")

    def test_state_installed_before_ui(self, resolve_with) -> None:
        main = resolve_with("vue3", "node", state_library="pinia", ui_library="naive-ui").get(
            "src/main.ts"
        )
        assert main.index("app.use(createPinia());") < main.index("app.use(naive);")


class TestValidationAndTesting:
    def test_valibot_on_home(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", validation_library="valibot")
        assert "from 'valibot'" in fileset.get("src/validation/userSchema.ts")
        home = fileset.get("src/pages/Home.vue")
        assert home.count("validateUser(") == 1
        assert "{{ userCheck.success ? 'valid user' : userCheck.error }}" in home

    def test_testing_library_for_vue(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", testing_library="react-testing-library")
        dev = _manifest(fileset)["devDependencies"]
        assert "@testing-library/vue" in dev
        assert "@testing-library/react" not in dev
        assert fileset.has("src/__tests__/Hello.test.ts")
        assert "plugins: [vue()]" in fileset.get("vitest.config.ts")

    def test_vitest_unit_test(self, resolve_with) -> None:
        fileset = resolve_with("vue3", "node", testing_library="vitest")
        assert _manifest(fileset)["scripts"]["test"] == "vitest"
        assert fileset.has("src/__tests__/greeting.test.ts")
