"""Vue-family lookup tables: state management and UI libraries.

Shared by the Vite+Vue and Vue-from-CDN resolvers.  Store modules are
written so they are valid as both TypeScript and plain ES modules; the only
language-dependent bits are the typed ``inject`` calls in the Counter
component, driven by ``StoreLayout.lang``.

Vue apps have no JSX provider tree: a library that needs app-level setup
contributes ``app.use(...)`` or ``app.provide(...)`` statements instead.
"""

from __future__ import annotations

from appforge.catalog import StateLibrary, UILibrary, label

from .options import NONE_OPTION, AxisOption, EntryFragment, Fragment, StoreLayout


_COUNTER_EXPOSES = ("count", "increment")


def _inject(layout: StoreLayout, key: str, type_name: str) -> str:
    if layout.lang == "ts":
        return f"const store = inject<{type_name}>('{key}')!;"
    return f"const store = inject('{key}');"


def _type_import(layout: StoreLayout, type_name: str, module: str) -> tuple[str, ...]:
    if layout.lang != "ts":
        return ()
    return (f"import type {{ {type_name} }} from '{layout.from_counter}{module}{layout.ts_ext}';",)


def vue_state_table(layout: StoreLayout) -> dict[StateLibrary, AxisOption]:
    """State libraries for Vue 3.  Provider-requiring ones set ``entry.install``."""
    stores = layout.stores_dir
    lang = layout.lang
    counter_from = layout.from_counter
    entry_from = layout.from_entry
    ext = layout.ts_ext

    return {
        StateLibrary.NONE: AxisOption(
            label="None",
            counter=Fragment(
                uses=("ref",),
                setup=(
                    "const count = ref(0);",
                    "const increment = () => {",
                    "  count.value += 1;",
                    "};",
                ),
                exposes=_COUNTER_EXPOSES,
            ),
        ),
        StateLibrary.PINIA: AxisOption(
            label=label(StateLibrary.PINIA),
            dependencies={"pinia": "^2.1.7"},
            files=((f"{stores}counter.{lang}", "vue-state/pinia.j2"),),
            entry=EntryFragment(
                imports=("import { createPinia } from 'pinia';",),
                install=("app.use(createPinia());",),
            ),
            counter=Fragment(
                imports=(
                    "import { storeToRefs } from 'pinia';",
                    f"import {{ useCounterStore }} from '{counter_from}counter{ext}';",
                ),
                setup=(
                    "const store = useCounterStore();",
                    "const { count } = storeToRefs(store);",
                    "const increment = () => store.increment();",
                ),
                exposes=_COUNTER_EXPOSES,
            ),
        ),
        StateLibrary.VALTIO: AxisOption(
            label=label(StateLibrary.VALTIO),
            dependencies={"valtio": "^1.13.2"},
            files=((f"{stores}counter.{lang}", "vue-state/valtio.j2"),),
            counter=Fragment(
                uses=("onUnmounted", "ref"),
                imports=(
                    "import { subscribe } from 'valtio/vanilla';",
                    f"import {{ counterState, increment }} from '{counter_from}counter{ext}';",
                ),
                setup=(
                    "const count = ref(counterState.count);",
                    "const unsubscribe = subscribe(counterState, () => {",
                    "  count.value = counterState.count;",
                    "});",
                    "onUnmounted(unsubscribe);",
                ),
                exposes=_COUNTER_EXPOSES,
            ),
        ),
        StateLibrary.NANOSTORES: AxisOption(
            label=label(StateLibrary.NANOSTORES),
            dependencies={"nanostores": "^0.10.0", "@nanostores/vue": "^0.10.0"},
            files=((f"{stores}counter.{lang}", "shared/stores/nanostores.ts.j2"),),
            counter=Fragment(
                imports=(
                    "import { useStore } from '@nanostores/vue';",
                    f"import {{ $count, increment }} from '{counter_from}counter{ext}';",
                ),
                setup=("const count = useStore($count);",),
                exposes=_COUNTER_EXPOSES,
            ),
        ),
        StateLibrary.MOBX: AxisOption(
            label=label(StateLibrary.MOBX),
            dependencies={"mobx": "^6.12.1"},
            files=((f"{stores}counter.{lang}", "vue-state/mobx.j2"),),
            entry=EntryFragment(
                imports=(f"import {{ counterStore }} from '{entry_from}counter{ext}';",),
                install=("app.provide('counterStore', counterStore);",),
            ),
            counter=Fragment(
                uses=("inject", "onUnmounted", "ref"),
                imports=("import { autorun } from 'mobx';",)
                + _type_import(layout, "CounterStore", "counter"),
                setup=(
                    _inject(layout, "counterStore", "CounterStore"),
                    "const count = ref(store.count);",
                    "const dispose = autorun(() => {",
                    "  count.value = store.count;",
                    "});",
                    "onUnmounted(dispose);",
                    "const increment = () => store.increment();",
                ),
                exposes=_COUNTER_EXPOSES,
            ),
        ),
        StateLibrary.REDUX_TOOLKIT_QUERY: AxisOption(
            label=label(StateLibrary.REDUX_TOOLKIT_QUERY),
            dependencies={"@reduxjs/toolkit": "^2.2.1"},
            files=(
                (f"{stores}api.{lang}", "vue-state/rtk-query/api.j2"),
                (f"{stores}counterSlice.{lang}", "vue-state/rtk-query/counterSlice.j2"),
                (f"{stores}store.{lang}", "vue-state/rtk-query/store.j2"),
            ),
            entry=EntryFragment(
                imports=(f"import {{ store }} from '{entry_from}store{ext}';",),
                install=("app.provide('store', store);",),
            ),
            counter=Fragment(
                uses=("inject", "onUnmounted", "ref"),
                imports=(f"import {{ increment as incrementAction }} from '{counter_from}counterSlice{ext}';",)
                + _type_import(layout, "AppStore", "store"),
                setup=(
                    _inject(layout, "store", "AppStore"),
                    "const count = ref(store.getState().counter.value);",
                    "const unsubscribe = store.subscribe(() => {",
                    "  count.value = store.getState().counter.value;",
                    "});",
                    "onUnmounted(unsubscribe);",
                    "const increment = () => store.dispatch(incrementAction());",
                ),
                exposes=_COUNTER_EXPOSES,
            ),
        ),
    }


# UI library -> stylesheet, as a bundler import and as a CDN URL.
_STYLESHEETS: dict[UILibrary, tuple[str, str]] = {
    UILibrary.ELEMENT_PLUS: (
        "element-plus/dist/index.css",
        "https://unpkg.com/element-plus@2.6.2/dist/index.css",
    ),
    UILibrary.VUETIFY: (
        "vuetify/styles",
        "https://unpkg.com/vuetify@3.5.13/dist/vuetify.min.css",
    ),
    UILibrary.ANT_DESIGN_VUE: (
        "ant-design-vue/dist/reset.css",
        "https://unpkg.com/ant-design-vue@4.1.2/dist/reset.css",
    ),
}


def _styles(value: UILibrary, cdn: bool) -> dict[str, tuple[str, ...]]:
    """Stylesheet as an ``import`` line, or as a ``<link>`` for CDN pages."""
    if value not in _STYLESHEETS:
        return {"imports": (), "head": ()}
    module, url = _STYLESHEETS[value]
    if cdn:
        return {"imports": (), "head": (f'<link rel="stylesheet" href="{url}" />',)}
    return {"imports": (f"import '{module}';",), "head": ()}


def vue_ui_table(cdn: bool = False) -> dict[UILibrary, AxisOption]:
    """Component libraries for Vue 3, each installed as an app plugin."""
    element = _styles(UILibrary.ELEMENT_PLUS, cdn)
    vuetify = _styles(UILibrary.VUETIFY, cdn)
    antd = _styles(UILibrary.ANT_DESIGN_VUE, cdn)

    return {
        UILibrary.NONE: NONE_OPTION,
        UILibrary.ELEMENT_PLUS: AxisOption(
            label=label(UILibrary.ELEMENT_PLUS),
            dependencies={"element-plus": "^2.6.2"},
            entry=EntryFragment(
                imports=("import ElementPlus from 'element-plus';",) + element["imports"],
                install=("app.use(ElementPlus);",),
                head=element["head"],
            ),
            page=Fragment(markup=('<el-button type="primary">Element Plus button</el-button>',)),
        ),
        UILibrary.VUETIFY: AxisOption(
            label=label(UILibrary.VUETIFY),
            dependencies={"vuetify": "^3.5.13"},
            entry=EntryFragment(
                imports=vuetify["imports"] + (
                    "import { createVuetify } from 'vuetify';",
                    "import * as components from 'vuetify/components';",
                    "import * as directives from 'vuetify/directives';",
                ),
                setup=("const vuetify = createVuetify({ components, directives });",),
                install=("app.use(vuetify);",),
                head=vuetify["head"],
            ),
            page=Fragment(markup=('<v-btn color="primary">Vuetify button</v-btn>',)),
        ),
        UILibrary.NAIVE_UI: AxisOption(
            label=label(UILibrary.NAIVE_UI),
            dependencies={"naive-ui": "^2.38.1"},
            entry=EntryFragment(
                imports=("import naive from 'naive-ui';",),
                install=("app.use(naive);",),
            ),
            page=Fragment(markup=('<n-button type="primary">Naive UI button</n-button>',)),
        ),
        UILibrary.ANT_DESIGN_VUE: AxisOption(
            label=label(UILibrary.ANT_DESIGN_VUE),
            dependencies={"ant-design-vue": "^4.1.2"},
            entry=EntryFragment(
                imports=("import Antd from 'ant-design-vue';",) + antd["imports"],
                install=("app.use(Antd);",),
                head=antd["head"],
            ),
            page=Fragment(markup=('<a-button type="primary">Ant Design Vue button</a-button>',)),
        ),
    }
