"""React-family lookup tables: state management and UI libraries.

Shared by the Vite+React and Fresh resolvers.  The two quadrants lay files
out differently (``src/stores`` vs ``stores``) and Deno needs explicit file
extensions in relative imports, so the tables are built by factories that
take a :class:`~appforge.scaffolder.options.StoreLayout`.
"""

from __future__ import annotations

from appforge.catalog import StateLibrary, UILibrary, label

from .options import NONE_OPTION, AxisOption, EntryFragment, Fragment, StoreLayout


_REDUX_DEPS = {"@reduxjs/toolkit": "^2.2.1", "react-redux": "^9.1.0"}


def react_state_table(layout: StoreLayout) -> dict[StateLibrary, AxisOption]:
    """State libraries for React.  Provider-requiring ones set ``entry.provider``."""
    stores = layout.stores_dir
    counter_from = layout.from_counter
    entry_from = layout.from_entry
    ts = layout.ts_ext
    tsx = layout.tsx_ext

    redux_counter = Fragment(
        imports=(
            f"import {{ useAppDispatch, useAppSelector }} from '{counter_from}hooks{ts}';",
            f"import {{ increment as incrementAction }} from '{counter_from}counterSlice{ts}';",
        ),
        setup=(
            "const count = useAppSelector((state) => state.counter.value);",
            "const dispatch = useAppDispatch();",
            "const increment = () => dispatch(incrementAction());",
        ),
    )
    redux_entry = EntryFragment(
        imports=(
            "import { Provider } from 'react-redux';",
            f"import {{ store }} from '{entry_from}store{ts}';",
        ),
        provider=("<Provider store={store}>", "</Provider>"),
    )

    return {
        StateLibrary.NONE: AxisOption(
            label="None",
            counter=Fragment(
                uses=("useState",),
                setup=(
                    "const [count, setCount] = useState(0);",
                    "const increment = () => setCount((c) => c + 1);",
                ),
            ),
        ),
        StateLibrary.REDUX: AxisOption(
            label=label(StateLibrary.REDUX),
            dependencies=_REDUX_DEPS,
            files=(
                (f"{stores}store.ts", "react-state/redux/store.ts.j2"),
                (f"{stores}counterSlice.ts", "react-state/redux/counterSlice.ts.j2"),
                (f"{stores}hooks.ts", "react-state/redux/hooks.ts.j2"),
            ),
            entry=redux_entry,
            counter=redux_counter,
        ),
        StateLibrary.REDUX_TOOLKIT_QUERY: AxisOption(
            label=label(StateLibrary.REDUX_TOOLKIT_QUERY),
            dependencies=_REDUX_DEPS,
            files=(
                (f"{stores}api.ts", "react-state/rtk-query/api.ts.j2"),
                (f"{stores}store.ts", "react-state/rtk-query/store.ts.j2"),
                (f"{stores}counterSlice.ts", "react-state/redux/counterSlice.ts.j2"),
                (f"{stores}hooks.ts", "react-state/redux/hooks.ts.j2"),
            ),
            entry=redux_entry,
            counter=Fragment(
                imports=redux_counter.imports + (
                    f"import {{ useGetTodoQuery }} from '{counter_from}api{ts}';",
                ),
                setup=redux_counter.setup + (
                    "const { data: todo, isLoading } = useGetTodoQuery(1);",
                ),
                markup=(
                    "<p>Todo: {isLoading ? 'Loading...' : todo?.title ?? 'n/a'}</p>",
                ),
            ),
        ),
        StateLibrary.RECOIL: AxisOption(
            label=label(StateLibrary.RECOIL),
            dependencies={"recoil": "^0.7.7"},
            files=((f"{stores}counterAtom.ts", "react-state/recoil/counterAtom.ts.j2"),),
            entry=EntryFragment(
                imports=("import { RecoilRoot } from 'recoil';",),
                provider=("<RecoilRoot>", "</RecoilRoot>"),
            ),
            counter=Fragment(
                imports=(
                    "import { useRecoilState } from 'recoil';",
                    f"import {{ counterState }} from '{counter_from}counterAtom{ts}';",
                ),
                setup=(
                    "const [count, setCount] = useRecoilState(counterState);",
                    "const increment = () => setCount((c) => c + 1);",
                ),
            ),
        ),
        StateLibrary.MOBX: AxisOption(
            label=label(StateLibrary.MOBX),
            dependencies={"mobx": "^6.12.1", "mobx-react-lite": "^4.0.6"},
            files=(
                (f"{stores}counterStore.ts", "react-state/mobx/counterStore.ts.j2"),
                (f"{stores}StoreContext.tsx", "react-state/mobx/StoreContext.tsx.j2"),
            ),
            entry=EntryFragment(
                imports=(f"import {{ StoreProvider }} from '{entry_from}StoreContext{tsx}';",),
                provider=("<StoreProvider>", "</StoreProvider>"),
            ),
            counter=Fragment(
                imports=(
                    "import { observer } from 'mobx-react-lite';",
                    f"import {{ useCounterStore }} from '{counter_from}StoreContext{tsx}';",
                ),
                setup=(
                    "const store = useCounterStore();",
                    "const count = store.count;",
                    "const increment = () => store.increment();",
                ),
                export="observer(Counter)",
            ),
        ),
        StateLibrary.ZUSTAND: AxisOption(
            label=label(StateLibrary.ZUSTAND),
            dependencies={"zustand": "^4.5.2"},
            files=((f"{stores}useCounter.ts", "react-state/zustand/useCounter.ts.j2"),),
            counter=Fragment(
                imports=(f"import {{ useCounter }} from '{counter_from}useCounter{ts}';",),
                setup=("const { count, increment } = useCounter();",),
            ),
        ),
        StateLibrary.JOTAI: AxisOption(
            label=label(StateLibrary.JOTAI),
            dependencies={"jotai": "^2.7.1"},
            files=((f"{stores}atoms.ts", "react-state/jotai/atoms.ts.j2"),),
            counter=Fragment(
                imports=(
                    "import { useAtom } from 'jotai';",
                    f"import {{ countAtom }} from '{counter_from}atoms{ts}';",
                ),
                setup=(
                    "const [count, setCount] = useAtom(countAtom);",
                    "const increment = () => setCount((c) => c + 1);",
                ),
            ),
        ),
        StateLibrary.VALTIO: AxisOption(
            label=label(StateLibrary.VALTIO),
            dependencies={"valtio": "^1.13.2"},
            files=((f"{stores}counterState.ts", "react-state/valtio/counterState.ts.j2"),),
            counter=Fragment(
                imports=(
                    "import { useSnapshot } from 'valtio';",
                    f"import {{ counterState, increment }} from '{counter_from}counterState{ts}';",
                ),
                setup=(
                    "const snap = useSnapshot(counterState);",
                    "const count = snap.count;",
                ),
            ),
        ),
        StateLibrary.NANOSTORES: AxisOption(
            label=label(StateLibrary.NANOSTORES),
            dependencies={"nanostores": "^0.10.0", "@nanostores/react": "^0.7.2"},
            files=((f"{stores}counter.ts", "shared/stores/nanostores.ts.j2"),),
            counter=Fragment(
                imports=(
                    "import { useStore } from '@nanostores/react';",
                    f"import {{ $count, increment }} from '{counter_from}counter{ts}';",
                ),
                setup=("const count = useStore($count);",),
            ),
        ),
    }


def react_ui_table(css_links: bool = False) -> dict[UILibrary, AxisOption]:
    """Component libraries for React.  Chakra and Mantine need a root provider.

    With *css_links* (Deno cannot import stylesheets) Mantine's styles are
    loaded through a ``<link>`` tag in the document head instead.
    """
    if css_links:
        mantine_css: dict[str, tuple[str, ...]] = {
            "imports": (),
            "head": ('<link rel="stylesheet" href="https://esm.sh/@mantine/core@7.7.1/styles.css" />',),
        }
    else:
        mantine_css = {"imports": ("import '@mantine/core/styles.css';",), "head": ()}

    return {
        UILibrary.NONE: NONE_OPTION,
        UILibrary.MUI: AxisOption(
            label=label(UILibrary.MUI),
            dependencies={
                "@mui/material": "^5.15.14",
                "@emotion/react": "^11.11.4",
                "@emotion/styled": "^11.11.0",
            },
            page=Fragment(
                imports=("import Button from '@mui/material/Button';",),
                markup=('<Button variant="contained">Material UI button</Button>',),
            ),
        ),
        UILibrary.ANTD: AxisOption(
            label=label(UILibrary.ANTD),
            dependencies={"antd": "^5.15.4"},
            page=Fragment(
                imports=("import { Button } from 'antd';",),
                markup=('<Button type="primary">Ant Design button</Button>',),
            ),
        ),
        UILibrary.CHAKRA_UI: AxisOption(
            label=label(UILibrary.CHAKRA_UI),
            dependencies={
                "@chakra-ui/react": "^2.8.2",
                "@emotion/react": "^11.11.4",
                "@emotion/styled": "^11.11.0",
            },
            entry=EntryFragment(
                imports=("import { ChakraProvider } from '@chakra-ui/react';",),
                provider=("<ChakraProvider>", "</ChakraProvider>"),
            ),
            page=Fragment(
                imports=("import { Button } from '@chakra-ui/react';",),
                markup=('<Button colorScheme="teal">Chakra UI button</Button>',),
            ),
        ),
        UILibrary.MANTINE: AxisOption(
            label=label(UILibrary.MANTINE),
            dependencies={"@mantine/core": "^7.7.1", "@mantine/hooks": "^7.7.1"},
            entry=EntryFragment(
                imports=mantine_css["imports"] + ("import { MantineProvider } from '@mantine/core';",),
                provider=("<MantineProvider>", "</MantineProvider>"),
                head=mantine_css["head"],
            ),
            page=Fragment(
                imports=("import { Button } from '@mantine/core';",),
                markup=("<Button>Mantine button</Button>",),
            ),
        ),
    }
