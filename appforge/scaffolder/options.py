"""Lookup-table entries for the optional axes.

Every resolver maps each enum value of each optional axis to one
:class:`AxisOption`.  An option carries everything the value contributes:
manifest entries, extra files (``(output path, template)`` pairs), and the
code fragments it splices into shared skeleton files such as the entry
point or the example page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class Fragment:
    """Code spliced into a skeleton component.

    ``uses`` lists framework API names (``useState``, ``ref``...) that the
    skeleton imports in a single statement, so two fragments needing the
    same hook never produce duplicate imports.
    """

    uses: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
    setup: tuple[str, ...] = ()
    markup: tuple[str, ...] = ()
    export: str = ""
    # Names the markup reads; options-API components return them from setup().
    exposes: tuple[str, ...] = ()


@dataclass(frozen=True)
class EntryFragment:
    """What an option adds to the application entry point.

    ``provider`` is an ``(opening, closing)`` JSX tag pair wrapped around the
    React root.  ``install`` holds ``app.use(...)`` / ``app.provide(...)``
    statements run on a Vue app instance before mounting.
    """

    imports: tuple[str, ...] = ()
    setup: tuple[str, ...] = ()
    provider: Optional[tuple[str, str]] = None
    install: tuple[str, ...] = ()
    head: tuple[str, ...] = ()

    @property
    def wraps_root(self) -> bool:
        """Whether this option needs a provider/root construct."""
        return self.provider is not None or bool(self.install)


@dataclass(frozen=True)
class AxisOption:
    """Everything one axis value contributes to a FileSet."""

    label: str
    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    scripts: Mapping[str, str] = field(default_factory=dict)
    files: tuple[tuple[str, str], ...] = ()
    entry: EntryFragment = EntryFragment()
    page: Fragment = Fragment()
    counter: Fragment = Fragment()


NONE_OPTION = AxisOption(label="None")


@dataclass(frozen=True)
class StoreLayout:
    """Where state store files live and how other files import them."""

    stores_dir: str        # output directory, e.g. "src/stores/"
    from_counter: str      # import prefix used by the Counter component
    from_entry: str        # import prefix used by the entry point
    ts_ext: str = ""       # ".ts" (or ".js") in relative imports under Deno
    tsx_ext: str = ""
    lang: str = "ts"


# ---------------------------------------------------------------------------
# Aggregation helpers
# ---------------------------------------------------------------------------

def unique(lines: Iterable[str]) -> list[str]:
    """De-duplicate *lines* keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for line in lines:
        if line not in seen:
            seen.add(line)
            result.append(line)
    return result


def merge_fragments(fragments: Iterable[Fragment]) -> Fragment:
    """Concatenate fragments in order; ``uses`` is sorted and de-duplicated."""
    fragments = list(fragments)
    exports = [f.export for f in fragments if f.export]
    return Fragment(
        uses=tuple(sorted(set(name for f in fragments for name in f.uses))),
        imports=tuple(unique(line for f in fragments for line in f.imports)),
        setup=tuple(line for f in fragments for line in f.setup),
        markup=tuple(line for f in fragments for line in f.markup),
        export=exports[-1] if exports else "",
        exposes=tuple(unique(name for f in fragments for name in f.exposes)),
    )


def merge_entries(entries: Iterable[EntryFragment]) -> dict[str, list]:
    """Aggregate entry fragments for the entry-point template.

    Providers are returned outermost first: the *last* entry (the UI axis)
    wraps everything contributed before it.
    """
    entries = list(entries)
    return {
        "imports": unique(line for e in entries for line in e.imports),
        "setup": [line for e in entries for line in e.setup],
        "providers": [e.provider for e in reversed(entries) if e.provider],
        "install": [line for e in entries for line in e.install],
        "head": unique(line for e in entries for line in e.head),
    }


def wrap_lines(
    wrappers: Iterable[tuple[str, str]],
    inner: list[str],
    indent: str = "  ",
    level: int = 0,
) -> list[str]:
    """Nest *inner* inside each ``(open, close)`` pair, outermost first.

    >>> wrap_lines([("<A>", "</A>"), ("<B>", "</B>")], ["<App />"])
    ['<A>', '  <B>', '    <App />', '  </B>', '</A>']
    """
    wrappers = list(wrappers)
    depth = len(wrappers)
    lines = [indent * (level + i) + opening for i, (opening, _) in enumerate(wrappers)]
    lines.extend(indent * (level + depth) + line for line in inner)
    lines.extend(
        indent * (level + i) + closing
        for i, (_, closing) in reversed(list(enumerate(wrappers)))
    )
    return lines
