"""Interactive collection of a :class:`~appforge.models.Configuration`.

Questions are asked with ``rich.prompt``: one single-choice question per
axis, in catalog order.  The state-management and UI questions only offer
the values legal for the framework answered first, so the collector can
never build an invalid configuration.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from appforge.catalog import AXES, AXIS_TITLES, Framework, label, options_for
from appforge.models import PRESET_TITLES, PRESETS, Configuration
from appforge.utils import console as default_console


class PromptAborted(Exception):
    """Raised when the user cancels: Ctrl-C, end of input, or a declined confirmation."""


CUSTOM = "custom"

QUESTIONS: dict[str, str] = {
    "framework": "Which framework do you want to use?",
    "runtime": "Which runtime?",
    "package_manager": "Which package manager?",
    "validation_library": "Validation library?",
    "error_handling_library": "Error handling library?",
    "testing_library": "Testing library?",
    "state_library": "State management library?",
    "ui_library": "UI component library?",
}


class PromptCollector:
    """Asks the configuration questions on a Rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or default_console

    # -- Low-level ---------------------------------------------------------

    def _ask(self, question: str, choices: list[str], default: str) -> str:
        try:
            return Prompt.ask(
                question, choices=choices, default=default, console=self.console
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptAborted("Cancelled") from exc

    def _choose(self, axis: str, framework: Optional[Framework] = None) -> Enum:
        values = options_for(axis, framework)
        hint = ", ".join(f"{v.value} ({label(v)})" for v in values)
        self.console.print(f"[dim]{AXIS_TITLES[axis]}: {hint}[/dim]")
        answer = self._ask(QUESTIONS[axis], [v.value for v in values], values[0].value)
        return AXES[axis](answer)

    # -- Public API --------------------------------------------------------

    def select_preset(self) -> Optional[Configuration]:
        """Offer the presets plus ``custom``.

        Returns:
            The chosen preset, or ``None`` when the user picks ``custom``.
        """
        table = Table(title="Presets", show_header=True, header_style="bold cyan")
        table.add_column("Name", no_wrap=True)
        table.add_column("Stack")
        for name in PRESETS:
            table.add_row(name, PRESET_TITLES[name])
        table.add_row(CUSTOM, "Answer every question yourself")
        self.console.print(table)

        answer = self._ask("Start from a preset?", [*PRESETS, CUSTOM], CUSTOM)
        if answer == CUSTOM:
            return None
        return PRESETS[answer]

    def collect_custom(self) -> Configuration:
        """Ask every axis in order and build the configuration."""
        framework = self._choose("framework")
        answers: dict[str, Enum] = {"framework": framework}
        for axis in AXES:
            if axis == "framework":
                continue
            answers[axis] = self._choose(axis, framework)
        return Configuration(**answers)

    def collect(self) -> Configuration:
        """Preset selection, falling back to the full question list."""
        preset = self.select_preset()
        if preset is not None:
            return preset
        return self.collect_custom()

    def confirm(self, config: Configuration) -> None:
        """Show the selection and ask for confirmation.

        Raises:
            PromptAborted: If the user declines or cancels.
        """
        table = Table(title="Your selection", show_header=True, header_style="bold cyan")
        table.add_column("Axis", style="dim", no_wrap=True)
        table.add_column("Choice")
        for axis in AXES:
            table.add_row(AXIS_TITLES[axis], label(getattr(config, axis)))
        table.add_row("Directory", config.project_name)
        self.console.print(table)

        try:
            accepted = Confirm.ask("Generate this project?", default=True, console=self.console)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptAborted("Cancelled") from exc
        if not accepted:
            raise PromptAborted("Generation declined")
