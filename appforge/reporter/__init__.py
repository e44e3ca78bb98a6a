"""Summary reporting for generated projects.

Renders the feature list and the install/dev commands for the chosen
package manager, both on the terminal and in the generated README.
"""

from appforge.reporter.summary import (
    COMMANDS,
    commands_for,
    feature_lines,
    next_steps,
    print_summary,
    render_readme,
)

__all__ = [
    "COMMANDS",
    "commands_for",
    "feature_lines",
    "next_steps",
    "print_summary",
    "render_readme",
]
