"""Command-line entry point.

Usage::

    appforge                                  # fully interactive
    appforge --preset react-node-quickstart --yes
    appforge --config appforge.yaml --output ./projects --force
    python -m appforge --save-config my-stack.json

Exit codes: 0 success, 1 cancelled, 2 bad arguments or config file,
3 project directory already exists, 4 any other I/O error.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Optional

import yaml

from appforge import __version__
from appforge.config import AppSettings
from appforge.models import PRESETS, Configuration
from appforge.prompts import PromptAborted, PromptCollector
from appforge.reporter import print_summary
from appforge.scaffolder import ProjectExistsError, ProjectGenerator
from appforge.utils import console, print_error, print_header, print_success, print_warning

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_USAGE = 2
EXIT_EXISTS = 3
EXIT_IO = 4


class ConfigFileError(Exception):
    """A ``--config`` file could not be read or does not validate."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appforge",
        description="appforge -- scaffold a React or Vue 3 project for Node, Bun or Deno",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  appforge\n"
            "  appforge --preset vue3-node-quickstart --yes\n"
            "  appforge --config stack.yaml --output ./projects --force\n"
            "\n"
            "Environment: APPFORGE_OUTPUT_DIR, APPFORGE_OVERWRITE, APPFORGE_ASSUME_YES\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--config", "-c",
        default=None,
        help="Load the configuration from a JSON or YAML file instead of prompting",
    )
    source.add_argument(
        "--preset", "-p",
        choices=sorted(PRESETS),
        default=None,
        help="Use a named preset instead of prompting",
    )
    parser.add_argument(
        "--save-config",
        default=None,
        metavar="FILE",
        help="Also write the chosen configuration to FILE (.json, .yml or .yaml)",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        default=None,
        help="Write into an existing project directory",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        default=None,
        help="Skip the confirmation prompt",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    """Environment settings, overridden by whichever flags were given."""
    settings = AppSettings.from_env()
    updates = {}
    if args.output is not None:
        updates["output_dir"] = Path(args.output)
    if args.force:
        updates["overwrite"] = True
    if args.yes:
        updates["assume_yes"] = True
    return settings.model_copy(update=updates)


def load_config_file(path: str | Path) -> Configuration:
    """Load a saved configuration.

    Raises:
        ConfigFileError: If the file is missing, unparsable or invalid.
    """
    try:
        return Configuration.load(path)
    except (OSError, yaml.YAMLError, ValueError) as exc:
        # ValidationError and UnsupportedOptionError are ValueErrors.
        raise ConfigFileError(f"Cannot use config file {path}: {exc}") from exc


def run(args: argparse.Namespace, collector: Optional[PromptCollector] = None) -> int:
    """Execute one scaffolding session and return the process exit code."""
    settings = settings_from_args(args)
    collector = collector or PromptCollector(console)

    print_header(f"appforge {__version__}")

    # 1. Configuration
    try:
        if args.config:
            config = load_config_file(args.config)
        elif args.preset:
            config = PRESETS[args.preset]
        else:
            config = collector.collect()
    except ConfigFileError as exc:
        print_error(str(exc))
        return EXIT_USAGE
    except PromptAborted:
        print_warning("Cancelled. Nothing was written.")
        return EXIT_ABORTED

    # 2. Confirmation
    if not settings.assume_yes:
        try:
            collector.confirm(config)
        except PromptAborted:
            print_warning("Cancelled. Nothing was written.")
            return EXIT_ABORTED

    if args.save_config:
        try:
            saved = config.save(args.save_config)
        except OSError as exc:
            print_error(f"Cannot save configuration: {exc}")
            return EXIT_IO
        print_success(f"Configuration saved to {saved}")

    # 3. Resolve and write
    generator = ProjectGenerator(config)
    fileset = generator.fileset
    for name in fileset.overridden:
        print_warning(
            f"Dependency '{name}' is requested by more than one option; "
            f"using {fileset.dependencies.get(name) or fileset.dev_dependencies.get(name)}"
        )

    try:
        project_path = asyncio.run(
            generator.generate(settings.output_dir, overwrite=settings.overwrite)
        )
    except ProjectExistsError as exc:
        print_error(str(exc))
        console.print("Use [bold]--force[/bold] to write into it anyway.")
        return EXIT_EXISTS
    except OSError as exc:
        print_error(f"Failed to write project: {exc}")
        return EXIT_IO

    # 4. Report
    print_summary(config, project_path, fileset)
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``appforge`` and ``python -m appforge``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
