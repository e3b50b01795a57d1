"""component-gen command line entry point.

Prompts for a component name and renders the configured templates into a
new component directory.

Usage::

    python -m component_gen
    python -m component_gen Button
    python -m component_gen --base-dir ./my-app
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from rich.console import Console

from component_gen.config import load_config
from component_gen.errors import ComponentGenError, ConfigMissingError
from component_gen.scaffolder import materialize
from component_gen.utils import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

PROMPT = "Enter the component name: "
BASE_DIR_ENV = "CG_BASE_DIR"


def prompt_component_name(out: Console | None = None) -> str:
    """Ask for the component name once and return the answer verbatim."""
    return (out or console).input(PROMPT, markup=False)


def run(component_name: str, base_dir: Path) -> None:
    """Load the config from *base_dir* and materialize *component_name*."""
    config = load_config(base_dir)
    result = materialize(component_name, config, base_dir)

    for subdir in result.skipped:
        print_warning(f"Skipping template subdirectory {subdir.name}: nested templates are not supported")
    for path in result.written:
        print_info(f"  wrote {path}")
    print_success(f"Component {component_name} created/updated successfully!")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m component_gen``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="component-gen",
        description="Create a component directory from a template folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Reads cg.config.json from the base directory.\n\n"
            "Examples:\n"
            "  component-gen\n"
            "  component-gen Button\n"
            "  component-gen Button --base-dir ./my-app\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Component name (prompted for if omitted)",
    )
    parser.add_argument(
        "--base-dir",
        default=None,
        help=f"Directory holding cg.config.json (default: ${BASE_DIR_ENV} or the current directory)",
    )

    args = parser.parse_args(argv)

    base_dir = Path(args.base_dir or os.environ.get(BASE_DIR_ENV) or Path.cwd())

    if args.name is not None:
        component_name = args.name
    else:
        try:
            component_name = prompt_component_name()
        except (EOFError, KeyboardInterrupt):
            err_console.print()
            print_error("Aborted: no component name given")
            sys.exit(1)

    try:
        run(component_name, base_dir)
    except ConfigMissingError as exc:
        print_error(f"Config file not found: {exc.path}")
        err_console.print(exc.remediation, markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)
    except ComponentGenError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
