"""Command-line entry point for formforge.

Collects a form description interactively (or loads a saved snapshot),
generates the artifact batch, writes it and prints the setup steps.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .config import ScaffoldConfig
from .models import FormSpec
from .prompts import collect_form_spec
from .scaffolder import FormGenerator, GenerationError
from .scaffolder.instructions import environment_notes, install_commands
from .utils import (
    console,
    print_commands,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formforge",
        description="Scaffold a Next.js form: component, zod schema, server action, API route",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  formforge\n"
            "  formforge --config generated-form/ContactConfig.json -o ./out\n"
            "  formforge --config ContactConfig.json --dry-run\n"
        ),
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Load a previously saved <FormName>Config.json instead of prompting",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: $FORMFORGE_OUTPUT_DIR or ./generated-form)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the artifacts that would be generated without writing them",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``formforge`` / ``python -m formforge.cli``."""
    args = build_parser().parse_args(argv)

    config = ScaffoldConfig.from_env()
    overrides: dict[str, object] = {}
    if args.output:
        overrides["output_dir"] = Path(args.output)
    if args.dry_run:
        overrides["dry_run"] = True
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        if args.config:
            spec = FormSpec.load(args.config)
        else:
            print_header("Describe your form")
            spec = collect_form_spec()
    except OSError as exc:
        print_error(f"Error: cannot read configuration: {exc}")
        sys.exit(1)
    except ValidationError as exc:
        print_error(f"Error: invalid form configuration\n{exc}")
        sys.exit(1)

    generator = FormGenerator(spec)
    for warning in generator.warnings():
        print_warning(f"Warning: {warning}")

    try:
        artifacts = generator.build()
    except GenerationError as exc:
        print_error(f"Error generating form files: {exc}")
        sys.exit(1)

    print_summary_table(
        {artifact.role.value: artifact.path for artifact in artifacts},
        title=f"{spec.form_name} artifacts",
    )

    if config.dry_run:
        print_warning("Dry run: no files were written.")
        return

    output_dir = config.output_path
    try:
        written = asyncio.run(generator.write(output_dir, artifacts))
    except OSError as exc:
        print_error(f"Error writing form files to {output_dir}: {exc}")
        sys.exit(1)

    print_success(f"Form files generated successfully! ({len(written)} files in {output_dir})")

    print_commands(install_commands(spec), title="To set up your project, run")
    notes = environment_notes(spec)
    if notes:
        console.print("Don't forget to add your MongoDB connection string to your .env file:")
        for line in notes:
            console.print(f"  {line}")


if __name__ == "__main__":
    main()
