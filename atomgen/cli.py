"""Command-line entry point.

Reads an answers document (YAML or JSON), validates it into an
``AnswerRecord`` and scaffolds the package.

Usage::

    atomgen answers.yml
    atomgen answers.json -o ./packages --no-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.panel import Panel

from atomgen import __version__
from atomgen.config import GeneratorConfig
from atomgen.derive import DerivationError
from atomgen.models import AnswerRecord
from atomgen.scaffolder import PackageGenerator, ProcessRunnerError
from atomgen.utils import (
    console,
    load_answers_file,
    print_error,
    print_header,
    print_success,
    print_summary_table,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomgen",
        description="Scaffold a package for the Atom editor from an answers file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  atomgen answers.yml\n"
            "  atomgen answers.json -o ./packages --no-install\n"
        ),
    )
    parser.add_argument(
        "answers",
        help="Path to the answers file (.yml, .yaml or .json)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the package folder is created in (default: .)",
    )
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Write the files but skip installing dependencies",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the validated answers and every written file",
    )
    parser.add_argument(
        "--allow-empty-description",
        action="store_true",
        help="Accept an empty package description",
    )
    parser.add_argument(
        "--disallow-atom-prefix",
        action="store_true",
        help="Reject package names starting with 'atom-'",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the console on startup",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Environment settings, overridden by whatever was given on the command line."""
    config = GeneratorConfig.from_env()
    overrides: dict[str, object] = {}
    if args.output is not None:
        overrides["output_dir"] = Path(args.output)
    if args.no_install:
        overrides["install"] = False
    if args.debug:
        overrides["debug"] = True
    if args.allow_empty_description:
        overrides["allow_empty_description"] = True
    if args.disallow_atom_prefix:
        overrides["allow_atom_prefix"] = False
    if args.no_clear:
        overrides["clear"] = False
    return config.model_copy(update=overrides)


def load_answers(path: str | Path, config: GeneratorConfig) -> AnswerRecord:
    """Read and validate the answers file at *path*.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
        pydantic.ValidationError: If the answers break a field rule or invariant.
    """
    data = load_answers_file(path)
    return AnswerRecord.model_validate(data, context=config.validation_context())


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``atomgen`` and ``python -m atomgen.cli``."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    if config.clear:
        console.clear()

    answers_path = Path(args.answers)
    if not answers_path.exists():
        print_error(f"Error: Answers file not found: {answers_path}")
        sys.exit(1)

    try:
        answers = load_answers(answers_path, config)
    except ValidationError as exc:
        print_error(f"Invalid answers in {answers_path}:")
        console.print(str(exc), markup=False)
        sys.exit(1)
    except ValueError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if config.debug:
        console.print(Panel("[bold]Answers[/bold]", style="cyan"))
        console.print_json(answers.model_dump_json(by_alias=True))

    print_header(f"Scaffolding {answers.name}")

    try:
        generator = PackageGenerator(answers, config)
        package_path = asyncio.run(generator.run())
    except DerivationError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except ProcessRunnerError as exc:
        print_error(f"Error: {exc}")
        if exc.stderr:
            console.print(exc.stderr, style="dim", markup=False)
        sys.exit(1)

    bundle = generator.bundle
    print_summary_table(
        {
            "Package": answers.name,
            "Location": str(package_path),
            "Build": bundle.manifest["scripts"]["build"],
            "Dev dependencies": str(len(bundle.dev_dependencies)),
            "Installed": "yes" if config.install else "no",
        },
        title="Package summary",
    )
    print_success(f"Created {answers.name} in {package_path}")


if __name__ == "__main__":
    main()
