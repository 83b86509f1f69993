"""Command line interface for generating CRUD boilerplate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import GeneratorConfig
from .errors import ScaffoldError
from .naming import NameForms, derive_name_forms
from .scaffold import GenerationReport, ScaffoldWriter
from .template import TemplateRenderer
from .templates import CONTROLLER_DIR, default_registry

EXIT_FAILURE = 1

_CONSOLE_HANDLER = "crudgen-console"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crudgen",
        description="Generate CRUD boilerplate (repository, service, controller) for Go projects.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    crud_parser = subparsers.add_parser(
        "crud",
        help="generate the repository, service and controller files for a new entity",
        description=(
            "Create boilerplate files for a new entity. The entity name must be "
            "given in PascalCase, for example: crudgen crud SbsFee"
        ),
    )
    crud_parser.add_argument("entity", help="Entity name in PascalCase")
    crud_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Project root the files are generated under (defaults to the current directory)",
    )
    verbosity = crud_parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log directory creation")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report errors")

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING

    logger = logging.getLogger("crudgen")
    for handler in list(logger.handlers):
        if handler.get_name() == _CONSOLE_HANDLER:
            logger.removeHandler(handler)

    # Bound to the current sys.stdout on every invocation.
    console = logging.StreamHandler(sys.stdout)
    console.set_name(_CONSOLE_HANDLER)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)
    logger.setLevel(level)


def _print_next_steps(forms: NameForms, report: GenerationReport) -> None:
    request_path = Path(CONTROLLER_DIR, forms.lower, "request.go")
    print(f"--- CRUD for {forms.pascal} generated successfully! ---")
    if report.all_skipped:
        print("All files already existed; nothing was written.")
    print("Next steps:")
    print(f"1. Define the 'dto.{forms.pascal}' struct in a relevant DTO file and ensure it implements 'dto.Entity'.")
    print(f"2. Populate the request structs in '{request_path}'.")
    print("3. Implement the TODOs in the generated controller to map request structs to your DTO.")
    print("4. Add the new controller, service, and repository to the initializers in 'internal/initializer/app.go'.")
    print("5. Add the new routes to the router in 'internal/transport/http/rest/router/route.go'.")
    print("6. Update the ColumnMapping in the generated controller for filtering and sorting.")


def _handle_crud(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if not args.entity:
        parser.error("entity name must not be empty")

    _configure_logging(args)
    forms = derive_name_forms(args.entity)
    writer = ScaffoldWriter(GeneratorConfig.for_directory(args.directory), TemplateRenderer())

    print(f"--- Generating CRUD for entity: {forms.pascal} ---")
    try:
        report = writer.generate(forms, default_registry())
    except ScaffoldError as exc:
        print(f"An error occurred: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    _print_next_steps(forms, report)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "crud":
        return _handle_crud(parser, args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
