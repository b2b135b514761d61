# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the UMLGraph command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from umlgraph.export.artifact import artifact_path_for, write_artifact
from umlgraph.model.entities import UMLModel
from umlgraph.parser.errors import UMLParseError
from umlgraph.parser.parser import parse_uml
from umlgraph.views.dependencies import build_dependency_view
from umlgraph.workspace.config import CONFIG_FILE_NAME, ProjectConfigError, load_project_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the UMLGraph CLI."""
    parser = argparse.ArgumentParser(
        prog="umlgraph",
        description="UMLGraph - structural model extraction from UML interchange documents",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Parse model documents and report errors",
        description="Parse and resolve each model document, printing a summary per file.",
    )
    check_parser.add_argument("files", nargs="+", help="Model documents to check")

    # export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Export a model document as a JSON artifact",
        description="Parse a model document and write its resolved model as JSON.",
    )
    export_parser.add_argument("file", help="Model document to export")
    export_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path (default: the input path with a .uml.json suffix)",
    )

    # deps subcommand
    deps_parser = subparsers.add_parser(
        "deps",
        help="Print component dependencies",
        description="Print the component-to-component dependencies implied by interface usage.",
    )
    deps_parser.add_argument("file", help="Model document to analyze")

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Export every model configured for a project",
        description=f"Read {CONFIG_FILE_NAME} and export each configured model document.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "export":
        return _cmd_export(args)
    if args.command == "deps":
        return _cmd_deps(args)
    if args.command == "build":
        return _cmd_build(args)
    return 0


def _load_model(path: Path) -> UMLModel | None:
    """Read and parse *path*, printing an error and returning None on failure."""
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None
    try:
        return parse_uml(source)
    except UMLParseError as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
        return None


def _save_model(model: UMLModel, output: Path) -> bool:
    """Write *model* to *output*, printing an error and returning False on failure."""
    try:
        write_artifact(model, output)
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return False
    return True


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for name in args.files:
        path = Path(name)
        model = _load_model(path)
        if model is None:
            has_errors = True
            continue
        print(f"{path}: {len(model.interfaces)} interfaces, {len(model.components)} components")

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    """Handle the export subcommand."""
    path = Path(args.file)
    model = _load_model(path)
    if model is None:
        return 1

    output = Path(args.output) if args.output else artifact_path_for(path)
    if not _save_model(model, output):
        return 1
    print(f"Wrote {output}")
    return 0


def _cmd_deps(args: argparse.Namespace) -> int:
    """Handle the deps subcommand."""
    model = _load_model(Path(args.file))
    if model is None:
        return 1

    names = {c.identifier: c.name for c in model.components}
    for edge in build_dependency_view(model).edges:
        print(f"{names[edge.source]} --{edge.label}--> {names[edge.target]}")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(f"Error: no {CONFIG_FILE_NAME} found in '{directory}'.", file=sys.stderr)
        return 1

    try:
        config = load_project_config(config_file)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not config.models:
        print("No models configured. Nothing to build.")
        return 0

    output_dir = directory / config.output_directory
    has_errors = False
    for entry in config.models:
        source = directory / entry
        model = _load_model(source)
        if model is None:
            has_errors = True
            continue
        target = output_dir / artifact_path_for(Path(entry)).name
        if not _save_model(model, target):
            has_errors = True
            continue
        print(f"  {entry}: wrote {target.relative_to(directory)}")

    return 1 if has_errors else 0
