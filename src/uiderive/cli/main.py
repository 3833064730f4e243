# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the uiderive command-line interface."""

import argparse
import fnmatch
import sys
from pathlib import Path

from yachalk import chalk

from uiderive.compiler.build import BuildError, compile_files, compile_source_file
from uiderive.diagnostics import CompileError
from uiderive.workspace.config import CONFIG_FILE_NAME, ConfigError, ProjectConfig, dump_config, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the uiderive CLI."""
    parser = argparse.ArgumentParser(
        prog="uiderive",
        description="uiderive: compile ui(...) annotations of dataclasses into draw routines",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a uiderive project",
        description=f"Write a default {CONFIG_FILE_NAME} configuration file.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the ui annotations of a project",
        description="Statically compile every annotated dataclass and report errors.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Generate draw modules",
        description="Compile annotated dataclasses into generated modules in the build directory.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    build_parser.add_argument(
        "--force",
        action="store_true",
        help="Recompile files even when their generated module is up to date",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the generated code of a file",
        description="Compile one Python file and print the generated Events types and draw routines.",
    )
    show_parser.add_argument("file", help="Python source file")
    show_parser.add_argument(
        "--aggregate",
        default=None,
        help="Only show the dataclass with this name",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_DEFAULT_BUILD_DIR = ".uiderive-build"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _error(message: str) -> None:
    print(chalk.red(f"Error: {message}"), file=sys.stderr)


def _load_project(directory: Path) -> ProjectConfig | None:
    """Load the project's config, or the defaults when there is none.

    Prints the error and returns None if the config is invalid.
    """
    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        return ProjectConfig(build_directory=_DEFAULT_BUILD_DIR)
    try:
        return load_config(config_file)
    except ConfigError as exc:
        _error(str(exc))
        return None


def _source_roots(directory: Path, config: ProjectConfig) -> list[Path]:
    return [(directory / source_dir).resolve() for source_dir in config.source_directories]


def _collect_sources(directory: Path, config: ProjectConfig) -> list[Path]:
    """Find the Python files that mention the derive decorator.

    Files in the build directory, in hidden directories or matching an
    ``exclude`` pattern are skipped.
    """
    build_dir = (directory / config.build_directory).resolve()
    found: dict[Path, None] = {}
    for root in _source_roots(directory, config):
        for path in sorted(root.rglob("*.py")):
            rel = path.relative_to(directory).as_posix() if directory in path.parents else path.as_posix()
            if build_dir in path.parents or any(part.startswith(".") for part in Path(rel).parts[:-1]):
                continue
            if any(fnmatch.fnmatch(rel, pattern) for pattern in config.exclude):
                continue
            if "derive" not in path.read_text(encoding="utf-8", errors="replace"):
                continue
            found[path] = None
    return list(found)


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        _error(f"directory '{directory}' does not exist.")
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        _error(f"project already initialized at '{config_file}'.")
        return 1

    content = "# uiderive project configuration\n" + dump_config(ProjectConfig(build_directory=_DEFAULT_BUILD_DIR))
    config_file.write_text(content, encoding="utf-8")
    print(chalk.green(f"Initialized uiderive project at '{config_file}'."))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        _error(f"directory '{directory}' does not exist.")
        return 1

    config = _load_project(directory)
    if config is None:
        return 1

    sources = _collect_sources(directory, config)
    if not sources:
        print("No annotated dataclasses found.")
        return 0

    print(f"Checking {len(sources)} source file(s)...")
    has_errors = False
    aggregates = 0
    for source in sources:
        try:
            aggregates += len(compile_source_file(source, marker=config.marker))
        except (CompileError, BuildError) as exc:
            _error(str(exc))
            has_errors = True

    if has_errors:
        return 1

    print(chalk.green(f"No issues found in {aggregates} dataclass(es)."))
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        _error(f"directory '{directory}' does not exist.")
        return 1

    config = _load_project(directory)
    if config is None:
        return 1

    sources = _collect_sources(directory, config)
    build_dir = directory / config.build_directory
    try:
        results = compile_files(
            sources,
            build_dir,
            _source_roots(directory, config),
            marker=config.marker,
            force=args.force,
        )
    except BuildError as exc:
        _error(str(exc))
        return 1

    for result in results:
        status = "up to date" if result.up_to_date else "compiled"
        print(f"{result.artifact.relative_to(directory).as_posix()}: {status} ({', '.join(result.aggregates)})")
    print(chalk.green(f"Built {len(results)} module(s) into '{config.build_directory}'."))
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    path = Path(args.file)
    try:
        compiled = compile_source_file(path, label=args.file)
    except (CompileError, BuildError) as exc:
        _error(str(exc))
        return 1

    if args.aggregate is not None:
        compiled = [agg for agg in compiled if agg.name == args.aggregate]
        if not compiled:
            _error(f"no annotated dataclass named '{args.aggregate}' in '{args.file}'.")
            return 1

    if not compiled:
        print(f"No annotated dataclasses in '{args.file}'.")
        return 0

    print("\n\n".join(agg.source.rstrip("\n") for agg in compiled))
    return 0
