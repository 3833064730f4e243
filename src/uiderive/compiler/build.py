# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental ahead-of-time compilation of annotated Python modules.

Implements a CMake-style cache: a generated module is reused when it already
exists and is strictly newer than the corresponding source file. Generated
modules mirror the source layout under the build directory, e.g.
``app/settings.py`` compiles to ``<build>/app/settings_ui.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from uiderive.compiler.pipeline import CompiledAggregate, compile_aggregate, render_module
from uiderive.compiler.scan import DEFAULT_MARKER, scan_file
from uiderive.diagnostics import CompileError
from uiderive.model.aggregate import EventSchema

# ###############
# Public Interface
# ###############

ARTIFACT_SUFFIX = "_ui.py"


class BuildError(Exception):
    """Raised when a source file cannot be read, scanned or compiled."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass
class BuildResult:
    """The outcome of building one source file.

    Attributes:
        source: The source file.
        artifact: The generated module.
        aggregates: Names of the aggregates found in the source.
        up_to_date: True if the artifact was reused from a previous build.
    """

    source: Path
    artifact: Path
    aggregates: list[str] = field(default_factory=list)
    up_to_date: bool = False


def compile_source_file(path: Path, *, marker: str = DEFAULT_MARKER, label: str | None = None) -> list[CompiledAggregate]:
    """Scan and compile every aggregate of one file without writing anything.

    Aggregates are compiled in source order so that nested aggregates defined
    earlier in the file contribute their event schemas.

    Raises:
        BuildError: If the file cannot be read or is not valid Python.
        CompileError: On the first annotation error.
    """
    try:
        aggregates = scan_file(path, marker=marker, label=label)
    except OSError as exc:
        raise BuildError(f"Cannot read source file '{path}': {exc}") from exc
    except SyntaxError as exc:
        raise BuildError(f"Python syntax error in '{path}', line {exc.lineno}: {exc.msg}") from exc

    schemas: dict[str, EventSchema] = {}
    compiled: list[CompiledAggregate] = []
    for aggregate in aggregates:
        result = compile_aggregate(aggregate, schemas)
        schemas[aggregate.name] = result.schema
        compiled.append(result)
    return compiled


def compile_files(
    files: list[Path],
    build_dir: Path,
    source_roots: list[Path],
    *,
    marker: str = DEFAULT_MARKER,
    force: bool = False,
) -> list[BuildResult]:
    """Compile annotated Python files into generated draw modules.

    For each file, the compiler:
    1. Checks whether an up-to-date generated module exists (cache hit).
    2. Otherwise scans and compiles the file.
    3. Writes the generated module to *build_dir*, mirroring the layout of the
       file relative to its source root. Files without aggregates produce no
       module.

    Args:
        files: Absolute paths of the Python files to compile.
        build_dir: Root directory for generated modules.
        source_roots: Directories the files are imported from; the module
            name of a file is its path relative to the first root containing it.
        marker: Name of the annotation marker callable.
        force: Recompile even when the cache is up to date.

    Returns:
        One result per file that contains aggregates, in input order.

    Raises:
        BuildError: On unreadable files, invalid Python, annotation errors, or
            files outside every source root.
    """
    results: list[BuildResult] = []
    for source_file in files:
        key = _rel_key(source_file, source_roots)
        artifact = _artifact_path(key, build_dir)

        if not force and _is_up_to_date(source_file, artifact):
            results.append(BuildResult(source_file, artifact, _read_aggregate_names(artifact), up_to_date=True))
            continue

        try:
            compiled = compile_source_file(source_file, marker=marker, label=key + ".py")
        except CompileError as exc:
            raise BuildError(f"Compile error in '{source_file}': {exc}") from exc

        if not compiled:
            artifact.unlink(missing_ok=True)
            continue

        module = key.replace("/", ".")
        artifact.parent.mkdir(parents=True, exist_ok=True)
        artifact.write_text(render_module(compiled, module, key + ".py"), encoding="utf-8")
        results.append(BuildResult(source_file, artifact, [agg.name for agg in compiled]))
    return results


# ################
# Implementation
# ################


def _rel_key(source_file: Path, source_roots: list[Path]) -> str:
    """Return the canonical key for a source file (path without extension)."""
    for root in source_roots:
        try:
            rel = source_file.relative_to(root)
        except ValueError:
            continue
        return str(rel.with_suffix("")).replace("\\", "/")
    raise BuildError(f"Source file '{source_file}' is not under any configured source directory")


def _artifact_path(key: str, build_dir: Path) -> Path:
    """Return the generated module path for a given canonical key."""
    parts = key.split("/")
    artifact_dir = build_dir
    for part in parts[:-1]:
        artifact_dir = artifact_dir / part
    return artifact_dir / (parts[-1] + ARTIFACT_SUFFIX)


def _is_up_to_date(source_file: Path, artifact: Path) -> bool:
    """Return True if *artifact* exists and is strictly newer than *source_file*."""
    if not artifact.exists():
        return False
    return artifact.stat().st_mtime > source_file.stat().st_mtime


def _read_aggregate_names(artifact: Path) -> list[str]:
    """Read the aggregate names recorded in a generated module's header."""
    for line in artifact.read_text(encoding="utf-8").splitlines()[:2]:
        if line.startswith("# aggregates:"):
            return [name.strip() for name in line.split(":", 1)[1].split(",") if name.strip()]
    return []
