# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for ``ui(...)`` annotations: grammar, validation, emission and build."""

from uiderive.compiler.build import ARTIFACT_SUFFIX, BuildError, BuildResult, compile_files, compile_source_file
from uiderive.compiler.grammar import parse_annotation
from uiderive.compiler.pipeline import CompiledAggregate, compile_aggregate, render_module
from uiderive.compiler.scan import scan_file, scan_source

__all__ = [
    "parse_annotation",
    "compile_aggregate",
    "CompiledAggregate",
    "render_module",
    "scan_source",
    "scan_file",
    "compile_files",
    "compile_source_file",
    "BuildError",
    "BuildResult",
    "ARTIFACT_SUFFIX",
]
