# sedmcp/cli/helpers.py
# Shared CLI helpers for input resolution, operation building & result output

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from ..config.settings import SedSettings
from ..core.engine import default_engine
from ..core.operations import OperationSpec, build_operation
from ..core.output import get_output_manager
from ..core.report import OutcomeReport
from ..core.verbose import vlog
from ..sed_io import ensure_distinct_paths, read_text_safe, write_text_safe
from .params import normalize_kind


# * Content comes from --text, then --file, then stdin
def read_content(text: Optional[str], file: Optional[Path]) -> str:
    if text is not None and file is not None:
        raise typer.BadParameter("Use either --text or --file, not both")
    if text is not None:
        return text
    if file is not None:
        return read_text_safe(file)
    vlog("INPUT", "Reading content from stdin")
    return sys.stdin.read()


# * Build an operation from CLI args; configured default_flags fill in when --flags is absent
def build_cli_operation(
    operation: str,
    pattern: Optional[str],
    replacement: Optional[str],
    flags: Optional[str],
    settings: SedSettings,
) -> OperationSpec:
    return build_operation(
        normalize_kind(operation),
        pattern=pattern,
        replacement=replacement,
        flags=settings.default_flags if flags is None else flags,
    )


# * Write the transformed content to --output or stdout (never back to the input file)
def emit_content(
    report: OutcomeReport, output: Optional[Path], source: Optional[Path] = None
) -> None:
    content = report.modified_content
    # line-oriented results end w/ a newline, like sed output
    if content and not content.endswith("\n"):
        content += "\n"
    if output is not None:
        ensure_distinct_paths(source, output)
        write_text_safe(content, output)
        return
    typer.echo(content, nl=False)


# exit w/ code 1 when the report failed; the renderer already printed the error
def exit_on_failure(report: OutcomeReport) -> None:
    if not report.success:
        raise typer.Exit(code=1)


# * Flag letters the engine will skip are reported as warnings (stderr & log file)
def warn_ignored_flags(op: OperationSpec) -> None:
    for warning in default_engine.check(op).warnings:
        get_output_manager().warning(warning)
