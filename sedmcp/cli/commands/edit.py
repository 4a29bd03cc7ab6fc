# sedmcp/cli/commands/edit.py
# exec & preview commands: run one operation over --text, --file or stdin

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from ...config.settings import get_settings
from ...core.engine import default_engine
from ...sed_io.console import console
from ...ui.reporting import render_report
from ..app import app
from ..decorators import handle_sed_error
from ..helpers import (
    build_cli_operation,
    emit_content,
    exit_on_failure,
    read_content,
    warn_ignored_flags,
)
from ..params import (
    FileOpt,
    FlagsOpt,
    OperationArg,
    OutputOpt,
    PatternArg,
    ReplacementArg,
    TextOpt,
)


# * Execute an operation & write the result to stdout or --output
@app.command(name="exec")
@handle_sed_error
def exec_cmd(
    ctx: typer.Context,
    operation: str = OperationArg(),
    pattern: str = PatternArg(),
    replacement: Optional[str] = ReplacementArg(),
    flags: Optional[str] = FlagsOpt(),
    text: Optional[str] = TextOpt(),
    file: Optional[Path] = FileOpt(),
    output: Optional[Path] = OutputOpt(),
    summary: bool = typer.Option(
        False, "--summary", "-s", help="Show a report panel after writing the result"
    ),
) -> None:
    settings = get_settings(ctx)
    op = build_cli_operation(operation, pattern, replacement, flags, settings)
    warn_ignored_flags(op)
    content = read_content(text, file)

    report = default_engine.execute(content, op)
    if not report.success:
        render_report(report, settings, title="Execute")
        exit_on_failure(report)

    emit_content(report, output, source=file)
    if summary:
        render_report(report, settings, title="Execute")


# * Show what an operation would do without writing anything
@app.command()
@handle_sed_error
def preview(
    ctx: typer.Context,
    operation: str = OperationArg(),
    pattern: str = PatternArg(),
    replacement: Optional[str] = ReplacementArg(),
    flags: Optional[str] = FlagsOpt(),
    text: Optional[str] = TextOpt(),
    file: Optional[Path] = FileOpt(),
) -> None:
    settings = get_settings(ctx)
    op = build_cli_operation(operation, pattern, replacement, flags, settings)
    warn_ignored_flags(op)
    content = read_content(text, file)

    report = default_engine.preview(content, op)
    render_report(report, settings, title="Preview")
    exit_on_failure(report)

    console.print("[bold]Result:[/]")
    console.print(Text(report.modified_content))
