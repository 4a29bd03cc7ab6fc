# sedmcp/cli/commands/batch.py
# Run a JSON list of operations in order, each on the previous result

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.engine import default_engine
from ...sed_io.batch_io import load_operations
from ...ui.reporting import render_report
from ..app import app
from ..decorators import handle_sed_error
from ..helpers import emit_content, exit_on_failure, read_content
from ..params import FileOpt, OutputOpt, TextOpt


@app.command()
@handle_sed_error
def batch(
    ctx: typer.Context,
    ops_json: Path = typer.Argument(
        ...,
        help="JSON file: a list of operations or {\"ops\": [...]}",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
    text: Optional[str] = TextOpt(),
    file: Optional[Path] = FileOpt(),
    output: Optional[Path] = OutputOpt(),
    summary: bool = typer.Option(
        False, "--summary", "-s", help="Show a report panel after writing the result"
    ),
) -> None:
    settings = get_settings(ctx)
    operations = load_operations(ops_json)
    content = read_content(text, file)

    report = default_engine.execute_batch(content, operations)
    if not report.success:
        render_report(report, settings, title="Batch")
        exit_on_failure(report)

    emit_content(report, output, source=file)
    if summary:
        render_report(report, settings, title="Batch")
