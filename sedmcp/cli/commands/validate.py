# sedmcp/cli/commands/validate.py
# Check an operation without running it

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.engine import default_engine
from ...core.exceptions import OperationConstructionError
from ...ui.reporting import render_validation
from ..app import app
from ..decorators import handle_sed_error
from ..helpers import build_cli_operation
from ..params import FlagsOpt, OperationArg, PatternArg, ReplacementArg


@app.command()
@handle_sed_error
def validate(
    ctx: typer.Context,
    operation: str = OperationArg(),
    pattern: str = PatternArg(),
    replacement: Optional[str] = ReplacementArg(),
    flags: Optional[str] = FlagsOpt(),
) -> None:
    settings = get_settings(ctx)
    try:
        op = build_cli_operation(operation, pattern, replacement, flags, settings)
    except OperationConstructionError as e:
        render_validation(None, str(e))
        raise typer.Exit(code=1)

    result = default_engine.check(op)
    render_validation(op.kind, result.error, result.warnings)
    if not result.is_valid:
        raise typer.Exit(code=1)
