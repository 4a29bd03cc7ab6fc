# sedmcp/cli/commands/serve.py
# Run the MCP tool server on stdin/stdout

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.verbose import VerboseSession, vlog_config
from ...server import SedToolServer
from ...sed_io.console import configure_console
from ..app import app
from ..decorators import handle_sed_error


@app.command()
@handle_sed_error
def serve(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    # stdout carries only MCP messages from here on
    configure_console(stderr=True)

    root = ctx.find_root().params
    log_file = root.get("log_file")
    with VerboseSession(
        enabled=bool(root.get("verbose")) or log_file is not None,
        log_file=log_file,
        dev_mode=settings.dev_mode,
        stderr=True,
    ):
        vlog_config("server_name", settings.server_name)
        vlog_config("server_version", settings.server_version)
        SedToolServer(settings=settings).serve()
