# sedmcp/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (SEDMCP_CONFIG may live in .env)
load_dotenv()

from ..config.settings import settings_manager
from ..sed_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
    help="Regex-driven text transformations (substitute, delete, print) & an MCP tool server.",
)


# * Load settings & initialize logging before any subcommand runs
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # must be after settings load to check dev_mode
    from ..core.verbose import init_verbose

    # log_file implies verbose mode; serve opens its own stderr session
    if ctx.invoked_subcommand != "serve":
        dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
        init_verbose(
            enabled=verbose or log_file is not None,
            log_file=log_file,
            dev_mode=dev_mode,
        )

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import edit as _edit  # noqa: F401,E402
from .commands import validate as _validate  # noqa: F401,E402
from .commands import batch as _batch  # noqa: F401,E402
from .commands import info as _info  # noqa: F401,E402
from .commands import serve as _serve  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
