# sedmcp/cli/commands/info.py
# capabilities & examples commands

from __future__ import annotations

import json

import typer

from ...core.engine import default_engine
from ...sed_io.console import console
from ..app import app
from ...ui.reporting import render_capabilities

_EXAMPLES = [
    (
        "Substitute (replace text)",
        "sedmcp exec s hello hi --flags g --text 'hello hello'",
        "Replaces every 'hello' with 'hi'; drop g to replace only the first",
    ),
    (
        "Substitute w/ groups",
        "sedmcp exec s '(\\w+)@(\\w+)' '\\2 at \\1' --file contacts.txt",
        "Group references use \\1 or \\g<name>",
    ),
    (
        "Delete lines",
        "sedmcp exec d error --file app.log --output clean.log",
        "Deletes lines containing 'error'",
    ),
    (
        "Print matching lines",
        "sedmcp exec p '^import' --flags i --file main.py",
        "Keeps only lines that match",
    ),
    (
        "Preview",
        "sedmcp preview s foo bar --text 'foo\\nfoo'",
        "Shows the report & result without writing anything",
    ),
    (
        "Batch",
        "sedmcp batch ops.json --file input.txt",
        'ops.json: [{"operation": "s", "pattern": "a", "replacement": "b", "flags": "g"}]',
    ),
]


# * Show which operation kinds the engine executes
@app.command()
def capabilities(
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
) -> None:
    caps = default_engine.capabilities()
    if as_json:
        typer.echo(json.dumps({kind.command: ok for kind, ok in caps.items()}))
        return
    render_capabilities(caps)


@app.command()
def examples() -> None:
    console.print("[bold]Sed operation examples[/]\n")
    for number, (title, command, note) in enumerate(_EXAMPLES, start=1):
        console.print(f"[bold]{number}. {title}[/]")
        console.print(f"   [cyan]{command}[/]", markup=True, highlight=False)
        console.print(f"   [dim]{note}[/]")
        console.print()
