# sedmcp/cli/params.py
# CLI argument definitions & normalization helpers

from __future__ import annotations

from typing import Any

import typer

from ..core.constants import OperationKind
from ..core.exceptions import OperationConstructionError


# accepts the one-letter command or the full name ("s" / "substitute")
def normalize_kind(value: str) -> OperationKind:
    v = value.strip().lower()
    for kind in OperationKind:
        if v == kind.name.lower():
            return kind
    try:
        return OperationKind.from_command(v)
    except OperationConstructionError:
        raise typer.BadParameter(
            "Invalid operation. Choose: s|d|p|i|a|c (or substitute|delete|print|...)"
        )


def OperationArg() -> Any:
    return typer.Argument(..., help="Operation: s (substitute), d (delete), p (print)")


def PatternArg() -> Any:
    return typer.Argument(..., help="Regular expression to match")


def ReplacementArg() -> Any:
    return typer.Argument(
        None, help="Replacement for s; supports \\1 & \\g<name> group references"
    )


def FlagsOpt() -> Any:
    return typer.Option(
        None, "--flags", "-f", help="Flags: g (global), i (ignore case), m, s"
    )


def TextOpt() -> Any:
    return typer.Option(None, "--text", "-t", help="Input text (instead of a file or stdin)")


def FileOpt() -> Any:
    return typer.Option(
        None,
        "--file",
        "-i",
        help="Read input from this file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    )


def OutputOpt() -> Any:
    return typer.Option(
        None, "--output", "-o", help="Write result here instead of stdout", resolve_path=True
    )
