# sedmcp/sed_io/console.py
# Shared Rich console; server mode points it at stderr so stdout carries only MCP messages

from __future__ import annotations
from typing import Optional, Any
from rich.console import Console


# forwards every attribute to the current Console so module-level imports survive a swap
class _SwappableConsole:
    __slots__ = ("current",)

    def __init__(self) -> None:
        self.current = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self.current, name)


console = _SwappableConsole()


def get_console() -> Console:
    # tests may patch `console` w/ a plain Console
    return getattr(console, "current", console)


# * Swap in a Console built w/ the given options (stderr for the server, record for tests)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    stderr: bool = False,
    record: bool = False,
) -> Console:
    options: dict[str, Any] = {
        key: value
        for key, value in (("width", width), ("force_terminal", force_terminal))
        if value is not None
    }
    if stderr:
        options["stderr"] = True
    if record:
        options["record"] = True

    if options:
        console.current = Console(**options)
    return console.current


def reset_console() -> Console:
    console.current = Console()
    return console.current


__all__ = ["console", "get_console", "configure_console", "reset_console"]
