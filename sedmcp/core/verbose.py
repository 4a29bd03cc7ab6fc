# sedmcp/core/verbose.py
# Verbose logging helpers; each one tags messages w/ a category (OP, VALIDATE, MCP, FILE...)
# * All calls go through get_output_manager(), so they are silent until init_verbose() runs

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import OutputLevel, get_output_manager, set_output_manager


def _requested_level(enabled: bool, dev_mode: bool) -> OutputLevel:
    if not enabled:
        return OutputLevel.NORMAL
    return OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE


# * Register a Rich OutputManager for this run
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    stderr: bool = False,
) -> None:
    # deferred: core must not import the CLI at module load
    from ..cli.output_manager import OutputManager

    manager = OutputManager(stderr=stderr)
    manager.initialize(
        requested_level=_requested_level(enabled, dev_mode),
        dev_mode=dev_mode,
        log_file=log_file,
    )
    set_output_manager(manager)


def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


def vlog_stage(stage: str, description: str | None = None) -> None:
    vlog("STAGE", f"{stage}: {description}" if description else stage)


# * One line per dispatched operation, pattern & flags as detail
def vlog_operation(kind: str, pattern: str | None, flags: str = "") -> None:
    detail = None if pattern is None else f"Pattern: {pattern!r}, Flags: {flags!r}"
    vlog("OP", f"{kind} operation", detail)


def vlog_outcome(
    label: str, success: bool, lines_modified: int, duration_ms: int | None = None
) -> None:
    took = f" in {duration_ms}ms" if duration_ms else ""
    if not success:
        vlog("OP", f"[red]{label} failed[/]{took}")
        return
    vlog("OP", f"{label} finished{took}", f"Lines modified: {lines_modified}")


def vlog_validation(result: str, errors: list[str] | None = None) -> None:
    detail = "\n".join(f"- {err}" for err in errors) if errors else None
    vlog("VALIDATE", result, detail)


# * MCP tool traffic: "<-" incoming call, "->" reply
def vlog_tool(direction: str, tool: str | None) -> None:
    vlog("MCP", f"{direction} {tool or '?'}")


def _sized(path: Path, size: int | None) -> str:
    return f"{path} ({size:,} bytes)" if size is not None else str(path)


def vlog_file_read(path: Path, size: int | None = None) -> None:
    vlog("FILE", f"Read: {_sized(path, size)}")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    vlog("FILE", f"Write: {_sized(path, size)}")


def vlog_config(key: str, value: Any) -> None:
    vlog("CONFIG", f"{key} = {value}")


# * `with VerboseSession(...)` brackets a run w/ session markers in the log file
class VerboseSession:
    def __init__(
        self,
        enabled: bool = False,
        log_file: Path | None = None,
        dev_mode: bool = False,
        stderr: bool = False,
    ):
        self._options = dict(
            enabled=enabled, log_file=log_file, dev_mode=dev_mode, stderr=stderr
        )

    def __enter__(self) -> "VerboseSession":
        init_verbose(**self._options)
        get_output_manager().start_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        get_output_manager().end_session()
