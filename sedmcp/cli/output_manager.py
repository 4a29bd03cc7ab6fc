# sedmcp/cli/output_manager.py
# Rich-backed OutputManager registered by init_verbose() for CLI & server runs
# * Console output follows the level; the optional log file gets plain text
# * stderr=True keeps stdout free for MCP messages

from __future__ import annotations

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from ..core.output import OutputLevel

_RULE = "=" * 60


# append-only plain-text log; failures to open or write are ignored
class _LogFile:
    def __init__(self, path: Path | None) -> None:
        self.path = path
        self._handle: TextIO | None = None
        if path is None:
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(path, "a", encoding="utf-8")
        except OSError:
            self.path = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def write(self, *lines: str) -> None:
        if self._handle is None:
            return
        try:
            for line in lines:
                self._handle.write(f"{line}\n")
            self._handle.flush()
        except OSError:
            pass

    def close(self) -> None:
        if self._handle is None:
            return
        try:
            self._handle.close()
        except OSError:
            pass
        self._handle = None


class OutputManager:
    def __init__(self, stderr: bool = False) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._stderr = stderr
        self._started = time.time()
        self._log = _LogFile(None)

    # --quiet wins; DEBUG is capped at VERBOSE unless dev_mode is on
    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        if quiet:
            self._level = OutputLevel.QUIET
        else:
            ceiling = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
            self._level = min(requested_level, ceiling)
        self._started = time.time()
        self._log.close()
        self._log = _LogFile(log_file)

    def _out(self) -> Console:
        if self._stderr:
            return Console(stderr=True)
        from ..sed_io.console import get_console

        return get_console()

    def _stamp(self) -> str:
        return f"{time.time() - self._started:.2f}s"

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        if not self.is_debug_enabled():
            return
        self._out().print(f"[magenta]\\[{category}][/] {escape(msg)}", **kwargs)
        self._log.write(f"[{self._stamp()}] [{category}] {msg}")

    # msg may carry Rich markup; detail lines are printed literally
    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if not self.is_verbose_enabled():
            return
        detail_lines = detail.split("\n") if detail else []
        out = self._out()
        out.print(f"[dim]\\[{self._stamp()}][/] [bold cyan]\\[{category}][/] {msg}", **kwargs)
        for line in detail_lines:
            out.print(f"  [dim]{escape(line)}[/]", highlight=False)
        self._log.write(
            f"[{self._stamp()}] [{category}] {msg}", *(f"  {line}" for line in detail_lines)
        )

    def info(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            self._out().print(msg, **kwargs)

    # always logged, shown on stderr unless quiet; stdout may carry results
    def warning(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            Console(stderr=True).print(f"[yellow]Warning:[/] {escape(msg)}", **kwargs)
        self._log.write(f"[{self._stamp()}] [WARNING] {msg}")

    def debug_json(self, label: str, data: Any) -> None:
        if not self.is_debug_enabled():
            return
        out = self._out()
        out.print(f"[magenta]\\[JSON][/] {escape(label)}:")
        out.print_json(data=data, default=str)
        try:
            body = json.dumps(data, indent=2, default=str).split("\n")
        except (TypeError, ValueError):
            self._log.write(f"[{self._stamp()}] [JSON] {label}: {data}")
            return
        self._log.write(f"[{self._stamp()}] [JSON] {label}:", *(f"  {line}" for line in body))

    def start_session(self) -> None:
        self._started = time.time()
        if self._log.active:
            lines = [
                "",
                _RULE,
                f"Session Started: {datetime.now().isoformat()}",
                f"Level: {self._level.name}",
            ]
            if self._dev_mode:
                lines.append("Mode: Developer (dev_mode enabled)")
            self._log.write(*lines, _RULE, "")

    def end_session(self) -> None:
        if self._log.active:
            self._log.write("", _RULE, f"Session Ended: {datetime.now().isoformat()}", _RULE, "")
        self.cleanup()

    def cleanup(self) -> None:
        self._log.close()
