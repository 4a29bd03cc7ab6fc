# sedmcp/core/output.py
# Verbosity levels & the output-manager registry used by engine, server & CLI
# * No I/O here; the Rich implementation is sedmcp/cli/output_manager.py
# * Engine code logs via get_output_manager() and never imports the CLI

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, Any, runtime_checkable, Optional


class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


# * What the engine & server expect from a registered manager
@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def is_debug_enabled(self) -> bool: ...

    def is_verbose_enabled(self) -> bool: ...

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None: ...

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def debug_json(self, label: str, data: Any) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Discards everything; active until init_verbose() registers a real manager
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.QUIET

    def is_debug_enabled(self) -> bool:
        return False

    def is_verbose_enabled(self) -> bool:
        return False

    def _discard(self, *args: Any, **kwargs: Any) -> None:
        return None

    debug = verbose = info = warning = debug_json = _discard
    start_session = end_session = _discard


_active: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _active
    _active = manager


def get_output_manager() -> OutputInterface:
    return _active


# tests call this between cases
def reset_output_manager() -> None:
    set_output_manager(NullOutputManager())
