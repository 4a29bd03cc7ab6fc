# sedmcp/core/report.py
# Immutable outcome of one execute/preview/batch call

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional


# * Result of applying one or more operations (pure data, no I/O)
@dataclass(frozen=True)
class OutcomeReport:
    original_content: str = ""
    modified_content: str = ""
    modified: bool = False
    lines_modified: int = 0
    changes_applied: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    success: bool = True
    error: Optional[str] = None
    execution_time_ms: int = 0

    def __post_init__(self) -> None:
        # normalize None/list inputs so the report stays hashable & immutable
        object.__setattr__(self, "original_content", self.original_content or "")
        object.__setattr__(self, "modified_content", self.modified_content or "")
        object.__setattr__(self, "changes_applied", tuple(self.changes_applied or ()))
        object.__setattr__(self, "warnings", tuple(self.warnings or ()))

    # * Successful report for a completed algorithm
    @classmethod
    def succeeded(
        cls,
        original: str,
        modified_content: str,
        *,
        modified: bool,
        lines_modified: int,
        changes: Iterable[str] = (),
        warnings: Iterable[str] = (),
        execution_time_ms: int = 0,
    ) -> "OutcomeReport":
        return cls(
            original_content=original,
            modified_content=modified_content,
            modified=modified,
            lines_modified=lines_modified,
            changes_applied=tuple(changes),
            warnings=tuple(warnings),
            success=True,
            execution_time_ms=execution_time_ms,
        )

    # * Failed report; content is always left untouched
    @classmethod
    def failed(
        cls,
        original: str,
        error: str,
        *,
        changes: Iterable[str] = (),
        warnings: Iterable[str] = (),
        execution_time_ms: int = 0,
    ) -> "OutcomeReport":
        return cls(
            original_content=original,
            modified_content=original,
            modified=False,
            lines_modified=0,
            changes_applied=tuple(changes),
            warnings=tuple(warnings),
            success=False,
            error=error or "Unknown error",
            execution_time_ms=execution_time_ms,
        )

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    # copy w/ a different timing value (preview reports always carry 0)
    def with_timing(self, execution_time_ms: int) -> "OutcomeReport":
        return replace(self, execution_time_ms=execution_time_ms)

    # JSON-ready dict w/ wire (camelCase) keys
    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "originalContent": self.original_content,
            "modifiedContent": self.modified_content,
            "modified": self.modified,
            "linesModified": self.lines_modified,
            "changesApplied": list(self.changes_applied),
            "warnings": list(self.warnings),
            "error": self.error,
            "executionTimeMs": self.execution_time_ms,
        }

    def __str__(self) -> str:
        return (
            f"OutcomeReport(success={self.success}, "
            f"lines_modified={self.lines_modified}, "
            f"changes={len(self.changes_applied)}, "
            f"warnings={len(self.warnings)}, "
            f"time={self.execution_time_ms}ms)"
        )
