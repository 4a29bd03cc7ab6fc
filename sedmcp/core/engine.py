# sedmcp/core/engine.py
# Stateless transformation engine: validate, substitute/delete/print & sequential batches

from __future__ import annotations

import re
import time
from typing import Callable, Iterable, Optional

from .constants import EXECUTABLE_KINDS, FLAG_GLOBAL, OperationKind
from .debug import debug_engine, debug_error
from .exceptions import (
    BatchExecutionError,
    OperationExecutionError,
    OperationValidationError,
    SedError,
)
from .operations import OperationSpec
from .patterns import compile_pattern, join_lines, split_lines
from .report import OutcomeReport
from .validation import ValidationResult, is_blank, unrecognized_flags
from .verbose import vlog_operation, vlog_outcome, vlog_stage, vlog_validation


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class TransformationEngine:
    """
    Applies sed-style operations to in-memory text.

    The engine holds no state; every method is a pure function of its
    arguments, so one instance can be shared freely between callers and
    threads. ``execute``, ``preview`` & ``execute_batch`` never raise for
    operation problems - failures come back as ``success=False`` reports
    whose ``modified_content`` equals the input.
    """

    # * Raise OperationValidationError if the engine cannot run this operation
    def validate(self, op: Optional[OperationSpec]) -> None:
        if op is None:
            raise OperationValidationError("Operation cannot be null")

        kind = getattr(op, "kind", None)
        if kind is None:
            raise OperationValidationError("Operation type is required")

        if not self.supports(kind):
            raise OperationValidationError(
                f"Unsupported operation type: {kind.label}", kind=kind
            )

        if is_blank(op.pattern):
            raise OperationValidationError(
                f"{kind.label} operation requires a pattern", kind=kind
            )

        if kind is OperationKind.SUBSTITUTE and op.replacement is None:
            raise OperationValidationError(
                "Substitute operation requires a replacement (can be empty string)",
                kind=kind,
                pattern=op.pattern,
            )

        compile_pattern(op.pattern, op.flags, kind=kind)

    # * Error-as-value form of validate()
    def check(self, op: Optional[OperationSpec]) -> ValidationResult:
        try:
            self.validate(op)
        except OperationValidationError as e:
            vlog_validation("Operation rejected", [str(e)])
            return ValidationResult.failed(str(e))

        warnings = []
        unknown = unrecognized_flags(op.flags)
        if unknown:
            warnings.append(f"Ignoring unrecognized flags: {''.join(unknown)}")
        vlog_validation("Operation is valid")
        return ValidationResult.ok(warnings)

    def supports(self, kind: Optional[OperationKind]) -> bool:
        return kind in EXECUTABLE_KINDS

    # * Support matrix for every known operation kind
    def capabilities(self) -> dict[OperationKind, bool]:
        return {kind: self.supports(kind) for kind in OperationKind}

    def execute(self, content: str, op: Optional[OperationSpec]) -> OutcomeReport:
        start = time.perf_counter()
        report = self._guarded(content, op, start)
        return report.with_timing(_elapsed_ms(start))

    # same computation as execute(); previews never report timing
    def preview(self, content: str, op: Optional[OperationSpec]) -> OutcomeReport:
        report = self._guarded(content, op, time.perf_counter())
        return report.with_timing(0)

    # * Apply operations in order, each consuming the previous output; stops at first failure
    def execute_batch(
        self, content: str, ops: Optional[Iterable[OperationSpec]]
    ) -> OutcomeReport:
        start = time.perf_counter()
        if ops is None:
            return OutcomeReport.failed(
                content, "Operations list is required", execution_time_ms=_elapsed_ms(start)
            )

        steps = list(ops)
        current = content
        changes: list[str] = []
        warnings: list[str] = []
        total_lines = 0
        any_modified = False

        for step, op in enumerate(steps, start=1):
            # anything that isn't an OperationSpec fails inside execute()
            label = getattr(getattr(op, "kind", None), "label", "missing")
            vlog_stage(f"Batch step {step}/{len(steps)}", label)

            result = self.execute(current, op)
            if not result.success:
                error = BatchExecutionError(step, result.error or "unknown error")
                debug_error(error, "execute_batch")
                vlog_outcome("Batch", False, 0, _elapsed_ms(start))
                return OutcomeReport.failed(
                    content,
                    str(error),
                    changes=changes,
                    warnings=warnings,
                    execution_time_ms=_elapsed_ms(start),
                )

            current = result.modified_content
            changes.extend(result.changes_applied)
            warnings.extend(result.warnings)
            total_lines += result.lines_modified
            any_modified = any_modified or result.modified

        elapsed = _elapsed_ms(start)
        vlog_outcome("Batch", True, total_lines, elapsed)
        return OutcomeReport.succeeded(
            content,
            current,
            modified=any_modified,
            lines_modified=total_lines,
            changes=changes,
            warnings=warnings,
            execution_time_ms=elapsed,
        )

    # validate + dispatch, converting every failure into a report
    def _guarded(
        self, content: str, op: Optional[OperationSpec], start: float
    ) -> OutcomeReport:
        try:
            if not isinstance(content, str):
                raise OperationExecutionError("Content must be a string")
            self.validate(op)
            vlog_operation(op.kind.label, op.pattern, op.flags)
            report = self._dispatch(op)(content, op)
        except SedError as e:
            debug_error(e, "engine")
            vlog_outcome("Operation", False, 0, _elapsed_ms(start))
            return OutcomeReport.failed(
                content if isinstance(content, str) else "",
                str(e),
                execution_time_ms=_elapsed_ms(start),
            )
        except Exception as e:
            debug_error(e, "engine (unexpected)")
            return OutcomeReport.failed(
                content if isinstance(content, str) else "",
                f"Unexpected error: {e}",
                execution_time_ms=_elapsed_ms(start),
            )

        vlog_outcome(op.kind.label, True, report.lines_modified)
        return report

    def _dispatch(
        self, op: OperationSpec
    ) -> Callable[[str, OperationSpec], OutcomeReport]:
        handlers = {
            OperationKind.SUBSTITUTE: self._substitute,
            OperationKind.DELETE: self._delete,
            OperationKind.PRINT: self._print,
        }
        try:
            return handlers[op.kind]
        except KeyError:
            raise OperationValidationError(
                f"Unsupported operation: {op.kind.label}", kind=op.kind
            )

    # * Replace first match (or every match w/ g) across the whole text
    def _substitute(self, content: str, op: OperationSpec) -> OutcomeReport:
        regex = compile_pattern(op.pattern, op.flags, kind=op.kind)
        changes: list[str] = []

        def _replace(match: re.Match[str]) -> str:
            try:
                replacement = match.expand(op.replacement)
            except (re.error, IndexError) as e:
                raise OperationExecutionError(f"Invalid replacement: {e}") from e
            changes.append(f"Replaced '{match.group(0)}' with '{replacement}'")
            return replacement

        count = 0 if op.has_flag(FLAG_GLOBAL) else 1
        result = regex.sub(_replace, content, count=count)
        debug_engine(f"substitute: {len(changes)} match(es), global={count == 0}")

        return OutcomeReport.succeeded(
            content,
            result,
            modified=result != content,
            lines_modified=len(changes),
            changes=changes,
        )

    # * Drop every line the pattern matches anywhere in
    def _delete(self, content: str, op: OperationSpec) -> OutcomeReport:
        regex = compile_pattern(op.pattern, op.flags, kind=op.kind)
        kept: list[str] = []
        changes: list[str] = []

        for number, line in enumerate(split_lines(content), start=1):
            if regex.search(line):
                changes.append(f"Deleted line {number}: '{line}'")
            else:
                kept.append(line)

        result = join_lines(kept)
        return OutcomeReport.succeeded(
            content,
            result,
            modified=result != content,
            lines_modified=len(changes),
            changes=changes,
        )

    # * Keep only matching lines; always reported as modified
    def _print(self, content: str, op: OperationSpec) -> OutcomeReport:
        regex = compile_pattern(op.pattern, op.flags, kind=op.kind)
        matched: list[str] = []
        changes: list[str] = []

        for number, line in enumerate(split_lines(content), start=1):
            if regex.search(line):
                matched.append(line)
                changes.append(f"Matched line {number}: '{line}'")

        return OutcomeReport.succeeded(
            content,
            join_lines(matched),
            modified=True,
            lines_modified=len(matched),
            changes=changes,
        )


# shared stateless instance for callers that don't need their own
default_engine = TransformationEngine()
