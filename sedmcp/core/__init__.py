# sedmcp/core/__init__.py
# Transformation engine, operation model & outcome reports (pure - no I/O)

from .constants import OperationKind, EXECUTABLE_KINDS
from .engine import TransformationEngine, default_engine
from .exceptions import (
    SedError,
    OperationConstructionError,
    OperationValidationError,
    OperationExecutionError,
    BatchExecutionError,
)
from .operations import (
    OperationSpec,
    Substitute,
    Delete,
    Print,
    Insert,
    Append,
    Change,
    build_operation,
    operation_from_dict,
)
from .report import OutcomeReport
from .validation import ValidationResult

__all__ = [
    "OperationKind",
    "EXECUTABLE_KINDS",
    "TransformationEngine",
    "default_engine",
    "SedError",
    "OperationConstructionError",
    "OperationValidationError",
    "OperationExecutionError",
    "BatchExecutionError",
    "OperationSpec",
    "Substitute",
    "Delete",
    "Print",
    "Insert",
    "Append",
    "Change",
    "build_operation",
    "operation_from_dict",
    "OutcomeReport",
    "ValidationResult",
]
