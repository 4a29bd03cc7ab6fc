# sedmcp/core/validation.py
# Pure validation helpers for operation fields (no I/O)

from dataclasses import dataclass, field
from typing import Any, Optional

from .constants import RECOGNIZED_FLAGS


# * Standard result type for validation operations (pure data, no I/O)
@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> "ValidationResult":
        return cls(is_valid=True, warnings=list(warnings or []))

    @classmethod
    def failed(cls, error: str) -> "ValidationResult":
        return cls(is_valid=False, errors=[error])

    @property
    def error(self) -> Optional[str]:
        return "; ".join(self.errors) if self.errors else None


# * Blank check: None, empty or whitespace-only
def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# * Required field validation; None counts as missing, "" does not
def validate_required_fields(
    values: dict[str, Any], required_fields: list[str], kind_label: str
) -> tuple[bool, Optional[str]]:
    missing = [f for f in required_fields if values.get(f) is None]

    if missing:
        fields_str = " and ".join(missing)
        return False, f"{kind_label} operation requires {fields_str}"

    return True, None


# * At least one of the given fields must be present
def validate_any_field(
    values: dict[str, Any], candidates: list[str], kind_label: str
) -> tuple[bool, Optional[str]]:
    if all(values.get(f) is None for f in candidates):
        return False, f"{kind_label} operation requires {' or '.join(candidates)}"
    return True, None


# * String type validation for optional text fields
def validate_text_field(name: str, value: Any) -> tuple[bool, Optional[str]]:
    if value is not None and not isinstance(value, str):
        return False, f"'{name}' must be string"
    return True, None


# * Return flag letters outside the recognized set (g, i, m, s)
def unrecognized_flags(flags: str) -> list[str]:
    return sorted({c for c in flags if c not in RECOGNIZED_FLAGS})
