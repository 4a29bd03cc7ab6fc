# sedmcp/core/operations.py
# Immutable operation model: one frozen dataclass per operation kind + validating builder

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .constants import OperationKind
from .exceptions import OperationConstructionError
from .validation import (
    validate_any_field,
    validate_required_fields,
    validate_text_field,
)


# * Base for all operation variants; instances never exist partially valid
@dataclass(frozen=True, kw_only=True)
class OperationSpec:
    KIND: ClassVar[OperationKind]
    REQUIRED: ClassVar[tuple[str, ...]] = ()

    pattern: Optional[str] = None
    replacement: Optional[str] = None
    flags: str = ""
    text: Optional[str] = None
    address: Optional[str] = None

    def __post_init__(self) -> None:
        if self.flags is None:
            object.__setattr__(self, "flags", "")

        for name in ("pattern", "replacement", "flags", "text", "address"):
            ok, error = validate_text_field(name, getattr(self, name))
            if not ok:
                raise OperationConstructionError(
                    f"{self.KIND.label} operation: {error}", kind=self.KIND
                )

        self._check_required()

    def _check_required(self) -> None:
        ok, error = validate_required_fields(
            self._values(), list(self.REQUIRED), self.KIND.label
        )
        if not ok:
            missing = [f for f in self.REQUIRED if getattr(self, f) is None]
            raise OperationConstructionError(error, kind=self.KIND, missing=missing)

    def _values(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "replacement": self.replacement,
            "text": self.text,
            "address": self.address,
        }

    @property
    def kind(self) -> OperationKind:
        return self.KIND

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    # JSON-ready dict using the wire field names
    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"operation": self.KIND.command}
        for key, value in self._values().items():
            if value is not None:
                data[key] = value
        if self.flags:
            data["flags"] = self.flags
        return data


@dataclass(frozen=True, kw_only=True)
class Substitute(OperationSpec):
    KIND = OperationKind.SUBSTITUTE
    REQUIRED = ("pattern", "replacement")


# delete/print take a pattern; address-only is accepted here but never executed
@dataclass(frozen=True, kw_only=True)
class _LineFilter(OperationSpec):
    def _check_required(self) -> None:
        ok, error = validate_any_field(
            self._values(), ["pattern", "address"], self.KIND.label
        )
        if not ok:
            raise OperationConstructionError(
                error, kind=self.KIND, missing=["pattern", "address"]
            )


@dataclass(frozen=True, kw_only=True)
class Delete(_LineFilter):
    KIND = OperationKind.DELETE


@dataclass(frozen=True, kw_only=True)
class Print(_LineFilter):
    KIND = OperationKind.PRINT


@dataclass(frozen=True, kw_only=True)
class Insert(OperationSpec):
    KIND = OperationKind.INSERT
    REQUIRED = ("text",)


@dataclass(frozen=True, kw_only=True)
class Append(OperationSpec):
    KIND = OperationKind.APPEND
    REQUIRED = ("text",)


@dataclass(frozen=True, kw_only=True)
class Change(OperationSpec):
    KIND = OperationKind.CHANGE
    REQUIRED = ("text",)


OPERATION_TYPES: dict[OperationKind, type[OperationSpec]] = {
    cls.KIND: cls for cls in (Substitute, Delete, Print, Insert, Append, Change)
}


# * Build a validated operation for the given kind (enum or command letter)
def build_operation(
    kind: OperationKind | str | None,
    pattern: Optional[str] = None,
    replacement: Optional[str] = None,
    flags: Optional[str] = "",
    text: Optional[str] = None,
    address: Optional[str] = None,
) -> OperationSpec:
    if kind is None:
        raise OperationConstructionError("Operation kind is required")
    if isinstance(kind, str):
        kind = OperationKind.from_command(kind)

    cls = OPERATION_TYPES[kind]

    # each variant only receives the payload its kind uses
    if kind is OperationKind.SUBSTITUTE:
        return cls(pattern=pattern, replacement=replacement, flags=flags, address=address)
    if kind in (OperationKind.DELETE, OperationKind.PRINT):
        return cls(pattern=pattern, flags=flags, address=address)
    return cls(text=text, flags=flags, address=address)


# * Build an operation from a loose mapping (tool arguments, batch files)
def operation_from_dict(data: dict[str, Any]) -> OperationSpec:
    if not isinstance(data, dict):
        raise OperationConstructionError("Operation must be an object")

    op = data.get("operation", data.get("op"))
    if not op:
        raise OperationConstructionError("Operation is missing 'operation' field")

    return build_operation(
        str(op),
        pattern=data.get("pattern"),
        replacement=data.get("replacement"),
        flags=data.get("flags") or "",
        text=data.get("text"),
        address=data.get("address"),
    )
