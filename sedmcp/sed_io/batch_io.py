# sedmcp/sed_io/batch_io.py
# Load batch operation lists from JSON files

from pathlib import Path
from typing import Any

from ..core.exceptions import OperationConstructionError
from ..core.operations import OperationSpec, operation_from_dict
from ..core.verbose import vlog
from .generics import read_json_safe


# * Accept either a bare list of ops or an object w/ an "ops" list
def extract_ops(data: Any) -> list[Any]:
    if isinstance(data, dict):
        if "ops" not in data:
            raise OperationConstructionError("Missing 'ops' field in batch file")
        data = data["ops"]

    if not isinstance(data, list):
        raise OperationConstructionError("'ops' field must be a list")

    return data


# * Build every operation, prefixing errors w/ the 1-based op index
def parse_operations(data: Any) -> list[OperationSpec]:
    operations: list[OperationSpec] = []
    for i, raw in enumerate(extract_ops(data), start=1):
        try:
            operations.append(operation_from_dict(raw))
        except OperationConstructionError as e:
            raise OperationConstructionError(
                f"Op {i}: {e}", kind=e.kind, missing=e.missing
            ) from e
    return operations


def load_operations(path: Path) -> list[OperationSpec]:
    operations = parse_operations(read_json_safe(path))
    vlog("BATCH", f"Loaded {len(operations)} operation(s) from {path}")
    return operations
