# sedmcp/sed_io/__init__.py
# File, JSON & console helpers used by the CLI & server adapters

from .generics import (
    ensure_parent,
    ensure_distinct_paths,
    read_text_safe,
    write_text_safe,
    read_json_safe,
    write_json_safe,
)
from .batch_io import load_operations, parse_operations

__all__ = [
    "ensure_parent",
    "ensure_distinct_paths",
    "read_text_safe",
    "write_text_safe",
    "read_json_safe",
    "write_json_safe",
    "load_operations",
    "parse_operations",
]
