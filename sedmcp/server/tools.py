# sedmcp/server/tools.py
# MCP Tool definitions for sed_execute, sed_preview & sed_validate plus argument parsing

from __future__ import annotations

from typing import Any, Optional

from mcp.types import Tool

from ..core.constants import (
    OperationKind,
    TOOL_EXECUTE,
    TOOL_PREVIEW,
    TOOL_VALIDATE,
)
from ..core.exceptions import OperationConstructionError, ToolCallError
from ..core.operations import OperationSpec, build_operation

_EDIT_PROPERTIES: dict[str, dict[str, str]] = {
    "content": {"type": "string", "description": "Text content to process"},
    "operation": {"type": "string", "description": "Sed operation (s, d, p)"},
    "pattern": {"type": "string", "description": "Regex pattern"},
    "replacement": {"type": "string", "description": "Replacement text"},
    "flags": {"type": "string", "description": "Operation flags (g, i, m, s)"},
}


def _schema(required: tuple[str, ...], with_content: bool = True) -> dict[str, Any]:
    properties = {
        name: dict(prop)
        for name, prop in _EDIT_PROPERTIES.items()
        if with_content or name != "content"
    }
    return {"type": "object", "properties": properties, "required": list(required)}


TOOLS: dict[str, Tool] = {
    TOOL_EXECUTE: Tool(
        name=TOOL_EXECUTE,
        description="Execute a sed operation on text content",
        inputSchema=_schema(("content", "operation", "pattern")),
    ),
    TOOL_PREVIEW: Tool(
        name=TOOL_PREVIEW,
        description="Preview a sed operation without modifying content",
        inputSchema=_schema(("content", "operation", "pattern")),
    ),
    TOOL_VALIDATE: Tool(
        name=TOOL_VALIDATE,
        description="Validate sed operation syntax",
        inputSchema=_schema(("operation", "pattern"), with_content=False),
    ),
}


def list_tools() -> list[Tool]:
    return list(TOOLS.values())


# * Required args present & every declared arg a string
def check_arguments(tool: Tool, arguments: Any) -> dict[str, Any]:
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolCallError("Invalid arguments: expected an object", tool.name)

    missing = [name for name in tool.inputSchema["required"] if arguments.get(name) is None]
    if missing:
        raise ToolCallError(f"{tool.name} requires {', '.join(missing)}", tool.name)

    for name in tool.inputSchema["properties"]:
        value = arguments.get(name)
        if value is not None and not isinstance(value, str):
            raise ToolCallError(f"'{name}' must be a string", tool.name)

    return arguments


def parse_kind(command: str) -> OperationKind:
    try:
        return OperationKind.from_command(command)
    except OperationConstructionError as e:
        raise ToolCallError(str(e)) from e


# * Build the operation from tool arguments; default_flags fill in absent flags
def operation_from_arguments(
    arguments: dict[str, Any], default_flags: str = ""
) -> OperationSpec:
    kind = parse_kind(arguments["operation"])
    flags: Optional[str] = arguments.get("flags")
    return build_operation(
        kind,
        pattern=arguments.get("pattern"),
        replacement=arguments.get("replacement"),
        flags=default_flags if flags is None else flags,
    )
