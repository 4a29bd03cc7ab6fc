# sedmcp/server/server.py
# MCP stdio tool server exposing sed_execute, sed_preview & sed_validate

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..config.settings import SedSettings
from ..core.constants import TOOL_EXECUTE, TOOL_PREVIEW, TOOL_VALIDATE
from ..core.engine import TransformationEngine
from ..core.exceptions import SedError, ToolCallError
from ..core.operations import OperationSpec
from ..core.output import get_output_manager
from ..core.report import OutcomeReport
from ..core.verbose import vlog_tool
from .formatting import (
    PREVIEW_PREFIX,
    format_report_text,
    format_validation_text,
    text_content,
)
from .tools import TOOLS, check_arguments, list_tools, operation_from_arguments


class SedToolServer:
    """
    Wraps an ``mcp`` low-level ``Server`` around the transformation engine.

    The SDK owns framing, the initialize handshake, ping and protocol error
    codes. Tool handlers return the text for the client; a raised
    ``ToolCallError`` becomes a result with ``isError`` set.
    """

    def __init__(
        self,
        engine: Optional[TransformationEngine] = None,
        settings: Optional[SedSettings] = None,
    ) -> None:
        self.engine = engine or TransformationEngine()
        self.settings = settings or SedSettings()
        self.server: Server = Server(
            self.settings.server_name, version=self.settings.server_version
        )
        self._tool_handlers: dict[str, Callable[[dict[str, Any]], str]] = {
            TOOL_EXECUTE: self._sed_execute,
            TOOL_PREVIEW: self._sed_preview,
            TOOL_VALIDATE: self._sed_validate,
        }
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def list_tools(self) -> list[Tool]:
        return list_tools()

    async def call_tool(
        self, name: str, arguments: Optional[dict[str, Any]]
    ) -> list[TextContent]:
        vlog_tool("<-", name)
        handler = self._tool_handlers.get(name)
        if handler is None:
            raise ToolCallError(f"Unknown tool: {name}", name)

        arguments = check_arguments(TOOLS[name], arguments)
        get_output_manager().debug_json(f"{name} arguments", arguments)
        try:
            text = handler(arguments)
        except ToolCallError:
            vlog_tool("-> error", name)
            raise
        vlog_tool("->", name)
        return text_content(text)

    # * Run over any pair of MCP streams (stdio, in-memory...)
    async def run(self, read_stream: Any, write_stream: Any) -> None:
        await self.server.run(
            read_stream, write_stream, self.server.create_initialization_options()
        )

    async def run_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            await self.run(read_stream, write_stream)

    # * Blocking; returns when the client closes stdin
    def serve(self) -> None:
        asyncio.run(self.run_stdio())

    # Tools

    def _build(self, arguments: dict[str, Any], failure: str) -> OperationSpec:
        try:
            return operation_from_arguments(arguments, self.settings.default_flags)
        except ToolCallError:
            raise
        except SedError as e:
            raise ToolCallError(f"{failure}: {e}") from e

    @staticmethod
    def _report(report: OutcomeReport, prefix: str = "") -> str:
        text = prefix + format_report_text(report)
        if not report.success:
            raise ToolCallError(text)
        return text

    def _sed_execute(self, arguments: dict[str, Any]) -> str:
        op = self._build(arguments, "Sed execution failed")
        return self._report(self.engine.execute(arguments["content"], op))

    def _sed_preview(self, arguments: dict[str, Any]) -> str:
        op = self._build(arguments, "Sed preview failed")
        return self._report(self.engine.preview(arguments["content"], op), PREVIEW_PREFIX)

    # construction problems come back as validation text, not a build failure
    def _sed_validate(self, arguments: dict[str, Any]) -> str:
        try:
            op = operation_from_arguments(arguments, self.settings.default_flags)
        except ToolCallError:
            raise
        except SedError as e:
            raise ToolCallError(format_validation_text(None, str(e))) from e

        result = self.engine.check(op)
        text = format_validation_text(op.kind.label, result.error)
        if not result.is_valid:
            raise ToolCallError(text)
        return text


# * Run the server on stdio until the client disconnects
def serve(settings: Optional[SedSettings] = None) -> None:
    SedToolServer(settings=settings).serve()
