# sedmcp/server/__init__.py
# MCP stdio tool server

from .server import SedToolServer, serve
from .tools import TOOLS, list_tools

__all__ = ["SedToolServer", "serve", "TOOLS", "list_tools"]
