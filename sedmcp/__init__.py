# sedmcp/__init__.py
# sed-style text transformations exposed as a CLI & MCP stdio tool server

__version__ = "0.1.0"
