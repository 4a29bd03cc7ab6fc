# sedmcp/ui/__init__.py
# Console rendering helpers

from .reporting import render_report, render_validation, render_capabilities
from .theme import SedColors

__all__ = ["render_report", "render_validation", "render_capabilities", "SedColors"]
