# sedmcp/ui/theme.py
# Color constants & pre-composed styling helpers for consistent CLI output

from __future__ import annotations

import json
from typing import Any

from rich.text import Text


# * Static palette shared by every renderer
class SedColors:
    ACCENT = "#4da6ff"
    ACCENT_DIM = "#2b6cb0"

    SUCCESS = "#10b981"  # emerald green
    WARNING = "#ffaa00"  # amber
    ERROR = "#ff4444"  # red
    INFO = "#4488ff"  # blue
    DIM = "#aaaaaa"

    ADDED = SUCCESS
    REMOVED = ERROR


def styled_checkmark() -> Text:
    return Text("✓", style=f"bold {SedColors.SUCCESS}")


def styled_cross() -> Text:
    return Text("✗", style=f"bold {SedColors.ERROR}")


def styled_arrow() -> Text:
    return Text("->", style=SedColors.ACCENT)


def styled_bullet() -> Text:
    return Text("•", style=SedColors.ACCENT)


def styled_success_line(label: str, value: str | None = None) -> list:
    """Checkmark + label [+ arrow + value]; use as console.print(*result)."""
    parts: list[Any] = [styled_checkmark(), Text(label, style=f"bold {SedColors.SUCCESS}")]
    if value is not None:
        parts.extend([styled_arrow(), value])
    return parts


def styled_setting_line(key: str, value: str) -> list:
    return [styled_bullet(), f"[bold white]{key}[/]", styled_arrow(), value]


def format_setting_value(value: Any) -> str:
    """Format a setting value with consistent styling."""
    if isinstance(value, str):
        return f'[{SedColors.ACCENT}]"{value}"[/]'
    elif isinstance(value, bool):
        return f"[{SedColors.ACCENT}]{str(value).lower()}[/]"
    elif isinstance(value, (int, float)):
        return f"[{SedColors.ACCENT}]{value}[/]"
    else:
        return f"[{SedColors.ACCENT}]{json.dumps(value)}[/]"
