# sedmcp/ui/reporting.py
# Rich console rendering for outcome reports, validation results & capabilities

from __future__ import annotations

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config.settings import SedSettings
from ..core.constants import OperationKind
from ..core.report import OutcomeReport
from ..sed_io.console import console
from .theme import SedColors, styled_checkmark, styled_cross


# header line: status, modified flag, line count & timing
def _summary_text(report: OutcomeReport, title: str) -> Text:
    text = Text()
    if report.success:
        text.append_text(styled_checkmark())
        text.append(f" {title} succeeded", style=f"bold {SedColors.SUCCESS}")
    else:
        text.append_text(styled_cross())
        text.append(f" {title} failed", style=f"bold {SedColors.ERROR}")
        return text

    text.append("  modified: ", style="dim")
    text.append(str(report.modified).lower(), style=SedColors.ACCENT)
    text.append("  lines: ", style="dim")
    text.append(str(report.lines_modified), style=SedColors.ACCENT)
    text.append("  time: ", style="dim")
    text.append(f"{report.execution_time_ms}ms", style=SedColors.ACCENT)
    return text


# change list, truncated to max_shown entries
def _changes_table(changes: tuple[str, ...], max_shown: int) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Change")
    for index, change in enumerate(changes[:max_shown], start=1):
        table.add_row(str(index), Text(change))
    hidden = len(changes) - max_shown
    if hidden > 0:
        table.add_row("", Text(f"... {hidden} more", style="dim"))
    return table


# * Render a report to the console honoring display settings
def render_report(
    report: OutcomeReport, settings: SedSettings | None = None, title: str = "Operation"
) -> None:
    settings = settings or SedSettings()
    parts: list = [_summary_text(report, title)]

    if not report.success:
        parts.append(Text(report.error or "unknown error", style=SedColors.ERROR))
    else:
        if settings.show_original:
            parts.append(Text("\nOriginal:", style="bold"))
            parts.append(Text(report.original_content, style="dim"))
        if settings.show_changes and report.changes_applied:
            parts.append(Text("\nChanges applied:", style="bold"))
            parts.append(_changes_table(report.changes_applied, settings.max_changes_shown))

    # partial batch progress is kept on failure
    if not report.success and settings.show_changes and report.changes_applied:
        parts.append(Text("\nChanges before failure:", style="bold"))
        parts.append(_changes_table(report.changes_applied, settings.max_changes_shown))

    if report.has_warnings:
        parts.append(Text("\nWarnings:", style=f"bold {SedColors.WARNING}"))
        for warning in report.warnings:
            parts.append(Text(f"! {warning}", style=SedColors.WARNING))

    border = SedColors.SUCCESS if report.success else SedColors.ERROR
    console.print(Panel(Group(*parts), title=title, border_style=border, expand=False))


def render_validation(kind: OperationKind | None, error: str | None, warnings=()) -> None:
    if error:
        console.print(styled_cross(), f"Validation failed: {escape(error)}")
    else:
        label = kind.label if kind is not None else "operation"
        console.print(styled_checkmark(), f"Operation is valid: {label}")
    for warning in warnings:
        console.print(f"[{SedColors.WARNING}]! {escape(warning)}[/]")


# * Table of every operation kind & whether the engine executes it
def render_capabilities(capabilities: dict[OperationKind, bool]) -> None:
    table = Table(title="Supported operations", header_style="bold")
    table.add_column("Command", style=SedColors.ACCENT, justify="center")
    table.add_column("Operation")
    table.add_column("Supported", justify="center")
    for kind, supported in capabilities.items():
        mark = styled_checkmark() if supported else styled_cross()
        table.add_row(kind.command, kind.label, mark)
    console.print(table)
