# sedmcp/server/formatting.py
# Plain-text rendering of outcome reports for tool responses

from __future__ import annotations

from mcp.types import TextContent

from ..core.report import OutcomeReport

PREVIEW_PREFIX = "PREVIEW: "


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


# * Render a report the way tool clients display it
def format_report_text(report: OutcomeReport) -> str:
    if not report.success:
        return f"❌ Error: {report.error}"

    parts = [
        "✅ Success!",
        f"Modified: {_bool_text(report.modified)}",
        f"Lines modified: {report.lines_modified}",
        f"Execution time: {report.execution_time_ms}ms",
        "",
        "Result:",
        report.modified_content,
    ]
    text = "\n".join(parts)

    if report.changes_applied:
        text += "\n\nChanges applied:\n"
        text += "".join(f"- {change}\n" for change in report.changes_applied)

    if report.has_warnings:
        text += "\n\nWarnings:\n"
        text += "".join(f"! {warning}\n" for warning in report.warnings)

    return text


def format_validation_text(kind_label: str | None, error: str | None) -> str:
    if error:
        return f"❌ Validation failed: {error}"
    return f"✅ Operation is valid: {kind_label}"


def text_content(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]
