"""HTML report renderer.

Builds the layout tree (section -> panels -> sub-sections -> tables) from the
report and delegates all HTML generation to templates/report.html.j2 via
Jinja2. No HTML strings live in this file.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Type

from jinja2 import Environment, FileSystemLoader, TemplateError

from .._util import debug
from ..schema import (
    CollectorResult,
    DiskRecord,
    HostReport,
    LocalAccountRecord,
    MemorySummary,
    NetworkAdapterRecord,
    ReportContext,
)
from .conditions import DISK_RULES, MEMORY_RULES, RowRule, select_style

TEMPLATE_NAME = "report.html.j2"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# The report is read or printed in full; tables carry no interactive controls.
TABLE_OPTIONS = {"paging": False, "searching": False, "footer": False, "ordering": False}


class ReportError(Exception):
    """The report could not be rendered or written."""


# ---------------------------------------------------------------------------
# Cell formatting
# ---------------------------------------------------------------------------

def format_value(value) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return value.strftime(TIMESTAMP_FORMAT)
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _titles(model: Type) -> List[tuple]:
    return [(name, f.title or name) for name, f in model.model_fields.items()]


# ---------------------------------------------------------------------------
# Table builders
# ---------------------------------------------------------------------------

def _empty_message(result: CollectorResult) -> str:
    if result.failed:
        return f"No data collected: {result.error}"
    return "No data collected."


def property_table(table_id: str, title: str, result: CollectorResult) -> dict:
    """Single summary record rendered as Property / Value rows."""
    rows = []
    rec = result.record
    if rec is not None:
        for name, label in _titles(type(rec)):
            rows.append({"cells": [label, format_value(getattr(rec, name))], "style": None})
    return {
        "id": table_id,
        "title": title,
        "kind": "properties",
        "columns": ["Property", "Value"],
        "rows": rows,
        "empty_message": _empty_message(result),
        "options": TABLE_OPTIONS,
    }


def record_table(
    table_id: str,
    title: str,
    result: CollectorResult,
    record_type: Type,
    rules: Optional[Sequence[RowRule]] = None,
) -> dict:
    """One row per record, one column per field, optionally styled per row."""
    fields = _titles(record_type)
    rows = []
    for rec in result.records:
        values = rec.model_dump()
        rows.append({
            "cells": [format_value(getattr(rec, name)) for name, _ in fields],
            "style": select_style(values, rules) if rules else None,
        })
    return {
        "id": table_id,
        "title": title,
        "kind": "records",
        "columns": [label for _, label in fields],
        "rows": rows,
        "empty_message": _empty_message(result),
        "options": TABLE_OPTIONS,
    }


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def footer_text(context: ReportContext) -> str:
    return (
        f"Generated {context.generated_at.strftime(TIMESTAMP_FORMAT)} "
        f"on {context.hostname} by {context.username}"
    )


def build_layout(report: HostReport) -> dict:
    """Outer section titled with the host name, containing panels in display order."""
    panels = [
        {"title": "System", "tables": [
            property_table("computer", "Computer", report.computer),
            property_table("bios", "BIOS", report.bios),
        ]},
        {"title": "Processor & Memory", "tables": [
            property_table("processor", "Processor", report.processor),
            record_table("memory", "Memory", report.memory, MemorySummary, MEMORY_RULES),
        ]},
        {"title": "Storage", "tables": [
            record_table("disks", "Fixed Disks", report.disks, DiskRecord, DISK_RULES),
        ]},
        {"title": "Network", "tables": [
            record_table("network", "Network Adapters", report.network, NetworkAdapterRecord),
        ]},
        {"title": "Accounts", "tables": [
            record_table("users", "Local Users", report.users, LocalAccountRecord),
        ]},
    ]
    return {"title": report.title_host, "panels": panels}


def _build_context(report: HostReport) -> dict:
    return {
        "document_title": f"Host Report - {report.title_host}",
        "section": build_layout(report),
        "footer": footer_text(report.context),
        "warnings": report.warnings,
    }


# ---------------------------------------------------------------------------
# Public render entry point
# ---------------------------------------------------------------------------

def render(report: HostReport, env: Environment, output_path: Path) -> None:
    """Render the report to *output_path*, overwriting any previous run."""
    output_path = Path(output_path)

    if env.loader is None:
        templates_dir = Path(__file__).resolve().parent.parent / "templates"
        env = env.overlay(loader=FileSystemLoader(str(templates_dir)))

    try:
        template = env.get_template(TEMPLATE_NAME)
        html = template.render(_build_context(report))
    except TemplateError as exc:
        raise ReportError(f"cannot render {TEMPLATE_NAME}: {exc}") from exc

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"cannot write {output_path}: {exc}") from exc
    debug("render", f"wrote {output_path} ({len(html)} bytes)")
