"""
Renderers consume the assembled HostReport and a Jinja2 environment.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ..schema import HostReport

from .html_report import ReportError, render as render_html_report

__all__ = ["ReportError", "make_environment", "run_all"]


def make_environment() -> Environment:
    templates_dir = Path(__file__).resolve().parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=True,
    )


def run_all(report: HostReport, output_path: Path) -> None:
    """Render the HTML report to output_path."""
    render_html_report(report, make_environment(), output_path)
