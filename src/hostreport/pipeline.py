"""
Report assembler: run collectors, then render the report to one HTML file.
Collector failures are absorbed into the report; render failures raise ReportError.
"""

import getpass
import socket
from datetime import datetime
from pathlib import Path
from typing import Callable

from .schema import HostReport, ReportContext


def current_context() -> ReportContext:
    """Display values for the header and footer, read from the running process."""
    try:
        username = getpass.getuser()
    except (KeyError, OSError):
        username = "unknown"
    return ReportContext(
        hostname=socket.gethostname(),
        username=username,
        generated_at=datetime.now(),
    )


def run_pipeline(
    *,
    context: ReportContext,
    output_path: Path,
    run_collectors: Callable[[ReportContext], HostReport],
    run_renderers: Callable[[HostReport, Path], None],
) -> HostReport:
    """Collect everything, render once, and return the report."""
    report = run_collectors(context)
    run_renderers(report, Path(output_path))
    return report
