"""Tests for the report assembler."""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

from hostreport.pipeline import current_context, run_pipeline
from hostreport.schema import ReportContext


def test_run_pipeline_collects_then_renders_once():
    context = ReportContext(hostname="ws", username="jdoe", generated_at=datetime(2026, 10, 17))
    calls = []
    report = object()

    def run_collectors(ctx):
        calls.append(("collect", ctx))
        return report

    def run_renderers(rep, path):
        calls.append(("render", rep, path))

    result = run_pipeline(
        context=context,
        output_path="out.html",
        run_collectors=run_collectors,
        run_renderers=run_renderers,
    )
    assert result is report
    assert calls == [("collect", context), ("render", report, Path("out.html"))]


def test_current_context_reads_process_environment():
    with patch("hostreport.pipeline.socket.gethostname", return_value="WS-0042"), \
         patch("hostreport.pipeline.getpass.getuser", return_value="jdoe"):
        ctx = current_context()
    assert (ctx.hostname, ctx.username) == ("WS-0042", "jdoe")
    assert isinstance(ctx.generated_at, datetime)


def test_current_context_unknown_user():
    with patch("hostreport.pipeline.getpass.getuser", side_effect=OSError("no login name")):
        assert current_context().username == "unknown"
