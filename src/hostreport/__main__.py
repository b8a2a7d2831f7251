"""
CLI entry point. Parses args and delegates to pipeline.
"""

import sys
from pathlib import Path
from typing import Optional

from .cli import parse_args
from .pipeline import current_context, run_pipeline
from .schema import HostReport, ReportContext


def _run_collectors(context: ReportContext) -> HostReport:
    """Run all collectors in their fixed order."""
    from .collectors import run_all

    return run_all(context)


def _run_renderers(report: HostReport, output_path: Path) -> None:
    from .renderers import run_all

    run_all(report, output_path)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    try:
        run_pipeline(
            context=current_context(),
            output_path=args.output,
            run_collectors=_run_collectors,
            run_renderers=_run_renderers,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Report written to {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
