"""
CLI argument parsing. The only option is the output file path.
"""

import argparse
from pathlib import Path
from typing import Optional

DEFAULT_OUTPUT = Path("HostReport.html")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hostreport",
        description="Collect local host inventory and health metrics into a static HTML report.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Path of the HTML report to write (default: ./{DEFAULT_OUTPUT})",
    )
    return parser.parse_args(argv)
