"""
CIM query layer. Runs PowerShell queries through an executor and returns the
JSON output as a list of dicts, plus converters for the values CIM hands back.
"""

import json
import re
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from ._util import debug
from .executor import Executor

POWERSHELL = ["powershell.exe", "-NoProfile", "-NonInteractive", "-Command"]

BYTES_PER_GB = 2 ** 30
BYTES_PER_MB = 2 ** 20

# Windows PowerShell 5.1 serializes DateTime as "/Date(1700000000000)/"
_MS_DATE_RE = re.compile(r"^/Date\((-?\d+)(?:[+-]\d{4})?\)/$")
# .NET emits 7 fractional digits; datetime accepts at most 6
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class CimQueryError(Exception):
    """A CIM query could not be run or its output could not be parsed."""

    def __init__(self, query: str, cause: str):
        self.query = query
        self.cause = cause
        super().__init__(f"{query}: {cause}")


def run_query(executor: Executor, script: str) -> List[dict]:
    """Run *script* piped through ConvertTo-Json and return the parsed rows."""
    r = executor(POWERSHELL + [f"{script} | ConvertTo-Json -Depth 3 -Compress"])
    if r.returncode != 0:
        raise CimQueryError(script, (r.stderr or "").strip() or f"exit status {r.returncode}")
    out = r.stdout.strip()
    if not out:
        debug("cim", f"{script}: no rows")
        return []
    try:
        data = json.loads(out)
    except json.JSONDecodeError as exc:
        raise CimQueryError(script, f"invalid JSON output ({exc})") from exc
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise CimQueryError(script, f"unexpected JSON value of type {type(data).__name__}")
    return [row for row in data if isinstance(row, dict)]


def query_class(
    executor: Executor,
    class_name: str,
    properties: Iterable[str],
    where: Optional[str] = None,
) -> List[dict]:
    """Get-CimInstance for *class_name*, optionally filtered, selecting *properties*."""
    script = f"Get-CimInstance -ClassName {class_name}"
    if where:
        script += f' -Filter "{where}"'
    script += " | Select-Object " + ",".join(properties)
    return run_query(executor, script)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse a serialized CIM datetime. Returns None for absent values."""
    if value is None or value == "":
        return None
    if isinstance(value, dict):
        # Windows PowerShell 5.1 wraps CIM dates as {"value": "/Date(...)/", "DateTime": "..."}
        value = value.get("value", value.get("DateTime"))
        return parse_datetime(value)
    text = str(value).strip()
    m = _MS_DATE_RE.match(text)
    if m:
        return datetime.fromtimestamp(int(m.group(1)) / 1000, tz=timezone.utc)
    try:
        return datetime.fromisoformat(_FRACTION_RE.sub(r"\1", text.replace("Z", "+00:00")))
    except ValueError as exc:
        raise ValueError(f"unrecognized datetime value {text!r}") from exc


def as_list(value: Any) -> List[str]:
    """CIM array properties may come back as null, a scalar, or a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v not in (None, "")]
    return [str(value)] if value != "" else []


def kib_to_bytes(kib: float) -> float:
    return float(kib) * 1024


def bytes_to_gb(n: float) -> float:
    return round(float(n) / BYTES_PER_GB, 2)


def bytes_to_mb(n: float) -> float:
    return round(float(n) / BYTES_PER_MB, 2)


def percent_used(total: float, free: float) -> float:
    """Utilization as a percentage of *total*, 0.0 when total is 0."""
    total = float(total)
    if total <= 0:
        return 0.0
    pct = (total - float(free)) / total * 100
    return round(min(max(pct, 0.0), 100.0), 2)
