"""Memory collector: physical RAM totals from Win32_OperatingSystem (reported in KiB)."""

from typing import List, Optional

from ..cim import CimQueryError, bytes_to_gb, kib_to_bytes, percent_used, query_class
from ..executor import Executor
from ..schema import MemoryResult, MemorySummary
from ._base import safe_collect


def summarize(total_bytes: float, free_bytes: float) -> MemorySummary:
    """Derive used and utilization from raw byte counts."""
    return MemorySummary(
        total_gb=bytes_to_gb(total_bytes),
        free_gb=bytes_to_gb(free_bytes),
        used_gb=bytes_to_gb(total_bytes - free_bytes),
        percent_used=percent_used(total_bytes, free_bytes),
    )


def _collect(executor: Executor) -> List[MemorySummary]:
    rows = query_class(
        executor, "Win32_OperatingSystem", ["TotalVisibleMemorySize", "FreePhysicalMemory"],
    )
    if not rows:
        raise CimQueryError("Win32_OperatingSystem", "no instances returned")
    row = rows[0]
    total = kib_to_bytes(row["TotalVisibleMemorySize"])
    free = kib_to_bytes(row["FreePhysicalMemory"])
    return [summarize(total, free)]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> MemoryResult:
    return safe_collect("memory", lambda: _collect(executor), MemoryResult, warnings)
