"""Disk collector: capacity and utilization of fixed local volumes (Win32_LogicalDisk)."""

from typing import List, Optional

from ..cim import bytes_to_gb, percent_used, query_class
from ..executor import Executor
from ..schema import DiskRecord, DiskResult
from ._base import safe_collect

# Win32_LogicalDisk.DriveType: 2 removable, 3 local disk, 4 network, 5 optical
LOCAL_DISK = 3

_PROPS = ["DeviceID", "DriveType", "FileSystem", "Size", "FreeSpace"]


def _to_record(row: dict) -> DiskRecord:
    size = float(row.get("Size") or 0)
    free = float(row.get("FreeSpace") or 0)
    return DiskRecord(
        device_id=row["DeviceID"],
        filesystem=row.get("FileSystem") or "",
        capacity_gb=bytes_to_gb(size),
        free_gb=bytes_to_gb(free),
        percent_used=percent_used(size, free),
    )


def _collect(executor: Executor) -> List[DiskRecord]:
    rows = query_class(executor, "Win32_LogicalDisk", _PROPS, where=f"DriveType={LOCAL_DISK}")
    return [_to_record(r) for r in rows if r.get("DriveType") == LOCAL_DISK]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> DiskResult:
    return safe_collect("disk", lambda: _collect(executor), DiskResult, warnings)
