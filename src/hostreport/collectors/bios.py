"""BIOS collector: firmware vendor, version and serial from Win32_BIOS."""

from typing import List, Optional

from ..cim import CimQueryError, parse_datetime, query_class
from ..executor import Executor
from ..schema import FirmwareResult, FirmwareSummary
from ._base import safe_collect

_PROPS = ["Manufacturer", "SMBIOSBIOSVersion", "ReleaseDate", "SerialNumber"]


def _collect(executor: Executor) -> List[FirmwareSummary]:
    rows = query_class(executor, "Win32_BIOS", _PROPS)
    if not rows:
        raise CimQueryError("Win32_BIOS", "no instances returned")
    row = rows[0]
    return [FirmwareSummary(
        manufacturer=row.get("Manufacturer") or "",
        version=row.get("SMBIOSBIOSVersion") or "",
        release_date=parse_datetime(row.get("ReleaseDate")),
        serial_number=str(row.get("SerialNumber") or "").strip(),
    )]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> FirmwareResult:
    return safe_collect("bios", lambda: _collect(executor), FirmwareResult, warnings)
