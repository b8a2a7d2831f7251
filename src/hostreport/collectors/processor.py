"""Processor collector: Win32_Processor, counts summed across sockets."""

from typing import List, Optional

from ..cim import CimQueryError, bytes_to_mb, kib_to_bytes, query_class
from ..executor import Executor
from ..schema import ProcessorResult, ProcessorSummary
from ._base import safe_collect

_PROPS = ["Name", "NumberOfCores", "NumberOfLogicalProcessors", "MaxClockSpeed", "L2CacheSize"]


def _collect(executor: Executor) -> List[ProcessorSummary]:
    sockets = query_class(executor, "Win32_Processor", _PROPS)
    if not sockets:
        raise CimQueryError("Win32_Processor", "no instances returned")
    first = sockets[0]
    return [ProcessorSummary(
        name=str(first.get("Name") or "").strip(),
        cores=sum(int(s.get("NumberOfCores") or 0) for s in sockets),
        logical_processors=sum(int(s.get("NumberOfLogicalProcessors") or 0) for s in sockets),
        max_clock_speed=f"{int(first.get('MaxClockSpeed') or 0)} MHz",
        l2_cache_mb=bytes_to_mb(kib_to_bytes(first.get("L2CacheSize") or 0)),
    )]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> ProcessorResult:
    return safe_collect("processor", lambda: _collect(executor), ProcessorResult, warnings)
