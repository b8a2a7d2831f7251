"""Computer collector: identity, OS and domain membership from Win32_ComputerSystem and Win32_OperatingSystem."""

from typing import List, Optional

from ..cim import CimQueryError, parse_datetime, query_class
from ..executor import Executor
from ..schema import HostResult, HostSummary
from ._base import safe_collect

_SYSTEM_PROPS = [
    "Name", "Manufacturer", "Model", "Domain", "Workgroup",
    "PartOfDomain", "PCSystemType", "UserName",
]
_OS_PROPS = ["Caption", "Version", "OSArchitecture", "InstallDate", "LastBootUpTime"]

# Win32_ComputerSystem.PCSystemType
_PC_SYSTEM_TYPES = {
    0: "Unspecified",
    1: "Desktop",
    2: "Mobile",
    3: "Workstation",
    4: "Enterprise Server",
    5: "SOHO Server",
    6: "Appliance PC",
    7: "Performance Server",
    8: "Maximum",
}


def device_type(code) -> str:
    if code is None:
        return _PC_SYSTEM_TYPES[0]
    return _PC_SYSTEM_TYPES.get(int(code), f"Unknown ({code})")


def domain_or_workgroup(system: dict) -> str:
    """A host is either domain-joined or in a workgroup, never both."""
    if system.get("PartOfDomain"):
        return system.get("Domain") or ""
    return system.get("Workgroup") or ""


def _collect(executor: Executor) -> List[HostSummary]:
    systems = query_class(executor, "Win32_ComputerSystem", _SYSTEM_PROPS)
    if not systems:
        raise CimQueryError("Win32_ComputerSystem", "no instances returned")
    oses = query_class(executor, "Win32_OperatingSystem", _OS_PROPS)
    if not oses:
        raise CimQueryError("Win32_OperatingSystem", "no instances returned")
    system, os_info = systems[0], oses[0]
    return [HostSummary(
        device_type=device_type(system.get("PCSystemType")),
        host_name=system["Name"],
        manufacturer=system.get("Manufacturer") or "",
        model=system.get("Model") or "",
        domain_or_workgroup=domain_or_workgroup(system),
        os_caption=os_info.get("Caption") or "",
        os_version=os_info.get("Version") or "",
        os_architecture=os_info.get("OSArchitecture") or "",
        install_date=parse_datetime(os_info.get("InstallDate")),
        last_boot=parse_datetime(os_info.get("LastBootUpTime")),
        current_user=system.get("UserName") or "",
    )]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> HostResult:
    return safe_collect("computer", lambda: _collect(executor), HostResult, warnings)
