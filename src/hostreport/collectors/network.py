"""Network collector: IP configuration of adapters with IP enabled."""

from typing import List, Optional

from ..cim import as_list, query_class
from ..executor import Executor
from ..schema import NO_GATEWAY, NetworkAdapterRecord, NetworkResult
from ._base import safe_collect

_PROPS = [
    "Description", "IPEnabled", "IPAddress", "IPSubnet",
    "DefaultIPGateway", "DNSServerSearchOrder", "DHCPEnabled",
]


def _join(value) -> str:
    return ", ".join(as_list(value))


def _to_record(row: dict) -> NetworkAdapterRecord:
    return NetworkAdapterRecord(
        description=row.get("Description") or "",
        ip_addresses=_join(row.get("IPAddress")),
        subnet_masks=_join(row.get("IPSubnet")),
        default_gateway=_join(row.get("DefaultIPGateway")) or NO_GATEWAY,
        dns_servers=_join(row.get("DNSServerSearchOrder")),
        dhcp_enabled=bool(row.get("DHCPEnabled")),
    )


def _collect(executor: Executor) -> List[NetworkAdapterRecord]:
    rows = query_class(
        executor, "Win32_NetworkAdapterConfiguration", _PROPS, where="IPEnabled=True",
    )
    return [_to_record(r) for r in rows if r.get("IPEnabled")]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> NetworkResult:
    return safe_collect("network", lambda: _collect(executor), NetworkResult, warnings)
