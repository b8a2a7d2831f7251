"""
Host report schema.

Strongly typed contract between collectors and the report renderer.
Every collector produces a CollectorResult holding records of one fixed shape;
the renderer consumes the assembled HostReport.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field

# Sentinels rendered in place of absent values
NO_GATEWAY = "none"
NEVER_LOGGED_ON = "never"


class _Record(BaseModel):
    """Base for collected records: immutable, no unknown keys."""

    model_config = {"frozen": True, "extra": "forbid"}


# --- Computer collector ---


class HostSummary(_Record):
    device_type: str = Field(title="Device Type")
    host_name: str = Field(title="Host Name")
    manufacturer: str = Field(title="Manufacturer")
    model: str = Field(title="Model")
    domain_or_workgroup: str = Field(title="Domain / Workgroup")
    os_caption: str = Field(title="Operating System")
    os_version: str = Field(title="OS Version")
    os_architecture: str = Field(title="OS Architecture")
    install_date: datetime = Field(title="Install Date")
    last_boot: datetime = Field(title="Last Boot")
    current_user: str = Field(title="Current User")


# --- Processor collector ---


class ProcessorSummary(_Record):
    name: str = Field(title="Name")
    cores: int = Field(title="Cores", ge=0)
    logical_processors: int = Field(title="Logical Processors", ge=0)
    max_clock_speed: str = Field(title="Max Clock Speed")  # "3600 MHz"
    l2_cache_mb: float = Field(title="L2 Cache (MB)", ge=0)


# --- Memory collector ---


class MemorySummary(_Record):
    total_gb: float = Field(title="Total (GB)", ge=0)
    free_gb: float = Field(title="Free (GB)", ge=0)
    used_gb: float = Field(title="Used (GB)", ge=0)
    percent_used: float = Field(title="Used (%)", ge=0, le=100)


# --- BIOS collector ---


class FirmwareSummary(_Record):
    manufacturer: str = Field(title="Manufacturer")
    version: str = Field(title="Version")
    release_date: datetime = Field(title="Release Date")
    serial_number: str = Field(title="Serial Number")


# --- Disk collector ---


class DiskRecord(_Record):
    device_id: str = Field(title="Drive")
    filesystem: str = Field(title="File System")
    capacity_gb: float = Field(title="Capacity (GB)", ge=0)
    free_gb: float = Field(title="Free (GB)", ge=0)
    percent_used: float = Field(title="Used (%)", ge=0, le=100)


# --- Network collector ---


class NetworkAdapterRecord(_Record):
    description: str = Field(title="Adapter")
    ip_addresses: str = Field(title="IP Address")
    subnet_masks: str = Field(title="Subnet Mask")
    default_gateway: str = Field(title="Default Gateway")  # NO_GATEWAY when absent
    dns_servers: str = Field(title="DNS Servers")
    dhcp_enabled: bool = Field(title="DHCP Enabled")


# --- Users collector ---


class LocalAccountRecord(_Record):
    username: str = Field(title="Username")
    enabled: bool = Field(title="Enabled")
    last_logon: Union[datetime, str] = Field(title="Last Logon")  # NEVER_LOGGED_ON when absent
    password_required: bool = Field(title="Password Required")


# --- Collector results ---


RecordT = TypeVar("RecordT", bound=_Record)


class CollectorResult(BaseModel, Generic[RecordT]):
    """
    Outcome of one collector run.

    A successful run holds its records (possibly none, e.g. no fixed disks).
    A failed run holds no records and the cause in ``error``, so callers can
    tell "collected nothing" apart from "could not collect".
    """

    category: str
    records: List[RecordT] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def record(self) -> Optional[RecordT]:
        """First record, for collectors that produce a single summary."""
        return self.records[0] if self.records else None


HostResult = CollectorResult[HostSummary]
ProcessorResult = CollectorResult[ProcessorSummary]
MemoryResult = CollectorResult[MemorySummary]
FirmwareResult = CollectorResult[FirmwareSummary]
DiskResult = CollectorResult[DiskRecord]
NetworkResult = CollectorResult[NetworkAdapterRecord]
AccountResult = CollectorResult[LocalAccountRecord]


# --- Root report ---


class ReportContext(BaseModel):
    """Display-only values supplied by the caller rather than read from the environment."""

    hostname: str
    username: str
    generated_at: datetime


class HostReport(BaseModel):
    """All collector results for one run, in collection order."""

    context: ReportContext
    computer: HostResult
    processor: ProcessorResult
    memory: MemoryResult
    bios: FirmwareResult
    disks: DiskResult
    network: NetworkResult
    users: AccountResult

    warnings: List[dict] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @property
    def title_host(self) -> str:
        """Host name for headings: the collected name, else the caller's."""
        rec = self.computer.record
        return rec.host_name if rec and rec.host_name else self.context.hostname
