"""
Collectors query one category of host information each and return a
CollectorResult. They are independent; run_all calls them in a fixed order.
"""

from typing import Optional

from ..executor import Executor, make_executor
from ..schema import HostReport, ReportContext

from .computer import run as run_computer
from .processor import run as run_processor
from .memory import run as run_memory
from .bios import run as run_bios
from .disk import run as run_disk
from .network import run as run_network
from .users import run as run_users


def run_all(context: ReportContext, executor: Optional[Executor] = None) -> HostReport:
    """Run every collector and assemble the results into one report."""
    if executor is None:
        executor = make_executor()

    warnings: list = []
    computer = run_computer(executor, warnings)
    processor = run_processor(executor, warnings)
    memory = run_memory(executor, warnings)
    bios = run_bios(executor, warnings)
    disks = run_disk(executor, warnings)
    network = run_network(executor, warnings)
    users = run_users(executor, warnings)

    return HostReport(
        context=context,
        computer=computer,
        processor=processor,
        memory=memory,
        bios=bios,
        disks=disks,
        network=network,
        users=users,
        warnings=warnings,
    )
