"""Shared fixtures: an executor that answers CIM queries from tests/fixtures."""

from pathlib import Path

import pytest

from hostreport.executor import RunResult

FIXTURES = Path(__file__).parent / "fixtures"

# Query name (CIM class or cmdlet) -> canned ConvertTo-Json output
FIXTURE_FILES = {
    "Win32_ComputerSystem": "computer_system.json",
    "Win32_OperatingSystem": "operating_system.json",
    "Win32_Processor": "processor.json",
    "Win32_BIOS": "bios.json",
    "Win32_LogicalDisk": "logical_disk.json",
    "Win32_NetworkAdapterConfiguration": "network_adapter_configuration.json",
    "Get-LocalUser": "local_users.json",
}


def _make_executor(failing=(), overrides=None, stderr="Access denied"):
    """Executor answering CIM queries from fixture files.

    Queries naming anything in *failing* exit non-zero with *stderr*;
    *overrides* maps a query name to literal stdout.
    """
    overrides = overrides or {}

    def executor(cmd, cwd=None):
        script = cmd[-1]
        for name, filename in FIXTURE_FILES.items():
            if name in script:
                if name in failing:
                    return RunResult(stdout="", stderr=stderr, returncode=1)
                if name in overrides:
                    return RunResult(stdout=overrides[name], stderr="", returncode=0)
                return RunResult(stdout=(FIXTURES / filename).read_text(), stderr="", returncode=0)
        return RunResult(stdout="", stderr="unknown command", returncode=1)

    return executor


@pytest.fixture
def make_fixture_executor():
    return _make_executor


@pytest.fixture
def fixture_executor():
    return _make_executor()


@pytest.fixture
def fixture_queries():
    return list(FIXTURE_FILES)
