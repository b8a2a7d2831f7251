"""Tests for the CIM query layer and value converters."""

from datetime import datetime, timezone

import pytest

from hostreport.cim import (
    CimQueryError,
    as_list,
    bytes_to_gb,
    bytes_to_mb,
    kib_to_bytes,
    parse_datetime,
    percent_used,
    query_class,
    run_query,
)
from hostreport.executor import RunResult


def _executor_returning(stdout="", stderr="", returncode=0, seen=None):
    def executor(cmd, cwd=None):
        if seen is not None:
            seen.append(cmd)
        return RunResult(stdout=stdout, stderr=stderr, returncode=returncode)
    return executor


# ---------------------------------------------------------------------------
# run_query / query_class
# ---------------------------------------------------------------------------

def test_run_query_wraps_single_object():
    rows = run_query(_executor_returning('{"Name": "WS-0042"}'), "Get-Thing")
    assert rows == [{"Name": "WS-0042"}]


def test_run_query_returns_list_unchanged():
    rows = run_query(_executor_returning('[{"A": 1}, {"A": 2}]'), "Get-Thing")
    assert [r["A"] for r in rows] == [1, 2]


def test_run_query_empty_output_is_empty_list():
    assert run_query(_executor_returning("  \n"), "Get-Thing") == []


def test_run_query_nonzero_exit_raises_with_stderr():
    with pytest.raises(CimQueryError) as exc_info:
        run_query(_executor_returning(stderr="Access denied\n", returncode=1), "Get-Thing")
    assert exc_info.value.cause == "Access denied"
    assert "Get-Thing" in str(exc_info.value)


def test_run_query_missing_powershell_raises():
    executor = _executor_returning(stderr="", returncode=127)
    with pytest.raises(CimQueryError, match="exit status 127"):
        run_query(executor, "Get-Thing")


def test_run_query_invalid_json_raises():
    with pytest.raises(CimQueryError, match="invalid JSON"):
        run_query(_executor_returning("not json"), "Get-Thing")


def test_run_query_scalar_json_raises():
    with pytest.raises(CimQueryError, match="unexpected JSON"):
        run_query(_executor_returning("42"), "Get-Thing")


def test_query_class_builds_filtered_select():
    seen = []
    query_class(_executor_returning("[]", seen=seen), "Win32_LogicalDisk",
                ["DeviceID", "Size"], where="DriveType=3")
    cmd = seen[0]
    assert cmd[0] == "powershell.exe"
    script = cmd[-1]
    assert script.startswith('Get-CimInstance -ClassName Win32_LogicalDisk -Filter "DriveType=3"')
    assert "Select-Object DeviceID,Size" in script
    assert script.endswith("ConvertTo-Json -Depth 3 -Compress")


def test_query_class_without_filter():
    seen = []
    query_class(_executor_returning("[]", seen=seen), "Win32_BIOS", ["SerialNumber"])
    assert "-Filter" not in seen[0][-1]


# ---------------------------------------------------------------------------
# parse_datetime
# ---------------------------------------------------------------------------

def test_parse_datetime_ms_epoch():
    assert parse_datetime("/Date(1672531200000)/") == datetime(2023, 1, 1, tzinfo=timezone.utc)


def test_parse_datetime_wrapped_value():
    value = {"value": "/Date(1652140800000)/", "DateTime": "Tuesday, May 10, 2022"}
    assert parse_datetime(value).date().isoformat() == "2022-05-10"


def test_parse_datetime_iso_with_seven_fraction_digits():
    dt = parse_datetime("2026-10-16T07:30:12.1234567+02:00")
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second) == (2026, 10, 16, 7, 30, 12)
    assert dt.microsecond == 123456


def test_parse_datetime_absent():
    assert parse_datetime(None) is None
    assert parse_datetime("") is None


def test_parse_datetime_garbage_raises_value_error():
    with pytest.raises(ValueError, match="unrecognized datetime"):
        parse_datetime("yesterday")


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------

def test_as_list_variants():
    assert as_list(None) == []
    assert as_list("10.0.0.1") == ["10.0.0.1"]
    assert as_list(["10.0.0.1", None, "", "10.0.0.2"]) == ["10.0.0.1", "10.0.0.2"]
    assert as_list("") == []


def test_unit_conversions():
    assert bytes_to_gb(16 * 2 ** 30) == 16.0
    assert bytes_to_gb(1.5 * 2 ** 30) == 1.5
    assert bytes_to_mb(4 * 2 ** 20) == 4.0
    assert kib_to_bytes(4096) == 4 * 2 ** 20


def test_percent_used_rounds_to_two_decimals():
    assert percent_used(16, 4.5) == 71.88


def test_percent_used_zero_capacity():
    assert percent_used(0, 0) == 0.0


def test_percent_used_clamped():
    assert percent_used(100, 120) == 0.0
