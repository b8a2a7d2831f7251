"""Users collector: local accounts via Get-LocalUser."""

from typing import List, Optional

from ..cim import parse_datetime, run_query
from ..executor import Executor
from ..schema import NEVER_LOGGED_ON, AccountResult, LocalAccountRecord
from ._base import safe_collect

_QUERY = "Get-LocalUser | Select-Object Name,Enabled,LastLogon,PasswordRequired"


def _to_record(row: dict) -> LocalAccountRecord:
    last_logon = parse_datetime(row.get("LastLogon"))
    return LocalAccountRecord(
        username=row["Name"],
        enabled=bool(row.get("Enabled")),
        last_logon=last_logon if last_logon is not None else NEVER_LOGGED_ON,
        password_required=bool(row.get("PasswordRequired")),
    )


def _collect(executor: Executor) -> List[LocalAccountRecord]:
    return [_to_record(r) for r in run_query(executor, _QUERY)]


def run(executor: Executor, warnings: Optional[List[dict]] = None) -> AccountResult:
    return safe_collect("users", lambda: _collect(executor), AccountResult, warnings)
