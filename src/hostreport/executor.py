"""
Command execution seam. Collectors never call subprocess directly; they receive
an Executor so tests can substitute canned output.
"""

import subprocess
from typing import Callable, List, NamedTuple, Optional

from ._util import debug


class RunResult(NamedTuple):
    stdout: str
    stderr: str
    returncode: int


Executor = Callable[..., RunResult]


def make_executor() -> Executor:
    """Return an executor that runs commands on the local host."""

    def run(cmd: List[str], cwd: Optional[str] = None) -> RunResult:
        debug("exec", " ".join(cmd))
        try:
            r = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as exc:
            return RunResult(stdout="", stderr=str(exc), returncode=127)
        return RunResult(stdout=r.stdout, stderr=r.stderr, returncode=r.returncode)

    return run
