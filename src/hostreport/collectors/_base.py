"""Failure boundary shared by all collectors."""

import sys
from typing import Callable, List, Optional, Type, TypeVar

from .._util import debug, make_warning
from ..schema import CollectorResult

R = TypeVar("R", bound=CollectorResult)


def safe_collect(
    category: str,
    fn: Callable[[], list],
    result_type: Type[R],
    warnings: Optional[List[dict]] = None,
) -> R:
    """Run *fn*; on failure print a warning and return an empty, failed *result_type*."""
    try:
        records = fn()
    except Exception as exc:
        message = f"{category} collector failed: {exc}"
        if warnings is not None:
            warnings.append(make_warning(category, message))
        print(f"WARNING: {message}", file=sys.stderr)
        return result_type(category=category, error=str(exc))
    debug(category, f"collected {len(records)} record(s)")
    return result_type(category=category, records=records)
