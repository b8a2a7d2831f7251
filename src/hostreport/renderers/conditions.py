"""
Conditional row styling.

A rule list is evaluated top to bottom against one row; the first rule whose
predicate holds decides the row's style and later rules are ignored. A rule
with no field always matches and serves as the fallback tier.
"""

import operator
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Sequence

_OPERATORS: Dict[str, Callable[[float, float], bool]] = {
    "gt": operator.gt,
    "ge": operator.ge,
    "lt": operator.lt,
    "le": operator.le,
    "eq": operator.eq,
}


class RowStyle(NamedTuple):
    name: str
    background: str
    color: str


ALERT = RowStyle("alert", "#d9534f", "#ffffff")
WARNING = RowStyle("warning", "#f0ad4e", "#000000")
OK = RowStyle("ok", "#5cb85c", "#000000")


class RowRule(NamedTuple):
    style: RowStyle
    field: Optional[str] = None
    op: str = "gt"
    threshold: float = 0.0

    def matches(self, row: Mapping[str, object]) -> bool:
        if self.field is None:
            return True
        value = row.get(self.field)
        if value is None:
            return False
        return _OPERATORS[self.op](float(value), self.threshold)


def rule(field: str, op: str, threshold: float, style: RowStyle) -> RowRule:
    if op not in _OPERATORS:
        raise ValueError(f"unknown comparison operator {op!r}")
    return RowRule(style=style, field=field, op=op, threshold=threshold)


def otherwise(style: RowStyle) -> RowRule:
    return RowRule(style=style)


def select_style(row: Mapping[str, object], rules: Sequence[RowRule]) -> Optional[RowStyle]:
    """Return the style of the first matching rule, or None if no rule matches."""
    for r in rules:
        if r.matches(row):
            return r.style
    return None


DISK_RULES: List[RowRule] = [
    rule("percent_used", "gt", 90, ALERT),
    rule("percent_used", "gt", 75, WARNING),
    otherwise(OK),
]

# Two tiers only: rows at or below 75% stay unstyled, unlike the disk table.
MEMORY_RULES: List[RowRule] = [
    rule("percent_used", "gt", 90, ALERT),
    rule("percent_used", "gt", 75, WARNING),
]
