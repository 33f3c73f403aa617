"""Time guards on arcs and time invariants on places."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Mapping, Optional

INFINITY = 2**31 - 1
"""Bound value that stands for an unbounded (infinite) guard or invariant."""


def _bound(text: str, replace: Mapping[str, int]) -> int:
    if text in replace:
        return replace[text]
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid bound: {text!r}") from None


@dataclass
class TimeInterval:
    """A time guard such as ``[0,inf)`` or ``(2,5]``."""

    left_strict: bool = False
    lower_bound: int = 0
    upper_bound: int = INFINITY
    right_strict: bool = True

    def divide_bounds_by(self, divider: int) -> None:
        """Divide the finite, non-zero bounds by ``divider``."""
        if self.lower_bound != 0:
            self.lower_bound //= divider
        if self.upper_bound != INFINITY:
            self.upper_bound //= divider

    def is_zero_infinity(self) -> bool:
        """True for the unrestricted guard ``[0,inf)``."""
        return (
            not self.left_strict
            and self.lower_bound == 0
            and self.upper_bound == INFINITY
        )

    def __str__(self) -> str:
        left = "(" if self.left_strict else "["
        right = ")" if self.right_strict else "]"
        upper = "inf" if self.upper_bound == INFINITY else str(self.upper_bound)
        return f"{left}{self.lower_bound},{upper}{right}"


@dataclass(frozen=True)
class TimeInvariant:
    """An age invariant on a place, such as ``<= 5`` or ``< inf``."""

    strict: bool = True
    bound: int = INFINITY

    LS_INF: ClassVar["TimeInvariant"]

    def __str__(self) -> str:
        comparison = "<" if self.strict else "<="
        bound = "inf" if self.bound == INFINITY else str(self.bound)
        return f"{comparison} {bound}"


TimeInvariant.LS_INF = TimeInvariant()


def parse_interval(
    text: str, replace: Optional[Mapping[str, int]] = None
) -> TimeInterval:
    """Parse a guard like ``[1,5)``; names in ``replace`` stand for constants."""
    replace = replace or {}
    left_strict = "(" in text
    right_strict = ")" in text
    parts = text.split(",")
    if len(parts) < 2:
        raise ValueError(f"invalid interval: {text!r}")
    lower_text = parts[0][1:].strip()
    upper_text = parts[1][:-1].strip()

    lower = _bound(lower_text, replace)
    upper = INFINITY
    if upper_text.lower() != "inf":
        upper = _bound(upper_text, replace)
    return TimeInterval(left_strict, lower, upper, right_strict)


def parse_invariant(
    text: str, replace: Optional[Mapping[str, int]] = None
) -> TimeInvariant:
    """Parse an invariant like ``<= 5`` or ``< inf``."""
    replace = replace or {}
    strict = "<=" not in text
    number = text[1 if strict else 2:].strip()
    bound = INFINITY
    if "inf" not in text.lower():
        bound = _bound(number, replace)
    if bound == INFINITY:
        return TimeInvariant.LS_INF
    return TimeInvariant(strict, bound)