"""Query syntax tree: boolean and arithmetic expressions over place markings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Operator(Enum):
    EQ = auto()
    NE = auto()
    LT = auto()
    LE = auto()


class Quantifier(Enum):
    EF = auto()
    EG = auto()
    AF = auto()
    AG = auto()
    CF = auto()
    CG = auto()
    PF = auto()
    PG = auto()


class Expression:
    """Base of boolean expressions."""


class ArithmeticExpression:
    """Base of integer-valued expressions."""


@dataclass(frozen=True)
class NotExpression(Expression):
    child: Expression


@dataclass(frozen=True)
class AndExpression(Expression):
    left: Expression
    right: Expression


@dataclass(frozen=True)
class OrExpression(Expression):
    left: Expression
    right: Expression


@dataclass(frozen=True)
class BoolExpression(Expression):
    value: bool


@dataclass(frozen=True)
class DeadlockExpression(Expression):
    pass


@dataclass(frozen=True)
class AtomicProposition(Expression):
    left: ArithmeticExpression
    op: Operator
    right: ArithmeticExpression


@dataclass(frozen=True)
class PlusExpression(ArithmeticExpression):
    left: ArithmeticExpression
    right: ArithmeticExpression


@dataclass(frozen=True)
class SubtractExpression(ArithmeticExpression):
    left: ArithmeticExpression
    right: ArithmeticExpression


@dataclass(frozen=True)
class MultiplyExpression(ArithmeticExpression):
    left: ArithmeticExpression
    right: ArithmeticExpression


@dataclass(frozen=True)
class MinusExpression(ArithmeticExpression):
    value: ArithmeticExpression


@dataclass(frozen=True)
class NumberExpression(ArithmeticExpression):
    value: int


@dataclass(frozen=True)
class IdentifierExpression(ArithmeticExpression):
    """The number of tokens in the place with this index."""

    place: int


@dataclass(frozen=True)
class Query:
    quantifier: Quantifier
    child: Expression


@dataclass(frozen=True)
class SMCSettings:
    """Parameters of a statistical model-checking query."""

    time_bound: int = 0
    step_bound: int = 0
    false_positives: float = 0.0
    false_negatives: float = 0.0
    indifference_region_up: float = 0.0
    indifference_region_down: float = 0.0
    confidence: float = 0.0
    estimation_interval_width: float = 0.0
    compare_to_float: bool = False
    geq_than: float = 0.0


@dataclass(frozen=True)
class SMCQuery(Query):
    settings: SMCSettings = field(default_factory=SMCSettings)


_OPERATORS = {
    "=": (Operator.EQ, False),
    "==": (Operator.EQ, False),
    "!=": (Operator.NE, False),
    "<": (Operator.LT, False),
    "<=": (Operator.LE, False),
    ">=": (Operator.LE, True),
    ">": (Operator.LT, True),
}


def make_atomic(
    left: ArithmeticExpression, op: str, right: ArithmeticExpression
) -> AtomicProposition:
    """Build a comparison; ``>`` and ``>=`` become ``<`` and ``<=`` with swapped sides."""
    try:
        operator, swap = _OPERATORS[op]
    except KeyError:
        raise ValueError(f"unknown comparison operator: {op!r}") from None
    if swap:
        left, right = right, left
    return AtomicProposition(left, operator, right)