"""Negation normal form for queries, and collection of the places a query reads."""

from __future__ import annotations

from typing import Iterator, List, Union

from .expressions import (
    AndExpression,
    ArithmeticExpression,
    AtomicProposition,
    BoolExpression,
    DeadlockExpression,
    Expression,
    IdentifierExpression,
    MinusExpression,
    MultiplyExpression,
    NotExpression,
    NumberExpression,
    Operator,
    OrExpression,
    PlusExpression,
    Query,
    SubtractExpression,
)

_NEGATED = {
    Operator.EQ: Operator.NE,
    Operator.NE: Operator.EQ,
    Operator.LE: Operator.LT,
    Operator.LT: Operator.LE,
}


def normalize(query: Query) -> Query:
    """Return the query with all negations pushed into the comparisons."""
    return Query(query.quantifier, normalize_expression(query.child, False))


def normalize_expression(expr: Expression, negate: bool) -> Expression:
    """Normalize ``expr``, negated when ``negate`` is true."""
    match expr:
        case NotExpression(child=child):
            return normalize_expression(child, not negate)
        case OrExpression(left=left, right=right):
            new_left = normalize_expression(left, negate)
            new_right = normalize_expression(right, negate)
            if negate:
                return AndExpression(new_left, new_right)
            return OrExpression(new_left, new_right)
        case AndExpression(left=left, right=right):
            new_left = normalize_expression(left, negate)
            new_right = normalize_expression(right, negate)
            if negate:
                return OrExpression(new_left, new_right)
            return AndExpression(new_left, new_right)
        case AtomicProposition(left=left, op=op, right=right):
            if negate:
                # not (a <= b) is b < a, and so on: the sides swap
                return AtomicProposition(right, _NEGATED[op], left)
            return AtomicProposition(left, op, right)
        case DeadlockExpression():
            return DeadlockExpression()
        case BoolExpression(value=value):
            return BoolExpression(negate != value)
    raise TypeError(f"cannot normalize {type(expr).__name__}")


Node = Union[Query, Expression, ArithmeticExpression]


def _places(node: Node) -> Iterator[int]:
    match node:
        case Query(child=child) | NotExpression(child=child):
            yield from _places(child)
        case (
            OrExpression(left=left, right=right)
            | AndExpression(left=left, right=right)
            | AtomicProposition(left=left, right=right)
            | PlusExpression(left=left, right=right)
            | SubtractExpression(left=left, right=right)
            | MultiplyExpression(left=left, right=right)
        ):
            yield from _places(left)
            yield from _places(right)
        case MinusExpression(value=value):
            yield from _places(value)
        case IdentifierExpression(place=place):
            yield place
        case DeadlockExpression() | BoolExpression() | NumberExpression():
            return


def place_indices(node: Node) -> List[int]:
    """Indices of the places the node mentions, left to right, with repeats."""
    return list(_places(node))