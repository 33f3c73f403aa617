"""Tokens and places with real-valued ages, as used in stochastic runs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from .elements import TimedPlace


@dataclass
class RealToken:
    """``count`` tokens that share the age ``age``."""

    age: float
    count: int

    def cmp(self, other: "RealToken") -> int:
        """Order by count, then by age; never reports equal ages as 0."""
        if self.count != other.count:
            return self.count - other.count
        return 1 if self.age - other.age > 0 else -1

    def add(self, num: int) -> None:
        self.count += num

    def remove(self, num: int) -> None:
        self.count -= num

    def delta_age(self, x: float) -> None:
        self.age += x


@dataclass
class RealPlace:
    """The tokens in one place, ordered by age with the oldest last."""

    place: TimedPlace
    tokens: List[RealToken] = field(default_factory=list)

    def number_of_tokens(self) -> int:
        return sum(token.count for token in self.tokens)

    def delta_age(self, x: float) -> None:
        """Let ``x`` time units pass for every token."""
        for token in self.tokens:
            token.delta_age(x)

    def max_token_age(self) -> float:
        """Age of the oldest token, or minus infinity if there is none."""
        if not self.tokens:
            return -math.inf
        return self.tokens[-1].age

    def available_delay(self) -> float:
        """How long time may pass before the place's invariant is violated."""
        if not self.tokens:
            return math.inf
        delay = float(self.place.invariant.bound) - self.max_token_age()
        return 0.0 if delay <= 0.0 else delay

    def place_id(self) -> int:
        return self.place.index

    def is_empty(self) -> bool:
        return not self.tokens