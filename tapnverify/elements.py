"""Places, transitions and arcs of a timed-arc Petri net."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Tuple

from .intervals import INFINITY, TimeInterval, TimeInvariant
from .stochastic import Distribution, FiringMode, default_distribution


class ModelError(ValueError):
    """Raised when a net breaks a structural rule of the model."""


class PlaceType(Enum):
    STD = "Std"
    INV = "Inv"
    DEAD = "Dead"


@dataclass(eq=False)
class TimedPlace:
    """A place with an age invariant on its tokens."""

    index: int
    name: str
    id: str = ""
    invariant: TimeInvariant = TimeInvariant.LS_INF
    x: float = 0.0
    y: float = 0.0
    max_constant: int = -1
    untimed: bool = False
    type: PlaceType = PlaceType.STD
    input_arcs: List["TimedInputArc"] = field(default_factory=list, repr=False)
    output_arcs: List["OutputArc"] = field(default_factory=list, repr=False)
    transport_arcs: List["TransportArc"] = field(default_factory=list, repr=False)
    prod_transport_arcs: List["TransportArc"] = field(
        default_factory=list, repr=False
    )
    inhibitor_arcs: List["InhibitorArc"] = field(default_factory=list, repr=False)

    BOTTOM_NAME: ClassVar[str] = "*BOTTOM*"
    BOTTOM_INDEX: ClassVar[int] = -1

    def __post_init__(self) -> None:
        if not self.id:
            self.id = self.name

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def divide_invariant_by(self, divider: int) -> None:
        """Divide a finite, non-zero invariant bound by ``divider``."""
        bound = self.invariant.bound
        if bound != 0 and bound != INFINITY:
            self.invariant = TimeInvariant(self.invariant.strict, bound // divider)

    def __str__(self) -> str:
        untimed = "true" if self.untimed else "false"
        return (
            f"({self.name} (index: {self.index}), {self.invariant}, "
            f"Max Constant: {self.max_constant}, Infinity Place: {untimed}, "
            f"Type: {self.type.value})"
        )


@dataclass(eq=False)
class TimedTransition:
    """A transition; its arc lists are kept sorted by place index."""

    index: int
    name: str
    id: str = ""
    urgent: bool = False
    controllable: bool = True
    x: float = 0.0
    y: float = 0.0
    distribution: Distribution = field(default_factory=default_distribution)
    weight: float = 1.0
    firing_mode: FiringMode = FiringMode.OLDEST
    untimed_postset: bool = True
    preset: List["TimedInputArc"] = field(default_factory=list, repr=False)
    postset: List["OutputArc"] = field(default_factory=list, repr=False)
    transport_arcs: List["TransportArc"] = field(default_factory=list, repr=False)
    inhibitor_arcs: List["InhibitorArc"] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.id:
            self.id = self.name

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def preset_size(self) -> int:
        return len(self.preset) + len(self.transport_arcs)

    @property
    def postset_size(self) -> int:
        return len(self.postset) + len(self.transport_arcs)

    def add_to_preset(self, arc: "TimedInputArc") -> None:
        """Insert an input arc, keeping the preset ordered by place index."""
        if self.urgent and not arc.interval.is_zero_infinity():
            raise ModelError("Urgent transitions must have untimed input arcs")
        key = arc.place.index
        pos = bisect_left(self.preset, key, key=lambda a: a.place.index)
        self.preset.insert(pos, arc)

    def add_transport_arc_going_through(self, arc: "TransportArc") -> None:
        """Insert a transport arc, keeping them ordered by source index."""
        if self.urgent:
            if not arc.interval.is_zero_infinity():
                raise ModelError("Urgent transitions must have untimed transportarcs")
            if arc.destination.invariant != TimeInvariant.LS_INF:
                raise ModelError(
                    "Transportarcs going through an urgent transition cannot "
                    "have invariants at destination-places."
                )
        key = arc.source.index
        pos = bisect_left(self.transport_arcs, key, key=lambda a: a.source.index)
        self.transport_arcs.insert(pos, arc)

    def add_incoming_inhibitor_arc(self, arc: "InhibitorArc") -> None:
        """Insert an inhibitor arc, keeping them ordered by place index."""
        key = arc.place.index
        pos = bisect_left(self.inhibitor_arcs, key, key=lambda a: a.place.index)
        self.inhibitor_arcs.insert(pos, arc)

    def add_to_postset(self, arc: "OutputArc") -> None:
        """Insert an output arc, keeping the postset ordered by place index."""
        key = arc.place.index
        pos = bisect_left(self.postset, key, key=lambda a: a.place.index)
        self.postset.insert(pos, arc)

    def __str__(self) -> str:
        urgent = " urgent " if self.urgent else ""
        return f"{self.name}{urgent}({self.index})"


@dataclass(eq=False)
class TimedInputArc:
    """An arc consuming tokens whose age lies in ``interval``."""

    place: TimedPlace
    transition: TimedTransition
    weight: int = 1
    interval: TimeInterval = field(default_factory=TimeInterval)

    def divide_interval_by(self, divider: int) -> None:
        self.interval.divide_bounds_by(divider)

    def __str__(self) -> str:
        return (
            f"From {self.place.name} to {self.transition.name} "
            f"weight: {self.weight} with interval {self.interval}"
        )


@dataclass(eq=False)
class OutputArc:
    """An arc producing fresh tokens in ``place``."""

    transition: TimedTransition
    place: TimedPlace
    weight: int = 1

    def __str__(self) -> str:
        return (
            f"From {self.transition.name} to {self.place.name} "
            f"weight: {self.weight}"
        )


@dataclass(eq=False)
class TransportArc:
    """An arc moving tokens, with their ages, from source to destination."""

    source: TimedPlace
    transition: TimedTransition
    destination: TimedPlace
    interval: TimeInterval = field(default_factory=TimeInterval)
    weight: int = 1

    def divide_interval_by(self, divider: int) -> None:
        self.interval.divide_bounds_by(divider)

    def __str__(self) -> str:
        return (
            f"From {self.source.name} to {self.transition.name} to "
            f"{self.destination.name} weight: {self.weight} "
            f"with interval {self.interval}"
        )


@dataclass(eq=False)
class InhibitorArc:
    """An arc that blocks the transition while ``place`` holds enough tokens."""

    place: TimedPlace
    transition: TimedTransition
    weight: int = 1

    def __str__(self) -> str:
        return (
            f"From {self.place.name} to {self.transition.name} "
            f"weight: {self.weight}"
        )