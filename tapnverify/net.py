"""A timed-arc Petri net with its constant analysis."""

from __future__ import annotations

from math import gcd
from typing import Iterable, List, Sequence, Union

from .elements import (
    InhibitorArc,
    OutputArc,
    PlaceType,
    TimedInputArc,
    TimedPlace,
    TimedTransition,
    TransportArc,
)
from .intervals import INFINITY, TimeInterval, TimeInvariant
from .normalization import place_indices
from .stochastic import firing_mode_name

_XML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<pnml xmlns="http://www.informatik.hu-berlin.de/top/pnml/ptNetb">\n'
    '<net id="ComposedModel" type="P/T net">\n'
)


def _num(value: float) -> str:
    return f"{value:g}"


class TimedArcPetriNet:
    """Places, transitions and arcs, plus the maximum constants derived from them."""

    def __init__(
        self,
        places: Iterable[TimedPlace],
        transitions: Iterable[TimedTransition],
        input_arcs: Iterable[TimedInputArc] = (),
        output_arcs: Iterable[OutputArc] = (),
        transport_arcs: Iterable[TransportArc] = (),
        inhibitor_arcs: Iterable[InhibitorArc] = (),
    ) -> None:
        self.places: List[TimedPlace] = list(places)
        self.transitions: List[TimedTransition] = list(transitions)
        self.input_arcs: List[TimedInputArc] = list(input_arcs)
        self.output_arcs: List[OutputArc] = list(output_arcs)
        self.transport_arcs: List[TransportArc] = list(transport_arcs)
        self.inhibitor_arcs: List[InhibitorArc] = list(inhibitor_arcs)
        self.max_constant = 0
        self.gcd = 1

    def initialize(
        self, use_global_max_constant: bool, lower_guards_by_gcd: bool
    ) -> None:
        """Compute max constants and place types, optionally scaling by the gcd."""
        if lower_guards_by_gcd:
            self.gcd_lower_guards()
        for place in self.places:
            self.update_max_constant(place.invariant)
        for arc in self.input_arcs:
            self.update_max_constant(arc.interval)
        for arc in self.transport_arcs:
            self.update_max_constant(arc.interval)

        self.find_max_constants()

        if use_global_max_constant:
            value = -1 if self.max_constant == 0 else self.max_constant
            for place in self.places:
                place.max_constant = value

        self.mark_untimed_places()

    def contains_orphan_transitions(self) -> bool:
        """True if some transition has neither inputs nor outputs."""
        return any(
            t.preset_size == 0 and t.postset_size == 0 for t in self.transitions
        )

    def gcd_lower_guards(self) -> None:
        """Divide all time constants by their greatest common divisor."""
        constants = {place.invariant.bound for place in self.places}
        for arc in (*self.input_arcs, *self.transport_arcs):
            constants.add(arc.interval.lower_bound)
            constants.add(arc.interval.upper_bound)
        constants.discard(0)
        constants.discard(INFINITY)
        if not constants:
            return

        divider = 0
        for constant in constants:
            divider = gcd(divider, constant)
        if divider <= 1:
            return

        self.gcd = divider
        for place in self.places:
            place.divide_invariant_by(divider)
        for arc in self.input_arcs:
            arc.divide_interval_by(divider)
        for arc in self.transport_arcs:
            arc.divide_interval_by(divider)

    def mark_untimed_places(self) -> None:
        """Flag places whose token ages can never matter."""
        for place in self.places:
            untimed = place.invariant == TimeInvariant.LS_INF
            untimed = untimed and all(
                arc.source is not place for arc in self.transport_arcs
            )
            if untimed:
                untimed = all(
                    arc.interval.is_zero_infinity()
                    for arc in self.input_arcs
                    if arc.place is place
                )
            if untimed:
                place.untimed = True

    def find_max_constants(self) -> None:
        """Compute each place's maximum constant and type."""
        for place in self.places:
            max_constant = -1
            if place.invariant != TimeInvariant.LS_INF:
                place.max_constant = place.invariant.bound
                place.type = PlaceType.INV
                continue

            place.type = PlaceType.DEAD
            for arc in self.input_arcs:
                if arc.place is not place:
                    continue
                lower = arc.interval.lower_bound
                upper = arc.interval.upper_bound
                if upper != INFINITY or lower != 0:
                    if upper == INFINITY:
                        max_constant = max(max_constant, lower)
                        place.type = PlaceType.STD
                    else:
                        max_constant = max(max_constant, upper)
                else:
                    place.type = PlaceType.STD

            for arc in self.transport_arcs:
                if arc.source is not place:
                    continue
                max_arc = -1
                lower = arc.interval.lower_bound
                upper = arc.interval.upper_bound
                if upper != INFINITY or lower != 0:
                    if upper == INFINITY:
                        max_arc = lower
                        place.type = PlaceType.STD
                    else:
                        max_arc = upper
                else:
                    place.type = PlaceType.STD
                destination_bound = arc.destination.invariant.bound
                if destination_bound != INFINITY:
                    max_arc = min(max_arc, destination_bound)
                max_constant = max(max_constant, max_arc)
            place.max_constant = max_constant

            if place.type is PlaceType.DEAD and any(
                arc.place.index == place.index for arc in self.inhibitor_arcs
            ):
                place.type = PlaceType.STD

        for place in self.places:
            for other in self.calculate_causality(place):
                if other.max_constant > place.max_constant:
                    place.max_constant = other.max_constant

        for transition in self.transitions:
            if any(arc.place.max_constant > -1 for arc in transition.postset):
                transition.untimed_postset = False

    def calculate_causality(self, place: TimedPlace) -> List[TimedPlace]:
        """Places reachable from ``place`` by unbounded transport arcs, itself first."""
        result: List[TimedPlace] = []
        self._causality(place, result)
        return result

    def _causality(self, place: TimedPlace, result: List[TimedPlace]) -> None:
        if any(p is place for p in result):
            return
        result.append(place)
        for arc in self.transport_arcs:
            if arc.source is place and arc.interval.upper_bound == INFINITY:
                self._causality(arc.destination, result)

    def update_place_types(self, query, keep_dead_tokens: bool = False) -> None:
        """Make dead places that the query reads (or all, if kept) standard."""
        mentioned = set(place_indices(query))
        for place in self.places:
            if place.type is not PlaceType.DEAD:
                continue
            if keep_dead_tokens or place.index in mentioned:
                place.type = PlaceType.STD

    def set_all_controllable(self, value: bool) -> None:
        for transition in self.transitions:
            transition.controllable = value

    def update_max_constant(self, bounds: Union[TimeInterval, TimeInvariant]) -> None:
        """Raise the global maximum constant to the finite bounds given."""
        if isinstance(bounds, TimeInvariant):
            values: Sequence[int] = (bounds.bound,)
        else:
            values = (bounds.lower_bound, bounds.upper_bound)
        for value in values:
            if value < INFINITY and value > self.max_constant:
                self.max_constant = value

    def place_index(self, name: str) -> int:
        """Index of the named place, or ``TimedPlace.BOTTOM_INDEX``."""
        for i, place in enumerate(self.places):
            if place.name == name:
                return i
        return TimedPlace.BOTTOM_INDEX

    def is_non_strict(self) -> bool:
        """True if no guard or invariant uses a strict finite bound."""
        for arc in (*self.input_arcs, *self.transport_arcs):
            interval = arc.interval
            if interval.left_strict or (
                interval.right_strict and interval.upper_bound != INFINITY
            ):
                return False
        return not any(
            p.invariant.strict and p.invariant.bound != INFINITY
            for p in self.places
        )

    def to_tapn_xml(self, initial: Sequence[int]) -> str:
        """Render the net as a model file, with ``initial`` token counts per place."""
        out = [_XML_HEADER]
        for place in self.places:
            inv = place.invariant
            if inv.strict:
                text = "&lt; inf" if inv.bound == INFINITY else f"&lt;{inv.bound}"
            else:
                text = f"&lt;={inv.bound}"
            out.append(
                f'<place id="{place.name}" name="{place.name}" invariant="{text}" '
                f'initialMarking="{initial[place.index]}">\n'
            )
            out.append(
                f'\t<graphics><position x="{_num(place.x)}" y="{_num(place.y)}" />'
                "</graphics>\n"
            )
            out.append("</place>\n")

        for t in self.transitions:
            weight = "inf" if t.weight == float("inf") else f"{t.weight:f}"
            out.append(
                f'<transition player="{0 if t.controllable else 1}" id="{t.name}" '
                f'name="{t.name}" urgent="{"true" if t.urgent else "false"}" '
                f'weight="{weight}" firingMode="{firing_mode_name(t.firing_mode)}" '
                f"{t.distribution.to_xml()}>\n"
            )
            out.append(
                f'\t<graphics><position x="{_num(t.x)}" y="{_num(t.y)}" />'
                "</graphics>\n"
            )
            out.append("</transition>\n")

        for arc in self.input_arcs:
            out.append(
                f'<inputArc inscription="{arc.interval}" weight="{arc.weight}" '
                f'source="{arc.place.name}" target="{arc.transition.name}" />\n'
            )
        for arc in self.output_arcs:
            out.append(
                f'<outputArc weight="{arc.weight}" target="{arc.place.name}" '
                f'source="{arc.transition.name}" />\n'
            )
        for arc in self.inhibitor_arcs:
            out.append(
                f'<inhibitorArc inscription="[0,inf)" weight="{arc.weight}" '
                f'source="{arc.place.name}" target="{arc.transition.name}" />\n'
            )
        for arc in self.transport_arcs:
            out.append(
                f'<transportArc inscription="{arc.interval}" '
                f'source="{arc.source.name}" transition="{arc.transition.name}" '
                f'target="{arc.destination.name}" weight="{arc.weight}" />\n'
            )
        out.append("</net></pnml>\n")
        return "".join(out)

    def __str__(self) -> str:
        out = ["TAPN:\n  Places: "]
        out.extend(f"{place}\n" for place in self.places)
        out.append("\n  Transitions: ")
        out.extend(f"{t}\n" for t in self.transitions)
        out.append("\n  Input Arcs: ")
        out.extend(f"{arc}, " for arc in self.input_arcs)
        if self.transport_arcs:
            out.append("\n  Transport Arcs: ")
            out.extend(f"{arc}, " for arc in self.transport_arcs)
        if self.inhibitor_arcs:
            out.append("\n  Inhibitor Arcs: ")
            out.extend(f"{arc}, " for arc in self.inhibitor_arcs)
        out.append("\n  Output Arcs: ")
        out.extend(f"{arc}, " for arc in self.output_arcs)
        out.append("\n")
        return "".join(out)