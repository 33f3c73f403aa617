"""Incremental construction of a timed-arc Petri net by element names."""

from __future__ import annotations

from typing import List

from .elements import (
    InhibitorArc,
    ModelError,
    OutputArc,
    TimedInputArc,
    TimedPlace,
    TimedTransition,
    TransportArc,
)
from .intervals import INFINITY, TimeInterval, TimeInvariant
from .net import TimedArcPetriNet
from .stochastic import FiringMode, distribution_from_params


class TAPNModelBuilder:
    """Collects places, transitions and arcs, then assembles the net."""

    def __init__(self) -> None:
        self.places: List[TimedPlace] = []
        self.transitions: List[TimedTransition] = []
        self.input_arcs: List[TimedInputArc] = []
        self.output_arcs: List[OutputArc] = []
        self.transport_arcs: List[TransportArc] = []
        self.inhibitor_arcs: List[InhibitorArc] = []
        self.initial_marking: List[int] = []

    def add_place(
        self,
        name: str,
        tokens: int = 0,
        strict: bool = True,
        bound: int = INFINITY,
        x: float = 0.0,
        y: float = 0.0,
    ) -> TimedPlace:
        """Add a place holding ``tokens`` tokens initially."""
        place = TimedPlace(
            len(self.places), name, name, TimeInvariant(strict, bound), x, y
        )
        self.places.append(place)
        self.initial_marking.append(tokens)
        return place

    def add_transition(
        self,
        name: str,
        player: int = 0,
        urgent: bool = False,
        x: float = 0.0,
        y: float = 0.0,
        distrib_id: int = 0,
        param1: float = 1.0,
        param2: float = 0.0,
        weight: float = 1.0,
        firing_mode: int = 0,
    ) -> TimedTransition:
        """Add a transition; player 0 is the controller."""
        transition = TimedTransition(
            len(self.transitions),
            name,
            name,
            urgent,
            player == 0,
            x,
            y,
            distribution_from_params(distrib_id, param1, param2),
            weight,
            FiringMode(firing_mode),
        )
        self.transitions.append(transition)
        return transition

    def add_input_arc(
        self,
        place_name: str,
        transition_name: str,
        inhibitor: bool = False,
        weight: int = 1,
        lstrict: bool = False,
        ustrict: bool = True,
        lower: int = 0,
        upper: int = INFINITY,
    ):
        """Add an input arc, or an inhibitor arc whose guard must be unrestricted."""
        place = self.find_place(place_name)
        transition = self.find_transition(transition_name)
        if inhibitor:
            if lstrict or not ustrict or lower != 0 or upper != INFINITY:
                raise ModelError(
                    "Inhibitor-arcs must have unrestricted guards! (between "
                    f"{place_name} and {transition_name})"
                )
            arc = InhibitorArc(place, transition, weight)
            transition.add_incoming_inhibitor_arc(arc)
            place.inhibitor_arcs.append(arc)
            self.inhibitor_arcs.append(arc)
            return arc
        interval = TimeInterval(lstrict, lower, upper, ustrict)
        arc = TimedInputArc(place, transition, weight, interval)
        transition.add_to_preset(arc)
        place.input_arcs.append(arc)
        self.input_arcs.append(arc)
        return arc

    def add_output_arc(
        self, transition_name: str, place_name: str, weight: int = 1
    ) -> OutputArc:
        """Add an arc producing tokens in the named place."""
        place = self.find_place(place_name)
        transition = self.find_transition(transition_name)
        arc = OutputArc(transition, place, weight)
        transition.add_to_postset(arc)
        place.output_arcs.append(arc)
        self.output_arcs.append(arc)
        return arc

    def add_transport_arc(
        self,
        source: str,
        transition_name: str,
        target: str,
        weight: int = 1,
        lstrict: bool = False,
        ustrict: bool = True,
        lower: int = 0,
        upper: int = INFINITY,
    ) -> TransportArc:
        """Add an arc moving tokens from ``source`` through a transition to ``target``."""
        in_place = self.find_place(source)
        out_place = self.find_place(target)
        transition = self.find_transition(transition_name)
        interval = TimeInterval(lstrict, lower, upper, ustrict)
        arc = TransportArc(in_place, transition, out_place, interval, weight)
        transition.add_transport_arc_going_through(arc)
        in_place.transport_arcs.append(arc)
        out_place.prod_transport_arcs.append(arc)
        self.transport_arcs.append(arc)
        return arc

    def find_place(self, name: str) -> TimedPlace:
        """The place with this name; it must already be defined."""
        for place in self.places:
            if place.name == name:
                return place
        raise ModelError(
            f'Could not find place "{name}". It must be defined before use.'
        )

    def find_transition(self, name: str) -> TimedTransition:
        """The transition with this name; it must already be defined."""
        for transition in self.transitions:
            if transition.name == name:
                return transition
        raise ModelError(
            f'Could not find transition "{name}". It must be defined before use.'
        )

    def make_tapn(self) -> TimedArcPetriNet:
        """Assemble the net from everything added so far."""
        return TimedArcPetriNet(
            self.places,
            self.transitions,
            self.input_arcs,
            self.output_arcs,
            self.transport_arcs,
            self.inhibitor_arcs,
        )