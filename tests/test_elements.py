import pytest

from tapnverify.elements import (
    InhibitorArc,
    ModelError,
    OutputArc,
    PlaceType,
    TimedInputArc,
    TimedPlace,
    TimedTransition,
    TransportArc,
)
from tapnverify.intervals import INFINITY, TimeInterval, TimeInvariant


def test_place_id_defaults_to_name():
    place = TimedPlace(0, "p0")
    assert place.id == "p0"


def test_place_str():
    place = TimedPlace(0, "p0", invariant=TimeInvariant(False, 5))
    place.type = PlaceType.INV
    assert str(place) == (
        "(p0 (index: 0), <= 5, Max Constant: -1, Infinity Place: false, Type: Inv)"
    )


def test_divide_invariant_keeps_product():
    place = TimedPlace(0, "p0", invariant=TimeInvariant(False, 6))
    place.divide_invariant_by(3)
    assert place.invariant.bound * 3 == 6
    assert place.invariant.strict is False


@pytest.mark.parametrize("bound", [0, INFINITY])
def test_divide_invariant_leaves_zero_and_infinity(bound):
    place = TimedPlace(0, "p0", invariant=TimeInvariant(True, bound))
    place.divide_invariant_by(3)
    assert place.invariant.bound == bound


def test_preset_sorted_by_place_index():
    transition = TimedTransition(0, "t0")
    places = [TimedPlace(i, f"p{i}") for i in (2, 0, 1)]
    for place in places:
        transition.add_to_preset(TimedInputArc(place, transition))
    assert [a.place.index for a in transition.preset] == [0, 1, 2]


def test_postset_and_inhibitors_sorted():
    transition = TimedTransition(0, "t0")
    for i in (3, 1):
        place = TimedPlace(i, f"p{i}")
        transition.add_to_postset(OutputArc(transition, place))
        transition.add_incoming_inhibitor_arc(InhibitorArc(place, transition))
    assert [a.place.index for a in transition.postset] == [1, 3]
    assert [a.place.index for a in transition.inhibitor_arcs] == [1, 3]


def test_transport_arcs_sorted_by_source():
    transition = TimedTransition(0, "t0")
    target = TimedPlace(9, "out")
    for i in (5, 2):
        source = TimedPlace(i, f"p{i}")
        transition.add_transport_arc_going_through(
            TransportArc(source, transition, target)
        )
    assert [a.source.index for a in transition.transport_arcs] == [2, 5]
    assert transition.preset_size == 2


def test_urgent_transition_rejects_timed_input_arc():
    transition = TimedTransition(0, "t0", urgent=True)
    place = TimedPlace(0, "p0")
    with pytest.raises(ModelError):
        transition.add_to_preset(
            TimedInputArc(place, transition, 1, TimeInterval(False, 1, 5, False))
        )


def test_urgent_transition_accepts_untimed_input_arc():
    transition = TimedTransition(0, "t0", urgent=True)
    arc = TimedInputArc(TimedPlace(0, "p0"), transition)
    transition.add_to_preset(arc)
    assert transition.preset == [arc]


def test_urgent_transport_rejects_destination_invariant():
    transition = TimedTransition(0, "t0", urgent=True)
    source = TimedPlace(0, "p0")
    target = TimedPlace(1, "p1", invariant=TimeInvariant(False, 3))
    with pytest.raises(ModelError):
        transition.add_transport_arc_going_through(
            TransportArc(source, transition, target)
        )


def test_urgent_transport_rejects_timed_guard():
    transition = TimedTransition(0, "t0", urgent=True)
    with pytest.raises(ModelError):
        transition.add_transport_arc_going_through(
            TransportArc(
                TimedPlace(0, "p0"),
                transition,
                TimedPlace(1, "p1"),
                TimeInterval(False, 2, INFINITY, True),
            )
        )


def test_transition_str():
    assert str(TimedTransition(3, "t1", urgent=True)) == "t1 urgent (3)"
    assert str(TimedTransition(4, "t2")) == "t2(4)"


def test_arc_strings():
    place = TimedPlace(0, "p0")
    other = TimedPlace(1, "p1")
    transition = TimedTransition(0, "t0")
    input_arc = TimedInputArc(place, transition, 2, TimeInterval(True, 1, 4, False))
    assert str(input_arc) == "From p0 to t0 weight: 2 with interval (1,4]"
    assert str(OutputArc(transition, other, 3)) == "From t0 to p1 weight: 3"
    assert str(InhibitorArc(place, transition, 1)) == "From p0 to t0 weight: 1"
    transport = TransportArc(place, transition, other, TimeInterval(), 1)
    assert str(transport) == "From p0 to t0 to p1 weight: 1 with interval [0,inf)"


def test_arc_divide_interval():
    place = TimedPlace(0, "p0")
    transition = TimedTransition(0, "t0")
    arc = TimedInputArc(place, transition, 1, TimeInterval(False, 4, 8, False))
    arc.divide_interval_by(4)
    assert arc.interval.lower_bound * 4 == 4
    assert arc.interval.upper_bound * 4 == 8