import pytest

from tapnverify.builder import TAPNModelBuilder
from tapnverify.elements import ModelError
from tapnverify.intervals import INFINITY, TimeInvariant
from tapnverify.stochastic import DistributionType, FiringMode


@pytest.fixture
def builder():
    b = TAPNModelBuilder()
    b.add_place("p0", tokens=2)
    b.add_place("p1", tokens=0, strict=False, bound=5)
    b.add_place("p2", tokens=1)
    b.add_transition("t0")
    return b


def test_places_get_sequential_indices_and_marking(builder):
    assert [p.index for p in builder.places] == [0, 1, 2]
    assert builder.initial_marking == [2, 0, 1]
    assert builder.places[1].invariant == TimeInvariant(False, 5)
    assert builder.places[0].invariant == TimeInvariant.LS_INF


def test_transition_player_and_firing_mode(builder):
    t = builder.add_transition("env", player=1, distrib_id=1, param1=2.0,
                               param2=4.0, firing_mode=2)
    assert t.controllable is False
    assert builder.transitions[0].controllable is True
    assert t.firing_mode is FiringMode.RANDOM
    assert t.distribution.kind is DistributionType.UNIFORM
    assert t.index == 1


def test_input_arcs_sorted_by_place(builder):
    builder.add_input_arc("p2", "t0")
    builder.add_input_arc("p0", "t0", lower=1, upper=3)
    t = builder.find_transition("t0")
    assert [a.place.name for a in t.preset] == ["p0", "p2"]
    assert builder.find_place("p0").input_arcs[0].interval.upper_bound == 3


def test_inhibitor_arc_requires_unrestricted_guard(builder):
    with pytest.raises(ModelError):
        builder.add_input_arc("p0", "t0", inhibitor=True, lower=1)
    arc = builder.add_input_arc("p0", "t0", inhibitor=True, weight=3)
    assert builder.inhibitor_arcs == [arc]
    assert builder.find_transition("t0").inhibitor_arcs == [arc]
    assert builder.find_transition("t0").preset == []


def test_output_and_transport_arcs(builder):
    out = builder.add_output_arc("t0", "p1", weight=2)
    ta = builder.add_transport_arc("p0", "t0", "p2", lower=1, upper=INFINITY)
    assert builder.find_transition("t0").postset == [out]
    assert builder.find_place("p0").transport_arcs == [ta]
    assert builder.find_place("p2").prod_transport_arcs == [ta]
    assert ta.destination is builder.find_place("p2")


def test_unknown_names_raise(builder):
    with pytest.raises(ModelError):
        builder.find_place("missing")
    with pytest.raises(ModelError):
        builder.add_output_arc("missing", "p0")


def test_urgent_transition_rejects_timed_arc(builder):
    builder.add_transition("u", urgent=True)
    with pytest.raises(ModelError):
        builder.add_input_arc("p0", "u", lower=2)


def test_make_tapn_contains_everything(builder):
    builder.add_input_arc("p0", "t0")
    builder.add_output_arc("t0", "p1")
    net = builder.make_tapn()
    assert net.places == builder.places
    assert net.transitions == builder.transitions
    assert len(net.input_arcs) == 1
    assert len(net.output_arcs) == 1
    assert net.place_index("p2") == 2