# tapnverify

Building blocks for verifying timed-arc Petri nets (TAPNs) in discrete time:
the net model, time guards and invariants, stochastic firing distributions,
the query syntax tree and its normalization, verification options with a
command-line style argument parser, and the waiting lists that order a
state-space search.

## What is inside

| Module | Contents |
| --- | --- |
| `tapnverify.intervals` | `TimeInterval`, `TimeInvariant`, `INFINITY`, `parse_interval`, `parse_invariant` |
| `tapnverify.stochastic` | `Distribution`, `DistributionType`, `FiringMode`, `distribution_from_params`, `urgent_distribution`, `default_distribution`, `distribution_name`, `firing_mode_name` |
| `tapnverify.expressions` | query tree: `Query`, `SMCQuery`, `SMCSettings`, `AtomicProposition`, boolean and arithmetic nodes, `make_atomic` |
| `tapnverify.normalization` | `normalize`, `normalize_expression`, `place_indices` |
| `tapnverify.elements` | `TimedPlace`, `TimedTransition`, `TimedInputArc`, `OutputArc`, `TransportArc`, `InhibitorArc`, `PlaceType`, `ModelError` |
| `tapnverify.net` | `TimedArcPetriNet`: max-constant analysis, GCD lowering of guards, place types, XML export |
| `tapnverify.builder` | `TAPNModelBuilder` for assembling a net by element names |
| `tapnverify.options` | `VerificationOptions` and its enumerations |
| `tapnverify.args` | `parse_args`, `build_parser` and the value converters, raising `ArgsError` |
| `tapnverify.waiting` | stack, queue, heuristic, min-first and random waiting lists |
| `tapnverify.real_marking` | `RealToken` and `RealPlace` for real-valued token ages |

## Building a net

```python
from tapnverify.builder import TAPNModelBuilder

builder = TAPNModelBuilder()
builder.add_place("P0", 1, False, 5, 0.0, 0.0)
builder.add_place("P1", 0, True, 2**31 - 1, 100.0, 0.0)
builder.add_transition("T0", 0, False, 50.0, 0.0, 0, 1.0, 0.0, 1.0, 0)
builder.add_input_arc("P0", "T0", False, 1, False, False, 2, 4)
builder.add_output_arc("T0", "P1", 1)

net = builder.make_tapn()
net.initialize(False, True)   # local max constants, lower guards by their gcd
print(net)
print(net.to_tapn_xml(builder.initial_marking))
```

Referring to a place or transition that has not been added raises
`ModelError`, as does an inhibitor arc with a restricted guard, a timed input
or transport arc on an urgent transition, or a transport arc through an urgent
transition into a place with an invariant.

`TimedArcPetriNet` also offers `contains_orphan_transitions()`,
`is_non_strict()`, `place_index(name)` (returning `TimedPlace.BOTTOM_INDEX`
for an unknown name), `calculate_causality(place)`, `set_all_controllable(value)`
and `update_place_types(query, keep_dead_tokens)`.

## Intervals and invariants

```python
from tapnverify.intervals import parse_interval, parse_invariant

guard = parse_interval("[2, k)", {"k": 6})
print(guard)                           # [2,6)
print(parse_invariant("<= 5", {}))     # <= 5
```

An unbounded upper bound (`inf`) is kept as `INFINITY`, the largest 32-bit
integer. A bound that is neither a number nor a key of the replacement
mapping raises `ValueError`.

## Queries

```python
from tapnverify.expressions import (
    IdentifierExpression, NumberExpression, NotExpression, Query, Quantifier, make_atomic,
)
from tapnverify.normalization import normalize, place_indices

prop = make_atomic(IdentifierExpression(0), ">=", NumberExpression(3))
query = Query(Quantifier.EF, NotExpression(prop))
normal = normalize(query)              # negation pushed into the comparison
print(place_indices(normal))           # [0]
```

`make_atomic` turns `>` and `>=` into `<` and `<=` with the sides swapped, and
raises `ValueError` for an unknown operator.

## Options and arguments

```python
from tapnverify.args import parse_args

options = parse_args(["-k", "4", "-s", "DFS", "model.xml", "query.xml"])
print(options)
```

Without a workflow mode exactly two file names (model and query) are
expected; with `-w 1` or `-w 2`, exactly one. Invalid values raise
`ArgsError`. `-h` and `-v` print help or version and exit through
`SystemExit`, as argparse does.

## Waiting lists

Every waiting list supports `add(marking, payload)`, `peek()`, `pop()`,
`flush_buffer()` and `len()`; peeking or popping an empty list raises
`IndexError`.

- `StackWaitingList` and `QueueWaitingList`: depth-first and breadth-first.
- `HeuristicWaitingList(query, weight)` and `HeuristicStackWaitingList(query, weight)`:
  the query is normalized and `weight(query, marking)` scores each marking;
  lower weights come first.
- `MinFirstWaitingList(weight)`: ordered by `weight(payload)`.
- `RandomWaitingList` and `RandomStackWaitingList`: random order, optionally
  from a given `random.Random`.

The stack variants with a buffer push each batch onto the stack when it is
flushed, which `peek` and `pop` do by themselves.

## What this package does not do

It holds the model, query and option layers only. It does not read model or
query files, does not explore state spaces or decide queries, has no
statistical simulation engine, and installs no command.

## Running the tests

The tests use pytest, available through the `test` extra:

```
pip install -e ".[test]"
pytest
```