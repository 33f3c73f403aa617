"""Firing-delay distributions and firing modes of stochastic transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Union


class DistributionType(IntEnum):
    CONSTANT = 0
    UNIFORM = 1
    EXPONENTIAL = 2
    NORMAL = 3
    GAMMA = 4
    ERLANG = 5
    DISCRETE_UNIFORM = 6
    GEOMETRIC = 7


class FiringMode(IntEnum):
    OLDEST = 0
    YOUNGEST = 1
    RANDOM = 2


_DISTRIBUTION_NAMES = {
    DistributionType.CONSTANT: "constant",
    DistributionType.UNIFORM: "uniform",
    DistributionType.EXPONENTIAL: "exponential",
    DistributionType.NORMAL: "normal",
    DistributionType.GAMMA: "gamma",
    DistributionType.ERLANG: "erlang",
    DistributionType.DISCRETE_UNIFORM: "discrete uniform",
    DistributionType.GEOMETRIC: "geometric",
}

_FIRING_MODE_NAMES = {
    FiringMode.OLDEST: "Oldest",
    FiringMode.YOUNGEST: "Youngest",
    FiringMode.RANDOM: "Random",
}

_PARAMETER_NAMES = {
    DistributionType.CONSTANT: ("value",),
    DistributionType.UNIFORM: ("a", "b"),
    DistributionType.EXPONENTIAL: ("rate",),
    DistributionType.NORMAL: ("mean", "stddev"),
    DistributionType.GAMMA: ("shape", "scale"),
    DistributionType.ERLANG: ("shape", "scale"),
    DistributionType.DISCRETE_UNIFORM: ("a", "b"),
    DistributionType.GEOMETRIC: ("p",),
}

Number = Union[int, float]


def distribution_name(kind: DistributionType) -> str:
    """The name a distribution carries in model files."""
    return _DISTRIBUTION_NAMES.get(kind, "")


def firing_mode_name(mode: FiringMode) -> str:
    """The name a firing mode carries in model files."""
    return _FIRING_MODE_NAMES.get(mode, "")


def _format_number(value: Number) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


@dataclass
class Distribution:
    """A delay distribution with its named parameters."""

    kind: DistributionType
    parameters: Dict[str, Number] = field(default_factory=dict)

    def to_xml(self) -> str:
        """Render the distribution as XML attributes."""
        pieces = [f'distribution="{distribution_name(self.kind)}" ']
        for name in _PARAMETER_NAMES[self.kind]:
            pieces.append(f'{name}="{_format_number(self.parameters[name])}" ')
        return "".join(pieces)


def urgent_distribution() -> Distribution:
    """A constant zero delay."""
    return Distribution(DistributionType.CONSTANT, {"value": 0.0})


def default_distribution() -> Distribution:
    """A constant delay of one time unit."""
    return Distribution(DistributionType.CONSTANT, {"value": 1.0})


def distribution_from_params(
    distrib_id: int, param1: float, param2: float
) -> Distribution:
    """Build a distribution from its numeric id and up to two parameters."""
    try:
        kind = DistributionType(distrib_id)
    except ValueError:
        raise ValueError(f"unknown distribution id: {distrib_id}") from None
    names = _PARAMETER_NAMES[kind]
    values = (param1, param2)[: len(names)]
    if kind is DistributionType.DISCRETE_UNIFORM:
        values = tuple(int(v) for v in values)
    return Distribution(kind, dict(zip(names, values)))