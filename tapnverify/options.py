"""Settings that control a verification run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Set


class SearchType(Enum):
    BREADTHFIRST = auto()
    DEPTHFIRST = auto()
    RANDOM = auto()
    COVERMOST = auto()
    MINDELAYFIRST = auto()
    DEFAULT = auto()
    OVER_APPROX = auto()


class VerificationType(Enum):
    DISCRETE = auto()
    TIMEDART = auto()


class MemoryOptimization(Enum):
    NO_MEMORY_OPTIMIZATION = auto()
    PTRIE = auto()


class Trace(Enum):
    NO_TRACE = auto()
    SOME_TRACE = auto()
    FASTEST_TRACE = auto()


class WorkflowMode(Enum):
    NOT_WORKFLOW = auto()
    WORKFLOW_SOUNDNESS = auto()
    WORKFLOW_STRONG_SOUNDNESS = auto()


class SMCTracesType(Enum):
    ANY_TRACE = auto()
    SATISFYING_TRACES = auto()
    UNSATISFYING_TRACES = auto()


_TRACE_NAMES = {Trace.SOME_TRACE: "some", Trace.FASTEST_TRACE: "fastest"}

_SEARCH_NAMES = {
    SearchType.COVERMOST: "Heuristic Search",
    SearchType.RANDOM: "Random Search",
    SearchType.DEPTHFIRST: "Depth-First Search",
    SearchType.BREADTHFIRST: "Breadth-First Search",
    SearchType.MINDELAYFIRST: "Minimum-Delay-First Search",
}


def trace_name(trace: Trace) -> str:
    return _TRACE_NAMES.get(trace, "no")


def search_type_name(search: SearchType) -> str:
    return _SEARCH_NAMES.get(search, "Breadth-First Search")


def verification_type_name(kind: VerificationType) -> str:
    if kind is VerificationType.TIMEDART:
        return "Time darts"
    return "Default (discrete)"


def memory_optimization_name(memory: MemoryOptimization) -> str:
    if memory is MemoryOptimization.PTRIE:
        return "PTrie "
    return "None"


@dataclass
class VerificationOptions:
    input_file: str = ""
    query_file: str = ""
    search_type: SearchType = SearchType.DEFAULT
    verification_type: VerificationType = VerificationType.DISCRETE
    memory_optimization: MemoryOptimization = MemoryOptimization.NO_MEMORY_OPTIMIZATION
    trace: Trace = Trace.NO_TRACE
    xml_trace: bool = True
    k_bound: int = 0
    query_numbers: Set[int] = field(default_factory=set)
    keep_dead_tokens: bool = False
    global_max_constants_enabled: bool = False
    gcd_lower_guards_enabled: bool = False
    workflow_mode: WorkflowMode = WorkflowMode.NOT_WORKFLOW
    workflow_bound: int = 0
    calculate_cmax: bool = False
    partial_order_reduction: bool = True
    output_model_file: str = ""
    output_query_file: str = ""
    print_bindings: bool = False
    benchmark_mode: bool = False
    benchmark_runs: int = 0
    parallel: bool = False
    print_cumulative: bool = False
    cumulative_rounding_digits: int = 0
    steps_stats_scale: int = 500
    time_stats_scale: int = 500
    smc_traces: int = 0
    smc_traces_type: SMCTracesType = SMCTracesType.ANY_TRACE
    smc_numeric_precision: int = 5

    def is_workflow(self) -> bool:
        return self.workflow_mode is not WorkflowMode.NOT_WORKFLOW

    def __str__(self) -> str:
        lines = [
            f"Search type: {search_type_name(self.search_type)}",
            f"Verification method: {verification_type_name(self.verification_type)}",
            "Memory optimization: "
            f"{memory_optimization_name(self.memory_optimization)}",
            "Partial Order Reduction: "
            f"{'Enabled' if self.partial_order_reduction else 'Disabled'}",
            f"k-bound is: {self.k_bound}",
        ]
        generating = f"Generating {trace_name(self.trace)} trace"
        if self.trace is not Trace.NO_TRACE:
            fmt = "xml format" if self.xml_trace else "human readable format"
            generating += f" in {fmt}"
        lines.append(generating)
        constants = (
            "global maximum constant"
            if self.global_max_constants_enabled
            else "local maximum constants"
        )
        lines.append(f"Using {constants} for extrapolation")
        if self.is_workflow():
            if self.workflow_mode is WorkflowMode.WORKFLOW_SOUNDNESS:
                lines.append("Workflow analysis type : Soundness")
            else:
                lines.append("Workflow analysis type : Strong soundness")
                lines.append(f"Bound is : {self.workflow_bound}")
        if self.calculate_cmax:
            lines.append("Calculating C-max")
        lines.append(f"Model file is: {self.input_file}")
        if self.query_file:
            lines.append(f"Query file is: {self.query_file}")
        return "".join(line + "\n" for line in lines)