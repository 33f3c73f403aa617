"""Command-line parsing into verification options."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Set

from .options import (
    MemoryOptimization,
    SearchType,
    SMCTracesType,
    Trace,
    VerificationOptions,
    VerificationType,
    WorkflowMode,
)

PROGRAM_NAME = "verifydtapn"
VERSION = "0.1.0"


class ArgsError(ValueError):
    """Raised for command-line arguments that cannot be used."""


_DIGITS = frozenset("0123456789")


def parse_int(text: str) -> int:
    """Parse a non-negative decimal number; the empty string counts as 0."""
    if any(c not in _DIGITS for c in text):
        raise ArgsError(f"Not a number: {text}")
    return int(text) if text else 0


def parse_numbers(text: str) -> Set[int]:
    """Turn a comma-separated list of 1-based query numbers into 0-based indices."""
    parts = text.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    result = set()
    for part in parts:
        number = parse_int(part)
        if number <= 0:
            raise ArgsError("Query-indexes are 1-index, got a 0")
        result.add(number - 1)
    return result


_SEARCH_TYPES = {
    "BestFS": SearchType.COVERMOST,
    "BFS": SearchType.BREADTHFIRST,
    "DFS": SearchType.DEPTHFIRST,
    "RDFS": SearchType.RANDOM,
    "MindelayFS": SearchType.MINDELAYFIRST,
    "DEFAULT": SearchType.DEFAULT,
    "default": SearchType.DEFAULT,
    "OverApprox": SearchType.OVER_APPROX,
}


def to_search_type(name: str) -> SearchType:
    try:
        return _SEARCH_TYPES[name]
    except KeyError:
        raise ArgsError(f"Unknown search strategy '{name}' specified.") from None


def _pick(choices, value: int, message: str):
    if 0 <= value < len(choices):
        return choices[value]
    raise ArgsError(message)


def to_verification_type(value: int) -> VerificationType:
    return _pick(
        (VerificationType.DISCRETE, VerificationType.TIMEDART),
        value,
        "Unknown verification method specified.",
    )


def to_memory_type(value: int) -> MemoryOptimization:
    return _pick(
        (MemoryOptimization.NO_MEMORY_OPTIMIZATION, MemoryOptimization.PTRIE),
        value,
        "Unknown memory optimization specified.",
    )


def to_trace_type(value: int) -> Trace:
    return _pick(
        (Trace.NO_TRACE, Trace.SOME_TRACE, Trace.FASTEST_TRACE),
        value,
        "Unknown trace option specified.",
    )


def to_workflow_mode(value: int) -> WorkflowMode:
    return _pick(
        (
            WorkflowMode.NOT_WORKFLOW,
            WorkflowMode.WORKFLOW_SOUNDNESS,
            WorkflowMode.WORKFLOW_STRONG_SOUNDNESS,
        ),
        value,
        "Unknown workflow option specified.",
    )


def _unsigned(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """The parser for all recognised options; file names stay unparsed."""
    p = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage=f"{PROGRAM_NAME} [options] model.pnml (query.xml)",
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument("-v", "--version", action="version",
                   version=f"VerifyDTAPN {VERSION}",
                   help="Displays version information.")
    p.add_argument("-k", "--k-bound", type=_unsigned,
                   help="Max tokens to use during exploration.")
    p.add_argument("-x", "--xml-queries",
                   help="Parse XML query file and verify queries of a given "
                        "comma-seperated list")
    p.add_argument("-s", "--search-strategy",
                   help="Specify the desired search strategy\n BestFS\n DFS\n"
                        " RDFS\n MindelayFS\n OverApprox\n default")
    p.add_argument("-m", "--verification-method", type=_unsigned,
                   help="Specify the desired verification method.\n"
                        " 0: Discrete (default)\n 1: Time Darts")
    p.add_argument("-p", "--memory-optimization", type=_unsigned,
                   help="Specify the desired memory optimization.\n"
                        " 0: None (default)\n 1: PTrie")
    p.add_argument("-t", "--trace", type=_unsigned,
                   help="Specify the desired trace option.\n"
                        " 0: none (default)\n 1: some\n 2: fastest")
    p.add_argument("--keep-dead-tokens", action="store_true",
                   help="Do not discard dead tokens (used for boundedness checking)")
    p.add_argument("--global-max-constants", action="store_true",
                   help="Use global maximum constant for extrapolation "
                        "(as opposed to local constants).")
    p.add_argument("--gcd-lower", action="store_true",
                   help="Enable lowering the guards by the greatest common divisor.")
    p.add_argument("-w", "--workflow", type=_unsigned,
                   help="Workflow mode.\n 0: Disabled (default)\n"
                        " 1: Soundness (and min)\n 2: Strong Soundness (and max)")
    p.add_argument("--strong-workflow-bound", type=_unsigned,
                   help="Maximum delay bound for strong workflow analysis")
    p.add_argument("--compute-cmax", action="store_true",
                   help="Calculate the place bounds.")
    p.add_argument("--disable-partial-order", action="store_true",
                   help="Disable partial order reduction")
    p.add_argument("--write-unfolded-net",
                   help="Outputs the model to the given file before structural "
                        "reduction but after unfolding")
    p.add_argument("-b", "--bindings", action="store_true",
                   help="Print bindings to stderr in XML format "
                        "(only for CPNs, default is not to print)")
    p.add_argument("--write-unfolded-queries",
                   help="Outputs the queries to the given file before query "
                        "reduction but after unfolding")
    p.add_argument("--strategy-output",
                   help="File to write synthesized strategy to, use '_' "
                        "(an underscore) for stdout")
    p.add_argument("--smc-benchmark", type=_unsigned,
                   help="Benchmark mode for SMC, runs the number of runs "
                        "specified to estimate performance")
    p.add_argument("--smc-parallel", action="store_true",
                   help="Enable parallel verification for SMC.")
    p.add_argument("--smc-print-cumulative-stats", type=_unsigned,
                   help="Prints the cumulative probability stats for SMC "
                        "quantitative estimation, specifying the rounding precision")
    p.add_argument("--smc-steps-scale", type=_unsigned,
                   help="Specify the number of slices to use to print steps "
                        "cumulative stats (scale = 0 means every step, default = 500)")
    p.add_argument("--smc-time-scale", type=_unsigned,
                   help="Specify the number of slices to use to print time "
                        "cumulative stats (scale = 0 means every 1 unit, default = 500)")
    p.add_argument("--smc-traces", type=_unsigned,
                   help="Specify the number of SMC run traces to print (default : 0)")
    p.add_argument("--smc-traces-type", type=_unsigned,
                   help="Specify the desired SMC runs to save.\n 0: any (default)\n"
                        " 1: only runs satisfying the property\n"
                        " 2: only runs not satisfying the property")
    p.add_argument("--smc-numeric-precision", type=_unsigned,
                   help="Specify the number of rounding digits to use in SMC "
                        "verifications (default = 5, 0 means no rounding).")
    return p


_SMC_TRACE_TYPES = {
    1: SMCTracesType.SATISFYING_TRACES,
    2: SMCTracesType.UNSATISFYING_TRACES,
}


def parse_args(argv: Optional[Sequence[str]] = None) -> VerificationOptions:
    """Parse a command line (without the program name) into options."""
    ns, rest = build_parser().parse_known_args(argv)
    opts = VerificationOptions()

    if ns.k_bound is not None:
        opts.k_bound = ns.k_bound
    if ns.xml_queries is not None:
        opts.query_numbers = parse_numbers(ns.xml_queries)
    if ns.search_strategy is not None:
        opts.search_type = to_search_type(ns.search_strategy)
    if ns.verification_method is not None:
        opts.verification_type = to_verification_type(ns.verification_method)
    if ns.memory_optimization is not None:
        opts.memory_optimization = to_memory_type(ns.memory_optimization)
    if ns.trace is not None:
        opts.trace = to_trace_type(ns.trace)
    if ns.keep_dead_tokens:
        opts.keep_dead_tokens = True
    if ns.global_max_constants:
        opts.global_max_constants_enabled = True
    if ns.gcd_lower:
        opts.gcd_lower_guards_enabled = True
    if ns.workflow is not None:
        opts.workflow_mode = to_workflow_mode(ns.workflow)
    if ns.strong_workflow_bound is not None:
        opts.workflow_bound = ns.strong_workflow_bound
    if ns.compute_cmax:
        opts.calculate_cmax = True
    if ns.disable_partial_order:
        opts.partial_order_reduction = False
    if ns.write_unfolded_net is not None:
        opts.output_model_file = ns.write_unfolded_net
    if ns.bindings:
        opts.print_bindings = True
    if ns.write_unfolded_queries is not None:
        opts.output_query_file = ns.write_unfolded_queries
    if ns.strategy_output is not None:
        opts.output_model_file = ns.strategy_output
    if ns.smc_benchmark is not None:
        opts.benchmark_mode = True
        opts.benchmark_runs = ns.smc_benchmark
    opts.parallel = ns.smc_parallel
    if ns.smc_print_cumulative_stats is not None:
        opts.print_cumulative = True
        opts.cumulative_rounding_digits = ns.smc_print_cumulative_stats
    if ns.smc_steps_scale is not None:
        opts.steps_stats_scale = ns.smc_steps_scale
    if ns.smc_time_scale is not None:
        opts.time_stats_scale = ns.smc_time_scale
    if ns.smc_traces is not None:
        opts.smc_traces = ns.smc_traces
    if ns.smc_traces_type is not None:
        opts.smc_traces_type = _SMC_TRACE_TYPES.get(
            ns.smc_traces_type, SMCTracesType.ANY_TRACE
        )
    if ns.smc_numeric_precision is not None:
        opts.smc_numeric_precision = ns.smc_numeric_precision

    files: List[str] = [f for f in rest if f.strip()]
    if opts.is_workflow():
        if len(files) != 1:
            raise ArgsError(
                "Expected exactly 1 trailing file (the model) for workflow "
                f"verification, got [{', '.join(files)}]"
            )
        opts.input_file = files[0]
    else:
        if len(files) != 2:
            raise ArgsError(
                "Expected exactly 1 trailing file (a model and a query), "
                f"got [{', '.join(files)}]"
            )
        opts.input_file, opts.query_file = files
    return opts