from tapnverify.options import (
    MemoryOptimization,
    SearchType,
    Trace,
    VerificationOptions,
    VerificationType,
    WorkflowMode,
    memory_optimization_name,
    search_type_name,
    trace_name,
    verification_type_name,
)


def test_trace_names():
    assert trace_name(Trace.SOME_TRACE) == "some"
    assert trace_name(Trace.FASTEST_TRACE) == "fastest"
    assert trace_name(Trace.NO_TRACE) == "no"


def test_search_names_fall_back_to_breadth_first():
    assert search_type_name(SearchType.COVERMOST) == "Heuristic Search"
    assert search_type_name(SearchType.DEFAULT) == search_type_name(
        SearchType.BREADTHFIRST
    )
    assert search_type_name(SearchType.OVER_APPROX) == "Breadth-First Search"


def test_verification_and_memory_names():
    assert verification_type_name(VerificationType.TIMEDART) == "Time darts"
    assert verification_type_name(VerificationType.DISCRETE) == "Default (discrete)"
    assert memory_optimization_name(MemoryOptimization.PTRIE) == "PTrie "
    assert memory_optimization_name(MemoryOptimization.NO_MEMORY_OPTIMIZATION) == "None"


def test_is_workflow():
    opts = VerificationOptions()
    assert not opts.is_workflow()
    opts.workflow_mode = WorkflowMode.WORKFLOW_SOUNDNESS
    assert opts.is_workflow()


def test_str_default_lines():
    opts = VerificationOptions(input_file="model.xml", k_bound=3)
    text = str(opts)
    lines = text.splitlines()
    assert lines[0] == "Search type: Breadth-First Search"
    assert "Partial Order Reduction: Enabled" in lines
    assert "k-bound is: 3" in lines
    assert "Generating no trace" in lines
    assert "Model file is: model.xml" in lines
    assert not any(line.startswith("Query file is") for line in lines)
    assert text.endswith("\n")


def test_str_trace_workflow_and_query():
    opts = VerificationOptions(
        input_file="m",
        query_file="q",
        trace=Trace.SOME_TRACE,
        workflow_mode=WorkflowMode.WORKFLOW_STRONG_SOUNDNESS,
        workflow_bound=7,
        calculate_cmax=True,
        global_max_constants_enabled=True,
    )
    lines = str(opts).splitlines()
    assert "Generating some trace in xml format" in lines
    assert "Workflow analysis type : Strong soundness" in lines
    assert "Bound is : 7" in lines
    assert "Calculating C-max" in lines
    assert "Using global maximum constant for extrapolation" in lines
    assert lines[-1] == "Query file is: q"