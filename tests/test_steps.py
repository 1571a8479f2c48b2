import pytest

from advent.steps import determine_instruction_sla, determine_step_order

EXAMPLE = """Step C must be finished before step A can begin.
Step C must be finished before step F can begin.
Step A must be finished before step B can begin.
Step A must be finished before step D can begin.
Step B must be finished before step E can begin.
Step D must be finished before step E can begin.
Step F must be finished before step E can begin."""


def test_determine_step_order():
    assert determine_step_order(EXAMPLE) == "CABDFE"


def test_step_order_contains_every_step_once():
    order = determine_step_order(EXAMPLE)
    assert sorted(order) == sorted("ABCDEF")


def test_independent_steps_come_alphabetically():
    text = (
        "Step Z must be finished before step Y can begin.\n"
        "Step B must be finished before step Y can begin."
    )
    assert determine_step_order(text) == "BZY"


def test_determine_instruction_sla_one_helper():
    assert determine_instruction_sla(EXAMPLE, 1, 0) == 15


def test_sla_overhead_adds_per_step_for_single_worker():
    base = determine_instruction_sla(EXAMPLE, 0, 0)
    with_overhead = determine_instruction_sla(EXAMPLE, 0, 60)
    assert with_overhead - base == 6 * 60


def test_more_helpers_are_never_slower():
    times = [determine_instruction_sla(EXAMPLE, helpers, 0) for helpers in range(5)]
    assert times == sorted(times, reverse=True)
    assert times[0] > times[-1]


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        determine_step_order("Step c must happen")


def test_empty_input_raises():
    with pytest.raises(ValueError):
        determine_step_order("")


def test_cycle_raises():
    text = (
        "Step A must be finished before step B can begin.\n"
        "Step B must be finished before step A can begin."
    )
    with pytest.raises(ValueError):
        determine_step_order(text)
    with pytest.raises(ValueError):
        determine_instruction_sla(text, 1, 0)