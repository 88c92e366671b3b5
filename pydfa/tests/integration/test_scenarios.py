from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from pydfa import (
    Configuration,
    InvalidAcceptingState,
    InvalidStartState,
    InvalidTransitionTarget,
    MissingStateTransitions,
    MissingTransition,
    build,
    run,
    run_with_trace,
)
from pydfa.tasks.library import (
    make_div3_configuration,
    make_parity_configuration,
    make_substring_configuration,
)


def test_parity_structure() -> None:
    config = make_parity_configuration()

    assert list(config.states) == ["q0", "q1"]
    assert list(config.alphabet) == ["0", "1"]
    assert config.transitions["q0"] == {"0": "q1", "1": "q0"}
    assert config.transitions["q1"] == {"0": "q1", "1": "q0"}
    assert config.start_state == "q0"
    assert list(config.accepting_states) == ["q1"]


@pytest.mark.parametrize(
    ("word", "accepted", "final_state", "n_steps"),
    [
        ("0", True, "q1", 1),
        ("10", True, "q1", 2),
        ("11", False, "q0", 2),
        ("", False, "q0", 0),
        ("102", False, "q1", 2),
    ],
)
def test_parity_scenarios(word: str, accepted: bool, final_state: str, n_steps: int) -> None:
    dfa = build(make_parity_configuration())

    assert run(dfa, word) is accepted

    trace = run_with_trace(dfa, word)
    assert trace.result is accepted
    assert trace.final_state == final_state
    assert len(trace.steps) == n_steps


def test_parity_single_zero_trace() -> None:
    trace = run_with_trace(build(make_parity_configuration()), "0")
    assert [(s.from_state, s.symbol, s.to_state) for s in trace.steps] == [("q0", "0", "q1")]


@pytest.mark.parametrize(
    ("word", "accepted"),
    [("ab", True), ("bbb", False), ("", False), ("aaab", True), ("abba", True), ("ba", False)],
)
def test_substring_scenarios(word: str, accepted: bool) -> None:
    dfa = build(make_substring_configuration())
    assert dfa.run(word) is accepted


def test_substring_absorbing_state() -> None:
    dfa = build(make_substring_configuration())
    trace = dfa.run_with_trace("abab")
    assert trace.path == ["q0", "q1", "q2", "q2", "q2"]


def test_div3_scenarios() -> None:
    dfa = build(make_div3_configuration())
    for value in range(64):
        assert dfa.run(format(value, "b")) is (value % 3 == 0)


def _broken(**overrides) -> Configuration:
    config = make_parity_configuration().to_dict()
    config.update(overrides)
    return Configuration.from_dict(config)


@pytest.mark.parametrize(
    ("config", "error"),
    [
        (_broken(start_state="q7"), InvalidStartState),
        (_broken(accepting_states=["q7"]), InvalidAcceptingState),
        (_broken(transitions={"q0": {"0": "q1", "1": "q0"}}), MissingStateTransitions),
        (
            _broken(transitions={"q0": {"0": "q1", "1": "q0"}, "q1": {"0": "q1"}}),
            MissingTransition,
        ),
        (
            _broken(transitions={"q0": {"0": "q1", "1": "q0"}, "q1": {"0": "q1", "1": "q7"}}),
            InvalidTransitionTarget,
        ),
    ],
)
def test_single_defect_yields_matching_error(config: Configuration, error: type) -> None:
    with pytest.raises(error):
        build(config)


def test_validation_errors_not_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pydfa"):
        with pytest.raises(InvalidStartState):
            build(_broken(start_state="q7"))
    assert caplog.records == []


def test_build_logs_debug_summary(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pydfa"):
        build(make_substring_configuration())
    assert any("3 states and 2 symbols" in record.getMessage() for record in caplog.records)


def test_concurrent_traces_deterministic() -> None:
    dfa = build(make_div3_configuration())
    words = [format(value, "b") for value in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        traces_a = list(pool.map(dfa.run_with_trace, words))
        traces_b = list(pool.map(dfa.run_with_trace, words))

    assert traces_a == traces_b
    for word, trace in zip(words, traces_a):
        assert len(trace.steps) == len(word)
