from __future__ import annotations

from pydfa.core.types import Configuration


def make_parity_configuration() -> Configuration:
    """Binary strings whose last symbol is 0, i.e. even numbers."""
    return Configuration(
        states=["q0", "q1"],
        alphabet=["0", "1"],
        transitions={
            "q0": {"0": "q1", "1": "q0"},
            "q1": {"0": "q1", "1": "q0"},
        },
        start_state="q0",
        accepting_states=["q1"],
    )


def make_substring_configuration() -> Configuration:
    """Strings over {a, b} containing "ab"; q2 is absorbing."""
    return Configuration(
        states=["q0", "q1", "q2"],
        alphabet=["a", "b"],
        transitions={
            "q0": {"a": "q1", "b": "q0"},
            "q1": {"a": "q1", "b": "q2"},
            "q2": {"a": "q2", "b": "q2"},
        },
        start_state="q0",
        accepting_states=["q2"],
    )


def make_div3_configuration() -> Configuration:
    return Configuration(
        states=["q0", "q1", "q2"],
        alphabet=["0", "1"],
        transitions={
            "q0": {"0": "q0", "1": "q1"},
            "q1": {"0": "q2", "1": "q0"},
            "q2": {"0": "q1", "1": "q2"},
        },
        start_state="q0",
        accepting_states=["q0"],
    )
