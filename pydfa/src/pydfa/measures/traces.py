"""
Trace statistics.

Aggregate counts over ExecutionTrace records and acceptance rates over
batches of inputs.
"""

from collections import Counter
from typing import Iterable, Sequence

import numpy as np

from pydfa.core.automaton import Automaton
from pydfa.core.encoding import accepts_many
from pydfa.core.types import ExecutionTrace


def state_occupancy(traces: Iterable[ExecutionTrace], states: Sequence[str]) -> np.ndarray:
    """
    Count visits to each state across trace paths.

    The start state of every trace counts as one visit.

    Args:
        traces: Traces produced by run_with_trace.
        states: State labels fixing the output order.

    Returns:
        int64 array of shape (len(states),).
    """
    index = {state: i for i, state in enumerate(states)}
    counts = np.zeros(len(states), dtype=np.int64)
    for trace in traces:
        for state in trace.path:
            if state not in index:
                raise ValueError(f"trace visits unknown state: {state}")
            counts[index[state]] += 1
    return counts


def transition_usage(traces: Iterable[ExecutionTrace]) -> dict[tuple[str, str], int]:
    counter: Counter = Counter()
    for trace in traces:
        counter.update((step.from_state, step.symbol) for step in trace.steps)
    return dict(counter)


def acceptance_rate(automaton: Automaton, inputs: Sequence[str]) -> float:
    if not inputs:
        raise ValueError("inputs must not be empty")
    accepted = accepts_many(automaton, inputs)
    return float(np.count_nonzero(accepted)) / float(len(inputs))
