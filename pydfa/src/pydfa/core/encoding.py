"""
Dense integer encoding of a validated automaton.

States and symbols are indexed in sorted order. table[i, j] is the index of
the state reached from states[i] on alphabet[j]. Arrays are read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

import numpy as np

from pydfa.core.automaton import Automaton


@dataclass(frozen=True, eq=False)
class TransitionTable:
    """Sorted state and symbol labels plus the matrices indexed by them."""

    states: tuple[str, ...]
    alphabet: tuple[str, ...]
    table: np.ndarray
    start: int
    accepting: np.ndarray

    def __post_init__(self):
        table = np.array(self.table, dtype=np.int64)
        accepting = np.array(self.accepting, dtype=bool)
        if table.shape != (len(self.states), len(self.alphabet)):
            raise ValueError(
                f"table shape {table.shape} does not match "
                f"({len(self.states)}, {len(self.alphabet)})"
            )
        if accepting.shape != (len(self.states),):
            raise ValueError("accepting must have one entry per state")
        if not (0 <= self.start < len(self.states)):
            raise ValueError("start must index into states")
        if table.size and (table.min() < 0 or table.max() >= len(self.states)):
            raise ValueError("table entries must index into states")

        table.flags.writeable = False
        accepting.flags.writeable = False
        object.__setattr__(self, "table", table)
        object.__setattr__(self, "accepting", accepting)

    def state_index(self, state: str) -> int:
        return self.states.index(state)

    def symbol_index(self, symbol: str) -> int:
        return self.alphabet.index(symbol)


def encode(automaton: Automaton) -> TransitionTable:
    """Encode the transition function of automaton as an int64 matrix."""
    states = tuple(sorted(automaton.states))
    alphabet = tuple(sorted(automaton.alphabet))
    state_ids = {state: i for i, state in enumerate(states)}

    table = np.empty((len(states), len(alphabet)), dtype=np.int64)
    for i, state in enumerate(states):
        row = automaton.transitions[state]
        for j, symbol in enumerate(alphabet):
            table[i, j] = state_ids[row[symbol]]

    accepting = np.array([state in automaton.accepting_states for state in states], dtype=bool)

    return TransitionTable(
        states=states,
        alphabet=alphabet,
        table=table,
        start=state_ids[automaton.start_state],
        accepting=accepting,
    )


def accepts_many(
    source: Union[Automaton, TransitionTable],
    inputs: Iterable[str],
) -> np.ndarray:
    """
    Evaluate acceptance for every input; element-wise equal to Automaton.run.

    Inputs are processed in lockstep, one symbol position at a time. An input
    that hits an out-of-alphabet symbol is marked dead and rejected.
    """
    if isinstance(source, Automaton):
        table = encode(source)
    elif isinstance(source, TransitionTable):
        table = source
    else:
        raise TypeError(f"source must be Automaton or TransitionTable, got {type(source)}")

    words = list(inputs)
    n_words = len(words)
    if n_words == 0:
        return np.zeros(0, dtype=bool)

    symbol_ids = {symbol: j for j, symbol in enumerate(table.alphabet)}
    lengths = np.array([len(word) for word in words], dtype=np.int64)
    max_len = int(lengths.max())

    # -1 marks a symbol outside the alphabet, -2 marks padding past the end
    encoded = np.full((n_words, max_len), -2, dtype=np.int64)
    for w, word in enumerate(words):
        for t, symbol in enumerate(word):
            encoded[w, t] = symbol_ids.get(symbol, -1)

    current = np.full(n_words, table.start, dtype=np.int64)
    alive = np.ones(n_words, dtype=bool)

    for t in range(max_len):
        column = encoded[:, t]
        alive &= column != -1
        stepping = alive & (column >= 0)
        current[stepping] = table.table[current[stepping], column[stepping]]

    return alive & table.accepting[current]
