"""
Automaton: a validated, immutable DFA (Q, Σ, δ, q₀, F).

Construction is the only operation that can fail. Once built, δ is total
over Q x Σ and closed in Q, so run and run_with_trace never re-check it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from pydfa.core.errors import (
    InvalidAcceptingState,
    InvalidStartState,
    InvalidTransitionTarget,
    MissingStateTransitions,
    MissingTransition,
)
from pydfa.core.types import Configuration, ExecutionStep, ExecutionTrace

logger = logging.getLogger(__name__)


def _freeze(transitions: Mapping[str, Mapping[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType(
        {state: MappingProxyType(dict(row)) for state, row in transitions.items()}
    )


def _validate(
    states: frozenset[str],
    alphabet: frozenset[str],
    transitions: Mapping[str, Mapping[str, str]],
    start_state: str,
    accepting_states: frozenset[str],
) -> None:
    if start_state not in states:
        raise InvalidStartState(start_state)

    for state in sorted(accepting_states):
        if state not in states:
            raise InvalidAcceptingState(state)

    symbols = sorted(alphabet)
    for state in sorted(states):
        row = transitions.get(state)
        if row is None:
            raise MissingStateTransitions(state)

        for symbol in symbols:
            target = row.get(symbol)
            if target is None:
                raise MissingTransition(state, symbol)
            if target not in states:
                raise InvalidTransitionTarget(state, symbol, target)


@dataclass(frozen=True)
class Automaton:
    """
    Validated DFA. Build with build() or Automaton.from_configuration().

    Direct construction and unpickling run the same checks, in a fixed
    order with the first failure raised: start state, accepting states,
    per-state rows, per-symbol totality, target closure. Fields are then
    frozen; transitions becomes a nested MappingProxyType restricted to
    rows of states.

    Raises:
        InvalidStartState, InvalidAcceptingState, MissingStateTransitions,
        MissingTransition, InvalidTransitionTarget: all subclasses of
        pydfa.core.errors.ValidationError.
    """

    states: frozenset[str]
    alphabet: frozenset[str]
    transitions: Mapping[str, Mapping[str, str]]
    start_state: str
    accepting_states: frozenset[str]

    def __post_init__(self):
        states = frozenset(self.states)
        alphabet = frozenset(self.alphabet)
        accepting_states = frozenset(self.accepting_states)

        _validate(states, alphabet, self.transitions, self.start_state, accepting_states)

        # Own a copy; rows for states outside Q are unreachable and dropped
        transitions = _freeze(
            {
                state: {symbol: self.transitions[state][symbol] for symbol in alphabet}
                for state in states
            }
        )

        object.__setattr__(self, "states", states)
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "transitions", transitions)
        object.__setattr__(self, "accepting_states", accepting_states)

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> Automaton:
        """Validate a Configuration and freeze it into an Automaton."""
        automaton = cls(
            states=configuration.states,
            alphabet=configuration.alphabet,
            transitions=configuration.transitions,
            start_state=configuration.start_state,
            accepting_states=configuration.accepting_states,
        )
        logger.debug(
            "built automaton with %d states and %d symbols",
            len(automaton.states),
            len(automaton.alphabet),
        )
        return automaton

    def run(self, symbols: Iterable[str]) -> bool:
        """Return True iff every symbol is in the alphabet and the run ends in F."""
        current = self.start_state
        for symbol in symbols:
            if symbol not in self.alphabet:
                return False
            current = self.transitions[current][symbol]
        return current in self.accepting_states

    def run_with_trace(self, symbols: Iterable[str]) -> ExecutionTrace:
        """
        Run like run() and record every transition taken.

        An out-of-alphabet symbol stops the run without producing a step;
        the trace then ends in the state held before that symbol.
        """
        consumed = symbols if isinstance(symbols, str) else list(symbols)
        steps: list[ExecutionStep] = []
        current = self.start_state

        for symbol in consumed:
            if symbol not in self.alphabet:
                return self._trace(consumed, steps, current, False)
            target = self.transitions[current][symbol]
            steps.append(ExecutionStep(current, symbol, target))
            current = target

        return self._trace(consumed, steps, current, current in self.accepting_states)

    def __hash__(self) -> int:
        edges = frozenset(
            (state, symbol, target)
            for state, row in self.transitions.items()
            for symbol, target in row.items()
        )
        return hash((self.states, self.alphabet, edges, self.start_state, self.accepting_states))

    def __reduce__(self):
        # mappingproxy does not pickle; ship plain dicts, revalidated on load
        plain = {state: dict(row) for state, row in self.transitions.items()}
        return (
            type(self),
            (self.states, self.alphabet, plain, self.start_state, self.accepting_states),
        )

    def _trace(self, consumed, steps, final_state: str, result: bool) -> ExecutionTrace:
        return ExecutionTrace(
            input=consumed if isinstance(consumed, str) else "".join(map(str, consumed)),
            start_state=self.start_state,
            steps=tuple(steps),
            final_state=final_state,
            result=result,
        )


def build(configuration: Configuration) -> Automaton:
    """Validate configuration and return an immutable Automaton."""
    return Automaton.from_configuration(configuration)


def run(automaton: Automaton, symbols: Iterable[str]) -> bool:
    return automaton.run(symbols)


def run_with_trace(automaton: Automaton, symbols: Iterable[str]) -> ExecutionTrace:
    return automaton.run_with_trace(symbols)
