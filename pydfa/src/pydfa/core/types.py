"""
Core types for pydfa: Configuration, ExecutionStep, ExecutionTrace.

Pure data containers. Configuration performs no validation on construction;
that is the job of the automaton builder.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


_CONFIG_KEYS = ("states", "alphabet", "transitions", "start_state", "accepting_states")


@dataclass
class Configuration:
    """
    Declarative DFA definition (Q, Σ, δ, q₀, F) as supplied by a caller.

    transitions maps state -> symbol -> target and may be partial; the
    builder checks it is total over states x alphabet.
    """

    states: Sequence[str]
    alphabet: Sequence[str]
    transitions: Mapping[str, Mapping[str, str]]
    start_state: str
    accepting_states: Sequence[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """
        Build a Configuration from a plain mapping.

        Raises:
            KeyError: If any of the five components is missing.
        """
        missing = [key for key in _CONFIG_KEYS if key not in data]
        if missing:
            raise KeyError(f"configuration missing keys: {missing}")

        return cls(
            states=list(data["states"]),
            alphabet=list(data["alphabet"]),
            transitions={
                state: dict(row) for state, row in data["transitions"].items()
            },
            start_state=data["start_state"],
            accepting_states=list(data["accepting_states"]),
        )

    def to_dict(self) -> dict:
        return {
            "states": list(self.states),
            "alphabet": list(self.alphabet),
            "transitions": {
                state: dict(row) for state, row in self.transitions.items()
            },
            "start_state": self.start_state,
            "accepting_states": list(self.accepting_states),
        }


@dataclass(frozen=True)
class ExecutionStep:
    """One transition taken during a run."""

    from_state: str
    symbol: str
    to_state: str


@dataclass(frozen=True)
class ExecutionTrace:
    """
    Record of one traced run.

    steps holds only the transitions actually taken, in traversal order.
    On an out-of-alphabet symbol the run stops: final_state is the state
    held at that point and result is False.
    """

    input: str
    start_state: str
    steps: tuple
    final_state: str
    result: bool

    def __post_init__(self):
        # Accept any sequence of steps but store a tuple
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def accepted(self) -> bool:
        return self.result

    @property
    def path(self) -> list[str]:
        """States visited, starting with the start state."""
        return [self.start_state] + [step.to_state for step in self.steps]

    def to_dict(self) -> dict:
        return {
            "input": self.input,
            "start_state": self.start_state,
            "steps": [
                {
                    "from_state": step.from_state,
                    "symbol": step.symbol,
                    "to_state": step.to_state,
                }
                for step in self.steps
            ],
            "final_state": self.final_state,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExecutionTrace":
        return cls(
            input=data["input"],
            start_state=data["start_state"],
            steps=tuple(ExecutionStep(**step) for step in data["steps"]),
            final_state=data["final_state"],
            result=bool(data["result"]),
        )
