"""pydfa: validate and run deterministic finite automata."""

import logging

from pydfa.core.automaton import Automaton, build, run, run_with_trace
from pydfa.core.errors import (
    InvalidAcceptingState,
    InvalidStartState,
    InvalidTransitionTarget,
    MissingStateTransitions,
    MissingTransition,
    ValidationError,
)
from pydfa.core.types import Configuration, ExecutionStep, ExecutionTrace

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Automaton",
    "Configuration",
    "ExecutionStep",
    "ExecutionTrace",
    "InvalidAcceptingState",
    "InvalidStartState",
    "InvalidTransitionTarget",
    "MissingStateTransitions",
    "MissingTransition",
    "ValidationError",
    "build",
    "run",
    "run_with_trace",
]
