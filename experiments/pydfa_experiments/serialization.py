"""Automaton serialization module (save/load via pickle)."""

import pickle
from pathlib import Path

from pydfa.core.automaton import Automaton


def save_automaton(automaton: Automaton, path: str) -> None:
    """Save a validated automaton to file using pickle.

    Args:
        automaton: Automaton instance to save
        path: File path where pickle will be written
    """
    with open(path, "wb") as f:
        pickle.dump(automaton, f, protocol=pickle.HIGHEST_PROTOCOL)


def load_automaton(path: str) -> Automaton:
    """Load automaton from pickle file.

    Unpickling rebuilds the automaton through its constructor, so the
    usual validation errors surface here for a corrupted definition.

    Raises:
        FileNotFoundError: If path does not exist
        TypeError: If the file does not hold an Automaton
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"Automaton file not found: {path}")

    with open(path, "rb") as f:
        obj = pickle.load(f)

    if not isinstance(obj, Automaton):
        raise TypeError(f"expected Automaton, got {type(obj)}")
    return obj
