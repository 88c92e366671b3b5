"""
Pytest configuration and fixtures for pydfa tests.

Provides ready-made configurations and built automata for unit and
integration tests.
"""

import pytest


@pytest.fixture
def parity_config():
    """
    Mod-2 binary counter: accepts strings ending in 0.

    Q={q0,q1}, Σ={0,1}, start=q0, F={q1}.
    """
    from pydfa.tasks.library import make_parity_configuration
    return make_parity_configuration()


@pytest.fixture
def substring_config():
    """Accepts strings over {a, b} containing "ab"."""
    from pydfa.tasks.library import make_substring_configuration
    return make_substring_configuration()


@pytest.fixture
def parity_dfa(parity_config):
    from pydfa.core.automaton import build
    return build(parity_config)


@pytest.fixture
def substring_dfa(substring_config):
    from pydfa.core.automaton import build
    return build(substring_config)
