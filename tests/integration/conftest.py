"""
Shared fixtures for integration tests.
"""

import pytest


@pytest.fixture
def gate_inputs():
    """The four input combinations of a two-input logic gate."""
    return [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]


@pytest.fixture
def truth_tables():
    """Expected output of each logic gate, in the order of 'gate_inputs'."""
    return {
        'AND' : [0.0, 0.0, 0.0, 1.0],
        'OR'  : [0.0, 1.0, 1.0, 1.0],
        'XOR' : [0.0, 1.0, 1.0, 0.0],
        'XNOR': [1.0, 0.0, 0.0, 1.0],
    }
