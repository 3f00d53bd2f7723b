# tests/conftest.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for VClocks tests.

Puts the project root on ``sys.path`` so the top-level ``model``,
``parser`` and ``utils`` packages import without installation, and
provides the three-node message exchange used across the test modules.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from model.vector_clock import VectorClock  # noqa: E402


@pytest.fixture
def walkthrough():
    """Serialized clock states after a three-node exchange.

    A ticks; B receives A's state and ticks; A receives B's state and
    ticks; C receives the same state of B and ticks.

    Returns:
        dict: Node name to serialized clock
            A: {A:2, B:1}, B: {A:1, B:1}, C: {A:1, B:1, C:1}
    """
    a = VectorClock("A").increment()
    b = VectorClock("B")
    c = VectorClock("C")

    b.merge(a.serialize()).increment()
    message_from_b = b.serialize()

    a.merge(message_from_b).increment()
    c.merge(message_from_b).increment()

    return {"A": a.serialize(), "B": b.serialize(), "C": c.serialize()}


@pytest.fixture
def sample_nodes():
    """Provide standard node set for testing.

    Returns:
        List[str]: Common node identifiers for test scenarios
    """
    return ["A", "B", "C"]
