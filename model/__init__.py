# model/__init__.py

"""
Domain objects for causal ordering: the per-node vector clock, its
four-way causal relation, and the batch orderer that ranks clocks and
groups concurrent ones.
"""

from .vector_clock import CausalOrder, VectorClock, default_node_id
from .ordering import order_clocks

__all__ = [
    "VectorClock",
    "CausalOrder",
    "default_node_id",
    "order_clocks",
]
