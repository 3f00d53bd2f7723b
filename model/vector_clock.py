# model/vector_clock.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Mutable per-node vector clock with merge, serialization and causal comparison

"""
Mutable Mattern–Fidge vector clock owned by a single node.

Supports:
  •  Local ticks (increment) for events and outgoing messages.
  •  Point-wise maximum merge for incoming messages.
  •  JSON wire form: {"id": ..., "clocks": {...}}.
  •  Four-way causal comparison (before / after / equal / independent).
"""

from __future__ import annotations

import json
import socket
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Set

from parser import ParseError, format_clock
from utils.logger import get_logger


def default_node_id() -> str:
    """Return the local machine's network name."""
    return socket.gethostname()


class CausalOrder(Enum):
    """Causal relationship of one clock to another."""

    BEFORE = -1
    EQUAL = 0
    AFTER = 1
    INDEPENDENT = None


class VectorClock:
    """Vector clock for a single node.

    Attributes:
        id: Identifier of the owning node
        clocks: Mapping of node identifier to logical counter; a missing
            entry counts as 0
    """

    __slots__ = ("id", "clocks")

    def __init__(
        self,
        source: object = None,
        id_provider: Optional[Callable[[], str]] = None,
    ) -> None:
        """Build a clock from an identifier, a clock, or a serialized form.

        Args:
            source: None (use ``id_provider``), a node identifier, another
                VectorClock (copied), a JSON string starting with ``{``, or
                an already-decoded mapping with ``id`` and ``clocks`` keys
            id_provider: Callable returning the identifier used when no
                source is given; defaults to the machine's hostname

        Raises:
            ParseError: If the serialized form is malformed
        """
        if isinstance(source, VectorClock):
            self.id = source.id
            self.clocks = dict(source.clocks)
        elif source is None or source == "":
            self.id = (id_provider or default_node_id)()
            self.clocks = {}
        elif isinstance(source, str) and not source.lstrip().startswith("{"):
            self.id = source
            self.clocks = {}
        elif isinstance(source, str):
            self.id, self.clocks = _load_wire(_decode_json(source))
        elif isinstance(source, Mapping):
            self.id, self.clocks = _load_wire(source)
        else:
            raise ParseError(
                f"Cannot build a vector clock from {type(source).__name__}"
            )

    @classmethod
    def coerce(cls, other: object) -> VectorClock:
        """Return ``other`` unchanged if it is a clock, otherwise construct one."""
        if isinstance(other, cls):
            return other
        return cls(other)

    # Mutation
    def increment(self) -> VectorClock:
        """Tick this node's own counter and return self (for chaining)."""
        self.clocks[self.id] = self.clocks.get(self.id, 0) + 1
        return self

    def merge(self, other: object) -> VectorClock:
        """Fold another clock into this one by point-wise maximum.

        The receiver's own counter is not ticked; a node handling a message
        calls ``merge`` and then ``increment``.

        Args:
            other: VectorClock or serialized form

        Returns:
            self
        """
        other = self.coerce(other)
        for node in self._node_ids(other):
            self.clocks[node] = max(self.clocks.get(node, 0), other.clocks.get(node, 0))
        get_logger().clock_merged(self.id, other.id, self.clocks)
        return self

    def copy(self) -> VectorClock:
        return VectorClock(self)

    # Serialization
    def to_dict(self) -> Dict[str, object]:
        """Decoded wire form with a fresh counters mapping."""
        return {"id": self.id, "clocks": dict(self.clocks)}

    def serialize(self) -> str:
        """JSON wire form accepted back by the constructor."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))

    # Comparison
    def equal(self, other: object) -> bool:
        """True if every counter matches, treating missing entries as 0."""
        other = self.coerce(other)
        return all(
            self.clocks.get(node, 0) == other.clocks.get(node, 0)
            for node in self._node_ids(other)
        )

    def not_equal(self, other: object) -> bool:
        return not self.equal(other)

    def causal_order(self, other: object) -> CausalOrder:
        """Classify how this clock relates causally to ``other``.

        Looks only at the sign of each per-node difference: if every nonzero
        difference is negative this clock happened before ``other``, if every
        one is positive it happened after, and mixed signs mean the two are
        independent.
        """
        other = self.coerce(other)
        signs = set()
        for node in self._node_ids(other):
            diff = self.clocks.get(node, 0) - other.clocks.get(node, 0)
            if diff:
                signs.add(1 if diff > 0 else -1)
            if len(signs) > 1:
                return CausalOrder.INDEPENDENT

        if not signs:
            return CausalOrder.EQUAL
        return CausalOrder.AFTER if 1 in signs else CausalOrder.BEFORE

    def compare(self, other: object) -> int:
        """Scalar comparator for sorting.

        Returns -1 if self happened before other, 1 if after, and 0 when the
        clocks are equal or independent. Use ``is_independent`` to tell the
        two zero cases apart.
        """
        order = self.causal_order(other)
        if order is CausalOrder.INDEPENDENT:
            return 0
        return order.value

    def is_independent(self, other: object) -> bool:
        """True if neither clock causally precedes the other."""
        return self.causal_order(other) is CausalOrder.INDEPENDENT

    def _node_ids(self, other: VectorClock) -> Set[str]:
        return set(self.clocks) | set(other.clocks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.not_equal(other)

    # Mutable: equal clocks may diverge after the next tick
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        try:
            return f"VectorClock({format_clock(self)})"
        except ValueError:
            return f"VectorClock({self.serialize()})"


def _decode_json(text: str) -> object:
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"Invalid JSON in serialized clock: {exc}") from exc


def _load_wire(data: object):
    """Validate a decoded wire form and return ``(id, counters)``."""
    if not isinstance(data, Mapping) or set(data) != {"id", "clocks"}:
        raise ParseError(
            "Serialized clock must be an object with exactly 'id' and 'clocks'"
        )

    node_id = data["id"]
    if not isinstance(node_id, str) or not node_id:
        raise ParseError(f"Clock id must be a non-empty string, got {node_id!r}")

    counters = data["clocks"]
    if not isinstance(counters, Mapping):
        raise ParseError(f"Clock counters must be an object, got {counters!r}")

    clocks = {}
    for node, count in counters.items():
        if not isinstance(node, str):
            raise ParseError(f"Node identifier must be a string, got {node!r}")
        # bool is an int subclass but never a counter
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ParseError(
                f"Counter for node '{node}' must be a non-negative integer, got {count!r}"
            )
        clocks[node] = count

    return node_id, clocks
