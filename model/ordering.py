# model/ordering.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Batch causal ordering of vector clocks with grouping of concurrent clocks

"""Sort a collection of clocks by causal order, latest first.

Clocks that tie under the scalar comparator are either equal or
independent. A run of tied clocks containing at least one independent pair
is returned as a single group (a list); runs of merely equal clocks are
returned as separate entries, since repeated observations of one state are
not concurrency.

Example:
    >>> a = VectorClock({"id": "A", "clocks": {"A": 2, "B": 1}})
    >>> b = VectorClock({"id": "B", "clocks": {"A": 1, "B": 1}})
    >>> c = VectorClock({"id": "C", "clocks": {"A": 1, "B": 1, "C": 1}})
    >>> order_clocks(a, b, c)
    [[VectorClock(A[A:2, B:1]), VectorClock(C[A:1, B:1, C:1])], VectorClock(B[A:1, B:1])]
"""

from __future__ import annotations

from itertools import combinations
from typing import List, Sequence, Union

from .vector_clock import VectorClock
from utils.logger import get_logger

OrderedEntry = Union[VectorClock, List[VectorClock]]


def order_clocks(*clocks: object) -> List[OrderedEntry]:
    """Order clocks causally, grouping independent clocks together.

    Args:
        *clocks: VectorClock values or serialized forms, in any mixture

    Returns:
        Entries latest first; each entry is a clock or a list of tied,
        mutually concurrent clocks

    Raises:
        ParseError: If a serialized form is malformed
    """
    logger = get_logger()

    vcs = [VectorClock.coerce(c) for c in clocks]
    # A clock that happened before another has a strictly smaller total, so
    # sorting by total descending never puts an earlier clock first.
    vcs.sort(key=_total, reverse=True)

    ordered: List[OrderedEntry] = []
    i = 0
    while i < len(vcs):
        block = _tie_block(vcs, i)
        independent = _any_independent(block)
        logger.tie_block([repr(vc) for vc in block], independent)

        if independent:
            ordered.append(block)
        else:
            ordered.extend(block)
        i += len(block)

    logger.clocks_ordered(len(vcs), len(ordered))
    return ordered


def _total(vc: VectorClock) -> int:
    return sum(vc.clocks.values())


def _tie_block(vcs: Sequence[VectorClock], start: int) -> List[VectorClock]:
    """Clock at ``start`` plus every immediately following clock tied with it."""
    head = vcs[start]
    block = [head]
    for vc in vcs[start + 1 :]:
        if head.compare(vc) != 0:
            break
        block.append(vc)
    return block


def _any_independent(block: Sequence[VectorClock]) -> bool:
    return any(a.is_independent(b) for a, b in combinations(block, 2))
