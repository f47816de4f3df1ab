"""
Joins already-encoded symbol sequences into one.

The data symbols of each operand are spliced together. A latch is inserted
only where the set active at the end of the left operand differs from the
Start set of the right one, and the check symbol and Stop code are rebuilt
for the result, which keeps the Start code of the first operand.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..symbols import FNC4_CODES, LATCH_CODES, STOP, Subtype, subtype_of_start
from ..validators.validators import calculate_checksum
from .state import CharsetState

logger = logging.getLogger(__name__)


class _Splicer:
    """Accumulates data symbols while replaying them through the state machine."""

    def __init__(self, first: Sequence[int]):
        self.start = first[0]
        self.state = CharsetState.from_start(self.start)
        self.data: List[int] = []
        self.extend(first[1:-2])

    def extend(self, values: Sequence[int]) -> None:
        for value in values:
            self.data.append(value)
            self.state.feed(value)

    def append(self, right: Sequence[int]) -> None:
        right_subtype = subtype_of_start(right[0])
        if self.state.sticky_high and right_subtype is not Subtype.C:
            # Double FNC4 turns the sticky high bit back off
            fnc4 = FNC4_CODES[self.state.latched]
            self.extend((fnc4, fnc4))
        if self.state.latched is not right_subtype:
            self.extend((LATCH_CODES[right_subtype],))
        self.extend(right[1:-2])

    def result(self) -> Tuple[int, ...]:
        return (self.start, *self.data, calculate_checksum(self.start, self.data), STOP)


def join(sequences: Optional[Sequence[Optional[Sequence[int]]]]) -> Optional[Tuple[int, ...]]:
    """
    Join complete sequences into one.

    None operands and sequences shorter than four symbols are skipped.
    Returns None if nothing is left, or the only remaining sequence unchanged.
    """
    if sequences is None:
        return None
    items = [tuple(s) for s in sequences if s is not None and len(s) > 3]
    if len(items) < 2:
        return items[0] if items else None

    splicer = _Splicer(items[0])
    for item in items[1:]:
        splicer.append(item)
    logger.debug("Joined %d sequences into %d data symbols", len(items), len(splicer.data))
    return splicer.result()


def concat(left: Optional[Sequence[int]], right: Optional[Sequence[int]]) -> Optional[Tuple[int, ...]]:
    """Join two complete sequences. A missing operand yields the other one."""
    if right is None:
        return tuple(left) if left is not None else None
    if left is None:
        return tuple(right)
    return join([left, right])
