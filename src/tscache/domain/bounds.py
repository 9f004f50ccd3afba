# tscache/domain/bounds.py
"""
Comparisons between optional bounds.

A missing lower bound (`start is None`) means -infinity, a missing upper
bound (`end is None`) means +infinity. Truthiness is never used: 0 and
other falsy scalars are real bounds.
"""
from __future__ import annotations

from .value_types import Bound


def is_after(start: Bound, end: Bound) -> bool:
    """True if lower bound `start` lies strictly past upper bound `end`."""
    if start is None or end is None:
        return False
    return start > end


def is_before(end: Bound, start: Bound) -> bool:
    """True if upper bound `end` lies strictly before lower bound `start`."""
    if end is None or start is None:
        return False
    return end < start


def extends_below(candidate: Bound, current: Bound) -> bool:
    """True if lower bound `candidate` reaches further down than `current`."""
    if current is None:
        return False
    return candidate is None or candidate < current


def extends_beyond(candidate: Bound, current: Bound) -> bool:
    """True if upper bound `candidate` reaches further up than `current`."""
    if current is None:
        return False
    return candidate is None or candidate > current


def end_exceeds(end: Bound, point: Bound) -> bool:
    """Upper bound `end` strictly greater than a concrete `point`."""
    return end is None or end > point


def start_precedes(start: Bound, point: Bound) -> bool:
    """Lower bound `start` strictly less than a concrete `point`."""
    return start is None or start < point
