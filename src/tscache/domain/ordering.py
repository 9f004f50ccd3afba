# tscache/domain/ordering.py
from __future__ import annotations
from typing import Iterable

from .models import Range


def sort_segments_descending(segments: Iterable[Range]) -> list[Range]:
    """
    Canonical order of a segment set: descending `start`.
    Segments without a start go last, in their input order.
    """
    segs = list(segments)
    bounded = sorted((s for s in segs if s.start is not None), key=lambda s: s.start, reverse=True)
    return bounded + [s for s in segs if s.start is None]


def sort_segments_ascending(segments: Iterable[Range]) -> list[Range]:
    # reversal of the canonical order, not an independent comparator
    return sort_segments_descending(segments)[::-1]
