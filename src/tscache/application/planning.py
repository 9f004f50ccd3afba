from __future__ import annotations
import logging
from typing import Any, Iterable, Mapping

from ..domain.bounds import end_exceeds, extends_below, extends_beyond, is_after, is_before, start_precedes
from ..domain.errors import MissingSegment, UnboundedRequest
from ..domain.models import Range, SegmentMap
from ..domain.ordering import sort_segments_ascending, sort_segments_descending

log = logging.getLogger(__name__)

_EMPTY = SegmentMap()


def get_relevant_segments(cache_map: SegmentMap | None, requested: Range | Mapping | tuple) -> list[Range]:
    """Stored segments strictly overlapping `requested`, in ascending order."""
    requested = Range.coerce(requested)
    cache_map = cache_map or _EMPTY
    return sort_segments_ascending(
        s for s in cache_map.segments
        if end_exceeds(s.end, requested.start) and start_precedes(s.start, requested.end)
    )


def get_missing_segments(cache_map: SegmentMap | None, requested: Range | Mapping | tuple) -> list[Range]:
    """
    Portions of `requested` not covered by `cache_map`, ascending by start.
    `requested` must be bounded on both sides.
    """
    requested = Range.coerce(requested)
    if not requested.is_bounded:
        raise UnboundedRequest()

    cursor: Any = requested.start   # None once a segment runs to +infinity
    missing: list[Range] = []
    for seg in get_relevant_segments(cache_map, requested):
        if cursor is None:
            break
        if seg.start is not None and cursor < seg.start:
            missing.append(Range(cursor, seg.start))
        cursor = seg.end
    if cursor is not None and cursor < requested.end:
        missing.append(Range(cursor, requested.end))

    log.debug("missing %s -> %d gap(s)", requested, len(missing))
    return missing


def record_segment(cache_map: SegmentMap | None, new_segment: Range | Mapping | tuple | None) -> SegmentMap:
    """
    Merge `new_segment` into the map's segments and append it to the history.
    Returns a new map; `cache_map` is left untouched.
    """
    if new_segment is None:
        raise MissingSegment()
    new_segment = Range.coerce(new_segment)   # raises InvalidRange on end < start
    cache_map = cache_map or _EMPTY

    start, end = new_segment.start, new_segment.end
    untouched: list[Range] = []
    merged = 0
    for seg in cache_map.segments:
        if is_after(start, seg.end) or is_before(end, seg.start):
            untouched.append(seg)
            continue
        merged += 1
        if extends_below(seg.start, start):
            start = seg.start
        if extends_beyond(seg.end, end):
            end = seg.end
    untouched.append(Range(start, end))

    log.debug("record %s: absorbed %d segment(s), %d kept", new_segment, merged, len(untouched) - 1)
    return SegmentMap(
        segments=tuple(sort_segments_descending(untouched)),
        segment_history=(*cache_map.segment_history, new_segment),
    )


def replay_history(history: Iterable[Range]) -> SegmentMap:
    out = _EMPTY
    for rng in history:
        out = record_segment(out, rng)
    return out


def plan_chunks(gaps: Iterable[Range], step: Any = None) -> list[Range]:
    """Split bounded gaps into consecutive chunks no wider than `step`."""
    gaps = list(gaps)
    if step is None:
        return gaps
    if not step > type(step)():
        raise ValueError(f"step must be positive, got {step!r}")
    out: list[Range] = []
    for gap in gaps:
        if not gap.is_bounded:
            raise UnboundedRequest("cannot chunk an unbounded range")
        b = gap.start
        if not b < b + step:
            raise ValueError(f"step {step!r} does not advance {b!r}")
        while b < gap.end:
            tb = min(gap.end, b + step)
            out.append(Range(b, tb))
            b = tb
    return out
