"""Tests for Range / SegmentMap value types and bound helpers."""
from datetime import datetime, timedelta

import pytest

from tscache.domain.bounds import end_exceeds, extends_below, extends_beyond, is_after, is_before, start_precedes
from tscache.domain.errors import InvalidRange, SegmentError
from tscache.domain.models import Range, SegmentMap


def test_range_defaults_to_whole_domain():
    r = Range()
    assert r.unbounded_below and r.unbounded_above
    assert not r.is_bounded


def test_range_rejects_end_before_start():
    with pytest.raises(InvalidRange, match="end precedes start"):
        Range(20, 10)


def test_invalid_range_is_a_value_error():
    assert issubclass(InvalidRange, SegmentError)
    assert issubclass(InvalidRange, ValueError)


def test_zero_is_a_real_bound():
    r = Range(0, 5)
    assert r.is_bounded
    assert not r.unbounded_below


def test_zero_width_range():
    r = Range(5, 5)
    assert r.is_empty
    assert r.span() == 0


def test_span_of_datetimes():
    t0 = datetime(2020, 1, 1)
    assert Range(t0, t0 + timedelta(hours=3)).span() == timedelta(hours=3)


def test_span_of_unbounded_raises():
    with pytest.raises(ValueError):
        Range(None, 5).span()


def test_range_is_frozen():
    r = Range(1, 2)
    with pytest.raises(AttributeError):
        r.start = 0  # type: ignore[misc]


def test_ranges_compare_by_value():
    assert Range(1, 2) == Range(1, 2)
    assert Range(1, 2) != Range(1, 3)
    assert Range(None, 2) != Range(0, 2)


def test_coerce_accepts_mappings_and_tuples():
    assert Range.coerce({"from": 1, "to": 2}) == Range(1, 2)
    assert Range.coerce({"to": 2}) == Range(None, 2)
    assert Range.coerce({"start": 3}) == Range(3, None)
    assert Range.coerce({}) == Range()
    assert Range.coerce((4, 5)) == Range(4, 5)
    r = Range(7, 8)
    assert Range.coerce(r) is r


def test_coerce_validates():
    with pytest.raises(InvalidRange):
        Range.coerce({"from": 20, "to": 10})


def test_coerce_rejects_garbage():
    with pytest.raises(TypeError):
        Range.coerce(42)


def test_empty_segment_map():
    m = SegmentMap()
    assert m.segments == ()
    assert m.segment_history == ()


def test_is_after_and_is_before_treat_none_as_infinite():
    assert is_after(5, 4)
    assert not is_after(4, 4)
    assert not is_after(None, 4)
    assert not is_after(5, None)
    assert is_before(3, 4)
    assert not is_before(4, 4)
    assert not is_before(None, 4)
    assert not is_before(3, None)


def test_extends_helpers():
    assert extends_below(1, 2)
    assert extends_below(None, 2)
    assert not extends_below(None, None)
    assert not extends_below(2, None)
    assert not extends_below(2, 2)
    assert extends_beyond(3, 2)
    assert extends_beyond(None, 2)
    assert not extends_beyond(None, None)
    assert not extends_beyond(3, None)


def test_relevance_helpers():
    assert end_exceeds(None, 0)
    assert end_exceeds(1, 0)
    assert not end_exceeds(0, 0)
    assert start_precedes(None, 0)
    assert start_precedes(-1, 0)
    assert not start_precedes(0, 0)
