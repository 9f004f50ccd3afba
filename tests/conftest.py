"""Shared helpers for tscache tests."""
from __future__ import annotations

from datetime import date

import pytest

from tscache.domain.models import Range, SegmentMap


def d(text: str) -> date:
    return date.fromisoformat(text)


def make_map(*segments: Range) -> SegmentMap:
    """A map whose history is exactly its (already coalesced) segments."""
    return SegmentMap(segments=tuple(segments), segment_history=tuple(segments))


@pytest.fixture
def one_segment_map() -> SegmentMap:
    return make_map(Range(d("2020-01-01"), d("2020-01-10")))


@pytest.fixture
def two_segment_map() -> SegmentMap:
    # canonical order: newest start first
    return make_map(
        Range(d("2020-02-01"), d("2020-02-10")),
        Range(d("2020-01-01"), d("2020-01-10")),
    )
