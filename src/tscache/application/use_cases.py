from __future__ import annotations
import logging
from typing import Any, Iterable

from ..domain.errors import ConcurrentUpdate
from ..domain.models import Range, SegmentMap
from ..ports.storage import SegmentMapStore
from .planning import get_missing_segments, plan_chunks, record_segment

log = logging.getLogger(__name__)


def plan_fetch(store: SegmentMapStore, requested: Range, *, step: Any = None) -> list[Range]:
    """Chunks of `requested` the store does not cover yet."""
    cache_map, _ = store.load()
    return plan_chunks(get_missing_segments(cache_map, requested), step)


def commit_fetched(
    store: SegmentMapStore,
    fetched: Iterable[Range],
    *,
    max_attempts: int = 8,
) -> SegmentMap:
    """
    Record every fetched range, in order, on top of the store's latest map.
    Lost compare-and-swap races are retried from a fresh snapshot.
    """
    fetched = list(fetched)
    for attempt in range(1, max_attempts + 1):
        cache_map, version = store.load()
        for rng in fetched:
            cache_map = record_segment(cache_map, rng)
        if store.compare_and_swap(version, cache_map):
            return cache_map
        log.debug("cas conflict at version %d (attempt %d/%d)", version, attempt, max_attempts)
    raise ConcurrentUpdate(f"store changed under us {max_attempts} times in a row")
