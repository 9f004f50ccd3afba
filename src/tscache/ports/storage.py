# tscache/ports/storage.py
from __future__ import annotations

from typing import Protocol
from ..domain.models import SegmentMap


class SegmentMapStore(Protocol):
    """Port for wherever a segment map lives between runs (file, DB, memory...)."""

    def load(self) -> tuple[SegmentMap, int]:
        """Return the current map and its version."""

    def compare_and_swap(self, version: int, new_map: SegmentMap) -> bool:
        """Replace the map iff it is still at `version`. Return True on success."""
