from __future__ import annotations
import threading

from ..domain.models import SegmentMap
from ..ports.storage import SegmentMapStore


class InMemorySegmentMapStore(SegmentMapStore):
    def __init__(self, initial: SegmentMap | None = None) -> None:
        self._map = initial or SegmentMap()
        self._version = 0
        self._lock = threading.Lock()

    def load(self) -> tuple[SegmentMap, int]:
        with self._lock:
            return self._map, self._version

    def compare_and_swap(self, version: int, new_map: SegmentMap) -> bool:
        with self._lock:
            if version != self._version:
                return False
            self._map = new_map
            self._version += 1
            return True

    @property
    def current(self) -> SegmentMap:
        return self.load()[0]
