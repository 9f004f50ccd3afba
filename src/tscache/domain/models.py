from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidRange
from .value_types import Bound


@dataclass(slots=True, frozen=True)
class Range:
    """[start, end) on an ordered axis; None on either side means unbounded."""
    start: Bound = None
    end: Bound = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidRange()

    @property
    def unbounded_below(self) -> bool: return self.start is None

    @property
    def unbounded_above(self) -> bool: return self.end is None

    @property
    def is_bounded(self) -> bool: return self.start is not None and self.end is not None

    @property
    def is_empty(self) -> bool: return self.is_bounded and self.start == self.end

    def span(self) -> Any:
        if not self.is_bounded:
            raise ValueError(f"span of unbounded range {self}")
        return self.end - self.start

    @classmethod
    def coerce(cls, value: Any) -> "Range":
        """Accept a Range, a {"from","to"} / {"start","end"} mapping, or a 2-tuple."""
        if isinstance(value, Range):
            return value
        if isinstance(value, Mapping):
            if "from" in value or "to" in value:
                return cls(value.get("from"), value.get("to"))
            return cls(value.get("start"), value.get("end"))
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f"cannot interpret {value!r} as a Range")


@dataclass(slots=True, frozen=True)
class SegmentMap:
    segments: tuple[Range, ...] = ()
    segment_history: tuple[Range, ...] = ()

