from __future__ import annotations
from typing import Any, Optional, Protocol, TypeAlias


class Comparable(Protocol):
    """Any totally ordered scalar: int, float, datetime, date, str..."""
    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


Bound: TypeAlias = Optional[Comparable]   # None = unbounded in that direction
