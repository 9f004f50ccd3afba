# tscache/domain/errors.py
from __future__ import annotations


class SegmentError(ValueError):
    """Base class for caller-triggered validation failures."""


class MissingSegment(SegmentError):
    def __init__(self, msg: str = "a segment to record is required") -> None:
        super().__init__(msg)


class InvalidRange(SegmentError):
    def __init__(self, msg: str = "invalid segment: end precedes start") -> None:
        super().__init__(msg)


class UnboundedRequest(SegmentError):
    def __init__(self, msg: str = "requested range must have both a start and an end") -> None:
        super().__init__(msg)


class ConcurrentUpdate(RuntimeError):
    """Raised when a store keeps rejecting compare-and-swap writes."""
