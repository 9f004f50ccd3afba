from __future__ import annotations
import re
from datetime import date, datetime, timedelta
from typing import Any

from ..domain.models import Range

RANGE_SEP = ".."

_SHORT_DURATION = re.compile(r"(\d+(?:\.\d+)?)([wdhms])")
_ISO_DURATION = re.compile(
    r"P(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?"
)
_UNITS = {"w": "weeks", "d": "days", "h": "hours", "m": "minutes", "s": "seconds"}


def parse_point(text: str) -> Any:
    """'' -> None (unbounded), else int, float, ISO date or ISO datetime."""
    s = text.strip()
    if not s:
        return None
    for conv in (int, float):
        try:
            return conv(s)
        except ValueError:
            pass
    if "T" in s or " " in s or ":" in s:
        return datetime.fromisoformat(s)
    return date.fromisoformat(s)


def parse_range(text: str) -> Range:
    if RANGE_SEP not in text:
        raise ValueError(f"expected START{RANGE_SEP}END, got {text!r}")
    lo, hi = text.split(RANGE_SEP, 1)
    return Range(parse_point(lo), parse_point(hi))


def format_point(p: Any, unbounded: str = "∞") -> str:
    if p is None:
        return unbounded
    return p.isoformat() if isinstance(p, (date, datetime)) else str(p)


def format_range(r: Range) -> str:
    return f"[{format_point(r.start, '-∞')}, {format_point(r.end)})"


def parse_duration(text: str) -> timedelta:
    """'7d', '1d12h', '90m' or ISO-8601 'P1DT2H' -> timedelta."""
    s = text.strip()
    m = _ISO_DURATION.fullmatch(s.upper())
    if m and s.upper() not in ("P", "PT"):
        return timedelta(**{k: float(v) for k, v in m.groupdict().items() if v})
    parts = _SHORT_DURATION.findall(s.lower())
    if not parts or "".join(n + u for n, u in parts) != s.lower():
        raise ValueError(f"expected a duration like 7d, 12h or PT2H, got {text!r}")
    out = timedelta()
    for n, u in parts:
        out += timedelta(**{_UNITS[u]: float(n)})
    return out


def parse_step(text: str, like: Any) -> Any:
    """Step in the units of `like`: a duration for date/datetime bounds, a number otherwise."""
    if isinstance(like, date):
        return parse_duration(text)
    step = parse_point(text)
    if not isinstance(step, (int, float)):
        raise ValueError(f"expected a numeric step, got {text!r}")
    return step
