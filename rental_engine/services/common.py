"""Shared service helpers: parsing, normalising and the clock."""

from datetime import datetime
from typing import Callable, Optional

import pytz

from rental_engine.utils.constants import ALLOWED_TYPES, ALL_RENTAL_STATUSES, ALL_VEHICLE_STATUSES

Clock = Callable[[], datetime]


# -------- clock --------
def make_clock(tz_name: Optional[str] = None) -> Clock:
    """
    Return a zero-argument callable giving "now".
    With a zone name the result is timezone-aware in that zone; without one it is naive local time.
    """
    if not tz_name:
        return datetime.now
    tz = pytz.timezone(tz_name)

    def _now() -> datetime:
        return datetime.now(tz)

    return _now


# -------- parsing --------
def parse_datetime(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp coming from a form or JSON body.
    Accepts 'YYYY-MM-DDTHH:MM[:SS]', a space instead of 'T', and 'Z' or '+hh:mm' offsets.
    Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    s = str(value).strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s.replace(" ", "T", 1))
    except ValueError:
        return None


def to_float_safe(value) -> Optional[float]:
    """Safely convert to float; return None if invalid."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def round2(x: float) -> float:
    return round(float(x), 2)


# -------- normalisers --------
def _lc(s):
    """Safe lowercase for case-insensitive compare."""
    return str(s or "").lower()


def canonical_type(value: Optional[str]) -> Optional[str]:
    """Map 'car', ' TRUCK ' etc. to the display spelling; None if not a known type."""
    key = _lc(value).strip()
    for t in ALLOWED_TYPES:
        if t.lower() == key:
            return t
    return None


def canonical_status(value: Optional[str]) -> Optional[str]:
    """Map a case-insensitive status name to its canonical spelling."""
    key = _lc(value).strip()
    for s in ALL_VEHICLE_STATUSES:
        if s.lower() == key:
            return s
    return None


def canonical_rental_status(value: Optional[str]) -> Optional[str]:
    key = _lc(value).strip()
    for s in ALL_RENTAL_STATUSES:
        if s.lower() == key:
            return s
    return None
