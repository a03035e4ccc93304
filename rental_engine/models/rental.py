from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..utils.constants import RentalStatus

_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)


def same_time_kind(a: datetime, b: datetime) -> bool:
    """True when both datetimes are naive or both carry a UTC offset."""
    return (a.tzinfo is None) == (b.tzinfo is None)


def whole_hours_between(start: datetime, end: datetime) -> int:
    """Whole hours from start to end; the sub-hour remainder is dropped."""
    return (end - start) // _HOUR


def whole_minutes_between(start: datetime, end: datetime) -> int:
    return (end - start) // _MINUTE


@dataclass
class Rental:
    """
    One rental transaction. `vehicle_name` is a snapshot taken when the rental
    is created, so history stays readable after the vehicle is renamed or deleted.
    `total_cost` is fixed at creation and never recomputed.
    """
    rental_id: str
    customer_username: str
    vehicle_id: str
    vehicle_name: str
    total_cost: float
    rental_start: Optional[datetime]
    expected_return: Optional[datetime]
    actual_return: Optional[datetime] = None
    give_back_date: Optional[datetime] = None
    status: str = RentalStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == RentalStatus.ACTIVE

    @property
    def duration_hours(self) -> int:
        if self.rental_start is None or self.expected_return is None:
            return 0
        return whole_hours_between(self.rental_start, self.expected_return)

    @property
    def formatted_duration(self) -> str:
        """e.g. "2h 30m"."""
        if self.rental_start is None or self.expected_return is None:
            return "0h 0m"
        minutes = whole_minutes_between(self.rental_start, self.expected_return) % 60
        return f"{self.duration_hours}h {minutes}m"

    def mark_returned(self, when: datetime) -> None:
        self.status = RentalStatus.RETURNED
        self.actual_return = when

    def mark_lost(self, give_back_date: Optional[datetime]) -> None:
        self.status = RentalStatus.LOST
        self.give_back_date = give_back_date
