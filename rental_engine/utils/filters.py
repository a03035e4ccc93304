"""Display formatting for timestamps, money and rental rows."""
from datetime import datetime
from typing import Optional

import pytz

from .constants import DATETIME_FMT


def fmt_datetime(value: Optional[datetime], tz_name: Optional[str] = None) -> str:
    """
    Format a timestamp as 'YYYY-MM-DD HH:MM'.
    Aware values are converted into `tz_name` first; naive values are shown as-is
    (they are already wall-clock time). None renders as '-', like an empty table cell.
    """
    if value is None:
        return "-"
    if value.tzinfo is not None and tz_name:
        try:
            value = value.astimezone(pytz.timezone(tz_name))
        except pytz.UnknownTimeZoneError:
            pass
    return value.strftime(DATETIME_FMT)


def fmt_money(value) -> str:
    return f"{float(value or 0):.2f}"


def vehicle_row(vehicle) -> dict:
    row = vehicle.to_dict()
    row["price_per_day"] = fmt_money(vehicle.price_per_day)
    return row


def rental_row(rental, tz_name: Optional[str] = None) -> dict:
    """One row of the rentals table as the dashboards show it."""
    return {
        "rental_id": rental.rental_id,
        "customer_username": rental.customer_username,
        "vehicle_id": rental.vehicle_id,
        "vehicle_name": rental.vehicle_name,
        "duration": rental.formatted_duration,
        "duration_hours": rental.duration_hours,
        "total_cost": fmt_money(rental.total_cost),
        "rental_start": fmt_datetime(rental.rental_start, tz_name),
        "expected_return": fmt_datetime(rental.expected_return, tz_name),
        "actual_return": fmt_datetime(rental.actual_return, tz_name),
        "give_back_date": fmt_datetime(rental.give_back_date, tz_name),
        "status": rental.status,
    }
