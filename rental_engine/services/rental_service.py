"""Rental ledger: rent, return, report-lost and the revenue figures."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from rental_engine.models.events import ChangeNotifier, Listener
from rental_engine.models.rental import Rental, same_time_kind, whole_hours_between
from rental_engine.services.common import Clock, make_clock
from rental_engine.services.vehicle_service import VehicleRegistry
from rental_engine.utils.constants import (
    FIRST_RENTAL_NUMBER,
    MAX_ACTIVE_RENTALS,
    RENTAL_ID_FMT,
    RentalStatus,
    VehicleStatus,
)

logger = logging.getLogger(__name__)


def hourly_cost(price_per_day: float, hours: int) -> float:
    """Whole-hour billing: price_per_day / 24 for every full hour."""
    return price_per_day / 24.0 * hours


class RentalLedger:
    """
    Owns every Rental record and flips vehicle status through the registry.

    State machine per rental: Active -> Returned, Active -> Lost. Both end states
    are terminal; return/report-lost only match Active rentals.
    """

    def __init__(self, vehicles: VehicleRegistry, clock: Optional[Clock] = None,
                 max_active_per_customer: int = MAX_ACTIVE_RENTALS):
        self.vehicles = vehicles
        self.clock = clock or make_clock()
        self.max_active_per_customer = max_active_per_customer
        self._rentals: List[Rental] = []
        self._next_number = FIRST_RENTAL_NUMBER
        self._changes = ChangeNotifier("rentals")

    # --------------- Subscriptions ---------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._changes.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> bool:
        return self._changes.unsubscribe(listener)

    # --------------- Validation / pricing ---------------
    def check_rental(self, customer_username: str, vehicle_id: str,
                     start: Optional[datetime], expected_return: Optional[datetime]) -> Tuple[bool, str]:
        """
        Run the rent rules in order and report the first failure.

        Returns:
            (ok: bool, message: str)
        """
        vehicle = self.vehicles.get_by_id(vehicle_id)
        if vehicle is None:
            return False, "Invalid vehicle"
        if vehicle.status != VehicleStatus.AVAILABLE:
            return False, f"Vehicle is {vehicle.status}"
        if start is None or expected_return is None:
            return False, "Start and return date/time are required"
        if not same_time_kind(start, expected_return):
            return False, "Start and return must both carry a UTC offset, or neither"
        if expected_return <= start:
            return False, "Return date must be after start date"
        if whole_hours_between(start, expected_return) <= 0:
            return False, "Rental must last at least one hour"

        active = self.list_active_by_customer(customer_username)
        if any(r.vehicle_id == vehicle_id for r in active):
            return False, "You already have this vehicle rented"
        if self.get_active_by_vehicle(vehicle_id) is not None:
            return False, "Vehicle already has an active rental"
        if len(active) >= self.max_active_per_customer:
            return False, f"Maximum {self.max_active_per_customer} active rentals allowed"
        return True, "OK"

    def quote(self, vehicle_id: str, start: Optional[datetime],
              expected_return: Optional[datetime]) -> Optional[float]:
        """
        Cost preview shown before the customer confirms. Uses the same whole-hour
        formula as rent_vehicle, so the preview always equals the charged total.
        """
        vehicle = self.vehicles.get_by_id(vehicle_id)
        if vehicle is None or start is None or expected_return is None:
            return None
        if not same_time_kind(start, expected_return):
            return None
        hours = whole_hours_between(start, expected_return)
        if hours <= 0:
            return None
        return hourly_cost(vehicle.price_per_day, hours)

    # --------------- Commands ---------------
    def rent_vehicle(self, customer_username: str, vehicle_id: str,
                     start: Optional[datetime], expected_return: Optional[datetime]) -> Optional[Rental]:
        """
        Create an Active rental and mark the vehicle Rented.
        Returns None, with nothing changed, when any rule in check_rental fails.
        """
        ok, msg = self.check_rental(customer_username, vehicle_id, start, expected_return)
        if not ok:
            logger.info("Rent rejected (%s, %s): %s", customer_username, vehicle_id, msg)
            return None

        vehicle = self.vehicles.get_by_id(vehicle_id)
        hours = whole_hours_between(start, expected_return)
        rental = Rental(
            rental_id=RENTAL_ID_FMT.format(self._next_number),
            customer_username=customer_username,
            vehicle_id=vehicle_id,
            vehicle_name=vehicle.name,
            total_cost=hourly_cost(vehicle.price_per_day, hours),
            rental_start=start,
            expected_return=expected_return,
        )
        self._next_number += 1

        # status flip and append happen back to back; single-threaded use only
        self.vehicles.set_status(vehicle_id, VehicleStatus.RENTED)
        self._rentals.append(rental)
        logger.info("Rental %s created: %s -> %s, %dh, %.2f",
                    rental.rental_id, customer_username, vehicle_id, hours, rental.total_cost)
        self._changes.notify()
        return rental

    def return_vehicle(self, rental_id: str) -> bool:
        """Close an Active rental and make the vehicle Available again."""
        rental = self._find_active(rental_id)
        if rental is None:
            return False
        rental.mark_returned(self.clock())
        self.vehicles.set_status(rental.vehicle_id, VehicleStatus.AVAILABLE)
        logger.info("Rental %s returned", rental_id)
        self._changes.notify()
        return True

    def report_as_lost(self, rental_id: str, give_back_date: Optional[datetime]) -> bool:
        """Mark an Active rental Lost, remember the promised give-back date, and flag the vehicle Lost."""
        rental = self._find_active(rental_id)
        if rental is None:
            return False
        rental.mark_lost(give_back_date)
        self.vehicles.set_status(rental.vehicle_id, VehicleStatus.LOST)
        logger.info("Rental %s reported lost, give back by %s", rental_id, give_back_date)
        self._changes.notify()
        return True

    def reset(self):
        """
        Empty the ledger and restart ids at R1001.
        Vehicle statuses are left alone; reset the registry too for a clean slate.
        """
        self._rentals.clear()
        self._next_number = FIRST_RENTAL_NUMBER
        logger.info("Rental ledger reset")
        self._changes.notify()

    # --------------- Queries ---------------
    def _find_active(self, rental_id: str) -> Optional[Rental]:
        for rental in self._rentals:
            if rental.rental_id == rental_id and rental.is_active:
                return rental
        return None

    def get_by_id(self, rental_id: str) -> Optional[Rental]:
        for rental in self._rentals:
            if rental.rental_id == rental_id:
                return rental
        return None

    def list_all(self) -> List[Rental]:
        return list(self._rentals)

    def list_active(self) -> List[Rental]:
        return [r for r in self._rentals if r.is_active]

    def list_by_status(self, status: str) -> List[Rental]:
        return [r for r in self._rentals if r.status == status]

    def list_by_customer(self, username: str) -> List[Rental]:
        return [r for r in self._rentals if r.customer_username == username]

    def get_active_by_vehicle(self, vehicle_id: str) -> Optional[Rental]:
        for rental in self._rentals:
            if rental.vehicle_id == vehicle_id and rental.is_active:
                return rental
        return None

    def list_active_by_customer(self, username: str) -> List[Rental]:
        return [r for r in self._rentals if r.customer_username == username and r.is_active]

    def total_revenue(self) -> float:
        """Sum of total_cost over Returned rentals; Active and Lost are excluded."""
        return sum(r.total_cost for r in self._rentals if r.status == RentalStatus.RETURNED)

    def total_count(self) -> int:
        return len(self._rentals)
