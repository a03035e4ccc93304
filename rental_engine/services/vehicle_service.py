from __future__ import annotations

import logging
from typing import Callable, List, Optional

from rental_engine.models.events import ChangeNotifier, Listener
from rental_engine.models.vehicle import Vehicle
from rental_engine.seeds import DEFAULT_FLEET, NEXT_VEHICLE_NUMBER
from rental_engine.services.common import _lc
from rental_engine.utils.constants import VehicleStatus, VEHICLE_ID_FMT

logger = logging.getLogger(__name__)


class VehicleRegistry:
    """
    The fleet: create, update, delete and query vehicles.
    Every mutation notifies subscribers after it has been applied.
    """

    def __init__(self):
        self._vehicles: List[Vehicle] = []
        self._next_number = 1
        self._changes = ChangeNotifier("vehicles")
        self._seed()

    def _seed(self):
        for vid, name, vtype, price, status in DEFAULT_FLEET:
            self._vehicles.append(Vehicle(vid, name, vtype, float(price), status))
        self._next_number = NEXT_VEHICLE_NUMBER

    # --------------- Subscriptions ---------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._changes.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> bool:
        return self._changes.unsubscribe(listener)

    # --------------- Commands ---------------
    def add_vehicle(self, name: str, type: str, price_per_day: float,
                    status: str = VehicleStatus.AVAILABLE) -> Vehicle:
        """Create a vehicle with the next sequential id (V021, V022, ...) and return it."""
        vid = VEHICLE_ID_FMT.format(self._next_number)
        self._next_number += 1
        vehicle = Vehicle(vid, name, type, float(price_per_day), status)
        self._vehicles.append(vehicle)
        logger.info("Vehicle added: %s", vehicle)
        self._changes.notify()
        return vehicle

    def update_vehicle(self, vehicle_id: str, name: str, type: str, price_per_day: float,
                       status: Optional[str] = None) -> bool:
        """
        Overwrite name, type and price. `status=None` keeps the current status.
        Returns False if the id is unknown.
        """
        vehicle = self.get_by_id(vehicle_id)
        if vehicle is None:
            return False
        vehicle.name = name
        vehicle.type = type
        vehicle.price_per_day = float(price_per_day)
        if status is not None:
            vehicle.status = status
        logger.info("Vehicle updated: %s [%s]", vehicle, vehicle.status)
        self._changes.notify()
        return True

    def delete_vehicle(self, vehicle_id: str) -> bool:
        """
        Remove a vehicle. Refused (False) when the id is unknown or the vehicle is
        currently Rented; historical rentals keep their own name snapshot.
        """
        vehicle = self.get_by_id(vehicle_id)
        if vehicle is None:
            return False
        if vehicle.status == VehicleStatus.RENTED:
            logger.info("Delete refused, %s is rented", vehicle_id)
            return False
        self._vehicles.remove(vehicle)
        logger.info("Vehicle deleted: %s", vehicle_id)
        self._changes.notify()
        return True

    def set_status(self, vehicle_id: str, status: str) -> bool:
        vehicle = self.get_by_id(vehicle_id)
        if vehicle is None:
            return False
        vehicle.status = status
        logger.debug("Vehicle %s -> %s", vehicle_id, status)
        self._changes.notify()
        return True

    def reset(self):
        """Restore the 20-vehicle starter fleet; new ids continue from V021."""
        self._vehicles.clear()
        self._seed()
        logger.info("Fleet reset to %d seeded vehicles", len(self._vehicles))
        self._changes.notify()

    # --------------- Queries ---------------
    def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self._vehicles:
            if vehicle.vehicle_id == vehicle_id:
                return vehicle
        return None

    def list_all(self) -> List[Vehicle]:
        return list(self._vehicles)

    def list_available(self) -> List[Vehicle]:
        """Available or Under Maintenance."""
        return [v for v in self._vehicles if v.counts_as_available]

    def list_by_type(self, type: str) -> List[Vehicle]:
        return [v for v in self._vehicles if v.type == type]

    def search_by_name(self, text: str) -> List[Vehicle]:
        """Case-insensitive substring match on the vehicle name."""
        kw = _lc(text)
        return [v for v in self._vehicles if kw in _lc(v.name)]

    def count_available(self) -> int:
        return sum(1 for v in self._vehicles if v.counts_as_available)

    def __len__(self) -> int:
        return len(self._vehicles)
