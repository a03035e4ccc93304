from dataclasses import asdict, dataclass

from ..utils.constants import VehicleStatus, AVAILABLE_FOR_REPORTING


@dataclass
class Vehicle:
    """
    A fleet vehicle. `vehicle_id` is assigned by the registry and never changes;
    the remaining fields are overwritten in place by updates.
    """
    vehicle_id: str
    name: str
    type: str  # "Car" | "Motorbike" | "Truck" (open string)
    price_per_day: float
    status: str = VehicleStatus.AVAILABLE

    @property
    def is_rentable(self) -> bool:
        return self.status == VehicleStatus.AVAILABLE

    @property
    def counts_as_available(self) -> bool:
        """Available or under maintenance, as shown in fleet statistics."""
        return self.status in AVAILABLE_FOR_REPORTING

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.vehicle_id} - {self.name} ({self.type})"
