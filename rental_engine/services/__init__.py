from .analytics_service import AnalyticsService
from .rental_service import RentalLedger
from .user_service import UserDirectory
from .vehicle_service import VehicleRegistry

__all__ = [
    "RentalLedger",
    "VehicleRegistry",
    "UserDirectory",
    "AnalyticsService",
]
