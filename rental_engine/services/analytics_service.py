from __future__ import annotations

from collections import Counter

from rental_engine.services.common import round2
from rental_engine.services.rental_service import RentalLedger
from rental_engine.services.vehicle_service import VehicleRegistry
from rental_engine.utils.constants import ALL_VEHICLE_STATUSES, RentalStatus


class AnalyticsService:
    """Aggregations for the administrator dashboard."""

    @staticmethod
    def dashboard_summary(vehicles: VehicleRegistry, rentals: RentalLedger):
        """The four stat cards: available vehicles, fleet size, rentals, revenue."""
        return {
            "available_vehicles": vehicles.count_available(),
            "total_vehicles": len(vehicles),
            "total_rentals": rentals.total_count(),
            "total_revenue": round2(rentals.total_revenue()),
        }

    @staticmethod
    def analytics(vehicles: VehicleRegistry, rentals: RentalLedger):
        summary = AnalyticsService.dashboard_summary(vehicles, rentals)

        # Vehicles by status, every status present even when zero
        status_cnt = Counter(v.status for v in vehicles.list_all())
        vehicles_by_status = {s: status_cnt.get(s, 0) for s in ALL_VEHICLE_STATUSES}

        rental_cnt = Counter(r.status for r in rentals.list_all())
        rentals_by_status = {
            s: rental_cnt.get(s, 0)
            for s in (RentalStatus.ACTIVE, RentalStatus.RETURNED, RentalStatus.LOST)
        }

        # Most rented, by snapshot name so deleted vehicles still show up
        per_vehicle = Counter((r.vehicle_id, r.vehicle_name) for r in rentals.list_all())
        most_rented = [
            {"vehicle_id": vid, "label": name, "count": n}
            for (vid, name), n in per_vehicle.most_common(5)
        ]

        return {
            "totals": summary,
            "vehicles_by_status": vehicles_by_status,
            "rentals_by_status": rentals_by_status,
            "most_rented": most_rented,
        }
