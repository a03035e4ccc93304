import logging
from typing import Optional

from rental_engine.services.common import Clock
from rental_engine.services.rental_service import RentalLedger
from rental_engine.services.user_service import UserDirectory
from rental_engine.services.vehicle_service import VehicleRegistry
from rental_engine.utils.constants import MAX_ACTIVE_RENTALS

logger = logging.getLogger(__name__)


class Store:
    """
    Holds the three engine components for the life of the process.

    Built once (by create_app or a test) and handed to whoever needs it; there is
    no global instance. The ledger is wired to the same registry it reads.
    """

    def __init__(self, clock: Optional[Clock] = None,
                 max_active_rentals: int = MAX_ACTIVE_RENTALS):
        self.users = UserDirectory()
        self.vehicles = VehicleRegistry()
        self.rentals = RentalLedger(self.vehicles, clock=clock,
                                    max_active_per_customer=max_active_rentals)
        logger.info("[Store] Ready: accounts=%d, vehicles=%d, rentals=%d",
                    len(self.users.list_accounts()), len(self.vehicles), self.rentals.total_count())

    def reset(self, include_accounts: bool = False):
        """Reseed the fleet and empty the ledger; accounts only when asked."""
        self.rentals.reset()
        self.vehicles.reset()
        if include_accounts:
            self.users.reset()
