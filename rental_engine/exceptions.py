"""
Custom exception classes for the rental engine's HTTP layer.

The engine itself signals expected failures with None/False. Controllers turn
those sentinels into these exceptions, and the app's error handlers render them
as JSON with a matching status code instead of a generic 500.
"""

from typing import Optional


class RentalEngineError(Exception):
    """Base class; `status_code` is used by the JSON error handler."""

    status_code = 400
    default_message = "Error: request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleNotFoundError(RentalEngineError):
    """Raised when a vehicle ID cannot be found in the fleet."""

    status_code = 404
    default_message = "Error: vehicle not found"


class RentalNotFoundError(RentalEngineError):
    """Raised when a rental ID is unknown, not active, or not the caller's."""

    status_code = 404
    default_message = "Error: rental not found"


class InvalidDateRangeError(RentalEngineError):
    """Raised when a timestamp is missing, unparseable, or the range is inverted or too long."""

    status_code = 400
    default_message = "Error: invalid date range"


class VehicleUnavailableError(RentalEngineError):
    """Raised when a rental or deletion is refused because of the vehicle's state."""

    status_code = 409
    default_message = "Error: vehicle is not available"
