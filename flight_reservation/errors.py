"""Recoverable errors reported by the reservation core."""
from __future__ import annotations


class ReservationError(RuntimeError):
    """Base class for expected booking and cancellation failures."""


class FlightNotFoundError(ReservationError):
    def __init__(self, flight_number: int) -> None:
        super().__init__(f"Flight {flight_number} not found.")
        self.flight_number = flight_number


class InsufficientSeatsError(ReservationError):
    def __init__(self, flight_number: int, requested: int, available: int) -> None:
        super().__init__(
            f"Only {available} seats available on flight {flight_number} ({requested} requested)."
        )
        self.flight_number = flight_number
        self.requested = requested
        self.available = available


class QueueFullError(ReservationError):
    """Raised when a booking request cannot be admitted to the queue."""


class PassengerNotFoundError(ReservationError):
    def __init__(self, passenger_id: int, flight_number: int) -> None:
        super().__init__(f"Passenger ID {passenger_id} not found on flight {flight_number}.")
        self.passenger_id = passenger_id
        self.flight_number = flight_number


class DuplicateFlightError(ReservationError):
    def __init__(self, flight_number: int) -> None:
        super().__init__(f"Flight {flight_number} is already registered.")
        self.flight_number = flight_number
