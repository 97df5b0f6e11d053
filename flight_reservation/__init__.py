"""Flight booking simulator: in-memory flight registry, ledgers and booking queue."""
from typing import Any

from .allocation import LegacySeatAllocator, SeatAllocator, SequentialSeatAllocator, get_allocator
from .booking_queue import BookingQueue
from .cli import main as cli_main
from .config import ReservationConfig
from .dataset import generate_sample_data, load_sample_flights
from .errors import (
    DuplicateFlightError,
    FlightNotFoundError,
    InsufficientSeatsError,
    PassengerNotFoundError,
    QueueFullError,
    ReservationError,
)
from .ledger import PassengerLedger
from .models import BookingConfirmation, BookingRequest, CancellationResult, Flight, Passenger
from .registry import AddResult, FlightRegistry
from .services import ReservationSystem


def create_app(*args: Any, **kwargs: Any):  # pragma: no cover - thin wrapper
    from .web import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = [
    "AddResult",
    "BookingConfirmation",
    "BookingQueue",
    "BookingRequest",
    "CancellationResult",
    "DuplicateFlightError",
    "Flight",
    "FlightNotFoundError",
    "FlightRegistry",
    "InsufficientSeatsError",
    "LegacySeatAllocator",
    "Passenger",
    "PassengerLedger",
    "PassengerNotFoundError",
    "QueueFullError",
    "ReservationConfig",
    "ReservationError",
    "ReservationSystem",
    "SeatAllocator",
    "SequentialSeatAllocator",
    "cli_main",
    "create_app",
    "generate_sample_data",
    "get_allocator",
    "load_sample_flights",
]
