"""Booking and cancellation engine for the flight reservation core."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Set, Union

from .allocation import SeatAllocator, get_allocator
from .booking_queue import BookingQueue
from .config import ReservationConfig
from .errors import (
    DuplicateFlightError,
    FlightNotFoundError,
    InsufficientSeatsError,
    PassengerNotFoundError,
)
from .models import (
    Amount,
    BookingConfirmation,
    BookingRequest,
    CancellationResult,
    Flight,
    Passenger,
    bounded_text,
)
from .registry import AddResult, DuplicatePolicy, FlightRegistry

logger = logging.getLogger(__name__)

NameSource = Union[Iterable[str], Callable[[int], str]]


def _name_supplier(names: NameSource, count: int) -> Callable[[int], str]:
    if callable(names):
        return names
    if isinstance(names, str):
        raise TypeError("names must be a sequence of names, not a single string")
    iterator: Iterator[str] = iter(names)

    def supply(index: int) -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise ValueError(f"expected {count} passenger names, got {index}") from None

    return supply


class ReservationSystem:
    """Flight registry, booking queue and seat allocator wired together.

    Every operation runs to completion before returning and either applies
    all of its changes or none of them. Callers sharing one instance between
    threads must serialize access themselves.
    """

    def __init__(
        self,
        config: Optional[ReservationConfig] = None,
        *,
        registry: Optional[FlightRegistry] = None,
        queue: Optional[BookingQueue] = None,
        allocator: Optional[SeatAllocator] = None,
    ) -> None:
        self.config = config or ReservationConfig()
        self.registry = registry or FlightRegistry(self.config.hash_size)
        self.queue = queue or BookingQueue(self.config.queue_size)
        self.allocator = allocator or get_allocator(self.config.allocator, id_base=self.config.id_base)

    @classmethod
    def from_env(cls) -> "ReservationSystem":
        return cls(ReservationConfig.from_env())

    def add_flight(
        self,
        flight_number: int,
        ticket_cost: Amount,
        date: str,
        departure_time: str,
        arrival_time: str,
        source: str,
        destination: str,
        *,
        on_duplicate: DuplicatePolicy = "shadow",
    ) -> Flight:
        """Create a flight with every seat free and register it."""

        flight = Flight(
            flight_number=int(flight_number),
            ticket_cost=ticket_cost,
            date=date,
            departure_time=departure_time,
            arrival_time=arrival_time,
            source=source,
            destination=destination,
            capacity=self.config.max_seats,
        )
        result = self.registry.add(flight, on_duplicate=on_duplicate)
        if result is AddResult.REJECTED:
            raise DuplicateFlightError(flight.flight_number)
        logger.info(
            "Added flight %s %s on %s (%s)", flight.flight_number, flight.route, flight.date, result.value
        )
        return flight

    def get_flight(self, flight_number: int) -> Flight:
        flight = self.registry.find(flight_number)
        if flight is None:
            raise FlightNotFoundError(flight_number)
        return flight

    def list_flights(self) -> List[Flight]:
        return self.registry.list_all()

    def list_passengers(self, flight_number: int) -> List[Passenger]:
        return self.get_flight(flight_number).passengers.list_all()

    def book_seats(self, flight_number: int, count: int, names: NameSource) -> BookingConfirmation:
        """Book ``count`` seats on a flight.

        ``names`` is either a sequence holding one name per seat or a callable
        receiving the zero-based seat index and returning that passenger's
        name. Names are requested one at a time while seats are assigned; if
        any of them is missing or invalid the flight is left untouched.
        """

        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError("number of seats must be a positive integer")
        flight = self.get_flight(flight_number)
        if count > flight.available_seats:
            logger.warning(
                "Rejected booking of %s seats on flight %s: %s available",
                count,
                flight_number,
                flight.available_seats,
            )
            raise InsufficientSeatsError(flight_number, count, flight.available_seats)

        request = BookingRequest(flight_number=flight_number, seats=count)
        self.queue.enqueue(request)
        self.queue.withdraw(request)

        supply = _name_supplier(names, request.seats)
        total_cost = flight.ticket_cost * request.seats
        available = flight.available_seats
        taken: Set[int] = flight.passengers.seat_numbers()
        staged: List[Passenger] = []
        for index in range(request.seats):
            name = bounded_text(supply(index), "passenger name", self.config.max_name_length)
            passenger_id, seat_number = self.allocator.allocate(flight, available, taken)
            staged.append(Passenger(id=passenger_id, name=name, seat_number=seat_number))
            taken.add(seat_number)
            available -= 1

        for passenger in staged:
            flight.passengers.insert_front(passenger)
        flight.available_seats = available
        logger.info(
            "Booked %s seats on flight %s for %s", request.seats, flight_number, total_cost
        )
        return BookingConfirmation(flight_number=flight_number, passengers=staged, total_cost=total_cost)

    def cancel_seat(self, passenger_id: int, flight_number: int) -> CancellationResult:
        flight = self.get_flight(flight_number)
        passenger = flight.passengers.remove_by_id(passenger_id)
        if passenger is None:
            logger.warning("Passenger %s not found on flight %s", passenger_id, flight_number)
            raise PassengerNotFoundError(passenger_id, flight_number)
        flight.available_seats += 1
        logger.info("Cancelled passenger %s on flight %s", passenger_id, flight_number)
        return CancellationResult(flight_number=flight_number, passenger=passenger)

    def summarize_capacity(self) -> List[dict]:
        return [
            {
                "flight": flight.flight_number,
                "route": flight.route,
                "available": flight.available_seats,
                "capacity": flight.capacity,
                "booked": len(flight.passengers),
                "ticket_cost": flight.ticket_cost,
            }
            for flight in self.registry.list_all()
        ]
