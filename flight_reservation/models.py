"""Domain records for the flight reservation core."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from .ledger import PassengerLedger

# Field limits mirror the fixed-size text buffers of the original records.
DATE_MAX_LENGTH = 11
TIME_MAX_LENGTH = 9
PLACE_MAX_LENGTH = 49

_CENTS = Decimal("0.01")

Amount = Union[Decimal, float, int, str]


def to_money(value: Amount) -> Decimal:
    """Return ``value`` as a non-negative two-place :class:`Decimal`."""

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"invalid ticket cost {value!r}") from exc
    if not amount.is_finite() or amount < 0:
        raise ValueError("ticket cost must be a non-negative amount")
    return amount.quantize(_CENTS)


def bounded_text(value: str, label: str, limit: int) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{label} must be text, got {type(value).__name__}")
    text = value.strip()
    if not text:
        raise ValueError(f"{label} must not be empty")
    if len(text) > limit:
        raise ValueError(f"{label} must be at most {limit} characters")
    return text


@dataclass
class Passenger:
    id: int
    name: str
    seat_number: int

    def as_row(self) -> List[object]:
        return [self.id, self.name, self.seat_number]


@dataclass
class Flight:
    flight_number: int
    ticket_cost: Decimal
    date: str
    departure_time: str
    arrival_time: str
    source: str
    destination: str
    capacity: int
    available_seats: Optional[int] = None
    passengers: PassengerLedger = field(default_factory=PassengerLedger, repr=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be greater than 0")
        self.ticket_cost = to_money(self.ticket_cost)
        self.date = bounded_text(self.date, "date", DATE_MAX_LENGTH)
        self.departure_time = bounded_text(self.departure_time, "departure time", TIME_MAX_LENGTH)
        self.arrival_time = bounded_text(self.arrival_time, "arrival time", TIME_MAX_LENGTH)
        self.source = bounded_text(self.source, "source", PLACE_MAX_LENGTH)
        self.destination = bounded_text(self.destination, "destination", PLACE_MAX_LENGTH)
        if self.available_seats is None:
            self.available_seats = self.capacity - len(self.passengers)
        if not 0 <= self.available_seats <= self.capacity:
            raise ValueError("available seats must be between 0 and capacity")
        if self.capacity - self.available_seats != len(self.passengers):
            raise ValueError("available seats must match the passengers on the ledger")

    @property
    def booked_seats(self) -> int:
        return self.capacity - self.available_seats

    @property
    def route(self) -> str:
        return f"{self.source}-{self.destination}"

    def as_row(self) -> List[object]:
        return [
            self.flight_number,
            self.date,
            self.departure_time,
            self.arrival_time,
            self.source,
            self.destination,
            f"${self.ticket_cost:,.2f}",
            self.available_seats,
        ]


@dataclass(frozen=True)
class BookingRequest:
    flight_number: int
    seats: int


@dataclass
class BookingConfirmation:
    """Outcome of a successful booking."""

    flight_number: int
    passengers: List[Passenger]
    total_cost: Decimal

    @property
    def seats(self) -> int:
        return len(self.passengers)


@dataclass
class CancellationResult:
    flight_number: int
    passenger: Passenger
