"""Sample flights and pseudo-random bookings for demos and tests."""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Dict, Sequence, Tuple

from .errors import ReservationError
from .services import ReservationSystem

SAMPLE_FLIGHTS: Sequence[Tuple[int, float, str, str, str, str, str]] = (
    (101, 200.00, "2024-10-29", "10:00", "12:30", "Mumbai", "South Korea"),
    (102, 150.00, "2024-10-29", "14:00", "16:30", "Mumbai", "Maldives"),
    (103, 300.00, "2024-10-29", "18:00", "20:30", "Mumbai", "Chicago"),
    (104, 400.00, "2024-10-29", "22:00", "01:00", "Mumbai", "Paris"),
)

CITIES: Sequence[str] = (
    "Mumbai",
    "Delhi",
    "Chennai",
    "Maldives",
    "Paris",
    "Chicago",
    "Dubai",
    "Singapore",
)
FIRST_NAMES = ("Ava", "Noah", "Liam", "Mia", "Lucas", "Emma", "Ethan", "Isabella")
LAST_NAMES = ("Johnson", "Williams", "Smith", "Brown", "Garcia", "Lee")


def load_sample_flights(system: ReservationSystem) -> int:
    """Register the demo flights the terminal starts with."""

    for flight in SAMPLE_FLIGHTS:
        system.add_flight(*flight)
    return len(SAMPLE_FLIGHTS)


def generate_sample_data(
    system: ReservationSystem,
    *,
    flights: int = 10,
    bookings: int = 30,
    first_flight_number: int = 200,
    seed: int = 42,
) -> Dict[str, int]:
    """Populate ``system`` with deterministic pseudo-random flights and bookings."""

    rng = random.Random(seed)
    start = date(2024, 11, 1)
    for index in range(flights):
        source, destination = rng.sample(CITIES, 2)
        departure_hour = rng.randint(5, 20)
        system.add_flight(
            first_flight_number + index,
            rng.choice((120.0, 180.0, 220.0)),
            (start + timedelta(days=rng.randint(0, 10))).isoformat(),
            f"{departure_hour:02d}:{rng.choice((0, 15, 30, 45)):02d}",
            f"{departure_hour + rng.randint(1, 3):02d}:00",
            source,
            destination,
        )

    successful = 0
    seats_booked = 0
    if flights:
        for _ in range(bookings):
            flight_number = first_flight_number + rng.randrange(flights)
            count = rng.randint(1, 3)
            names = [f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}" for _ in range(count)]
            try:
                confirmation = system.book_seats(flight_number, count, names)
            except ReservationError:
                continue
            successful += 1
            seats_booked += confirmation.seats
    return {"flights": flights, "bookings": successful, "seats": seats_booked}
