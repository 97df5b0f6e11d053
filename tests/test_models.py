import pytest

from flight_reservation.ledger import PassengerLedger
from flight_reservation.models import Flight, Passenger, bounded_text


def make_flight(**overrides) -> Flight:
    fields = dict(
        flight_number=101,
        ticket_cost="200",
        date="2024-10-29",
        departure_time="10:00",
        arrival_time="12:30",
        source="Mumbai",
        destination="Paris",
        capacity=10,
    )
    fields.update(overrides)
    return Flight(**fields)


def test_available_seats_default_to_free_capacity():
    ledger = PassengerLedger()
    ledger.insert_front(Passenger(id=10010, name="Alice", seat_number=1))

    flight = make_flight(passengers=ledger)

    assert flight.available_seats == 9
    assert flight.booked_seats == 1


def test_available_seats_must_match_ledger():
    with pytest.raises(ValueError):
        make_flight(available_seats=5)
    with pytest.raises(ValueError):
        make_flight(available_seats=11)

    assert make_flight(available_seats=10).available_seats == 10


def test_bounded_text_rejects_non_strings():
    with pytest.raises(TypeError):
        bounded_text(None, "passenger name", 99)
    with pytest.raises(TypeError):
        make_flight(source=42)
    assert bounded_text("  Alice ", "passenger name", 99) == "Alice"
