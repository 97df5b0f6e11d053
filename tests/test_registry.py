from flight_reservation.models import Flight
from flight_reservation.registry import AddResult, FlightRegistry


def make_flight(number: int, cost: float = 100.0, destination: str = "Paris") -> Flight:
    return Flight(
        flight_number=number,
        ticket_cost=cost,
        date="2024-10-29",
        departure_time="10:00",
        arrival_time="12:30",
        source="Mumbai",
        destination=destination,
        capacity=10,
    )


def test_find_returns_added_flight():
    registry = FlightRegistry(bucket_count=20)
    registry.add(make_flight(101))

    found = registry.find(101)

    assert found is not None
    assert found.flight_number == 101
    assert registry.find(999) is None
    assert 101 in registry
    assert 999 not in registry


def test_flights_land_in_their_hash_bucket():
    registry = FlightRegistry(bucket_count=5)
    for number in (3, 8, 13, 4):
        registry.add(make_flight(number))

    assert registry.hash(13) == 3
    assert registry.chain_lengths() == [0, 0, 0, 3, 1]
    assert len(registry) == 4


def test_listing_is_bucket_order_then_newest_first():
    registry = FlightRegistry(bucket_count=5)
    for number in (3, 1, 8, 13):
        registry.add(make_flight(number))

    assert [flight.flight_number for flight in registry.list_all()] == [1, 13, 8, 3]
    assert [flight.flight_number for flight in registry] == [1, 13, 8, 3]


def test_colliding_numbers_are_both_reachable():
    registry = FlightRegistry(bucket_count=20)
    registry.add(make_flight(101))
    registry.add(make_flight(121))

    assert registry.find(101).flight_number == 101
    assert registry.find(121).flight_number == 121


def test_duplicate_add_shadows_older_entry_by_default():
    registry = FlightRegistry()
    registry.add(make_flight(101, destination="Paris"))

    result = registry.add(make_flight(101, destination="Chicago"))

    assert result is AddResult.INSERTED
    assert registry.find(101).destination == "Chicago"
    assert len(registry) == 2


def test_duplicate_add_with_replace_policy():
    registry = FlightRegistry()
    registry.add(make_flight(101, destination="Paris"))

    result = registry.add(make_flight(101, destination="Chicago"), on_duplicate="replace")

    assert result is AddResult.REPLACED
    assert registry.find(101).destination == "Chicago"
    assert len(registry) == 1


def test_duplicate_add_with_reject_policy():
    registry = FlightRegistry()
    registry.add(make_flight(101, destination="Paris"))

    result = registry.add(make_flight(101, destination="Chicago"), on_duplicate="reject")

    assert result is AddResult.REJECTED
    assert registry.find(101).destination == "Paris"
    assert len(registry) == 1
