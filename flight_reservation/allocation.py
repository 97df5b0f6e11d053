"""Passenger id and seat number assignment policies."""
from __future__ import annotations

import itertools
from typing import AbstractSet, Dict, Tuple, Type

from .config import DEFAULT_ID_BASE
from .models import Flight


class SeatAllocator:
    """Assigns ``(passenger_id, seat_number)`` pairs for new bookings."""

    name = "base"

    def __init__(self, id_base: int = DEFAULT_ID_BASE) -> None:
        self.id_base = id_base

    def allocate(self, flight: Flight, available: int, taken: AbstractSet[int]) -> Tuple[int, int]:
        """Return the id and seat for the next passenger on ``flight``.

        ``available`` is the free seat count before this seat is handed out and
        ``taken`` holds every seat number already held, including seats staged
        earlier in the same booking.
        """

        raise NotImplementedError


class LegacySeatAllocator(SeatAllocator):
    """Derives both numbers from the live available-seat counter.

    After cancellations the same id and seat number can be handed out again,
    even while the earlier holder is still on the ledger.
    """

    name = "legacy"

    def allocate(self, flight: Flight, available: int, taken: AbstractSet[int]) -> Tuple[int, int]:
        return self.id_base + available, flight.capacity - available + 1


class SequentialSeatAllocator(SeatAllocator):
    """Monotonic passenger ids and the lowest free seat number."""

    name = "sequential"

    def __init__(self, id_base: int = DEFAULT_ID_BASE) -> None:
        super().__init__(id_base)
        self._ids = itertools.count(id_base + 1)

    def allocate(self, flight: Flight, available: int, taken: AbstractSet[int]) -> Tuple[int, int]:
        for seat in range(1, flight.capacity + 1):
            if seat not in taken:
                return next(self._ids), seat
        raise ValueError(f"no seats available on flight {flight.flight_number}")


_ALLOCATORS: Dict[str, Type[SeatAllocator]] = {
    LegacySeatAllocator.name: LegacySeatAllocator,
    SequentialSeatAllocator.name: SequentialSeatAllocator,
}


def get_allocator(name: str, *, id_base: int = DEFAULT_ID_BASE) -> SeatAllocator:
    try:
        allocator_cls = _ALLOCATORS[name]
    except KeyError as exc:
        raise ValueError(f"Unsupported seat allocator '{name}'.") from exc
    return allocator_cls(id_base=id_base)


def allocator_names() -> Tuple[str, ...]:
    return tuple(_ALLOCATORS)
