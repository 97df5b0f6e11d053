"""Per-flight passenger ledger."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import Passenger


class PassengerLedger:
    """Passengers of one flight, most recently booked first."""

    def __init__(self) -> None:
        self._entries: Deque["Passenger"] = deque()

    def insert_front(self, passenger: "Passenger") -> None:
        self._entries.appendleft(passenger)

    def find(self, passenger_id: int) -> Optional["Passenger"]:
        for passenger in self._entries:
            if passenger.id == passenger_id:
                return passenger
        return None

    def remove_by_id(self, passenger_id: int) -> Optional["Passenger"]:
        """Remove the first passenger with ``passenger_id`` and return it.

        Returns ``None`` and leaves the ledger untouched when no entry matches.
        """

        for index, passenger in enumerate(self._entries):
            if passenger.id == passenger_id:
                del self._entries[index]
                return passenger
        return None

    def list_all(self) -> List["Passenger"]:
        return list(self._entries)

    def seat_numbers(self) -> set[int]:
        return {passenger.seat_number for passenger in self._entries}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator["Passenger"]:
        return iter(list(self._entries))
