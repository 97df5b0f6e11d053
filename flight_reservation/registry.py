"""Hash-indexed flight registry using separate chaining."""
from __future__ import annotations

import enum
import logging
from collections import deque
from typing import Deque, Iterator, List, Literal, Optional

from .config import DEFAULT_HASH_SIZE
from .models import Flight

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["shadow", "replace", "reject"]


class AddResult(enum.Enum):
    INSERTED = "inserted"
    REPLACED = "replaced"
    REJECTED = "rejected"


class FlightRegistry:
    """Flights keyed by number, spread over ``bucket_count`` chains.

    A flight lives in chain ``flight_number % bucket_count``. New entries go to
    the head of their chain, so listing is bucket order then newest first.
    """

    def __init__(self, bucket_count: int = DEFAULT_HASH_SIZE) -> None:
        if bucket_count <= 0:
            raise ValueError("bucket_count must be greater than 0")
        self.bucket_count = bucket_count
        self._buckets: List[Deque[Flight]] = [deque() for _ in range(bucket_count)]

    def hash(self, flight_number: int) -> int:
        return flight_number % self.bucket_count

    def _chain(self, flight_number: int) -> Deque[Flight]:
        return self._buckets[self.hash(flight_number)]

    def add(self, flight: Flight, *, on_duplicate: DuplicatePolicy = "shadow") -> AddResult:
        """Register ``flight`` according to the duplicate policy.

        ``shadow`` performs no duplicate check: the new entry sits in front of
        any older one with the same number and wins every lookup.
        """

        chain = self._chain(flight.flight_number)
        if on_duplicate == "shadow":
            chain.appendleft(flight)
            return AddResult.INSERTED
        if on_duplicate not in ("replace", "reject"):
            raise ValueError(f"Unsupported duplicate policy '{on_duplicate}'.")

        for index, existing in enumerate(chain):
            if existing.flight_number == flight.flight_number:
                if on_duplicate == "reject":
                    logger.warning("Rejected duplicate flight %s", flight.flight_number)
                    return AddResult.REJECTED
                chain[index] = flight
                logger.info("Replaced flight %s", flight.flight_number)
                return AddResult.REPLACED
        chain.appendleft(flight)
        return AddResult.INSERTED

    def find(self, flight_number: int) -> Optional[Flight]:
        for flight in self._chain(flight_number):
            if flight.flight_number == flight_number:
                return flight
        return None

    def list_all(self) -> List[Flight]:
        return [flight for chain in self._buckets for flight in chain]

    def chain_lengths(self) -> List[int]:
        return [len(chain) for chain in self._buckets]

    def __contains__(self, flight_number: object) -> bool:
        return isinstance(flight_number, int) and self.find(flight_number) is not None

    def __iter__(self) -> Iterator[Flight]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return sum(self.chain_lengths())
