"""Bounded circular FIFO of pending booking requests."""
from __future__ import annotations

import logging
from typing import List, Optional

from .config import DEFAULT_QUEUE_SIZE
from .errors import QueueFullError
from .models import BookingRequest

logger = logging.getLogger(__name__)

_EMPTY = -1


class BookingQueue:
    """Fixed-capacity ring buffer; ``head == -1`` marks the empty queue."""

    def __init__(self, capacity: int = DEFAULT_QUEUE_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than 0")
        self.capacity = capacity
        self._slots: List[Optional[BookingRequest]] = [None] * capacity
        self.head = _EMPTY
        self.tail = _EMPTY

    def is_empty(self) -> bool:
        return self.head == _EMPTY

    def is_full(self) -> bool:
        return (self.tail + 1) % self.capacity == self.head

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self.tail - self.head) % self.capacity + 1

    def enqueue(self, request: BookingRequest) -> None:
        if self.is_full():
            logger.warning(
                "Booking queue is full (%s pending); rejected request for flight %s",
                self.capacity,
                request.flight_number,
            )
            raise QueueFullError(f"booking queue is full ({self.capacity} pending requests)")
        self.tail = (self.tail + 1) % self.capacity
        self._slots[self.tail] = request
        if self.head == _EMPTY:
            self.head = self.tail
        logger.debug("Queued %s seat(s) for flight %s", request.seats, request.flight_number)

    def dequeue(self) -> Optional[BookingRequest]:
        """Remove and return the oldest request, or ``None`` when empty."""

        if self.is_empty():
            return None
        request = self._slots[self.head]
        self._slots[self.head] = None
        if self.head == self.tail:
            self.head = self.tail = _EMPTY
        else:
            self.head = (self.head + 1) % self.capacity
        return request

    def withdraw(self, request: BookingRequest) -> BookingRequest:
        """Remove ``request`` from the front or back of the queue and return it.

        Only the request object itself matches; an equal request queued by
        someone else is left in place.
        """

        if self.is_empty():
            raise LookupError("booking queue is empty")
        if self._slots[self.head] is request:
            self.dequeue()
            return request
        if self._slots[self.tail] is not request:
            raise LookupError(f"request for flight {request.flight_number} is not at either end of the queue")
        self._slots[self.tail] = None
        self.tail = (self.tail - 1) % self.capacity
        return request

    def peek(self) -> Optional[BookingRequest]:
        if self.is_empty():
            return None
        return self._slots[self.head]

    def snapshot(self) -> List[BookingRequest]:
        """Pending requests in FIFO order."""

        pending: List[BookingRequest] = []
        for offset in range(len(self)):
            request = self._slots[(self.head + offset) % self.capacity]
            if request is not None:
                pending.append(request)
        return pending
