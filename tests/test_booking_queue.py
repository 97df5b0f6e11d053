import pytest

from flight_reservation.booking_queue import BookingQueue
from flight_reservation.errors import QueueFullError
from flight_reservation.models import BookingRequest


def test_fifo_round_trip_at_capacity():
    queue = BookingQueue(capacity=50)
    requests = [BookingRequest(flight_number=100 + i, seats=i % 3 + 1) for i in range(50)]
    for request in requests:
        queue.enqueue(request)

    assert queue.is_full()
    assert len(queue) == 50
    with pytest.raises(QueueFullError):
        queue.enqueue(BookingRequest(flight_number=999, seats=1))

    drained = [queue.dequeue() for _ in range(50)]

    assert drained == requests
    assert queue.is_empty()
    assert queue.head == queue.tail == -1


def test_dequeue_on_empty_returns_none():
    queue = BookingQueue(capacity=3)

    assert queue.dequeue() is None
    assert queue.peek() is None
    assert len(queue) == 0


def test_indices_wrap_around():
    queue = BookingQueue(capacity=3)
    for number in (1, 2, 3):
        queue.enqueue(BookingRequest(number, 1))
    assert queue.dequeue().flight_number == 1
    assert queue.dequeue().flight_number == 2

    queue.enqueue(BookingRequest(4, 1))
    queue.enqueue(BookingRequest(5, 1))

    assert queue.is_full()
    assert queue.tail == 1
    assert [r.flight_number for r in queue.snapshot()] == [3, 4, 5]
    assert [queue.dequeue().flight_number for _ in range(3)] == [3, 4, 5]
    assert queue.is_empty()


def test_single_slot_queue():
    queue = BookingQueue(capacity=1)
    queue.enqueue(BookingRequest(1, 2))

    with pytest.raises(QueueFullError):
        queue.enqueue(BookingRequest(2, 1))

    assert queue.peek() == BookingRequest(1, 2)
    assert queue.dequeue() == BookingRequest(1, 2)
    queue.enqueue(BookingRequest(2, 1))
    assert len(queue) == 1


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        BookingQueue(capacity=0)


def test_withdraw_takes_back_own_request_from_either_end():
    queue = BookingQueue(capacity=3)
    older = BookingRequest(102, 6)
    queue.enqueue(older)
    mine = BookingRequest(101, 2)
    queue.enqueue(mine)

    assert queue.withdraw(mine) is mine
    assert queue.snapshot() == [older]
    assert queue.withdraw(older) is older
    assert queue.is_empty()
    assert queue.head == queue.tail == -1


def test_withdraw_wraps_tail_and_ignores_equal_requests():
    queue = BookingQueue(capacity=3)
    for number in (1, 2, 3):
        queue.enqueue(BookingRequest(number, 1))
    queue.dequeue()
    mine = BookingRequest(4, 1)
    queue.enqueue(mine)
    assert queue.tail == 0

    with pytest.raises(LookupError):
        queue.withdraw(BookingRequest(4, 1))
    queue.withdraw(mine)

    assert queue.tail == 2
    assert [r.flight_number for r in queue.snapshot()] == [2, 3]
    with pytest.raises(LookupError):
        BookingQueue(capacity=2).withdraw(mine)
