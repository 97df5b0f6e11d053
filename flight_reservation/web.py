"""FastAPI application exposing the reservation core over HTTP."""
from __future__ import annotations

import threading
from decimal import Decimal
from io import StringIO
from typing import Dict, List, Literal, Optional

import pandas as pd
from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from .dataset import load_sample_flights
from .errors import (
    DuplicateFlightError,
    FlightNotFoundError,
    InsufficientSeatsError,
    PassengerNotFoundError,
    QueueFullError,
    ReservationError,
)
from .models import Flight, Passenger
from .services import ReservationSystem

_ERROR_STATUS: Dict[type, int] = {
    FlightNotFoundError: 404,
    PassengerNotFoundError: 404,
    InsufficientSeatsError: 409,
    DuplicateFlightError: 409,
    QueueFullError: 503,
}


class FlightIn(BaseModel):
    flight_number: int
    ticket_cost: Decimal = Field(ge=0)
    date: str
    departure_time: str
    arrival_time: str
    source: str
    destination: str
    on_duplicate: Literal["shadow", "replace", "reject"] = "shadow"


class BookingIn(BaseModel):
    names: List[str] = Field(min_length=1)


def _flight_payload(flight: Flight) -> dict:
    return {
        "flight_number": flight.flight_number,
        "date": flight.date,
        "departure_time": flight.departure_time,
        "arrival_time": flight.arrival_time,
        "source": flight.source,
        "destination": flight.destination,
        "ticket_cost": str(flight.ticket_cost),
        "capacity": flight.capacity,
        "available_seats": flight.available_seats,
    }


def _passenger_payload(passenger: Passenger) -> dict:
    return {"id": passenger.id, "name": passenger.name, "seat_number": passenger.seat_number}


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, ReservationError):
        return HTTPException(status_code=_ERROR_STATUS.get(type(exc), 400), detail=str(exc))
    return HTTPException(status_code=422, detail=str(exc))


def create_app(system: Optional[ReservationSystem] = None) -> FastAPI:
    """Return an application serving ``system`` (a seeded one by default).

    Every request goes through one lock, so the core only ever sees a single
    caller at a time.
    """

    if system is None:
        system = ReservationSystem.from_env()
        load_sample_flights(system)
    lock = threading.Lock()

    app = FastAPI(title="Flight Reservation", description="Flight booking simulator")
    app.state.system = system

    @app.get("/flights")
    def list_flights() -> List[dict]:
        with lock:
            return [_flight_payload(flight) for flight in system.list_flights()]

    @app.post("/flights", status_code=201)
    def add_flight(payload: FlightIn) -> dict:
        with lock:
            try:
                flight = system.add_flight(
                    payload.flight_number,
                    payload.ticket_cost,
                    payload.date,
                    payload.departure_time,
                    payload.arrival_time,
                    payload.source,
                    payload.destination,
                    on_duplicate=payload.on_duplicate,
                )
            except (ReservationError, ValueError) as exc:
                raise _http_error(exc) from exc
            return _flight_payload(flight)

    @app.get("/flights/{flight_number}/passengers")
    def list_passengers(flight_number: int) -> List[dict]:
        with lock:
            try:
                passengers = system.list_passengers(flight_number)
            except ReservationError as exc:
                raise _http_error(exc) from exc
            return [_passenger_payload(passenger) for passenger in passengers]

    @app.get("/flights/{flight_number}/manifest.csv")
    def download_manifest(flight_number: int) -> StreamingResponse:
        with lock:
            try:
                passengers = system.list_passengers(flight_number)
            except ReservationError as exc:
                raise _http_error(exc) from exc
            dataframe = pd.DataFrame(
                [_passenger_payload(passenger) for passenger in passengers],
                columns=["id", "name", "seat_number"],
            )
        buffer = StringIO()
        dataframe.to_csv(buffer, index=False)
        buffer.seek(0)
        headers = {"Content-Disposition": f"attachment; filename=\"flight_{flight_number}_manifest.csv\""}
        return StreamingResponse(iter([buffer.getvalue()]), media_type="text/csv", headers=headers)

    @app.post("/flights/{flight_number}/bookings", status_code=201)
    def book_seats(flight_number: int, payload: BookingIn) -> dict:
        with lock:
            try:
                confirmation = system.book_seats(flight_number, len(payload.names), payload.names)
            except (ReservationError, ValueError) as exc:
                raise _http_error(exc) from exc
            return {
                "flight_number": confirmation.flight_number,
                "seats": confirmation.seats,
                "total_cost": str(confirmation.total_cost),
                "passengers": [_passenger_payload(p) for p in confirmation.passengers],
            }

    @app.delete("/flights/{flight_number}/passengers/{passenger_id}")
    def cancel_seat(flight_number: int, passenger_id: int) -> dict:
        with lock:
            try:
                result = system.cancel_seat(passenger_id, flight_number)
            except ReservationError as exc:
                raise _http_error(exc) from exc
            return {
                "flight_number": result.flight_number,
                "passenger": _passenger_payload(result.passenger),
            }

    return app


__all__ = ["create_app"]
