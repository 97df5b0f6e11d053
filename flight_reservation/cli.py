"""Terminal interface for the flight reservation simulator."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, TextIO

from tabulate import tabulate

from .allocation import allocator_names
from .config import ReservationConfig
from .dataset import load_sample_flights
from .errors import ReservationError
from .models import Flight
from .services import ReservationSystem

logger = logging.getLogger(__name__)

FLIGHT_HEADERS = [
    "Flight No",
    "Date",
    "Departure",
    "Arrival",
    "Source",
    "Destination",
    "Ticket Cost",
    "Available Seats",
]
PASSENGER_HEADERS = ["Passenger ID", "Name", "Seat Number"]

MENU = """
1. Display Flights
2. Book Seats
3. Display Passengers
4. Cancel Seat
5. Exit"""


def render_flights(flights: Iterable[Flight]) -> str:
    return tabulate([flight.as_row() for flight in flights], headers=FLIGHT_HEADERS, tablefmt="github")


def render_passengers(flight: Flight) -> str:
    rows = [passenger.as_row() for passenger in flight.passengers]
    table = tabulate(rows, headers=PASSENGER_HEADERS, tablefmt="github")
    return f"Passengers on Flight {flight.flight_number} (Date: {flight.date}):\n{table}"


class ReservationTerminal:
    """Interactive menu over a :class:`ReservationSystem`."""

    def __init__(
        self,
        system: ReservationSystem,
        *,
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ) -> None:
        self.system = system
        self.input_fn = input_fn
        self.out = out or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def ask_int(self, prompt: str) -> Optional[int]:
        raw = self.input_fn(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            self.say(f"Invalid number '{raw}'.")
            return None

    def show_flights(self) -> None:
        self.say()
        self.say(render_flights(self.system.list_flights()))
        self.say()

    def show_passengers(self) -> None:
        flight_number = self.ask_int("Enter Flight Number: ")
        if flight_number is None:
            return
        try:
            flight = self.system.get_flight(flight_number)
        except ReservationError as exc:
            self.say(f"\n{exc}\n")
            return
        self.say()
        self.say(render_passengers(flight))
        self.say()

    def book(self) -> None:
        flight_number = self.ask_int("Enter Flight Number: ")
        if flight_number is None:
            return
        count = self.ask_int("Enter Number of Seats to Book: ")
        if count is None:
            return
        limit = self.system.config.max_name_length

        def prompt_name(index: int) -> str:
            return self.input_fn(f"Enter name for passenger {index + 1} (max {limit} characters): ")

        try:
            confirmation = self.system.book_seats(flight_number, count, prompt_name)
        except (ReservationError, ValueError) as exc:
            self.say(f"Error: {exc}\n")
            return
        for passenger in confirmation.passengers:
            self.say(
                f"Seat {passenger.seat_number} booked for {passenger.name} (Passenger ID: {passenger.id})."
            )
        self.say(
            f"Booking confirmed for {confirmation.seats} seats on flight {flight_number}. "
            f"Total cost: ${confirmation.total_cost:,.2f}\n"
        )

    def cancel(self) -> None:
        passenger_id = self.ask_int("Enter Passenger ID: ")
        if passenger_id is None:
            return
        flight_number = self.ask_int("Enter Flight Number: ")
        if flight_number is None:
            return
        try:
            self.system.cancel_seat(passenger_id, flight_number)
        except ReservationError as exc:
            self.say(f"Error: {exc}\n")
            return
        self.say(
            f"Cancellation confirmed: Passenger ID {passenger_id} has been removed from flight {flight_number}.\n"
        )

    def run(self) -> None:
        actions = {
            "1": self.show_flights,
            "2": self.book,
            "3": self.show_passengers,
            "4": self.cancel,
        }
        while True:
            self.say(MENU)
            try:
                choice = self.input_fn("Enter your choice: ").strip()
            except EOFError:
                choice = "5"
            if choice == "5":
                self.say("Exiting program.")
                return
            action = actions.get(choice)
            if action is None:
                self.say("Invalid choice. Please try again.")
                continue
            try:
                action()
            except EOFError:
                self.say("Exiting program.")
                return


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flight booking simulator.")
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start without the sample flights.",
    )
    parser.add_argument(
        "--allocator",
        choices=allocator_names(),
        default=None,
        help="Passenger id and seat numbering policy (default: FLIGHT_RESERVATION_ALLOCATOR or legacy).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: FLIGHT_RESERVATION_LOG_LEVEL or WARNING).",
    )

    commands = parser.add_subparsers(dest="command")
    commands.add_parser("menu", help="Run the interactive menu (default).")
    commands.add_parser("flights", help="List all flights.")
    commands.add_parser("summary", help="Show seat usage per flight.")
    passengers = commands.add_parser("passengers", help="List the passengers of a flight.")
    passengers.add_argument("flight", type=int)
    book = commands.add_parser("book", help="Book one seat per passenger name.")
    book.add_argument("flight", type=int)
    book.add_argument("names", nargs="+")
    cancel = commands.add_parser("cancel", help="Cancel a passenger's seat.")
    cancel.add_argument("passenger_id", type=int)
    cancel.add_argument("flight", type=int)

    return parser.parse_args(list(argv))


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_system(args: argparse.Namespace) -> ReservationSystem:
    config = ReservationConfig.from_env()
    if args.allocator:
        config = replace(config, allocator=args.allocator)
    system = ReservationSystem(config)
    if not args.no_seed:
        load_sample_flights(system)
    return system


def _run_command(system: ReservationSystem, args: argparse.Namespace) -> List[str]:
    if args.command == "flights":
        return [render_flights(system.list_flights())]
    if args.command == "summary":
        rows = system.summarize_capacity()
        return [tabulate(rows, headers="keys", tablefmt="github")]
    if args.command == "passengers":
        return [render_passengers(system.get_flight(args.flight))]
    if args.command == "book":
        confirmation = system.book_seats(args.flight, len(args.names), args.names)
        lines = [
            f"Seat {p.seat_number} booked for {p.name} (Passenger ID: {p.id})."
            for p in confirmation.passengers
        ]
        lines.append(
            f"Booking confirmed for {confirmation.seats} seats on flight {args.flight}. "
            f"Total cost: ${confirmation.total_cost:,.2f}"
        )
        return lines
    if args.command == "cancel":
        system.cancel_seat(args.passenger_id, args.flight)
        return [
            f"Cancellation confirmed: Passenger ID {args.passenger_id} has been removed from flight {args.flight}."
        ]
    raise ValueError(f"Unsupported command '{args.command}'.")


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        system = build_system(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or system.config.log_level)

    if args.command in (None, "menu"):
        ReservationTerminal(system).run()
        return 0
    try:
        output = _run_command(system, args)
    except (ReservationError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("\n".join(output))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
