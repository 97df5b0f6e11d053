from io import StringIO

from flight_reservation import cli
from flight_reservation.dataset import load_sample_flights
from flight_reservation.services import ReservationSystem


def scripted(answers):
    remaining = list(answers)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input, prompts


def make_terminal(answers):
    system = ReservationSystem()
    load_sample_flights(system)
    fake_input, prompts = scripted(answers)
    out = StringIO()
    return cli.ReservationTerminal(system, input_fn=fake_input, out=out), system, out, prompts


def test_menu_books_lists_and_cancels():
    terminal, system, out, prompts = make_terminal(
        ["1", "2", "101", "2", "Alice", "Bob", "3", "101", "4", "10009", "101", "5"]
    )

    terminal.run()

    text = out.getvalue()
    assert "South Korea" in text
    assert "Seat 1 booked for Alice (Passenger ID: 10010)." in text
    assert "Seat 2 booked for Bob (Passenger ID: 10009)." in text
    assert "Total cost: $400.00" in text
    assert "Passengers on Flight 101" in text
    assert "Cancellation confirmed: Passenger ID 10009 has been removed from flight 101." in text
    assert text.rstrip().endswith("Exiting program.")
    assert "Enter name for passenger 2 (max 99 characters): " in prompts
    assert [p.name for p in system.list_passengers(101)] == ["Alice"]


def test_menu_reports_errors_and_keeps_running():
    terminal, system, out, _ = make_terminal(
        ["9", "2", "555", "1", "2", "101", "11", "3", "abc", "4", "1", "101", "5"]
    )

    terminal.run()

    text = out.getvalue()
    assert "Invalid choice. Please try again." in text
    assert "Flight 555 not found." in text
    assert "Only 10 seats available on flight 101" in text
    assert "Invalid number 'abc'." in text
    assert "Passenger ID 1 not found on flight 101." in text
    assert system.get_flight(101).available_seats == 10


def test_menu_exits_on_end_of_input():
    terminal, system, out, _ = make_terminal(["2", "101", "2", "Alice"])

    terminal.run()

    assert "Exiting program." in out.getvalue()
    assert system.get_flight(101).available_seats == 10


def test_render_flights_table():
    system = ReservationSystem()
    load_sample_flights(system)

    table = cli.render_flights(system.list_flights())

    assert "Flight No" in table
    assert "$200.00" in table
    assert table.index("101") < table.index("104")


def test_main_flights_command(capsys):
    assert cli.main(["flights"]) == 0

    out = capsys.readouterr().out
    assert "Maldives" in out


def test_main_book_command(capsys):
    assert cli.main(["--allocator", "sequential", "book", "103", "Alice", "Bob"]) == 0

    out = capsys.readouterr().out
    assert "Seat 1 booked for Alice (Passenger ID: 10001)." in out
    assert "Total cost: $600.00" in out


def test_main_reports_errors(capsys):
    assert cli.main(["--no-seed", "passengers", "101"]) == 1
    assert "Flight 101 not found." in capsys.readouterr().err

    assert cli.main(["cancel", "10010", "101"]) == 1
    assert "Passenger ID 10010 not found" in capsys.readouterr().err
