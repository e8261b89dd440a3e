import importlib
from io import StringIO

from airline_reservation import cli
from airline_reservation.dataset import load_default_data
from airline_reservation.services import ReservationManager


def _run(script: str, **kwargs) -> tuple[ReservationManager, str]:
    manager = ReservationManager()
    load_default_data(manager)
    stdout = StringIO()
    cli.run_menu(manager, stdin=StringIO(script), stdout=stdout, **kwargs)
    return manager, stdout.getvalue()


def test_menu_books_and_cancels():
    manager, output = _run("3\nAI103\n4\nAI103\n4\nAI103\n5\n")

    assert "Seat booked successfully." in output
    assert "Seat canceled successfully." in output
    assert "No bookings to cancel." in output
    assert output.rstrip().endswith("Exiting...")
    assert manager.find_flight("AI103").seats_booked == 0


def test_menu_lists_flights_and_customers():
    _, output = _run("1\n2\n5\n")

    assert "Flight Number: AI101, Destination: New York, Capacity: 200, Seats Booked: 0" in output
    assert "Customer Name: Bob, Email: bob@example.com" in output


def test_menu_renders_tables():
    _, output = _run("1\n5\n", table=True)

    assert "| Flight" in output
    assert "AI102" in output
    assert "London" in output


def test_menu_reports_unknown_flight_and_invalid_choice():
    manager, output = _run("3\nXX1\nabc\n9\n5\n")

    assert "Flight not found." in output
    assert output.count("Invalid option. Try again.") == 2
    assert all(flight.seats_booked == 0 for flight in manager.list_flights())


def test_menu_exits_when_input_runs_out():
    _, output = _run("1\n")

    assert output.rstrip().endswith("Exiting...")


def test_main_returns_zero_with_sample_flights():
    stdout = StringIO()
    code = cli.main(
        ["--sample-flights", "2", "--table", "--log-level", "debug"],
        stdin=StringIO("1\n5\n"),
        stdout=stdout,
    )

    assert code == 0
    assert "AR1000" in stdout.getvalue()
    assert "AR1001" in stdout.getvalue()


def test_parse_args_defaults():
    args = cli.parse_args([])

    assert args.table is False
    assert args.sample_flights == 0


def test_log_level_read_from_environment(monkeypatch):
    monkeypatch.setenv("AIRLINE_RESERVATION_LOG_LEVEL", "info")
    module = importlib.reload(cli)
    try:
        assert module.parse_args([]).log_level == "INFO"
        assert module.main([], stdin=StringIO("5\n"), stdout=StringIO()) == 0
    finally:
        monkeypatch.delenv("AIRLINE_RESERVATION_LOG_LEVEL")
        importlib.reload(cli)


def test_unknown_environment_log_level_reports_error(monkeypatch, capsys):
    monkeypatch.setenv("AIRLINE_RESERVATION_LOG_LEVEL", "verbose")
    module = importlib.reload(cli)
    try:
        stdout = StringIO()
        code = module.main([], stdin=StringIO("5\n"), stdout=stdout)
    finally:
        monkeypatch.delenv("AIRLINE_RESERVATION_LOG_LEVEL")
        importlib.reload(cli)

    assert code == 1
    assert "Error: unknown log level 'VERBOSE'" in capsys.readouterr().err
    assert stdout.getvalue() == ""


def test_menu_defaults_follow_redirected_streams(monkeypatch, capsys):
    manager = ReservationManager()
    load_default_data(manager)
    monkeypatch.setattr("sys.stdin", StringIO("3\nAI101\n5\n"))

    cli.run_menu(manager)

    assert "Seat booked successfully." in capsys.readouterr().out
    assert manager.find_flight("AI101").seats_booked == 1
