"""Command line interface for the airline reservation demo."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, Optional, TextIO

from tabulate import tabulate

from .dataset import DEFAULT_SEED, generate_sample_data, load_default_data
from .services import ReservationManager

logger = logging.getLogger(__name__)

_DEFAULT_LOG_LEVEL = os.environ.get("AIRLINE_RESERVATION_LOG_LEVEL", "WARNING")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

MENU = (
    "\nAirline Reservation System:\n"
    "1. View Flights\n"
    "2. View Customers\n"
    "3. Book a Flight\n"
    "4. Cancel a Flight\n"
    "5. Exit"
)


def _render_flights(manager: ReservationManager, table: bool) -> str:
    if table:
        rows = [
            [row["flight"], row["destination"], row["capacity"], row["booked"], row["available"]]
            for row in manager.summarize_capacity()
        ]
        headers = ["Flight", "Destination", "Capacity", "Booked", "Available"]
        return tabulate(rows, headers=headers, tablefmt="github")
    return "\n".join(str(flight) for flight in manager.list_flights())


def _render_customers(manager: ReservationManager, table: bool) -> str:
    if table:
        rows = [[customer.name, customer.email] for customer in manager.list_customers()]
        return tabulate(rows, headers=["Name", "Email"], tablefmt="github")
    return "\n".join(str(customer) for customer in manager.list_customers())


def _prompt(label: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    stdout.write(label)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def run_menu(
    manager: ReservationManager,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    table: bool = False,
) -> None:
    """Drive the interactive menu until the user exits or input runs out."""

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        print(MENU, file=stdout)
        choice = _prompt("Choose an option: ", stdin, stdout)
        if choice is None:
            print("\nExiting...", file=stdout)
            return

        if choice == "1":
            output = _render_flights(manager, table)
        elif choice == "2":
            output = _render_customers(manager, table)
        elif choice in ("3", "4"):
            action = "book" if choice == "3" else "cancel"
            flight_number = _prompt(f"Enter flight number to {action}: ", stdin, stdout)
            if flight_number is None:
                print("\nExiting...", file=stdout)
                return
            result = manager.book(flight_number) if action == "book" else manager.cancel(flight_number)
            output = result.message
        elif choice == "5":
            print("Exiting...", file=stdout)
            return
        else:
            logger.debug("rejected menu choice %r", choice)
            output = "Invalid option. Try again."

        if output:
            print(output, file=stdout)


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Book and cancel seats on demo flights.")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Render flight and customer listings as tables.",
    )
    parser.add_argument(
        "--sample-flights",
        type=int,
        default=0,
        help="Number of generated flights to add on top of the default ones.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed for generated sample data (default: {DEFAULT_SEED}).",
    )
    parser.add_argument(
        "--log-level",
        default=_DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity, written to stderr.",
    )
    return parser.parse_args(list(argv))


def main(
    argv: Iterable[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    # argparse does not check an environment-supplied default against choices
    if args.log_level not in LOG_LEVELS:
        print(f"Error: unknown log level '{args.log_level}'", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    manager = ReservationManager()
    try:
        load_default_data(manager)
        if args.sample_flights > 0:
            summary = generate_sample_data(
                manager,
                flights=args.sample_flights,
                customers=0,
                bookings=0,
                seed=args.seed,
            )
            logger.info("generated %d sample flights", summary["flights"])
        run_menu(
            manager,
            stdin=stdin,
            stdout=stdout,
            table=args.table,
        )
    except Exception as exc:  # pragma: no cover - CLI entry point
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
