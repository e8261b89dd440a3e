"""Utilities to populate a reservation manager with data for tests and demos."""
from __future__ import annotations

import os
import random
from typing import Dict, Sequence, Tuple

from .models import Customer, Flight
from .services import ReservationManager

DEFAULT_FLIGHTS: Sequence[Tuple[str, str, int]] = (
    ("AI101", "New York", 200),
    ("AI102", "London", 150),
    ("AI103", "Dubai", 100),
)
DEFAULT_CUSTOMERS: Sequence[Tuple[str, str]] = (
    ("Alice", "alice@example.com"),
    ("Bob", "bob@example.com"),
)

DESTINATIONS: Sequence[str] = (
    "New York",
    "London",
    "Dubai",
    "Singapore",
    "Tokyo",
    "Paris",
    "Frankfurt",
    "Sydney",
)
FIRST_NAMES = ("Ava", "Noah", "Liam", "Mia", "Lucas", "Emma", "Ethan", "Isabella")

DEFAULT_SEED = int(os.environ.get("AIRLINE_RESERVATION_SAMPLE_SEED", 42))


def load_default_data(manager: ReservationManager) -> Dict[str, int]:
    """Seed ``manager`` with the demo flights and customers."""

    for flight_number, destination, capacity in DEFAULT_FLIGHTS:
        manager.add_flight(Flight(flight_number, destination, capacity))
    for name, email in DEFAULT_CUSTOMERS:
        manager.add_customer(Customer(name, email))
    return {"flights": len(DEFAULT_FLIGHTS), "customers": len(DEFAULT_CUSTOMERS)}


def generate_sample_data(
    manager: ReservationManager,
    *,
    flights: int = 25,
    customers: int = 200,
    bookings: int = 500,
    seed: int = DEFAULT_SEED,
) -> Dict[str, int]:
    """Populate ``manager`` with deterministic pseudo-random data."""

    rng = random.Random(seed)
    flight_numbers = []
    for index in range(flights):
        flight = manager.add_flight(
            Flight(
                flight_number=f"AR{1000 + index}",
                destination=rng.choice(DESTINATIONS),
                capacity=rng.choice((10, 20, 40)),
            )
        )
        flight_numbers.append(flight.flight_number)
    for index in range(customers):
        manager.add_customer(
            Customer(name=rng.choice(FIRST_NAMES), email=f"test{index}@example.com")
        )

    successful = 0
    if flight_numbers:
        for _ in range(bookings):
            if manager.book(rng.choice(flight_numbers)).succeeded:
                successful += 1
    return {"flights": flights, "customers": customers, "bookings": successful}
