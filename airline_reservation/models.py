"""In-memory models for the airline reservation system."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class BookingStatus(str, enum.Enum):
    """Outcome of a booking or cancellation attempt."""

    SUCCESS = "success"
    FULL = "full"
    NO_BOOKINGS = "no_bookings"
    FLIGHT_NOT_FOUND = "flight_not_found"


class BookingAction(str, enum.Enum):
    BOOK = "book"
    CANCEL = "cancel"


class Flight:
    """A bookable flight.

    The identifier and capacity are fixed at construction; the booked count
    only moves through ``book_seat`` and ``cancel_seat``.
    """

    def __init__(self, flight_number: str, destination: str, capacity: int, seats_booked: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        if not 0 <= seats_booked <= capacity:
            raise ValueError("seats_booked must be between 0 and capacity")
        self._flight_number = flight_number
        self.destination = destination
        self._capacity = capacity
        self._seats_booked = seats_booked

    @property
    def flight_number(self) -> str:
        return self._flight_number

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def seats_booked(self) -> int:
        return self._seats_booked

    @property
    def seats_available(self) -> int:
        return self.capacity - self.seats_booked

    def is_available(self) -> bool:
        return self.seats_booked < self.capacity

    def book_seat(self) -> BookingStatus:
        """Take one seat if any remain; a full flight is left untouched."""

        if not self.is_available():
            logger.warning("flight %s is full (%d seats)", self.flight_number, self.capacity)
            return BookingStatus.FULL
        self._seats_booked += 1
        logger.info(
            "booked seat on %s (%d/%d)", self.flight_number, self.seats_booked, self.capacity
        )
        return BookingStatus.SUCCESS

    def cancel_seat(self) -> BookingStatus:
        """Release one seat; a flight with nothing booked is left untouched."""

        if self.seats_booked <= 0:
            logger.warning("flight %s has no bookings to cancel", self.flight_number)
            return BookingStatus.NO_BOOKINGS
        self._seats_booked -= 1
        logger.info(
            "cancelled seat on %s (%d/%d)", self.flight_number, self.seats_booked, self.capacity
        )
        return BookingStatus.SUCCESS

    def __repr__(self) -> str:
        return (
            f"Flight(flight_number={self.flight_number!r}, destination={self.destination!r}, "
            f"capacity={self.capacity!r}, seats_booked={self.seats_booked!r})"
        )

    def __str__(self) -> str:
        return (
            f"Flight Number: {self.flight_number}, Destination: {self.destination}, "
            f"Capacity: {self.capacity}, Seats Booked: {self.seats_booked}"
        )


@dataclass(frozen=True)
class Customer:
    name: str
    email: str

    def __str__(self) -> str:
        return f"Customer Name: {self.name}, Email: {self.email}"
