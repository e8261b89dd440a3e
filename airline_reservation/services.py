"""Business logic for the airline reservation system."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .models import BookingAction, BookingStatus, Customer, Flight

logger = logging.getLogger(__name__)

_MESSAGES: Dict[BookingAction, Dict[BookingStatus, str]] = {
    BookingAction.BOOK: {
        BookingStatus.SUCCESS: "Seat booked successfully.",
        BookingStatus.FULL: "No seats available on this flight.",
        BookingStatus.FLIGHT_NOT_FOUND: "Flight not found.",
    },
    BookingAction.CANCEL: {
        BookingStatus.SUCCESS: "Seat canceled successfully.",
        BookingStatus.NO_BOOKINGS: "No bookings to cancel.",
        BookingStatus.FLIGHT_NOT_FOUND: "Flight not found.",
    },
}


@dataclass
class BookingResult:
    status: BookingStatus
    flight_number: str
    flight: Optional[Flight] = None
    action: BookingAction = BookingAction.BOOK

    def __post_init__(self) -> None:
        self.action = BookingAction(self.action)
        if self.status not in _MESSAGES[self.action]:
            raise ValueError(f"{self.status.value} is not a {self.action.value} outcome")

    @property
    def succeeded(self) -> bool:
        return self.status is BookingStatus.SUCCESS

    @property
    def message(self) -> str:
        return _MESSAGES[self.action][self.status]


class ReservationManager:
    """Owns the flights and customers known to the system.

    Flights are kept in insertion order and looked up by a linear scan, so a
    duplicated flight number always resolves to the first one added.
    """

    def __init__(self) -> None:
        self._flights: List[Flight] = []
        self._customers: List[Customer] = []

    def add_flight(self, flight: Flight) -> Flight:
        self._flights.append(flight)
        logger.debug("added flight %s to %s", flight.flight_number, flight.destination)
        return flight

    def add_customer(self, customer: Customer) -> Customer:
        self._customers.append(customer)
        logger.debug("added customer %s", customer.email)
        return customer

    def find_flight(self, flight_number: str) -> Optional[Flight]:
        for flight in self._flights:
            if flight.flight_number == flight_number:
                return flight
        logger.debug("no flight matches %r", flight_number)
        return None

    def book(self, flight_number: str) -> BookingResult:
        """Book one seat on ``flight_number`` and report the outcome."""

        flight = self.find_flight(flight_number)
        if flight is None:
            return BookingResult(BookingStatus.FLIGHT_NOT_FOUND, flight_number)
        return BookingResult(flight.book_seat(), flight_number, flight)

    def cancel(self, flight_number: str) -> BookingResult:
        """Cancel one seat on ``flight_number`` and report the outcome."""

        flight = self.find_flight(flight_number)
        if flight is None:
            return BookingResult(BookingStatus.FLIGHT_NOT_FOUND, flight_number, action=BookingAction.CANCEL)
        return BookingResult(flight.cancel_seat(), flight_number, flight, action=BookingAction.CANCEL)

    def list_flights(self) -> Tuple[Flight, ...]:
        return tuple(self._flights)

    def list_customers(self) -> Tuple[Customer, ...]:
        return tuple(self._customers)

    def list_available_flights(self) -> List[Flight]:
        return [flight for flight in self._flights if flight.is_available()]

    def summarize_capacity(self) -> List[dict]:
        return [
            {
                "flight": flight.flight_number,
                "destination": flight.destination,
                "capacity": flight.capacity,
                "booked": flight.seats_booked,
                "available": flight.seats_available,
            }
            for flight in self._flights
        ]
