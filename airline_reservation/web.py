"""FastAPI application exposing the reservation manager over HTTP."""
from __future__ import annotations

import logging
from io import StringIO
from typing import Dict, List, Optional

import pandas as pd
from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse

from .dataset import load_default_data
from .models import BookingStatus, Customer, Flight
from .services import BookingResult, ReservationManager

logger = logging.getLogger(__name__)

_STATUS_CODES: Dict[BookingStatus, int] = {
    BookingStatus.FLIGHT_NOT_FOUND: 404,
    BookingStatus.FULL: 409,
    BookingStatus.NO_BOOKINGS: 409,
}


def _flight_payload(flight: Flight) -> Dict[str, str | int]:
    return {
        "flight_number": flight.flight_number,
        "destination": flight.destination,
        "capacity": flight.capacity,
        "seats_booked": flight.seats_booked,
        "seats_available": flight.seats_available,
    }


def _customer_payload(customer: Customer) -> Dict[str, str]:
    return {"name": customer.name, "email": customer.email}


def _result_payload(result: BookingResult) -> dict:
    if not result.succeeded:
        raise HTTPException(status_code=_STATUS_CODES[result.status], detail=result.message)
    return {
        "status": result.status.value,
        "message": result.message,
        "flight": _flight_payload(result.flight),
    }


def _as_dataframe(manager: ReservationManager) -> pd.DataFrame:
    data: List[Dict[str, str | int]] = []
    for row in manager.summarize_capacity():
        data.append(
            {
                "Flight": row["flight"],
                "Destination": row["destination"],
                "Capacity": row["capacity"],
                "Booked": row["booked"],
                "Available": row["available"],
            }
        )
    return pd.DataFrame(data, columns=["Flight", "Destination", "Capacity", "Booked", "Available"])


def create_app(manager: Optional[ReservationManager] = None) -> FastAPI:
    """Return an application serving ``manager`` (default demo data when omitted)."""

    if manager is None:
        manager = ReservationManager()
        load_default_data(manager)

    app = FastAPI(title="Airline Reservation", description="Book and cancel seats on demo flights")
    app.state.manager = manager

    @app.get("/flights")
    async def flights() -> List[dict]:
        return [_flight_payload(flight) for flight in manager.list_flights()]

    @app.get("/customers")
    async def customers() -> List[dict]:
        return [_customer_payload(customer) for customer in manager.list_customers()]

    @app.get("/flights/{flight_number}")
    async def flight_detail(flight_number: str) -> dict:
        flight = manager.find_flight(flight_number)
        if flight is None:
            raise HTTPException(status_code=404, detail="Flight not found.")
        return _flight_payload(flight)

    @app.post("/flights/{flight_number}/book")
    async def book(flight_number: str) -> dict:
        result = manager.book(flight_number)
        logger.debug("book %s -> %s", flight_number, result.status.value)
        return _result_payload(result)

    @app.post("/flights/{flight_number}/cancel")
    async def cancel(flight_number: str) -> dict:
        result = manager.cancel(flight_number)
        logger.debug("cancel %s -> %s", flight_number, result.status.value)
        return _result_payload(result)

    @app.get("/download/flights.csv")
    async def download() -> StreamingResponse:
        buffer = StringIO()
        _as_dataframe(manager).to_csv(buffer, index=False)
        buffer.seek(0)
        headers = {"Content-Disposition": 'attachment; filename="flights.csv"'}
        return StreamingResponse(iter([buffer.getvalue()]), media_type="text/csv", headers=headers)

    return app


__all__ = ["create_app"]
