"""Airline reservation system package."""
from typing import Any

from .cli import main as cli_main
from .dataset import generate_sample_data, load_default_data
from .models import BookingAction, BookingStatus, Customer, Flight
from .services import BookingResult, ReservationManager


def create_app(*args: Any, **kwargs: Any):  # pragma: no cover - thin wrapper
    from .web import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = [
    "BookingAction",
    "BookingResult",
    "BookingStatus",
    "Customer",
    "Flight",
    "ReservationManager",
    "cli_main",
    "create_app",
    "generate_sample_data",
    "load_default_data",
]
