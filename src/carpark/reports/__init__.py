"""Report schemas and text rendering."""

from .formatting import render_car_location, render_slot_table
from .schemas import CarLocation, CarParkReport, FailureReason, OperationResult, SlotRow

__all__ = [
    "CarLocation",
    "CarParkReport",
    "FailureReason",
    "OperationResult",
    "SlotRow",
    "render_car_location",
    "render_slot_table",
]
