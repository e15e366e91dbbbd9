"""State management module."""

from .car_park import CarPark
from .models import Car, ParkingSlot, SlotType

__all__ = ["Car", "CarPark", "ParkingSlot", "SlotType"]
