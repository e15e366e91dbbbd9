"""Data models for slots and parked cars."""

import re
from datetime import datetime
from enum import Enum
from typing import Optional

from ..errors import (
    ParkTimeAlreadySetError,
    RegistrationFormatError,
    SlotEmptyError,
    SlotIdFormatError,
    SlotOccupiedError,
)

SLOT_ID_PATTERN = re.compile(r"[A-Z][0-9]{2}")
REGISTRATION_PATTERN = re.compile(r"[A-Z][0-9]{4}")


def is_valid_slot_id(value: str) -> bool:
    """Check a slot ID against the capital letter + two digits format."""
    return isinstance(value, str) and SLOT_ID_PATTERN.fullmatch(value) is not None


def is_valid_registration(value: str) -> bool:
    """Check a registration against the capital letter + four digits format."""
    return isinstance(value, str) and REGISTRATION_PATTERN.fullmatch(value) is not None


class SlotType(str, Enum):
    """Who a parking slot is reserved for."""

    STAFF = "staff"
    VISITOR = "visitor"


class Car:
    """
    A car parked in a slot.

    The park time is not set by the constructor. The caller records it with
    mark_parked() at the moment the car occupies a slot.
    """

    def __init__(self, registration: str, owner: str, is_staff: bool):
        if not is_valid_registration(registration):
            raise RegistrationFormatError(registration)

        self._registration = registration
        self._owner = owner
        self._is_staff = bool(is_staff)
        self._park_time: Optional[datetime] = None

    @property
    def registration(self) -> str:
        return self._registration

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def is_staff(self) -> bool:
        return self._is_staff

    @property
    def park_time(self) -> Optional[datetime]:
        return self._park_time

    @property
    def is_parked(self) -> bool:
        return self._park_time is not None

    def mark_parked(self, at: datetime) -> None:
        """
        Record when the car was parked.

        Args:
            at: Moment the car occupied its slot

        Raises:
            ParkTimeAlreadySetError: If the park time was recorded before
        """
        if self._park_time is not None:
            raise ParkTimeAlreadySetError(self._registration)
        self._park_time = at

    def __repr__(self) -> str:
        return (
            f"Car(registration={self._registration!r}, owner={self._owner!r}, "
            f"is_staff={self._is_staff})"
        )


class ParkingSlot:
    """
    A labeled parking slot holding at most one car.

    ID and type are fixed at construction. A malformed ID fails immediately.
    """

    def __init__(self, slot_id: str, slot_type: SlotType):
        if not is_valid_slot_id(slot_id):
            raise SlotIdFormatError(slot_id)

        self._slot_id = slot_id
        self._slot_type = SlotType(slot_type)
        self._parked_car: Optional[Car] = None

    @property
    def slot_id(self) -> str:
        return self._slot_id

    @property
    def slot_type(self) -> SlotType:
        return self._slot_type

    @property
    def parked_car(self) -> Optional[Car]:
        return self._parked_car

    def is_occupied(self) -> bool:
        return self._parked_car is not None

    def park(self, car: Car) -> None:
        """
        Bind a car to this slot.

        Staff/visitor compatibility is not checked here; see
        CarParkService.park_car.

        Raises:
            SlotOccupiedError: If a car is already parked here
        """
        if self.is_occupied():
            raise SlotOccupiedError(self._slot_id)
        self._parked_car = car

    def remove(self) -> Car:
        """
        Detach the parked car.

        Returns:
            The car that was parked here

        Raises:
            SlotEmptyError: If no car is parked here
        """
        if self._parked_car is None:
            raise SlotEmptyError(self._slot_id)
        car, self._parked_car = self._parked_car, None
        return car

    def __repr__(self) -> str:
        return (
            f"ParkingSlot(slot_id={self._slot_id!r}, slot_type={self._slot_type.value}, "
            f"occupied={self.is_occupied()})"
        )
