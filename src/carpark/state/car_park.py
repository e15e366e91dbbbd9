"""Slot registry for a single car park."""

import logging
from typing import Optional

from ..config import CarParkConfig
from ..metrics import update_slot_counts
from .models import ParkingSlot, SlotType

logger = logging.getLogger(__name__)

MAX_SLOTS_PER_TYPE = 99


def _check_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got: {value!r}")
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    if value > MAX_SLOTS_PER_TYPE:
        raise ValueError(f"{name} cannot exceed {MAX_SLOTS_PER_TYPE}: {value}")
    return value


class CarPark:
    """
    Ordered collection of parking slots with unique IDs.

    Slots are kept in insertion order. Lookups are linear scans, which is
    fine for the handful of slots a car park has.
    """

    def __init__(self, staff_count: int = 0, visitor_count: int = 0):
        """
        Create the car park with generated staff and visitor slots.

        Staff slots are labeled S01, S02, ... and visitor slots V01, V02, ...
        Staff slots come first.

        Args:
            staff_count: Number of STAFF slots to create
            visitor_count: Number of VISITOR slots to create

        Raises:
            ValueError: If a count is negative, not an integer, or above 99
        """
        _check_count("staff_count", staff_count)
        _check_count("visitor_count", visitor_count)

        self._slots: list[ParkingSlot] = []
        for i in range(1, staff_count + 1):
            self._slots.append(ParkingSlot(f"S{i:02d}", SlotType.STAFF))
        for i in range(1, visitor_count + 1):
            self._slots.append(ParkingSlot(f"V{i:02d}", SlotType.VISITOR))

        logger.info(
            f"Initialized CarPark with {staff_count} staff and {visitor_count} visitor slots"
        )
        self.update_metrics()

    @classmethod
    def from_config(cls, config: CarParkConfig) -> "CarPark":
        """Create a CarPark from configuration."""
        return cls(staff_count=config.staff_slots, visitor_count=config.visitor_slots)

    def __len__(self) -> int:
        return len(self._slots)

    def add_slot(self, slot_id: str, slot_type: SlotType) -> bool:
        """
        Append a new empty slot.

        Args:
            slot_id: Slot ID, a capital letter followed by two digits
            slot_type: STAFF or VISITOR

        Returns:
            True if added, False if a slot with this ID already exists

        Raises:
            SlotIdFormatError: If slot_id is malformed
        """
        if self.find_slot_by_id(slot_id) is not None:
            logger.warning(f"Slot {slot_id} already exists")
            return False

        slot = ParkingSlot(slot_id, slot_type)
        self._slots.append(slot)
        logger.info(f"Added {slot.slot_type.value} slot {slot_id}")
        self.update_metrics()
        return True

    def delete_slot(self, slot_id: str) -> bool:
        """
        Delete an unoccupied slot.

        Returns:
            True if deleted, False if the slot does not exist or is occupied
        """
        slot = self.find_slot_by_id(slot_id)
        if slot is None:
            logger.warning(f"Cannot delete slot {slot_id}: not found")
            return False
        if slot.is_occupied():
            logger.warning(f"Cannot delete slot {slot_id}: occupied")
            return False

        self._slots.remove(slot)
        logger.info(f"Deleted slot {slot_id}")
        self.update_metrics()
        return True

    def list_slots(self) -> list[ParkingSlot]:
        """Get all slots in insertion order, as a new list."""
        return list(self._slots)

    def delete_all_unoccupied(self) -> bool:
        """
        Delete every unoccupied slot, keeping the order of the rest.

        Returns:
            True if at least one slot was deleted
        """
        remaining = [s for s in self._slots if s.is_occupied()]
        removed = len(self._slots) - len(remaining)
        if removed == 0:
            logger.info("No unoccupied slots to delete")
            return False

        self._slots = remaining
        logger.info(f"Deleted {removed} unoccupied slot(s)")
        self.update_metrics()
        return True

    def find_slot_by_id(self, slot_id: str) -> Optional[ParkingSlot]:
        """Get the slot with this ID, or None."""
        for slot in self._slots:
            if slot.slot_id == slot_id:
                return slot
        return None

    def find_slot_by_registration(self, registration: str) -> Optional[ParkingSlot]:
        """Get the slot where the car with this registration is parked, or None."""
        for slot in self._slots:
            car = slot.parked_car
            if car is not None and car.registration == registration:
                return slot
        logger.debug(f"No parked car with registration {registration}")
        return None

    def occupied_count(self) -> int:
        """Get count of occupied slots."""
        return sum(1 for s in self._slots if s.is_occupied())

    def available_count(self) -> int:
        """Get count of unoccupied slots."""
        return sum(1 for s in self._slots if not s.is_occupied())

    def update_metrics(self) -> None:
        """Publish slot counts per type to the metrics registry."""
        for slot_type in SlotType:
            slots = [s for s in self._slots if s.slot_type == slot_type]
            update_slot_counts(
                slot_type=slot_type.value,
                total=len(slots),
                occupied=sum(1 for s in slots if s.is_occupied()),
            )
