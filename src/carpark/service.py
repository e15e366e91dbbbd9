"""Car park operations as seen by a front end."""

import logging
from datetime import datetime
from typing import Callable, Optional

from .errors import FormatError
from .fees import DEFAULT_HOURLY_RATE, FeeQuote, compute_fee
from .metrics import record_billable_hours, record_occupancy_change
from .reports.schemas import (
    CarLocation,
    CarParkReport,
    FailureReason,
    FeeInfo,
    OperationResult,
    SlotRow,
)
from .state.car_park import CarPark
from .state.models import Car, SlotType, is_valid_registration

logger = logging.getLogger(__name__)


def _fee_info(quote: FeeQuote) -> FeeInfo:
    return FeeInfo(
        hours=quote.hours,
        minutes=quote.minutes,
        seconds=quote.seconds,
        billable_hours=quote.billable_hours,
        amount=quote.amount,
    )


def slot_accepts(slot_type: SlotType, is_staff: bool) -> bool:
    """Staff cars park in STAFF slots only, visitor cars in VISITOR slots only."""
    return slot_type == (SlotType.STAFF if is_staff else SlotType.VISITOR)


class CarParkService:
    """
    Applies the car park's policies on top of a CarPark registry.

    Expected refusals come back as failed OperationResults, not exceptions.
    Lookups return None when nothing matches.
    """

    def __init__(
        self,
        car_park: CarPark,
        hourly_rate: int = DEFAULT_HOURLY_RATE,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the service.

        Args:
            car_park: Registry to operate on
            hourly_rate: Currency units per billable hour
            clock: Returns the current time; used for park times and fees
        """
        self.car_park = car_park
        self.hourly_rate = hourly_rate
        self._clock = clock

    def add_slot(self, slot_id: str, slot_type: SlotType) -> OperationResult:
        try:
            slot_type = SlotType(slot_type)
        except ValueError:
            return self._refuse(
                FailureReason.INVALID_SLOT_TYPE, f"Unknown slot type: {slot_type!r}", slot_id
            )

        try:
            added = self.car_park.add_slot(slot_id, slot_type)
        except FormatError as e:
            return self._refuse(FailureReason.INVALID_SLOT_ID, str(e))

        if not added:
            return self._refuse(
                FailureReason.DUPLICATE_SLOT, f"Slot {slot_id} already exists", slot_id
            )
        return OperationResult.success(f"Slot {slot_id} added", slot_id=slot_id)

    def delete_slot(self, slot_id: str) -> OperationResult:
        slot = self.car_park.find_slot_by_id(slot_id)
        if slot is None:
            return self._refuse(FailureReason.SLOT_NOT_FOUND, f"Slot {slot_id} not found", slot_id)
        if not self.car_park.delete_slot(slot_id):
            return self._refuse(FailureReason.SLOT_OCCUPIED, f"Slot {slot_id} is occupied", slot_id)
        return OperationResult.success(f"Slot {slot_id} deleted", slot_id=slot_id)

    def delete_all_unoccupied(self) -> OperationResult:
        if not self.car_park.delete_all_unoccupied():
            return self._refuse(FailureReason.NO_UNOCCUPIED_SLOTS, "No unoccupied slots to delete")
        return OperationResult.success("All unoccupied slots deleted")

    def park_car(
        self,
        slot_id: str,
        registration: str,
        owner: str,
        is_staff: bool,
    ) -> OperationResult:
        """
        Park a new car in a slot.

        Checks, in order: the slot exists, the slot is empty, the registration
        is well formed, the owner kind matches the slot type, and the car is
        not already parked elsewhere.

        Returns:
            OperationResult with parked_at set on success
        """
        slot = self.car_park.find_slot_by_id(slot_id)
        if slot is None:
            return self._refuse(FailureReason.SLOT_NOT_FOUND, f"Slot {slot_id} not found", slot_id)
        if slot.is_occupied():
            return self._refuse(
                FailureReason.SLOT_OCCUPIED, f"Slot {slot_id} is already occupied", slot_id
            )
        if not is_valid_registration(registration):
            return self._refuse(
                FailureReason.INVALID_REGISTRATION,
                f"Invalid registration format: {registration!r}",
                slot_id,
            )
        if not slot_accepts(slot.slot_type, is_staff):
            return self._refuse(
                FailureReason.TYPE_MISMATCH,
                f"Car type doesn't match {slot.slot_type.value} slot {slot_id}",
                slot_id,
            )
        if self.car_park.find_slot_by_registration(registration) is not None:
            return self._refuse(
                FailureReason.DUPLICATE_REGISTRATION,
                f"Car {registration} is already parked",
                slot_id,
            )

        car = Car(registration, owner, is_staff)
        car.mark_parked(self._clock())
        slot.park(car)

        logger.info(f"Car {registration} parked in slot {slot_id}")
        record_occupancy_change(slot.slot_type.value, parked=True, hour=car.park_time.hour)
        self.car_park.update_metrics()

        return OperationResult.success(
            f"Car parked at {car.park_time:%Y-%m-%d %H:%M:%S}",
            slot_id=slot_id,
            parked_at=car.park_time,
        )

    def remove_car(self, registration: str) -> OperationResult:
        """Remove a parked car by registration."""
        slot = self.car_park.find_slot_by_registration(registration)
        if slot is None:
            return self._refuse(FailureReason.CAR_NOT_FOUND, f"Car {registration} not found")

        now = self._clock()
        quote = self._quote(slot.parked_car.park_time, now)
        slot.remove()

        logger.info(f"Car {registration} removed from slot {slot.slot_id}")
        record_occupancy_change(slot.slot_type.value, parked=False, hour=now.hour)
        record_billable_hours(slot.slot_type.value, quote.billable_hours)
        self.car_park.update_metrics()

        return OperationResult.success(
            f"Car removed from slot {slot.slot_id}", slot_id=slot.slot_id
        )

    def find_car(self, registration: str) -> Optional[CarLocation]:
        """Get where a car is parked and its fee so far, or None."""
        slot = self.car_park.find_slot_by_registration(registration)
        if slot is None:
            return None

        car = slot.parked_car
        quote = self._quote(car.park_time, self._clock())
        return CarLocation(
            slot_id=slot.slot_id,
            registration=car.registration,
            owner=car.owner,
            is_staff=car.is_staff,
            park_time=car.park_time,
            fee=_fee_info(quote),
        )

    def list_slots(self) -> CarParkReport:
        """Get a listing of every slot, with fees for parked cars."""
        now = self._clock()
        rows = []
        for slot in self.car_park.list_slots():
            car = slot.parked_car
            if car is None:
                rows.append(SlotRow(slot_id=slot.slot_id, slot_type=slot.slot_type, occupied=False))
                continue

            quote = self._quote(car.park_time, now)
            rows.append(
                SlotRow(
                    slot_id=slot.slot_id,
                    slot_type=slot.slot_type,
                    occupied=True,
                    registration=car.registration,
                    owner=car.owner,
                    park_time=car.park_time,
                    fee=_fee_info(quote),
                )
            )

        occupied = sum(1 for r in rows if r.occupied)
        return CarParkReport(
            generated_at=now,
            total_slots=len(rows),
            occupied=occupied,
            available=len(rows) - occupied,
            slots=rows,
        )

    def _refuse(
        self,
        reason: FailureReason,
        message: str,
        slot_id: Optional[str] = None,
    ) -> OperationResult:
        logger.warning(message)
        return OperationResult.failure(reason, message, slot_id=slot_id)

    def _quote(self, park_time: datetime, now: datetime) -> FeeQuote:
        """Fee quote as of now. A clock that stepped back before park_time charges nothing."""
        if now < park_time:
            logger.warning(f"Clock reads {now}, before park time {park_time}")
            now = park_time
        return compute_fee(park_time, now, self.hourly_rate)
