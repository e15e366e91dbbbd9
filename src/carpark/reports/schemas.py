"""Report and operation result schemas."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ..state.models import SlotType


class FailureReason(str, Enum):
    """Why an operation was refused."""

    INVALID_SLOT_ID = "invalid_slot_id"
    INVALID_REGISTRATION = "invalid_registration"
    DUPLICATE_SLOT = "duplicate_slot"
    DUPLICATE_REGISTRATION = "duplicate_registration"
    SLOT_NOT_FOUND = "slot_not_found"
    SLOT_OCCUPIED = "slot_occupied"
    INVALID_SLOT_TYPE = "invalid_slot_type"
    CAR_NOT_FOUND = "car_not_found"
    TYPE_MISMATCH = "type_mismatch"
    NO_UNOCCUPIED_SLOTS = "no_unoccupied_slots"


class OperationResult(BaseModel):
    """Outcome of a state-changing operation."""

    ok: bool
    message: str
    reason: Optional[FailureReason] = None
    slot_id: Optional[str] = None
    parked_at: Optional[datetime] = None

    @classmethod
    def success(cls, message: str, **kwargs) -> "OperationResult":
        return cls(ok=True, message=message, **kwargs)

    @classmethod
    def failure(cls, reason: FailureReason, message: str, **kwargs) -> "OperationResult":
        return cls(ok=False, reason=reason, message=message, **kwargs)


class FeeInfo(BaseModel):
    """Elapsed time and fee for a parked car."""

    hours: int
    minutes: int
    seconds: int
    billable_hours: int
    amount: int


class SlotRow(BaseModel):
    """One slot in a car park listing."""

    slot_id: str
    slot_type: SlotType
    occupied: bool
    registration: Optional[str] = None
    owner: Optional[str] = None
    park_time: Optional[datetime] = None
    fee: Optional[FeeInfo] = None


class CarLocation(BaseModel):
    """Where a car is parked and what it owes so far."""

    slot_id: str
    registration: str
    owner: str
    is_staff: bool
    park_time: datetime
    fee: FeeInfo


class CarParkReport(BaseModel):
    """Listing of every slot in the car park."""

    generated_at: datetime
    total_slots: int
    occupied: int
    available: int
    slots: list[SlotRow]
