"""Exceptions raised by the car park data model."""


class CarParkError(Exception):
    """Base class for car park errors."""


class FormatError(CarParkError):
    """An identifier does not match its required pattern."""


class SlotIdFormatError(FormatError):
    """Slot ID is not a capital letter followed by two digits."""

    def __init__(self, slot_id: str):
        super().__init__(
            f"Slot ID must be a capital letter followed by two digits, got: {slot_id!r}"
        )
        self.slot_id = slot_id


class RegistrationFormatError(FormatError):
    """Registration is not a capital letter followed by four digits."""

    def __init__(self, registration: str):
        super().__init__(
            f"Registration must be a capital letter followed by four digits, got: {registration!r}"
        )
        self.registration = registration


class SlotStateError(CarParkError):
    """Operation is not allowed in the slot's current occupancy state."""


class SlotOccupiedError(SlotStateError):
    def __init__(self, slot_id: str):
        super().__init__(f"Slot {slot_id} is already occupied")
        self.slot_id = slot_id


class SlotEmptyError(SlotStateError):
    def __init__(self, slot_id: str):
        super().__init__(f"Slot {slot_id} is empty")
        self.slot_id = slot_id


class ParkTimeAlreadySetError(CarParkError):
    """A car's park timestamp can only be recorded once."""

    def __init__(self, registration: str):
        super().__init__(f"Park time for {registration} is already set")
        self.registration = registration
