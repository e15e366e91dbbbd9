"""Plain-text rendering of car park reports."""

from datetime import datetime

from .schemas import CarLocation, CarParkReport, FeeInfo

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROW_FORMAT = "{:<5} {:<7} {:<9} {:<10} {:<8} {:<20} {:<6}"
_HEADER = ("ID", "Type", "Occupied", "RegNum", "Owner", "ParkTime", "Fee")


def format_timestamp(value: datetime) -> str:
    return value.strftime(DATE_TIME_FORMAT)


def format_fee(fee: FeeInfo) -> str:
    """Format elapsed time and fee, e.g. '1h 30m 0s $12'."""
    return f"{fee.hours}h {fee.minutes}m {fee.seconds}s ${fee.amount}"


def render_slot_table(report: CarParkReport) -> str:
    """
    Render a car park listing as a fixed-width table.

    Empty slots show '-' for the car columns.
    """
    if not report.slots:
        return "No slots in the car park."

    lines = [_ROW_FORMAT.format(*_HEADER)]
    for row in report.slots:
        lines.append(
            _ROW_FORMAT.format(
                row.slot_id,
                row.slot_type.value,
                "Yes" if row.occupied else "No",
                row.registration or "-",
                row.owner or "-",
                format_timestamp(row.park_time) if row.park_time else "-",
                format_fee(row.fee) if row.fee else "-",
            ).rstrip()
        )
    return "\n".join(lines)


def render_car_location(location: CarLocation) -> str:
    fee = location.fee
    return (
        f"Found in slot {location.slot_id}, owner: {location.owner}\n"
        f"Parked for {fee.hours}h {fee.minutes}m {fee.seconds}s, Fee: ${fee.amount}"
    )
