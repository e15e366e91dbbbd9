"""Time-based parking fee calculation."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_HOURLY_RATE = 6


@dataclass(frozen=True)
class FeeQuote:
    """Elapsed parking time and the fee charged for it."""

    hours: int
    minutes: int  # Remaining whole minutes after hours
    seconds: int  # Remaining whole seconds after minutes
    billable_hours: int
    amount: int


def billable_hours(hours: int, minutes: int, seconds: int) -> int:
    """Round a duration up to whole hours. Any partial hour counts as a full one."""
    return hours + 1 if minutes > 0 or seconds > 0 else hours


def compute_fee(
    park_time: datetime,
    now: datetime,
    hourly_rate: int = DEFAULT_HOURLY_RATE,
) -> FeeQuote:
    """
    Compute the fee for a car parked at park_time, as of now.

    Sub-second remainders are dropped before rounding.

    Args:
        park_time: When the car was parked
        now: Time to charge up to
        hourly_rate: Currency units per billable hour

    Returns:
        FeeQuote with the elapsed breakdown and amount

    Raises:
        ValueError: If now is before park_time
    """
    elapsed = now - park_time
    if elapsed.total_seconds() < 0:
        raise ValueError(f"Query time {now} is before park time {park_time}")

    total_seconds = int(elapsed.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    charged = billable_hours(hours, minutes, seconds)
    return FeeQuote(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        billable_hours=charged,
        amount=charged * hourly_rate,
    )
